"""Out-of-band jobs for payinstruct."""

from payinstruct.jobs.audit import AuditTrail, audit_trail, build_audit_event, record_audit_event

__all__ = [
    "AuditTrail",
    "audit_trail",
    "build_audit_event",
    "record_audit_event",
]
