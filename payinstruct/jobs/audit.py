"""Audit job dispatched after each processed instruction.

The job runs after the response has been produced (as a background task) and
has no bearing on the outcome: failures inside it are logged, never raised.
"""

import logging
import threading
import uuid
from collections import deque
from typing import Deque, List, Optional

from payinstruct import config
from payinstruct.errors import PaymentInstructionError
from payinstruct.models.audit_event import AuditEventType, PaymentAuditEvent
from payinstruct.models.constants import StatusCode
from payinstruct.models.transaction import TransactionResult

logger = logging.getLogger(__name__)


class AuditTrail:
    """Bounded in-memory record of the most recent audit events."""

    def __init__(self, max_events: int = config.AUDIT_MAX_EVENTS):
        self._events: Deque[PaymentAuditEvent] = deque(maxlen=max_events)
        self._lock = threading.Lock()

    def append(self, event: PaymentAuditEvent) -> None:
        with self._lock:
            self._events.append(event)

    def recent(self, limit: Optional[int] = None) -> List[PaymentAuditEvent]:
        with self._lock:
            events = list(self._events)
        return events[-limit:] if limit else events

    def clear(self) -> None:
        with self._lock:
            self._events.clear()

    def __len__(self) -> int:
        return len(self._events)


audit_trail = AuditTrail()


def build_audit_event(
    instruction: str,
    *,
    result: Optional[TransactionResult] = None,
    error: Optional[PaymentInstructionError] = None,
) -> PaymentAuditEvent:
    """Create the audit event for a processed instruction (exactly one of result/error)."""
    if (result is None) == (error is None):
        raise ValueError("Exactly one of result or error is required")

    if result is not None:
        executed = result.status_code == StatusCode.TRANSACTION_SUCCESSFUL.value
        return PaymentAuditEvent(
            id=str(uuid.uuid4()),
            event_type=AuditEventType.INSTRUCTION_EXECUTED if executed else AuditEventType.INSTRUCTION_SCHEDULED,
            status_code=result.status_code,
            instruction=instruction,
            debit_account=result.debit_account,
            credit_account=result.credit_account,
            details={
                "amount": result.amount,
                "currency": result.currency,
                "execute_by": result.execute_by,
            },
        )

    context = error.context
    return PaymentAuditEvent(
        id=str(uuid.uuid4()),
        event_type=AuditEventType.INSTRUCTION_FAILED,
        status_code=error.status_code,
        instruction=instruction,
        debit_account=context.debit_account,
        credit_account=context.credit_account,
        details={"status_reason": context.status_reason},
    )


def record_audit_event(event: PaymentAuditEvent, trail: Optional[AuditTrail] = None) -> None:
    """Background job body: log the event and keep it in the audit trail."""
    if not config.AUDIT_ENABLED:
        return
    try:
        (trail if trail is not None else audit_trail).append(event)
        logger.info(
            f"Audit {event.event_type} [{event.status_code}] {event.id}: "
            f"debit={event.debit_account} credit={event.credit_account}"
        )
    except Exception as e:
        logger.error(f"Failed to record audit event {event.id}: {type(e).__name__}: {str(e)}")
