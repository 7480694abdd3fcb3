"""FastAPI web application for payinstruct."""

import logging
from datetime import date
from typing import List

from fastapi import BackgroundTasks, Depends, FastAPI, Query
from fastapi.responses import JSONResponse
from pydantic import BaseModel
from starlette.background import BackgroundTask

from payinstruct import __version__, config
from payinstruct.clock import utc_today
from payinstruct.engine.processor import process_payment_instruction
from payinstruct.errors import PaymentInstructionError
from payinstruct.jobs.audit import audit_trail, build_audit_event, record_audit_event
from payinstruct.models.audit_event import PaymentAuditEvent
from payinstruct.models.instruction import PaymentInstructionRequest
from payinstruct.models.transaction import TransactionResult

config.setup_logging()
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="payinstruct API",
    description="Interprets DEBIT/CREDIT payment instructions against supplied accounts",
    version=__version__,
)


# Response models
class PaymentInstructionErrorResponse(BaseModel):
    """Body returned for a failed instruction."""
    message: str
    status_code: str
    context: dict


class AuditEventsResponse(BaseModel):
    """Response for the audit trail view."""
    count: int
    events: List[PaymentAuditEvent]


def get_today() -> date:
    """Current UTC day; overridden in tests to pin "now"."""
    return utc_today()


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post(
    "/payment-instructions",
    response_model=TransactionResult,
    responses={400: {"model": PaymentInstructionErrorResponse}},
)
async def process_instruction(
    payload: PaymentInstructionRequest,
    background_tasks: BackgroundTasks,
    today: date = Depends(get_today),
):
    """Process one payment instruction.

    Returns the transaction result on success. Instruction failures return 400
    with the status code and the error context. The audit job runs after the
    response either way.
    """
    try:
        result = process_payment_instruction(payload, today=today)
    except PaymentInstructionError as e:
        event = build_audit_event(payload.instruction, error=e)
        return JSONResponse(
            status_code=400,
            content=e.to_dict(),
            background=BackgroundTask(record_audit_event, event),
        )

    background_tasks.add_task(record_audit_event, build_audit_event(payload.instruction, result=result))
    return result


@app.get("/audit-events", response_model=AuditEventsResponse)
async def list_audit_events(limit: int = Query(50, ge=1)):
    """Most recent audit events, oldest first."""
    events = audit_trail.recent(limit)
    return AuditEventsResponse(count=len(events), events=events)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
