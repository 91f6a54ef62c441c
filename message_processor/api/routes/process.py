"""HTTP route handler for message decoration."""

import logging

from fastapi import APIRouter, Depends, HTTPException, Request, status
from pydantic import ValidationError

from message_processor.api import deps
from message_processor.schemas.message import InboundMessage, OutboundResult
from message_processor.services.processor import MessageProcessor

logger = logging.getLogger(__name__)

router = APIRouter(tags=["processing"])


def describe_decode_error(exc: ValidationError) -> str:
    """Flatten pydantic errors into `<location>: <message>` pairs."""
    parts = []
    for error in exc.errors(include_url=False):
        location = ".".join(str(part) for part in error["loc"]) or "body"
        parts.append(f"{location}: {error['msg']}")
    return "; ".join(parts) or "Invalid request body"


@router.post("/process", response_model=OutboundResult)
async def process_message(
    request: Request,
    processor: MessageProcessor = Depends(deps.get_message_processor),
) -> OutboundResult:
    """Decorate the submitted message with the marker and current timestamp.

    The raw body is decoded here instead of through a typed body parameter so
    that malformed payloads are answered with 400 and the decoder's own text.
    """

    body = await request.body()
    try:
        payload = InboundMessage.model_validate_json(body)
    except ValidationError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=describe_decode_error(exc))

    processed = processor.process(payload.message)
    logger.debug("Processed message of %d characters", len(payload.message))
    return OutboundResult(processed_message=processed)
