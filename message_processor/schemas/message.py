"""Pydantic schemas for the /process request and response bodies."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator, model_validator


class InboundMessage(BaseModel):
    """Payload sent by the caller; only `message` is read, other keys are dropped.

    JSON `null`, either for the whole body or for `message`, decodes to an
    empty message. Any other non-string value is a decode error.
    """

    model_config = ConfigDict(extra="ignore")

    message: str = ""

    @model_validator(mode="before")
    @classmethod
    def null_body_is_empty(cls, data: Any) -> Any:
        return {} if data is None else data

    @field_validator("message", mode="before")
    @classmethod
    def null_message_is_empty(cls, value: Any) -> Any:
        return "" if value is None else value


class OutboundResult(BaseModel):
    """Response body carrying the decorated message."""

    processed_message: str
