from message_processor.schemas.message import InboundMessage, OutboundResult

__all__ = [
    "InboundMessage",
    "OutboundResult",
]
