"""Async client for callers that hand messages to the processor service.

The front-end application posts the raw text here and stores whatever comes
back in `processed_message`.
"""

import httpx

from message_processor.schemas.message import InboundMessage, OutboundResult

DEFAULT_BASE_URL = "http://localhost:8081"


class ProcessorError(Exception):
    """The service answered with a non-success status."""

    def __init__(self, status_code: int, detail: str):
        super().__init__(f"{status_code}: {detail}")
        self.status_code = status_code
        self.detail = detail


class ProcessorClient:
    """Thin wrapper over `httpx.AsyncClient` bound to one service base URL."""

    def __init__(
        self,
        base_url: str = DEFAULT_BASE_URL,
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ) -> None:
        self._client = httpx.AsyncClient(base_url=base_url, timeout=timeout, transport=transport)

    async def __aenter__(self) -> "ProcessorClient":
        return self

    async def __aexit__(self, *exc_info) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        await self._client.aclose()

    async def process(self, message: str) -> str:
        """Send `message` to `/process` and return the decorated text."""

        payload = InboundMessage(message=message)
        resp = await self._client.post("/process", json=payload.model_dump())
        if resp.is_error:
            raise ProcessorError(resp.status_code, resp.text)
        return OutboundResult.model_validate(resp.json()).processed_message


async def send_message(message: str, base_url: str = DEFAULT_BASE_URL) -> str:
    """One-shot helper that opens a client, processes a message, and closes it."""
    async with ProcessorClient(base_url=base_url) as client:
        return await client.process(message)
