"""Webhook adapter for registration notifications.

POSTs JSON payloads to the organizers' automation webhook using HTTP
Basic Authentication. Delivery failures are logged and reported as
False; they never raise, so a broken webhook cannot fail a registration.
"""

import httpx
import structlog
from tenacity import (
    AsyncRetrying,
    retry_if_exception_type,
    stop_after_attempt,
    wait_exponential,
)

logger = structlog.get_logger()


class WebhookAdapter:
    """Sends registration payloads to a webhook URL.

    Transport errors (connection refused, timeouts) are retried with
    exponential backoff. HTTP error responses are not retried.
    """

    def __init__(
        self,
        username: str = "",
        password: str = "",
        *,
        timeout: float = 10.0,
        retry_attempts: int = 3,
        retry_wait_seconds: float = 1.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        """Initialize with shared webhook credentials.

        Args:
            username: Basic auth username (no auth header if empty)
            password: Basic auth password
            timeout: Per-request timeout in seconds
            retry_attempts: Attempts before giving up on transport errors
            retry_wait_seconds: Backoff multiplier between attempts
            transport: Optional httpx transport (for testing)
        """
        self._auth = httpx.BasicAuth(username, password) if username else None
        self._timeout = timeout
        self._retry_attempts = retry_attempts
        self._retry_wait = retry_wait_seconds
        self._transport = transport

    @property
    def is_configured(self) -> bool:
        """True if basic auth credentials are set."""
        return self._auth is not None

    async def send(self, url: str, payload: dict) -> bool:
        """POST payload as JSON to the webhook.

        Args:
            url: Webhook URL
            payload: JSON-compatible payload

        Returns:
            True if the webhook answered with a 2xx status
        """
        if not url:
            logger.warning("webhook url not configured, skipping")
            return False

        try:
            async for attempt in AsyncRetrying(
                stop=stop_after_attempt(self._retry_attempts),
                wait=wait_exponential(multiplier=self._retry_wait, max=30),
                retry=retry_if_exception_type(httpx.TransportError),
                reraise=True,
            ):
                with attempt:
                    response = await self._post(url, payload)
        except httpx.HTTPError as e:
            logger.error(
                "webhook error",
                url=url,
                attempts=self._retry_attempts,
                error=str(e),
            )
            return False

        if not response.is_success:
            logger.error(
                "webhook failed",
                url=url,
                status_code=response.status_code,
                reason=response.reason_phrase,
            )
            return False

        logger.info("webhook delivered", url=url, status_code=response.status_code)
        return True

    async def _post(self, url: str, payload: dict) -> httpx.Response:
        async with httpx.AsyncClient(
            auth=self._auth,
            timeout=self._timeout,
            transport=self._transport,
        ) as client:
            return await client.post(url, json=payload)
