"""Background delivery of registration notifications.

Webhook calls run as asyncio tasks scheduled after the registration is
persisted. The registrant's response never waits for them and never sees
their failures; those are only logged.
"""

import asyncio

import structlog

from workshop_registration.adapters.webhook_adapter import WebhookAdapter
from workshop_registration.registration.schemas import WebhookPayload

logger = structlog.get_logger()


class NotificationDispatcher:
    """Fire-and-forget dispatcher for webhook notifications.

    Keeps a reference to every in-flight task (the event loop only holds
    weak references) and lets shutdown wait for them with drain().
    """

    def __init__(self, webhook: WebhookAdapter):
        """Initialize with the webhook adapter used for delivery.

        Args:
            webhook: Configured WebhookAdapter
        """
        self._webhook = webhook
        self._tasks: set[asyncio.Task] = set()

    def dispatch(self, url: str, payload: WebhookPayload) -> asyncio.Task:
        """Schedule a webhook delivery and return immediately.

        Must be called from a running event loop.

        Args:
            url: Webhook URL of the workshop
            payload: Registration notification

        Returns:
            The scheduled task (callers normally ignore it)
        """
        task = asyncio.create_task(
            self._deliver(url, payload),
            name=f"webhook:{payload.workshop}",
        )
        self._tasks.add(task)
        task.add_done_callback(self._tasks.discard)
        return task

    async def _deliver(self, url: str, payload: WebhookPayload) -> bool:
        try:
            delivered = await self._webhook.send(url, payload.to_json_dict())
        except Exception as e:
            logger.error(
                "webhook failed (non-blocking)",
                workshop=payload.workshop,
                error=str(e),
            )
            return False

        if not delivered:
            logger.warning(
                "registration notification not delivered",
                workshop=payload.workshop,
            )
        return delivered

    @property
    def pending(self) -> int:
        """Number of deliveries still in flight."""
        return len(self._tasks)

    async def drain(self) -> None:
        """Wait for all in-flight deliveries to finish."""
        if not self._tasks:
            return
        logger.info("draining webhook deliveries", pending=len(self._tasks))
        await asyncio.gather(*list(self._tasks), return_exceptions=True)
