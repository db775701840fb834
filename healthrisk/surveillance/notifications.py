"""
Fire-and-forget notification channel for hotspots and health alerts
"""

import asyncio
import logging
from datetime import datetime, timezone
from typing import Any, Dict, List, Set

from pydantic import BaseModel, Field

logger = logging.getLogger(__name__)

HOTSPOT_DETECTED = "hotspot_detected"
HEALTH_ALERT = "health_alert"

# Strong references to in-flight deliveries
_PENDING: Set[asyncio.Task] = set()


class NotificationEvent(BaseModel):
    kind: str
    payload: Dict[str, Any] = Field(default_factory=dict)
    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))


class Notifier:
    async def send(self, event: NotificationEvent) -> None:
        raise NotImplementedError


class LoggingNotifier(Notifier):
    """Default channel, writes events to the application log"""

    async def send(self, event: NotificationEvent) -> None:
        logger.info(f"Notification {event.kind}: {event.payload}")


class MemoryNotifier(Notifier):
    """Keeps delivered events in memory"""

    def __init__(self):
        self.events: List[NotificationEvent] = []

    async def send(self, event: NotificationEvent) -> None:
        self.events.append(event)


async def _deliver(notifier: Notifier, event: NotificationEvent) -> None:
    try:
        await notifier.send(event)
    except Exception as e:
        logger.error(f"Failed to deliver {event.kind} notification: {e}")


def dispatch(notifier: Notifier, event: NotificationEvent) -> asyncio.Task:
    """
    Schedule delivery without waiting for it
    Must be called from a running event loop
    """
    task = asyncio.create_task(_deliver(notifier, event))
    _PENDING.add(task)
    task.add_done_callback(_PENDING.discard)
    return task


async def drain_pending() -> None:
    """Wait for deliveries scheduled on the running loop, used on shutdown"""
    loop = asyncio.get_running_loop()
    pending = [task for task in _PENDING if task.get_loop() is loop]
    if pending:
        await asyncio.gather(*pending, return_exceptions=True)
