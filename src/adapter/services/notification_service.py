"""Low-balance alert delivery

Alerts are always written to the log; when a webhook is configured the
notification is also POSTed there as a JSON event.
"""

import logging
from typing import Optional
import httpx
from src.app.services.notification_service import NotificationService
from src.domain.low_balance_notification import LowBalanceNotification

logger = logging.getLogger(__name__)


def to_event(notification: LowBalanceNotification) -> dict:
    return {
        "event": notification.notification_type,
        "notification_id": notification.id,
        "agent_id": notification.agent_id,
        "balance": str(notification.balance_at_notification),
        "raised_at": notification.created_at.isoformat(),
    }


class LoggingNotificationService(NotificationService):
    async def send_low_balance_alert(self, notification: LowBalanceNotification) -> bool:
        logger.warning(
            f"Low balance for agent {notification.agent_id}: "
            f"{notification.balance_at_notification} credits left (notification {notification.id})"
        )
        return True


class WebhookNotificationService(NotificationService):
    """
    Posts low-balance events to an HTTP endpoint.

    Delivery failures are logged and reported as False; the notification
    row already exists, so the alert is never raised twice for the same
    cooldown window even when the webhook is down.
    """

    def __init__(self, webhook_url: str, timeout: float = 10.0, log_service: Optional[NotificationService] = None):
        self.webhook_url = webhook_url
        self.timeout = timeout
        self.log_service = log_service or LoggingNotificationService()

    async def send_low_balance_alert(self, notification: LowBalanceNotification) -> bool:
        await self.log_service.send_low_balance_alert(notification)

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.post(self.webhook_url, json=to_event(notification))
                response.raise_for_status()
        except httpx.HTTPError as e:
            logger.error(f"Webhook delivery failed for notification {notification.id}: {e}")
            return False

        logger.info(f"Delivered low balance notification {notification.id} to {self.webhook_url}")
        return True


def create_notification_service(webhook_url: Optional[str] = None) -> NotificationService:
    if webhook_url:
        return WebhookNotificationService(webhook_url)
    return LoggingNotificationService()
