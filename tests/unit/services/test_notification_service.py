"""Unit tests for low-balance alert delivery"""

import pytest
from decimal import Decimal
from unittest.mock import AsyncMock, MagicMock, patch

import httpx

from src.adapter.services.notification_service import (
    LoggingNotificationService,
    WebhookNotificationService,
    create_notification_service,
    to_event,
)
from src.domain.low_balance_notification import LowBalanceNotification


@pytest.fixture
def notification():
    return LowBalanceNotification(id="n_1", agent_id="agent_1", balance_at_notification=Decimal("12.50"))


def mock_client(post):
    client = MagicMock()
    client.post = post
    client.__aenter__ = AsyncMock(return_value=client)
    client.__aexit__ = AsyncMock(return_value=False)
    return client


def test_factory_without_webhook_only_logs():
    assert isinstance(create_notification_service(None), LoggingNotificationService)


def test_factory_with_webhook():
    service = create_notification_service("https://hooks.example.com/low-balance")

    assert isinstance(service, WebhookNotificationService)
    assert service.webhook_url == "https://hooks.example.com/low-balance"


def test_event_payload(notification):
    event = to_event(notification)

    assert event["event"] == "low_balance"
    assert event["agent_id"] == "agent_1"
    assert event["balance"] == "12.50"


@pytest.mark.asyncio
async def test_logging_service_always_succeeds(notification):
    assert await LoggingNotificationService().send_low_balance_alert(notification) is True


@pytest.mark.asyncio
async def test_webhook_posts_event(notification):
    response = MagicMock()
    post = AsyncMock(return_value=response)
    service = WebhookNotificationService("https://hooks.example.com/x")

    with patch("src.adapter.services.notification_service.httpx.AsyncClient", return_value=mock_client(post)):
        sent = await service.send_low_balance_alert(notification)

    assert sent is True
    post.assert_awaited_once_with("https://hooks.example.com/x", json=to_event(notification))
    response.raise_for_status.assert_called_once()


@pytest.mark.asyncio
async def test_webhook_failure_returns_false(notification):
    post = AsyncMock(side_effect=httpx.ConnectError("refused"))
    log_service = AsyncMock()
    service = WebhookNotificationService("https://hooks.example.com/x", log_service=log_service)

    with patch("src.adapter.services.notification_service.httpx.AsyncClient", return_value=mock_client(post)):
        sent = await service.send_low_balance_alert(notification)

    assert sent is False
    log_service.send_low_balance_alert.assert_awaited_once_with(notification)
