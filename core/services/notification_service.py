# =============================================================================
# core/services/notification_service.py - Slack Application Notifications
# =============================================================================
# Relays accepted applications to the hiring Slack channel.
#
# Notifications are fire-and-forget:
# - dispatch_application() returns immediately
# - the Slack call runs on a worker thread (the event loop's default
#   executor when called from async code, a daemon thread otherwise)
# - failures are logged and never reach the HTTP client
#
# Usage:
#   from core.services.notification_service import NotificationService
#   NotificationService.dispatch_application(application)
# =============================================================================

import asyncio
import logging
import threading
from concurrent.futures import Future
from datetime import datetime
from typing import Any

import httpx

from app.config import settings
from core.models.challenge import ApplicationData

logger = logging.getLogger(__name__)

# In-flight dispatches, kept referenced until they complete
_pending: set[Future | asyncio.Future] = set()


class NotificationError(Exception):
    """Raised when Slack rejects or fails to receive a notification."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        super().__init__(message)
        self.message = message
        self.details = details or {}


class NotificationService:
    """
    Service for posting application notifications to Slack.

    All methods are static; the Slack token and channel come from settings
    unless passed explicitly.
    """

    @staticmethod
    def build_message(
        application: ApplicationData,
        channel: str,
        timestamp: datetime | None = None,
    ) -> dict[str, Any]:
        """
        Build the chat.postMessage payload for an application.

        The message has a header block and a section with one field per
        application attribute plus the local submission time.
        """
        when = (timestamp or datetime.now()).strftime("%d/%m/%Y, %H:%M:%S")
        return {
            "channel": channel,
            "text": f"New application for {application.position}",
            "blocks": [
                {
                    "type": "header",
                    "text": {"type": "plain_text", "text": "🎯 New Job Application"},
                },
                {
                    "type": "section",
                    "fields": [
                        {"type": "mrkdwn", "text": f"*Position:* {application.position}"},
                        {"type": "mrkdwn", "text": f"*Name:* {application.full_name}"},
                        {"type": "mrkdwn", "text": f"*Email:* {application.email}"},
                        {"type": "mrkdwn", "text": f"*LinkedIn:* <{application.linkedin_profile}|Profile>"},
                        {"type": "mrkdwn", "text": f"*Graduation:* {application.graduation_year}"},
                        {"type": "mrkdwn", "text": f"*Time:* {when}"},
                    ],
                },
            ],
        }

    @staticmethod
    def post_message(payload: dict[str, Any]) -> dict[str, Any]:
        """
        Send a payload to the Slack Web API.

        Returns:
            The decoded Slack response

        Raises:
            NotificationError: On transport errors, HTTP errors, or ok=false
        """
        try:
            response = httpx.post(
                settings.SLACK_API_URL,
                json=payload,
                headers={"Authorization": f"Bearer {settings.SLACK_BOT_TOKEN}"},
                timeout=settings.SLACK_TIMEOUT_SECONDS,
            )
            response.raise_for_status()
            body = response.json()
        except httpx.HTTPError as e:
            raise NotificationError(f"Slack request failed: {e}")
        except ValueError as e:
            raise NotificationError(f"Slack returned invalid JSON: {e}")

        # Slack reports auth and channel errors with HTTP 200 and ok=false
        if not body.get("ok"):
            raise NotificationError(
                f"Slack rejected the message: {body.get('error', 'unknown_error')}",
                details=body,
            )
        return body

    @staticmethod
    def send_application(application: ApplicationData) -> bool:
        """
        Post an application notification, absorbing any failure.

        Returns:
            bool: True if Slack accepted the message
        """
        try:
            payload = NotificationService.build_message(application, settings.SLACK_CHANNEL_ID)
            body = NotificationService.post_message(payload)
            logger.info(
                f"Slack notification sent for {application.email} "
                f"(channel={body.get('channel')}, ts={body.get('ts')})"
            )
            return True
        except Exception as e:
            logger.error(f"Slack notification failed for {application.email}: {e}")
            return False

    @staticmethod
    def dispatch_application(application: ApplicationData) -> None:
        """
        Send an application notification without waiting for it.

        Safe to call from both sync and async code. The caller never sees
        the outcome; it is only logged.
        """
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            loop = None

        if loop is not None:
            future = loop.run_in_executor(None, NotificationService.send_application, application)
        else:
            future = Future()
            thread = threading.Thread(
                target=_run_into_future,
                args=(future, application),
                name="slack-notification",
                daemon=True,
            )
            thread.start()

        _pending.add(future)
        future.add_done_callback(_pending.discard)
        logger.debug(f"Dispatched Slack notification for {application.email}")


def _run_into_future(future: Future, application: ApplicationData) -> None:
    future.set_result(NotificationService.send_application(application))
