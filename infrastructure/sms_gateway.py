from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

from twilio.base.exceptions import TwilioException
from twilio.rest import Client

from config import Settings

logger = logging.getLogger(__name__)


class SmsSendError(RuntimeError):
    """SMS не отправлено: нет настроек или ошибка провайдера."""


@dataclass
class SmsGateway:
    """Адаптер отправки SMS через Twilio."""

    settings: Settings
    client: Any = field(default=None, repr=False)

    @property
    def is_configured(self) -> bool:
        return bool(
            self.settings.twilio_account_sid
            and self.settings.twilio_auth_token
            and self.settings.twilio_from_number
        )

    def _get_client(self):
        if self.client is not None:
            return self.client
        if not self.is_configured:
            raise SmsSendError("Twilio не настроен: задайте TWILIO_* в .env")
        self.client = Client(
            self.settings.twilio_account_sid, self.settings.twilio_auth_token
        )
        return self.client

    def send(self, to: str, message: str) -> str:
        """Отправить SMS и вернуть идентификатор сообщения у провайдера."""
        client = self._get_client()
        try:
            sent = client.messages.create(
                body=message,
                from_=self.settings.twilio_from_number,
                to=to,
            )
        except TwilioException as exc:
            raise SmsSendError(str(exc)) from exc
        logger.info("📨 SMS отправлено на %s: %s", to, sent.sid)
        return sent.sid
