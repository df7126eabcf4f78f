"""Отправка SMS с записью результата в журнал."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, Protocol

from database.records import MessageLog, MessageStatus

if TYPE_CHECKING:
    from core.app_state import AppState

logger = logging.getLogger(__name__)


class SmsTransport(Protocol):
    def send(self, to: str, message: str) -> object: ...


@dataclass
class SmsResult:
    ok: bool
    log: MessageLog
    text: str


def send_sms(state: "AppState", transport: SmsTransport, to: str, message: str) -> SmsResult:
    """Отправить SMS и записать попытку в журнал.

    Ошибка транспорта не пробрасывается: попытка сохраняется со статусом
    ``failed``, а в результате возвращается текст для пользователя.
    """
    to = (to or "").strip()
    message = (message or "").strip()
    if not to or not message:
        raise ValueError("Укажите номер и текст сообщения")

    try:
        transport.send(to, message)
    except Exception as exc:
        logger.warning("Не удалось отправить SMS на %s: %s", to, exc)
        log = MessageLog(to_number=to, message=message, status=MessageStatus.FAILED.value)
        log = replace(log, id=state.add_message_log(log))
        return SmsResult(ok=False, log=log, text=f"Failed to send: {exc}")

    log = MessageLog(to_number=to, message=message, status=MessageStatus.SENT.value)
    log = replace(log, id=state.add_message_log(log))
    return SmsResult(ok=True, log=log, text="SMS sent")
