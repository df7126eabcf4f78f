"""Звонок клиенту через системный обработчик ``tel:``."""

import logging
import re
import urllib.parse
import webbrowser

logger = logging.getLogger(__name__)


def tel_uri(phone: str) -> str:
    """Сформировать ``tel:``-ссылку, оставив цифры и ведущий ``+``."""
    cleaned = re.sub(r"[^\d+]", "", phone or "")
    if not cleaned:
        raise ValueError("Телефон не указан")
    return "tel:" + urllib.parse.quote(cleaned, safe="+")


def call_customer(phone: str) -> bool:
    """Открыть номер в звонилке; ``False``, если обработчика нет."""
    uri = tel_uri(phone)
    opened = webbrowser.open(uri)
    if not opened:
        logger.warning("Нет обработчика для %s", uri)
    return opened
