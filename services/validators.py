"""Валидаторы и нормализаторы данных из форм."""

import ast
import logging
import math
import operator as op
import re

logger = logging.getLogger(__name__)

_GROUPED = re.compile(r"-?\d{1,3}(,\d{2,3})+(\.\d+)?")

_ALLOWED_OPS = {
    ast.Add: op.add,
    ast.Sub: op.sub,
    ast.Mult: op.mul,
    ast.Div: op.truediv,
}


def _eval(node):
    if isinstance(node, ast.Constant) and isinstance(node.value, (int, float)):
        return node.value
    if isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.USub):
        return -_eval(node.operand)
    if isinstance(node, ast.BinOp) and type(node.op) in _ALLOWED_OPS:
        return _ALLOWED_OPS[type(node.op)](_eval(node.left), _eval(node.right))
    raise ValueError("Недопустимое выражение")


def normalize_number(value: str | int | float | None) -> str | None:
    """Нормализует строку с числом и поддерживает простые выражения.

    Убирает пробелы, символы валют и буквы (``₹``, ``Rs.``), разделители
    тысяч вида ``1,23,456`` и ``12,345``; одиночная запятая считается
    десятичной. Можно вводить ``2*150`` или ``500-50``.
    """

    if value is None:
        return None

    text = str(value)
    text = re.sub(r"\s+", "", text)
    text = re.sub(r"[^\d.,+\-*/()]", "", text)
    text = text.strip(".")

    if text == "":
        return text

    if _GROUPED.fullmatch(text):
        text = text.replace(",", "")
    else:
        text = text.replace(",", ".")

    try:
        result = _eval(ast.parse(text, mode="eval").body)
        if isinstance(result, float):
            if not math.isfinite(result):
                return ""
            if result.is_integer():
                result = int(result)
        return str(result)
    except (SyntaxError, ValueError, ZeroDivisionError, RecursionError, OverflowError):
        return text


def parse_amount(value: str | int | float | None) -> float:
    """Сумма из формы; некорректный ввод превращается в ``0.0``."""
    text = normalize_number(value)
    try:
        amount = float(text) if text else 0.0
    except (ValueError, OverflowError):
        amount = math.inf
    if not math.isfinite(amount):
        logger.debug("Некорректная сумма %r, используем 0", value)
        return 0.0
    return amount


def parse_quantity(value: str | int | float | None) -> int:
    """Количество из формы; некорректный ввод превращается в ``0``."""
    text = normalize_number(value)
    try:
        return int(float(text)) if text else 0
    except (ValueError, OverflowError):
        logger.debug("Некорректное количество %r, используем 0", value)
        return 0
