"""Записи мастерской и их преобразование в строки хранилища и обратно."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Mapping

from utils.time_utils import now_ms


class LedgerKind(str, Enum):
    INCOME = "income"
    EXPENSE = "expense"


class MessageStatus(str, Enum):
    SENT = "sent"
    FAILED = "failed"


class RepairStatus(str, Enum):
    """Рекомендуемые статусы ремонта; колонка принимает любую строку."""

    PENDING = "Pending"
    IN_PROGRESS = "InProgress"
    COMPLETED = "Completed"
    CANCELLED = "Cancelled"


def _str(value: Any, default: str = "") -> str:
    if value is None:
        return default
    return str(value.value if isinstance(value, Enum) else value)


def _int(value: Any, default: int = 0) -> int:
    if value is None or value == "":
        return default
    return int(value)


def _float(value: Any, default: float = 0.0) -> float:
    if value is None or value == "":
        return default
    return float(value)


def _opt_int(value: Any) -> int | None:
    return None if value is None else int(value)


def _ms(value: Any) -> int:
    """Метка времени в мс; отсутствующая считается текущим моментом."""
    if value is None or value == "":
        return now_ms()
    return int(value)


@dataclass
class LedgerEntry:
    title: str
    amount: float
    kind: str
    note: str = ""
    timestamp: int = field(default_factory=now_ms)
    id: int | None = None

    TABLE = "ledger"

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "title": self.title,
            "amount": self.amount,
            "type": _str(self.kind),
            "note": self.note,
            "timestamp": self.timestamp,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "LedgerEntry":
        return cls(
            id=_opt_int(row.get("id")),
            title=_str(row.get("title")),
            amount=_float(row.get("amount")),
            kind=_str(row.get("type")),
            note=_str(row.get("note")),
            timestamp=_ms(row.get("timestamp")),
        )


@dataclass
class RepairJob:
    customer_name: str
    phone: str
    model: str
    imei: str
    problem: str
    status: str = RepairStatus.PENDING.value
    image_path: str | None = None
    created_at: int = field(default_factory=now_ms)
    id: int | None = None

    TABLE = "repairs"

    @property
    def is_completed(self) -> bool:
        return self.status == RepairStatus.COMPLETED.value

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "customerName": self.customer_name,
            "phone": self.phone,
            "model": self.model,
            "imei": self.imei,
            "problem": self.problem,
            "status": _str(self.status),
            "imagePath": self.image_path,
            "createdAt": self.created_at,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "RepairJob":
        return cls(
            id=_opt_int(row.get("id")),
            customer_name=_str(row.get("customerName")),
            phone=_str(row.get("phone")),
            model=_str(row.get("model")),
            imei=_str(row.get("imei")),
            problem=_str(row.get("problem")),
            status=_str(row.get("status"), RepairStatus.PENDING.value),
            image_path=None if row.get("imagePath") is None else _str(row.get("imagePath")),
            created_at=_ms(row.get("createdAt")),
        )


@dataclass
class InventoryItem:
    name: str
    qty: int = 0
    buy_price: float = 0.0
    sell_price: float = 0.0
    id: int | None = None

    TABLE = "inventory"

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "qty": self.qty,
            "buyPrice": self.buy_price,
            "sellPrice": self.sell_price,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "InventoryItem":
        return cls(
            id=_opt_int(row.get("id")),
            name=_str(row.get("name")),
            qty=_int(row.get("qty")),
            buy_price=_float(row.get("buyPrice")),
            sell_price=_float(row.get("sellPrice")),
        )


@dataclass
class Customer:
    name: str
    phone: str
    address: str = ""
    note: str = ""
    id: int | None = None

    TABLE = "customers"

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "phone": self.phone,
            "address": self.address,
            "note": self.note,
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "Customer":
        return cls(
            id=_opt_int(row.get("id")),
            name=_str(row.get("name")),
            phone=_str(row.get("phone")),
            address=_str(row.get("address")),
            note=_str(row.get("note")),
        )


@dataclass
class MessageLog:
    to_number: str
    message: str
    sent_at: int = 0
    status: str = MessageStatus.SENT.value
    id: int | None = None

    TABLE = "message_log"

    def __post_init__(self) -> None:
        # 0 считается «не указано», как и None
        if not self.sent_at:
            self.sent_at = now_ms()

    def to_row(self) -> dict[str, Any]:
        return {
            "id": self.id,
            "toNumber": self.to_number,
            "message": self.message,
            "sentAt": self.sent_at,
            "status": _str(self.status),
        }

    @classmethod
    def from_row(cls, row: Mapping[str, Any]) -> "MessageLog":
        return cls(
            id=_opt_int(row.get("id")),
            to_number=_str(row.get("toNumber")),
            message=_str(row.get("message")),
            sent_at=_ms(row.get("sentAt")),
            status=_str(row.get("status"), MessageStatus.SENT.value),
        )
