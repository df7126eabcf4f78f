from types import SimpleNamespace

import pytest
from keyring.errors import PasswordDeleteError

from config import Settings
from database.records import Customer, LedgerEntry, RepairJob


class MemoryKeyring:
    """Keyring-бэкенд в памяти для тестов."""

    def __init__(self):
        self.data: dict[tuple[str, str], str] = {}

    def get_password(self, service, username):
        return self.data.get((service, username))

    def set_password(self, service, username, password):
        self.data[(service, username)] = password

    def delete_password(self, service, username):
        try:
            del self.data[(service, username)]
        except KeyError:
            raise PasswordDeleteError(username) from None


@pytest.fixture
def memory_keyring():
    return MemoryKeyring()


@pytest.fixture
def settings(tmp_path):
    return Settings(
        data_dir=str(tmp_path / "data"),
        log_dir=str(tmp_path / "logs"),
        secure_store_service="repair_shop_test",
    )


@pytest.fixture
def make_repair():
    def _make_repair(**kwargs):
        params = {
            "customer_name": "Ravi",
            "phone": "9876543210",
            "model": "Redmi Note 9",
            "imei": "356789012345678",
            "problem": "Broken screen",
        }
        params.update(kwargs)
        return RepairJob(**params)

    return _make_repair


@pytest.fixture
def make_entry():
    def _make_entry(title="Screen repair", amount=100.0, kind="income", **kwargs):
        return LedgerEntry(title=title, amount=amount, kind=kind, **kwargs)

    return _make_entry


@pytest.fixture
def make_customer():
    def _make_customer(name="Ravi", phone="9876543210", **kwargs):
        return Customer(name=name, phone=phone, **kwargs)

    return _make_customer


@pytest.fixture
def stub_transport():
    """SMS-транспорт, который запоминает отправки или падает по флагу."""

    stub = SimpleNamespace(sent=[], error=None)

    def send(to, message):
        if stub.error is not None:
            raise stub.error
        stub.sent.append((to, message))
        return "SM123"

    stub.send = send
    return stub
