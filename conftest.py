import os
import signal
import sys
from pathlib import Path

import pytest

# ensure project root is on sys.path when running tests
sys.path.append(str(Path(__file__).resolve().parent))

from core.app_state import AppState
from database.store import ShopStore

_TEST_TIMEOUT = int(os.environ.get("PYTEST_TIMEOUT", "60"))


@pytest.fixture(autouse=True)
def watchdog():
    """Fail a test if it hangs longer than the timeout."""
    if not hasattr(signal, "SIGALRM"):
        yield
        return

    def handler(signum, frame):  # pragma: no cover - timeout handler
        pytest.fail("Test timeout exceeded", pytrace=False)

    signal.signal(signal.SIGALRM, handler)
    signal.alarm(_TEST_TIMEOUT)
    try:
        yield
    finally:
        signal.alarm(0)


@pytest.fixture()
def store():
    """Хранилище на чистой in-memory SQLite для каждого теста."""
    shop_store = ShopStore.initialize(":memory:")
    try:
        yield shop_store
    finally:
        shop_store.close()


@pytest.fixture()
def state(store):
    return AppState(store).load()
