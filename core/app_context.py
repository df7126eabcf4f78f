"""Контекст приложения и управление зависимостями."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, ClassVar

from config import Settings, get_settings
from core.app_state import AppState
from database.store import ShopStore
from infrastructure.secure_store import SecureStore
from infrastructure.sms_gateway import SmsGateway

DependencyName = str


class AppContext:
    """Контекст приложения с ленивым созданием зависимостей.

    Хранилище открывается один раз при первом обращении и дальше
    передаётся всем потребителям через этот объект.
    """

    _DEPENDENCY_NAMES: ClassVar[set[str]] = {
        "store",
        "state",
        "sms_gateway",
        "secure_store",
    }

    def __init__(
        self,
        settings: Settings,
        *,
        store_factory: Callable[[Settings], ShopStore],
        state_factory: Callable[[ShopStore], AppState],
        sms_gateway_factory: Callable[[Settings], SmsGateway],
        secure_store_factory: Callable[[Settings], SecureStore],
        overrides: dict[str, Any] | None = None,
        instances: dict[str, Any] | None = None,
    ) -> None:
        self._settings = settings
        self._store_factory = store_factory
        self._state_factory = state_factory
        self._sms_gateway_factory = sms_gateway_factory
        self._secure_store_factory = secure_store_factory
        self._overrides: dict[str, Any] = dict(overrides or {})
        self._instances: dict[str, Any] = dict(instances or {})

    @property
    def settings(self) -> Settings:
        return self._settings

    @property
    def store(self) -> ShopStore:
        return self._get_dependency(
            "store",
            lambda: self._store_factory(self._settings),
        )

    @property
    def state(self) -> AppState:
        return self._get_dependency(
            "state",
            lambda: self._state_factory(self.store),
        )

    @property
    def sms_gateway(self) -> SmsGateway:
        return self._get_dependency(
            "sms_gateway",
            lambda: self._sms_gateway_factory(self._settings),
        )

    @property
    def secure_store(self) -> SecureStore:
        return self._get_dependency(
            "secure_store",
            lambda: self._secure_store_factory(self._settings),
        )

    def override(self, **deps: Any) -> "AppContext":
        """Создать новый контекст с переопределёнными зависимостями."""

        override_args = dict(deps)
        new_settings = override_args.pop("settings", self._settings)

        unknown = set(override_args) - self._DEPENDENCY_NAMES
        if unknown:
            names = ", ".join(sorted(unknown))
            raise ValueError(f"Неизвестные зависимости для переопределения: {names}")

        overrides = dict(self._overrides)
        overrides.update(override_args)
        if new_settings is self._settings:
            instances = {
                key: value
                for key, value in self._instances.items()
                if key not in override_args
            }
        else:
            instances = {}
        return AppContext(
            settings=new_settings,
            store_factory=self._store_factory,
            state_factory=self._state_factory,
            sms_gateway_factory=self._sms_gateway_factory,
            secure_store_factory=self._secure_store_factory,
            overrides=overrides,
            instances=instances,
        )

    def _get_dependency(
        self, name: DependencyName, factory: Callable[[], Any]
    ) -> Any:
        if name in self._overrides:
            return self._overrides[name]
        if name not in self._instances:
            self._instances[name] = factory()
        return self._instances[name]


_app_context: AppContext | None = None


def build_context(settings: Settings) -> AppContext:
    return AppContext(
        settings=settings,
        store_factory=lambda s: ShopStore.initialize(s.database_path),
        state_factory=lambda store: AppState(store).load(),
        sms_gateway_factory=SmsGateway,
        secure_store_factory=lambda s: SecureStore(s.secure_store_service),
    )


def get_app_context() -> AppContext:
    """Получить (или создать) синглтон контекста приложения."""

    global _app_context
    if _app_context is None:
        _app_context = build_context(get_settings())
    return _app_context


__all__ = ["AppContext", "build_context", "get_app_context"]
