"""Singleton: one shared instance, created lazily and thread-safely."""

from __future__ import annotations

import threading
from typing import Any, ClassVar


class AppConfig:
    _instance: ClassVar[AppConfig | None] = None
    _lock: ClassVar[threading.Lock] = threading.Lock()

    def __new__(cls) -> AppConfig:
        # double-checked so the lock is only taken on first creation
        if cls._instance is None:
            with cls._lock:
                if cls._instance is None:
                    instance = super().__new__(cls)
                    instance._values = {}
                    cls._instance = instance
        return cls._instance

    _values: dict[str, Any]

    def set(self, key: str, value: Any) -> None:
        self._values[key] = value

    def get(self, key: str, default: Any = None) -> Any:
        return self._values.get(key, default)

    @classmethod
    def reset(cls) -> None:
        """Drop the shared instance (tests need a clean slate)."""
        with cls._lock:
            cls._instance = None


def demo() -> None:
    AppConfig.reset()
    first = AppConfig()
    second = AppConfig()
    first.set("env", "production")
    print(f"Same instance: {first is second}")
    print(f"Second sees env={second.get('env')}")

    instances: list[AppConfig] = []
    threads = [threading.Thread(target=lambda: instances.append(AppConfig())) for _ in range(8)]
    for thread in threads:
        thread.start()
    for thread in threads:
        thread.join()
    print(f"Distinct instances across threads: {len({id(obj) for obj in instances})}")
    AppConfig.reset()
