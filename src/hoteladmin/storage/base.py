from __future__ import annotations

from typing import Protocol, runtime_checkable, Optional


@runtime_checkable
class KeyValueStorage(Protocol):
    # lifecycle
    def init(self) -> None: ...

    # slots
    def get_item(self, key: str) -> Optional[str]: ...
    def set_item(self, key: str, value: str) -> None: ...
    def remove_item(self, key: str) -> bool: ...
    def clear(self) -> None: ...
