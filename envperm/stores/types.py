from __future__ import annotations

from typing import Any, Protocol


class VariableStore(Protocol):
    """Somewhere a variable assignment can be made to outlive the process.

    Values are rendered with str() before they are written.
    """

    def set(self, name: str, value: Any) -> None: ...

    def append(self, name: str, value: Any) -> None: ...
