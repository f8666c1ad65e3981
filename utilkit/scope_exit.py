"""Run a callback when a block is left, unless it was cancelled."""

from __future__ import annotations

from types import TracebackType
from typing import Callable

__all__ = ["ScopeExit", "make_scope_exit"]


class ScopeExit:
    """Context manager that calls ``callback`` on exit unless cancelled."""

    __slots__ = ("_callback", "_cancelled")

    def __init__(self, callback: Callable[[], object]) -> None:
        self._callback = callback
        self._cancelled = False

    def cancel(self) -> None:
        """Prevent the callback from running."""
        self._cancelled = True

    def __enter__(self) -> "ScopeExit":
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> bool:
        if not self._cancelled:
            self._cancelled = True
            self._callback()
        return False


def make_scope_exit(callback: Callable[[], object]) -> ScopeExit:
    """Return a ScopeExit guarding ``callback``."""
    return ScopeExit(callback)