"""Join a collection of values into one string."""

from __future__ import annotations

from typing import Any, Iterable

__all__ = ["join"]


def join(container: Iterable[Any], delim: str | None = "") -> str:
    """Turn each value into a string and join them with ``delim``.

    A ``delim`` of ``None`` joins the values with nothing between them.
    """
    separator = "" if delim is None else delim
    return separator.join(str(value) for value in container)