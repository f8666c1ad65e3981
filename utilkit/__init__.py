"""Small helpers: portable paths and filesystem operations, joining, scope-exit callbacks."""

__version__ = "0.1.0"
__all__ = ["filesystem", "join", "scope_exit"]