import functools

import pytest

from utilkit.scope_exit import ScopeExit, make_scope_exit


def test_should_run():
    called = []
    with make_scope_exit(lambda: called.append(True)):
        assert called == []
    assert called == [True]


def test_should_not_run():
    called = []
    with make_scope_exit(lambda: called.append(True)) as on_exit:
        on_exit.cancel()
    assert called == []


def test_code_types():
    calls = []

    def named():
        calls.append("function")

    class CallableObject:
        def __call__(self):
            calls.append("object")

    with make_scope_exit(named):
        pass
    with make_scope_exit(CallableObject()):
        pass
    with make_scope_exit(functools.partial(calls.append, "partial")):
        pass

    assert calls == ["function", "object", "partial"]


def test_runs_when_exception_raised():
    called = []
    with pytest.raises(ValueError):
        with make_scope_exit(lambda: called.append(True)):
            raise ValueError("boom")
    assert called == [True]


def test_enter_returns_guard_and_runs_once():
    called = []
    guard = ScopeExit(lambda: called.append(1))
    with guard as entered:
        assert entered is guard
    guard.__exit__(None, None, None)
    assert called == [1]