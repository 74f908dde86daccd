"""Unit tests for the bounded retry combinator."""

from __future__ import annotations

from unittest.mock import MagicMock

import pytest

from doc_ingest.errors import RetryExhaustedError
from doc_ingest.ingestion.retry import retry


def _failing(times: int, result: str = "ok"):
    calls = {"n": 0}

    def operation() -> str:
        calls["n"] += 1
        if calls["n"] <= times:
            raise RuntimeError(f"boom {calls['n']}")
        return result

    return operation, calls


def test_returns_first_success() -> None:
    operation, calls = _failing(0)
    assert retry(operation, max_attempts=4) == "ok"
    assert calls["n"] == 1


def test_retries_until_success() -> None:
    operation, calls = _failing(2)
    hook = MagicMock()
    assert retry(operation, max_attempts=4, on_attempt_failed=hook) == "ok"
    assert calls["n"] == 3
    assert [c.args[0] for c in hook.call_args_list] == [1, 2]
    assert str(hook.call_args_list[1].args[1]) == "boom 2"


def test_exhaustion_raises_with_last_message() -> None:
    operation, calls = _failing(10)
    hook = MagicMock()
    with pytest.raises(RetryExhaustedError, match="boom 4") as excinfo:
        retry(operation, max_attempts=4, on_attempt_failed=hook)
    assert calls["n"] == 4
    assert excinfo.value.attempts == 4
    assert isinstance(excinfo.value.__cause__, RuntimeError)
    # the hook also sees the final failure
    assert [c.args[0] for c in hook.call_args_list] == [1, 2, 3, 4]


def test_all_exception_types_are_retried() -> None:
    errors = iter([ValueError("bad"), KeyError("missing"), TimeoutError("slow")])

    def operation() -> str:
        err = next(errors, None)
        if err is not None:
            raise err
        return "done"

    assert retry(operation, max_attempts=4) == "done"


def test_single_attempt() -> None:
    operation, calls = _failing(1)
    with pytest.raises(RetryExhaustedError):
        retry(operation, max_attempts=1)
    assert calls["n"] == 1


def test_rejects_non_positive_attempts() -> None:
    with pytest.raises(ValueError):
        retry(lambda: None, max_attempts=0)
