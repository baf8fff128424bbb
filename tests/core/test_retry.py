"""
Tests for the database and rate-limit retry policies.
"""

from unittest.mock import AsyncMock

import pytest

from toolbox.core.retry import (
    is_duplicate_error,
    is_fatal_db_error,
    is_rate_limit_error,
    with_db_retry,
    with_rate_limit_retry,
)


class DriverError(Exception):
    def __init__(self, message: str, sqlstate: str | None = None) -> None:
        super().__init__(message)
        self.sqlstate = sqlstate


class WrappedError(Exception):
    """Mimics SQLAlchemy's DBAPIError carrying the driver error in .orig."""

    def __init__(self, orig: Exception) -> None:
        super().__init__("(wrapped) driver error")
        self.orig = orig


class TestClassification:
    def test_fatal_sqlstates(self):
        assert is_fatal_db_error(DriverError("boom", sqlstate="42P01"))
        assert is_fatal_db_error(WrappedError(DriverError("boom", sqlstate="23505")))
        assert not is_fatal_db_error(DriverError("connection reset", sqlstate="08006"))

    def test_fatal_message_markers(self):
        assert is_fatal_db_error(Exception('relation "toolbox_tools" does not exist'))
        assert is_fatal_db_error(Exception("malformed array literal"))
        assert not is_fatal_db_error(Exception("timeout"))

    def test_duplicate_detection(self):
        assert is_duplicate_error(WrappedError(DriverError("x", sqlstate="23505")))
        assert is_duplicate_error(Exception("duplicate key value violates unique constraint"))
        assert not is_duplicate_error(DriverError("x", sqlstate="42P01"))

    def test_rate_limit_detection(self):
        error = Exception("Too many requests")
        error.status_code = 429
        assert is_rate_limit_error(error)
        assert is_rate_limit_error(Exception("RESOURCE_EXHAUSTED: quota"))
        assert not is_rate_limit_error(Exception("invalid api key"))


class TestWithDbRetry:
    @pytest.mark.asyncio
    async def test_transient_error_is_retried(self):
        operation = AsyncMock(side_effect=[ConnectionError("reset"), ConnectionError("reset"), "ok"])

        result = await with_db_retry(operation, max_attempts=3, base_delay=0)

        assert result == "ok"
        assert operation.await_count == 3

    @pytest.mark.asyncio
    @pytest.mark.parametrize("sqlstate", ["42P01", "23505"])
    async def test_fatal_error_is_not_retried(self, sqlstate):
        error = WrappedError(DriverError("fatal", sqlstate=sqlstate))
        operation = AsyncMock(side_effect=error)

        with pytest.raises(WrappedError) as exc_info:
            await with_db_retry(operation, max_attempts=3, base_delay=0)

        assert exc_info.value is error
        assert operation.await_count == 1

    @pytest.mark.asyncio
    async def test_last_error_reraised_when_attempts_exhausted(self):
        operation = AsyncMock(side_effect=TimeoutError("slow"))

        with pytest.raises(TimeoutError):
            await with_db_retry(operation, max_attempts=2, base_delay=0)

        assert operation.await_count == 2


class TestWithRateLimitRetry:
    @pytest.mark.asyncio
    async def test_rate_limit_is_retried(self):
        operation = AsyncMock(side_effect=[Exception("429 quota exceeded"), "answer"])

        result = await with_rate_limit_retry(operation, max_attempts=3, initial_delay=0)

        assert result == "answer"
        assert operation.await_count == 2

    @pytest.mark.asyncio
    async def test_other_errors_raise_immediately(self):
        operation = AsyncMock(side_effect=ValueError("bad request"))

        with pytest.raises(ValueError):
            await with_rate_limit_retry(operation, max_attempts=3, initial_delay=0)

        assert operation.await_count == 1
