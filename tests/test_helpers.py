"""Tests for operational helpers."""

import pytest
from loguru import logger

from fencesplit.config import Config, RetryConfig, get_config, set_config
from fencesplit.utils import camel_to_snake, log, random_id, retry_with_backoff, sanitize_string, sleep


@pytest.fixture
def fast_retries():
    previous = get_config()
    set_config(Config(retry=RetryConfig(max_attempts=3, base_delay_ms=0)))
    yield
    set_config(previous)


def test_log_accepts_levels():
    """Known levels, the warn alias and attached errors all log."""
    log("info", "test")
    log("warn", "careful")
    log("error", "failed", error=RuntimeError("boom"))
    log("debug", "detail", error="not an exception")


def test_log_unknown_level_falls_back_to_info():
    """Level names loguru does not know are logged at INFO."""
    levels = []
    sink_id = logger.add(lambda message: levels.append(message.record["level"].name), level="DEBUG")
    try:
        log("verbose", "x")
    finally:
        logger.remove(sink_id)
    assert levels == ["INFO"]


@pytest.mark.asyncio
async def test_sleep():
    """sleep takes milliseconds."""
    await sleep(1)


def test_sanitize_string():
    """Unsafe characters become dashes."""
    assert sanitize_string("test@#$%^&*()+=[]{}|;") == "test-----------------"
    assert sanitize_string("file_name-1.txt") == "file_name-1.txt"


class TestRandomId:
    def test_default_length(self):
        """Ids are 21 characters by default."""
        assert len(random_id()) == 21

    def test_custom_length(self):
        """Explicit length is honoured."""
        assert len(random_id(10)) == 10

    def test_unique(self):
        """Two ids differ."""
        assert random_id() != random_id()

    def test_zero_length(self):
        """Length 0 gives an empty id rather than the default."""
        assert random_id(0) == ""


class TestCamelToSnake:
    def test_simple(self):
        """Uppercase letters become underscore plus lowercase."""
        assert camel_to_snake("camelCase") == "camel_case"
        assert camel_to_snake("thisIsACamelCaseString") == "this_is_a_camel_case_string"

    def test_already_snake(self):
        """snake_case input is unchanged."""
        assert camel_to_snake("snake_case") == "snake_case"

    def test_numbers(self):
        """Digits do not introduce underscores."""
        assert camel_to_snake("camel123Case") == "camel123_case"
        assert camel_to_snake("camel123case456") == "camel123case456"


class TestRetryWithBackoff:
    @pytest.mark.asyncio
    async def test_succeeds_after_failures(self, fast_retries):
        """Result of the first successful attempt is returned."""
        calls = 0
        retries = []

        async def flaky():
            nonlocal calls
            calls += 1
            if calls < 3:
                raise ConnectionError("failed")
            return "success"

        result = await retry_with_backoff(flaky, on_retry=lambda: retries.append(calls))
        assert result == "success"
        assert calls == 3
        assert retries == [1, 2]

    @pytest.mark.asyncio
    async def test_raises_after_max_attempts(self, fast_retries):
        """Last error is raised once attempts run out."""
        calls = 0

        async def always_fails():
            nonlocal calls
            calls += 1
            raise ValueError("failed")

        with pytest.raises(ValueError, match="failed"):
            await retry_with_backoff(always_fails)
        assert calls == 3

    @pytest.mark.asyncio
    async def test_explicit_attempts_override_config(self, fast_retries):
        """Arguments take precedence over configured defaults."""
        calls = 0

        async def always_fails():
            nonlocal calls
            calls += 1
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            await retry_with_backoff(always_fails, max_attempts=2, base_delay_ms=0)
        assert calls == 2

    @pytest.mark.asyncio
    async def test_failing_on_retry_hook_is_ignored(self, fast_retries):
        """Errors from on_retry do not stop the retries."""
        calls = 0

        async def flaky():
            nonlocal calls
            calls += 1
            if calls == 1:
                raise ConnectionError("once")
            return calls

        def broken_hook():
            raise RuntimeError("hook")

        assert await retry_with_backoff(flaky, on_retry=broken_hook) == 2

    @pytest.mark.asyncio
    async def test_zero_attempts_is_not_the_default(self, fast_retries):
        """An explicit max_attempts of 0 gives up after the first failure."""
        calls = 0

        async def always_fails():
            nonlocal calls
            calls += 1
            raise RuntimeError("nope")

        with pytest.raises(RuntimeError):
            await retry_with_backoff(always_fails, max_attempts=0)
        assert calls == 1
