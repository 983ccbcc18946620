"""Operational helpers: logging shim, ids, delays, retries, name munging."""

from __future__ import annotations

import asyncio
import re
from typing import Any, Awaitable, Callable, TypeVar

from loguru import logger
from nanoid import generate

from fencesplit.config import get_config

T = TypeVar("T")

_LEVEL_ALIASES = {"warn": "WARNING"}
_UPPER = re.compile(r"[A-Z]")
_UNSAFE = re.compile(r"[^a-zA-Z0-9_\-.]")


def log(level: str, msg: str, error: BaseException | Any | None = None) -> None:
    """Log *msg* at *level*; an attached error is logged with it."""
    name = _LEVEL_ALIASES.get(level.lower(), level.upper())
    try:
        logger.level(name)
    except ValueError:
        name = "INFO"  # unknown level names
    if isinstance(error, BaseException):
        logger.opt(exception=error, depth=1).log(name, msg)
    elif error is not None:
        logger.opt(depth=1).log(name, f"{msg}: {error}")
    else:
        logger.opt(depth=1).log(name, msg)


def random_id(length: int | None = None) -> str:
    """Return a URL-safe random id (21 characters by default)."""
    if length is None:
        length = get_config().ids.length
    if length == 0:
        return ""
    return generate(size=length)


async def sleep(ms: float) -> None:
    """Pause for *ms* milliseconds."""
    await asyncio.sleep(ms / 1000)


async def retry_with_backoff(
    fn: Callable[[], Awaitable[T]],
    on_retry: Callable[[], Any] | None = None,
    max_attempts: int | None = None,
    base_delay_ms: int | None = None,
) -> T:
    """Await ``fn()`` until it succeeds, backing off exponentially.

    Args:
        fn: Zero-argument coroutine function to call.
        on_retry: Called before each retry. Its errors are logged and ignored.
        max_attempts: Total attempts before giving up.
        base_delay_ms: Delay before retry *n* is ``base_delay_ms * 2**n``.

    Returns:
        The first successful result of ``fn()``.

    Raises:
        The exception from the final attempt.
    """
    cfg = get_config().retry
    max_attempts = cfg.max_attempts if max_attempts is None else max_attempts
    base_delay_ms = cfg.base_delay_ms if base_delay_ms is None else base_delay_ms

    attempt = 1
    while True:
        try:
            return await fn()
        except Exception as e:
            if attempt >= max_attempts:
                logger.error(f"Max attempts reached ({max_attempts}): {e}")
                raise
            delay_ms = base_delay_ms * (2 ** attempt)
            logger.warning(f"Retry attempt {attempt} after {delay_ms}ms: {e}")
            if on_retry is not None:
                try:
                    on_retry()
                except Exception as hook_error:
                    logger.error(f"could not execute on_retry: {hook_error}")
            await sleep(delay_ms)
            attempt += 1


def camel_to_snake(name: str) -> str:
    """``thisIsCamel`` -> ``this_is_camel``."""
    return _UPPER.sub(lambda m: f"_{m.group(0).lower()}", name)


def sanitize_string(value: str) -> str:
    """Replace every character outside ``[A-Za-z0-9_.-]`` with ``-``."""
    return _UNSAFE.sub("-", value)
