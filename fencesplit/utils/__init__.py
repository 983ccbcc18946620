"""Hashing, codec and operational helpers."""

from fencesplit.utils.hashing import base64_to_object, create_hash, md5, object_to_base64
from fencesplit.utils.helpers import (
    camel_to_snake,
    log,
    random_id,
    retry_with_backoff,
    sanitize_string,
    sleep,
)

__all__ = [
    "base64_to_object",
    "camel_to_snake",
    "create_hash",
    "log",
    "md5",
    "object_to_base64",
    "random_id",
    "retry_with_backoff",
    "sanitize_string",
    "sleep",
]
