"""Content hashing and object/base64 codec helpers."""

import base64
import hashlib
import json
from typing import Any


def _to_json(data: Any) -> str:
    # Compact form, same bytes as JSON.stringify
    return json.dumps(data, separators=(",", ":"), ensure_ascii=False)


def _as_text(data: Any) -> str:
    return data if isinstance(data, str) else _to_json(data)


def create_hash(data: Any) -> str:
    """SHA-1 hex digest of *data* (JSON-serialized unless already a string)."""
    return hashlib.sha1(_as_text(data).encode("utf-8")).hexdigest()


def md5(data: Any) -> str:
    """MD5 hex digest of *data* (JSON-serialized unless already a string)."""
    return hashlib.md5(_as_text(data).encode("utf-8")).hexdigest()


def object_to_base64(obj: Any) -> str:
    """Encode *obj* as compact JSON wrapped in base64."""
    return base64.b64encode(_to_json(obj).encode("utf-8")).decode("ascii")


def base64_to_object(value: str) -> Any:
    """Inverse of object_to_base64."""
    return json.loads(base64.b64decode(value).decode("utf-8"))
