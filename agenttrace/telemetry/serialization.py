"""Best-effort JSON serialization for span attributes."""

import base64
import dataclasses
import json
from datetime import datetime
from enum import Enum
from typing import Any

from ..logging_config import get_logger

logger = get_logger(__name__)

NOT_SERIALIZABLE = "<not serializable>"


def _to_jsonable(obj: Any) -> Any:
    """json.dumps default hook for the types that flow through traced calls."""
    if dataclasses.is_dataclass(obj) and not isinstance(obj, type):
        # None fields are omitted to keep attribute payloads small
        return {
            f.name: getattr(obj, f.name)
            for f in dataclasses.fields(obj)
            if getattr(obj, f.name) is not None
        }
    if hasattr(obj, "model_dump"):
        return obj.model_dump(mode="json", exclude_none=True)
    if isinstance(obj, (bytes, bytearray)):
        return base64.b64encode(bytes(obj)).decode("ascii")
    if isinstance(obj, datetime):
        return obj.isoformat()
    if isinstance(obj, Enum):
        return obj.value
    if isinstance(obj, (set, frozenset)):
        return list(obj)
    raise TypeError(f"Object of type {type(obj).__name__} is not JSON serializable")


def safe_serialize(obj: Any) -> str:
    """Serialize obj to JSON, returning "<not serializable>" on any failure."""
    try:
        return json.dumps(obj, default=_to_jsonable, ensure_ascii=False)
    except Exception as e:
        logger.warning(
            "Failed to serialize %s for tracing: %s", type(obj).__name__, e
        )
        return NOT_SERIALIZABLE
