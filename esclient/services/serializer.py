"""Request body encoding. Schema values serialize through their model serializers; plain documents pass through json."""

import json
from typing import Any

from pydantic import BaseModel


def to_json(value: Any) -> Any:
    """Return the JSON-compatible structure for a schema value, pydantic model, or plain JSON value."""
    if isinstance(value, BaseModel):
        return value.model_dump(mode="json")
    return value


def encode(value: Any) -> bytes:
    """Encode a request body as UTF-8 JSON bytes."""
    return json.dumps(to_json(value), ensure_ascii=False).encode("utf-8")
