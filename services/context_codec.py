"""Encoding of the task ``context`` tag set into its single TEXT column."""
from __future__ import annotations

import json
from typing import Iterable, List, Optional


class ContextDecodeError(ValueError):
    """A stored ``context`` value is not a serialized list of tags."""


def encode_context(tags: Optional[Iterable[str]]) -> Optional[str]:
    """Serialize ``tags`` keeping first occurrences in order; ``None`` stays ``None``."""

    if tags is None:
        return None
    if isinstance(tags, str):
        raise TypeError("context must be a sequence of tags, not a string")
    seen = set()
    ordered: List[str] = []
    for tag in tags:
        value = str(tag)
        if value in seen:
            continue
        seen.add(value)
        ordered.append(value)
    return json.dumps(ordered, ensure_ascii=False)


def decode_context(raw: Optional[str]) -> List[str]:
    if raw is None or raw == "":
        return []
    try:
        data = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise ContextDecodeError(f"Malformed context value: {raw!r}") from exc
    if not isinstance(data, list) or not all(isinstance(tag, str) for tag in data):
        raise ContextDecodeError(f"Context is not a list of tags: {raw!r}")
    return data


__all__ = ["ContextDecodeError", "decode_context", "encode_context"]
