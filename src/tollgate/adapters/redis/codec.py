"""Redis adapter – canonical JSON encoding of per-key state.

The CAS script compares raw bytes, so encoding must be canonical: the same
state always produces the same bytes. Field types are pinned (floats stay
floats) and keys are sorted.
"""
from __future__ import annotations

import json
from typing import Any

from tollgate.application.rate_limit.state import (
    FixedWindowState,
    LeakyBucketState,
    SlidingWindowState,
    State,
    TokenBucketState,
)
from tollgate.kernel.errors import StateCodecError


def _fields(state: State) -> dict[str, Any]:
    if isinstance(state, TokenBucketState):
        return {"k": "tb", "tokens": float(state.tokens), "at": float(state.last_refill_at)}
    if isinstance(state, FixedWindowState):
        return {"k": "fw", "start": float(state.window_start), "count": int(state.count)}
    if isinstance(state, SlidingWindowState):
        return {"k": "sw", "log": [[float(ts), int(weight)] for ts, weight in state.entries]}
    if isinstance(state, LeakyBucketState):
        return {"k": "lb", "level": float(state.level), "at": float(state.last_leak_at)}
    raise TypeError(f"Unsupported state type: {type(state).__name__}")


def encode_state(state: State) -> bytes:
    return json.dumps(_fields(state), sort_keys=True, separators=(",", ":")).encode()


def decode_state(raw: bytes | str) -> State:
    try:
        data = json.loads(raw)
        kind = data["k"]
        if kind == "tb":
            return TokenBucketState(tokens=float(data["tokens"]), last_refill_at=float(data["at"]))
        if kind == "fw":
            return FixedWindowState(window_start=float(data["start"]), count=int(data["count"]))
        if kind == "sw":
            return SlidingWindowState(
                entries=tuple((float(ts), int(weight)) for ts, weight in data["log"])
            )
        if kind == "lb":
            return LeakyBucketState(level=float(data["level"]), last_leak_at=float(data["at"]))
    except (ValueError, KeyError, TypeError) as exc:
        raise StateCodecError("redis", f"Undecodable state: {raw!r}", cause=exc) from exc
    raise StateCodecError("redis", f"Unknown state kind {kind!r}")


__all__ = ["decode_state", "encode_state"]
