"""Redis adapter – shared state store for multi-process deployments."""
from tollgate.adapters.redis.client import RedisClient
from tollgate.adapters.redis.codec import decode_state, encode_state
from tollgate.adapters.redis.state_store import CAS_SCRIPT, RedisStateStore

__all__ = ["CAS_SCRIPT", "RedisClient", "RedisStateStore", "decode_state", "encode_state"]
