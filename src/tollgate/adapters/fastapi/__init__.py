"""FastAPI adapter – rate-limit middleware and key resolvers."""
from tollgate.adapters.fastapi.keys import api_key_key, client_ip_key, forwarded_ip_key
from tollgate.adapters.fastapi.middleware import RateLimitMiddleware, rate_limit_headers

__all__ = ["RateLimitMiddleware", "api_key_key", "client_ip_key", "forwarded_ip_key", "rate_limit_headers"]
