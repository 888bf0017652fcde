"""Resilience retry – backoff and jitter between compare-and-swap rounds."""
from tollgate.resilience.retry.backoff import BackoffStrategy, ConstantBackoff, ExponentialBackoff
from tollgate.resilience.retry.jitter import FullJitter, JitterStrategy, NoJitter

__all__ = [
    "BackoffStrategy",
    "ConstantBackoff",
    "ExponentialBackoff",
    "FullJitter",
    "JitterStrategy",
    "NoJitter",
]
