"""Testing generators – hypothesis strategies for limits and traffic."""
from tollgate.testing.generators.strategies import arrival_times_strategy, limit_config_strategy

__all__ = ["arrival_times_strategy", "limit_config_strategy"]
