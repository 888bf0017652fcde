"""Unit tests for the hypothesis strategies in tollgate.testing.generators."""
from __future__ import annotations

import sys
from unittest.mock import patch

import pytest
from hypothesis import given, settings

from tollgate.application.rate_limit import LimitConfig
from tollgate.testing.generators import arrival_times_strategy, limit_config_strategy


# ===========================================================================
# Import guard
# ===========================================================================

class TestRequireHypothesis:
    def test_raises_import_error_without_hypothesis(self) -> None:
        from tollgate.testing.generators.strategies import _require_hypothesis

        with patch.dict(sys.modules, {"hypothesis.strategies": None}):
            with pytest.raises(ImportError, match="hypothesis"):
                _require_hypothesis()


# ===========================================================================
# limit_config_strategy
# ===========================================================================

class TestLimitConfigStrategy:
    @given(limit_config_strategy(max_capacity=7, max_window=3.0))
    @settings(max_examples=50)
    def test_configs_are_valid_and_bounded(self, config: LimitConfig) -> None:
        assert isinstance(config, LimitConfig)
        assert 1 <= config.capacity <= 7
        assert 0.5 <= config.window_seconds <= 3.0
        assert config.rate > 0

    @given(limit_config_strategy(with_refill_rate=False))
    @settings(max_examples=25)
    def test_without_refill_rate(self, config: LimitConfig) -> None:
        assert config.refill_rate is None


# ===========================================================================
# arrival_times_strategy
# ===========================================================================

class TestArrivalTimesStrategy:
    @given(arrival_times_strategy(max_size=20, max_gap=2.0))
    @settings(max_examples=50)
    def test_non_decreasing_from_zero(self, times: list[float]) -> None:
        assert 1 <= len(times) <= 20
        assert times[0] >= 0.0
        assert all(a <= b for a, b in zip(times, times[1:]))
        assert times[-1] <= 2.0 * len(times)
