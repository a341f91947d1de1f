from unittest.mock import MagicMock

import numpy as np
import pytest

from rainharvest.errors import ConfigurationError
from rainharvest.estimators.hydrogeology import (
    COASTAL_WARNING,
    GENERIC_AQUIFER_NAMES,
    HARD_ROCK_WARNING,
    HydrogeologyEstimator,
    classify_suitability,
    is_coastal_zone,
    is_hard_rock_zone,
    zone_warnings,
)
from rainharvest.models.domain import DepthRange
from rainharvest.models.enums import AquiferType, Permeability, Suitability, WaterQuality


@pytest.fixture
def mock_rng():
    """Generator stub: name 'Volcanic', quality draw 0.5, type index 1."""
    rng = MagicMock()
    rng.choice.return_value = "Volcanic"
    rng.random.return_value = 0.5
    rng.integers.return_value = 1
    return rng


class TestZones:
    def test_mumbai_is_coastal_only(self):
        assert is_coastal_zone(19.076, 72.8777)
        assert not is_hard_rock_zone(19.076, 72.8777)

    def test_hyderabad_is_both(self):
        assert is_coastal_zone(17.385, 78.4867)
        assert is_hard_rock_zone(17.385, 78.4867)

    def test_delhi_is_neither(self):
        assert not is_coastal_zone(28.6139, 77.209)
        assert not is_hard_rock_zone(28.6139, 77.209)

    def test_bounds_are_exclusive(self):
        assert not is_coastal_zone(25.0, 80.0)
        assert not is_hard_rock_zone(15.0, 80.0)

    def test_suitability_rules(self):
        shallow = DepthRange(min=5, max=25)
        deep = DepthRange(min=25, max=45)

        assert classify_suitability(False, True, deep) is Suitability.FAIR
        assert classify_suitability(True, True, deep) is Suitability.FAIR
        assert classify_suitability(True, False, shallow) is Suitability.GOOD
        assert classify_suitability(False, False, shallow) is Suitability.EXCELLENT

    def test_warnings_prefer_coastal(self):
        assert zone_warnings(True, True) == (COASTAL_WARNING,)
        assert zone_warnings(False, True) == (HARD_ROCK_WARNING,)
        assert zone_warnings(False, False) == ()


class TestHydrogeologyEstimator:
    def test_coastal_profile(self, mock_rng):
        profile = HydrogeologyEstimator(mock_rng).estimate_aquifer(19.076, 72.8777)

        assert profile.aquifer_name == "Coastal Alluvial"
        assert profile.suitability.rainwater_harvesting is Suitability.GOOD
        assert profile.suitability.recharge_method == ("Recharge Well", "Infiltration Trench")
        assert profile.depth_to_water == DepthRange(min=5, max=25)
        assert profile.permeability is Permeability.HIGH
        assert profile.warnings == (COASTAL_WARNING,)
        assert profile.recommendations[-1] == "Focus on storage-based systems"

    def test_hard_rock_name_wins_but_coastal_warning_wins(self, mock_rng):
        profile = HydrogeologyEstimator(mock_rng).estimate_aquifer(17.385, 78.4867)

        assert profile.aquifer_name == "Deccan Trap Hard Rock"
        assert profile.depth_to_water == DepthRange(min=15, max=45)
        assert profile.permeability is Permeability.MEDIUM
        # min depth 15 is not deeper than 20, so the coastal rule applies
        assert profile.suitability.rainwater_harvesting is Suitability.GOOD
        assert profile.warnings == (COASTAL_WARNING,)

    def test_inland_profile(self, mock_rng):
        profile = HydrogeologyEstimator(mock_rng).estimate_aquifer(28.6139, 77.209)

        assert profile.aquifer_name == "Volcanic"
        assert profile.suitability.rainwater_harvesting is Suitability.EXCELLENT
        assert profile.suitability.recharge_method == (
            "Recharge Pit",
            "Percolation Tank",
            "Check Dam",
        )
        assert profile.warnings == ()
        assert profile.recommendations == (
            "Install first flush diverter for water quality",
            "Regular maintenance of collection system required",
            "Consider multiple recharge structures",
        )

    def test_random_draws(self, mock_rng):
        mock_rng.random.return_value = 0.71
        mock_rng.integers.return_value = 2

        profile = HydrogeologyEstimator(mock_rng).estimate_aquifer(28.6139, 77.209)

        assert profile.quality is WaterQuality.FAIR
        assert profile.aquifer_type is AquiferType.SEMI_CONFINED

    def test_quality_cutoff_is_exclusive(self, mock_rng):
        mock_rng.random.return_value = 0.7

        profile = HydrogeologyEstimator(mock_rng).estimate_aquifer(28.6139, 77.209)

        assert profile.quality is WaterQuality.GOOD

    def test_draw_order_is_fixed(self, mock_rng):
        HydrogeologyEstimator(mock_rng).estimate_aquifer(19.076, 72.8777)

        assert [name for name, _, _ in mock_rng.method_calls] == ["choice", "random", "integers"]

    def test_real_generator(self, rng):
        estimator = HydrogeologyEstimator(rng)

        for _ in range(20):
            profile = estimator.estimate_aquifer(28.6139, 77.209)
            assert profile.aquifer_name in GENERIC_AQUIFER_NAMES
            assert profile.quality in (WaterQuality.GOOD, WaterQuality.FAIR)

    def test_seeded_generators_agree(self):
        first = HydrogeologyEstimator(np.random.default_rng(5)).estimate_aquifer(28.6, 77.2)
        second = HydrogeologyEstimator(np.random.default_rng(5)).estimate_aquifer(28.6, 77.2)

        assert first == second

    def test_missing_generator(self):
        with pytest.raises(ConfigurationError):
            HydrogeologyEstimator(None)
