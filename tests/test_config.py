"""Tests for primality configuration."""

import pytest

from int_kernel.config import DEFAULT_CONFIG, PrimalityConfig


class TestPrimalityConfig:
    """Tests for PrimalityConfig class."""

    def test_defaults(self):
        """Test default values."""
        assert DEFAULT_CONFIG.probable_prime_rounds == 25
        assert DEFAULT_CONFIG.seed is None

    def test_invalid_rounds(self):
        """Test invalid round count raises error."""
        with pytest.raises(ValueError):
            PrimalityConfig(probable_prime_rounds=0)

    def test_seeded_rng_repeats(self):
        """Test that a seed gives the same witnesses every time."""
        config = PrimalityConfig(seed=123)
        first = [config.make_rng().randrange(2, 10**9) for _ in range(3)]
        assert len(set(first)) == 1

    def test_dict_round_trip(self):
        """Test conversion to and from dictionaries."""
        config = PrimalityConfig(probable_prime_rounds=7, seed=5)
        assert PrimalityConfig.from_dict(config.to_dict()) == config
        assert PrimalityConfig.from_dict({"seed": 1, "unknown": 2}).seed == 1

    def test_frozen(self):
        """Test that configs are immutable."""
        with pytest.raises(AttributeError):
            DEFAULT_CONFIG.seed = 3
