from dataclasses import FrozenInstanceError

import pytest

from ficcmc.config import DEFAULT_CONFIG, ValuationConfig


def test_defaults():
    assert DEFAULT_CONFIG.num_paths == 10_000
    assert DEFAULT_CONFIG.random_seed is None
    assert not DEFAULT_CONFIG.antithetic
    assert not DEFAULT_CONFIG.strict_schedule


@pytest.mark.parametrize("num_paths", [0, -5])
def test_num_paths_must_be_positive(num_paths):
    with pytest.raises(ValueError, match="num_paths"):
        ValuationConfig(num_paths=num_paths)


def test_antithetic_requires_even_paths():
    with pytest.raises(ValueError, match="even number of paths"):
        ValuationConfig(num_paths=11, antithetic=True)
    assert ValuationConfig(num_paths=12, antithetic=True).antithetic


def test_config_is_frozen():
    config = ValuationConfig()
    with pytest.raises(FrozenInstanceError):
        config.num_paths = 5
