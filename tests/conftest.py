import numpy as np
import pytest

from ficcmc.config import ValuationConfig
from ficcmc.errors import ComputationError
from ficcmc.models import CurveMarketModel, DiscountCurve, HullWhiteModel
from ficcmc.schedule import Schedule
from ficcmc.stochastic import PathVector


class FailingModel:
    """Model that cannot compute forward rates."""

    num_paths = 2

    def forward_rate(self, curve_id, fixing_time, period_length):
        raise ComputationError(f"no forward for {curve_id} at {fixing_time}")

    def numeraire(self, time):
        return PathVector.constant(1.0, self.num_paths, time)

    def discount_factor(self, time):
        return PathVector.constant(1.0, self.num_paths, time)


@pytest.fixture
def zero_rate_model():
    return CurveMarketModel(
        DiscountCurve.flat(0.0),
        forward_curves={"EURIBOR": DiscountCurve.flat(0.0, name="EURIBOR")},
        num_paths=5,
    )


@pytest.fixture
def curve_model():
    return CurveMarketModel(
        DiscountCurve.flat(0.03, name="OIS"),
        forward_curves={"EURIBOR": DiscountCurve.flat(0.035, name="EURIBOR")},
        num_paths=3,
    )


@pytest.fixture
def failing_model():
    return FailingModel()


@pytest.fixture
def annual_schedule():
    return Schedule.from_arrays([0, 1, 2, 3], [1, 2, 3, 4], [1, 1, 1, 1])


@pytest.fixture(scope="module")
def hull_white():
    return HullWhiteModel(
        DiscountCurve.flat(0.03),
        mean_reversion=0.1,
        volatility=0.01,
        time_grid=np.linspace(0.0, 5.0, 101),
        config=ValuationConfig(num_paths=20_000, random_seed=42, antithetic=True),
    )
