"""
Market models answering the forward rate, numeraire and asset queries made
by product components.
"""

from .base import AssetModel, MarketModel
from .black_scholes import BlackScholesModel
from .curve_model import CurveMarketModel
from .curves import DiscountCurve
from .hull_white import HullWhiteModel
from .simulation import SimulationModel

__all__ = [
    # Protocols
    'MarketModel',
    'AssetModel',

    # Curves
    'DiscountCurve',

    # Models
    'CurveMarketModel',
    'SimulationModel',
    'HullWhiteModel',
    'BlackScholesModel',
]
