"""Monte Carlo Pricing of Compositional Interest Rate Products.

This package builds swap legs, swaps and single-asset options from
elementary components (coupon indices, notionals, periods) and values them
path by path against a market model.

Key modules:
- products: Coupon indices, notionals, periods, legs and their valuation
- models: Deterministic curve model, Hull-White and Black-Scholes simulations
- stochastic: Per-path random variables
- schedule: Time-offset schedules and dated schedule generation
- conventions: Day counts, calendars and schedule conventions
- descriptors: Product descriptors and product factories
"""

__version__ = "1.0.0"

__all__ = [
    "__version__",
    # Main modules are imported via subpackages
    "products",
    "models",
    "stochastic",
    "schedule",
    "conventions",
    "descriptors",
    "config",
    "errors",
]
