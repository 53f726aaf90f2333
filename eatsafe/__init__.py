"""EatSafe food-safety compliance core."""

__version__ = "0.1.0"
