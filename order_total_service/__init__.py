"""Order total service: applies a zip-code sales tax rate to an order."""

__version__ = "0.1.0"
