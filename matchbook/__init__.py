"""In-memory order book with price-time priority matching of market and limit orders."""

__version__ = "0.1.0"