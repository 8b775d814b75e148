"""Lazy rebalancer: invest new contributions toward target allocations without selling."""

__version__ = "0.1.0"
