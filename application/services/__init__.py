# application/services/__init__.py
from .market_aggregator import MarketAggregator

__all__ = ['MarketAggregator']
