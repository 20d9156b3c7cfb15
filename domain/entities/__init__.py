# domain/entities/__init__.py
from .data_point import DataPoint
from .market_stats import MarketStats

__all__ = ['DataPoint', 'MarketStats']
