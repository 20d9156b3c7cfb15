# application/interfaces/__init__.py
from .data_point_source import IDataPointSource
from .stats_writer import IStatsWriter

__all__ = ['IDataPointSource', 'IStatsWriter']
