# infrastructure/data_sources/__init__.py
from .stream_data_point_source import StreamDataPointSource

__all__ = ['StreamDataPointSource']
