# orchestration/__init__.py
from .stats_pipeline import StatsPipeline, RunSummary

__all__ = ['StatsPipeline', 'RunSummary']
