# analyzers/statistics/__init__.py
"""
Cálculo das estatísticas por mercado.
Regras incrementais (O(1) por observação) e a referência em lote.
"""

from .market_stats_calculator import update, compute_batch_stats

__all__ = ['update', 'compute_batch_stats']
