# analyzers/statistics/market_stats_calculator.py
from typing import Optional, Sequence
import numpy as np
from domain.entities.data_point import DataPoint
from domain.entities.market_stats import MarketStats

def update(stats: Optional[MarketStats], point: DataPoint) -> MarketStats:
    """
    Incorpora uma observação às estatísticas de um mercado.

    Usa apenas o snapshot anterior e a contagem de pontos: nenhum histórico
    é guardado. O resultado é equivalente a recalcular tudo a partir da
    lista completa de observações. `stats=None` equivale ao estado zerado.
    """
    if stats is None:
        stats = MarketStats.empty(point.market)
    elif stats.market != point.market:
        raise ValueError(
            f"Observação do mercado {point.market} aplicada às estatísticas do mercado {stats.market}"
        )

    n = stats.total_data_points
    new_count = n + 1
    total_volume = stats.total_volume + point.volume
    is_buy = 1.0 if point.is_buy else 0.0

    # VWAP indefinido com volume acumulado zero: fica em 0
    if total_volume == 0:
        vwap = 0.0
    else:
        vwap = (
            stats.volume_weighted_mean_price * stats.total_volume + point.price * point.volume
        ) / total_volume

    return MarketStats(
        market=stats.market,
        total_volume=total_volume,
        mean_price=(stats.mean_price * n + point.price) / new_count,
        mean_volume=(stats.mean_volume * n + point.volume) / new_count,
        volume_weighted_mean_price=vwap,
        percent_buy=(stats.percent_buy * n + is_buy) / new_count,
        total_data_points=new_count,
    )

def compute_batch_stats(market: int, points: Sequence[DataPoint]) -> MarketStats:
    """Recalcula as estatísticas a partir do histórico completo (referência)."""
    if not points:
        return MarketStats.empty(market)

    prices = np.array([p.price for p in points], dtype=float)
    volumes = np.array([p.volume for p in points], dtype=float)
    buys = np.array([1.0 if p.is_buy else 0.0 for p in points])

    total_volume = float(np.sum(volumes))
    vwap = float(np.sum(prices * volumes) / total_volume) if total_volume != 0 else 0.0

    return MarketStats(
        market=market,
        total_volume=total_volume,
        mean_price=float(np.mean(prices)),
        mean_volume=float(np.mean(volumes)),
        volume_weighted_mean_price=vwap,
        percent_buy=float(np.mean(buys)),
        total_data_points=len(points),
    )
