# application/services/market_aggregator.py
from typing import Dict, Iterable, List, Mapping, Optional, Any
import logging

from domain.entities.data_point import DataPoint
from domain.entities.market_stats import MarketStats
from analyzers.statistics import market_stats_calculator

logger = logging.getLogger(__name__)

MarketStatsMap = Dict[int, MarketStats]


def initialize() -> MarketStatsMap:
    """Retorna o mapeamento vazio mercado -> estatísticas."""
    return {}


def update(stats: Optional[MarketStats], point: DataPoint) -> MarketStats:
    """Aplica uma observação ao snapshot de um mercado (None = mercado novo)."""
    return market_stats_calculator.update(stats, point)


def apply(markets: Mapping[int, MarketStats], point: DataPoint) -> MarketStatsMap:
    """
    Retorna um novo mapeamento com o registro do mercado da observação
    substituído. Os demais mercados ficam intocados.
    """
    updated = dict(markets)
    updated[point.market] = update(markets.get(point.market), point)
    return updated


def finalize(markets: Mapping[int, MarketStats]) -> List[MarketStats]:
    """Snapshot final de todos os mercados vistos. A ordem não é garantida."""
    return [markets[market] for market in sorted(markets)]


class MarketAggregator:
    """Mantém as estatísticas de todos os mercados durante uma execução."""

    def __init__(self):
        self.markets: MarketStatsMap = initialize()
        self.points_ingested = 0
        logger.info("MarketAggregator inicializado")

    def ingest(self, point: DataPoint) -> MarketStats:
        """Incorpora uma observação e retorna o novo snapshot do mercado."""
        previous = self.markets.get(point.market)
        if previous is None:
            logger.debug(f"Novo mercado encontrado: {point.market}")

        stats = update(previous, point)
        self.markets[point.market] = stats
        self.points_ingested += 1
        return stats

    def ingest_many(self, points: Iterable[DataPoint]) -> int:
        """Incorpora várias observações em sequência. Retorna quantas foram lidas."""
        count = 0
        for point in points:
            self.ingest(point)
            count += 1
        return count

    def get(self, market: int) -> Optional[MarketStats]:
        return self.markets.get(market)

    @property
    def market_count(self) -> int:
        return len(self.markets)

    def snapshot(self) -> List[MarketStats]:
        """Estatísticas atuais de todos os mercados."""
        return finalize(self.markets)

    def reset(self):
        """Descarta todo o estado acumulado."""
        logger.info(
            f"Resetando agregador: {self.market_count} mercados, {self.points_ingested} observações descartadas"
        )
        self.markets = initialize()
        self.points_ingested = 0

    def get_statistics(self) -> Dict[str, Any]:
        """Retorna estatísticas de uso do agregador."""
        return {
            'markets': self.market_count,
            'points_ingested': self.points_ingested,
            'market_ids': sorted(self.markets),
        }
