# infrastructure/output/text_stats_writer.py
import logging
import sys
from typing import Iterable, Optional, TextIO

from domain.entities.market_stats import MarketStats
from application.interfaces.stats_writer import IStatsWriter

logger = logging.getLogger(__name__)

class TextStatsWriter(IStatsWriter):
    """Escreve uma linha legível por mercado."""

    LINE_TEMPLATE = (
        "Market: {market}, total volume: {total_volume}, mean price: {mean_price}, "
        "mean volume: {mean_volume}, volume weighted mean price: {volume_weighted_mean_price}, "
        "percent buy: {percent_buy}, total data points: {total_data_points}"
    )

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def format(self, market_stats: MarketStats) -> str:
        return self.LINE_TEMPLATE.format(**market_stats.model_dump())

    def write(self, stats: Iterable[MarketStats]) -> int:
        written = 0
        for market_stats in stats:
            self.stream.write(self.format(market_stats) + '\n')
            written += 1

        logger.debug(f"{written} registros de mercado escritos em texto")
        return written

    def flush(self) -> None:
        self.stream.flush()
