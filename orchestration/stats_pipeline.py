# orchestration/stats_pipeline.py
import time
import logging
from dataclasses import dataclass
from typing import Optional

from application.interfaces.data_point_source import IDataPointSource
from application.interfaces.stats_writer import IStatsWriter
from application.services.market_aggregator import MarketAggregator

logger = logging.getLogger(__name__)


@dataclass
class RunSummary:
    """Resumo de uma execução completa."""
    lines_read: int
    data_points: int
    markets: int
    records_written: int
    elapsed_seconds: float


class StatsPipeline:
    """
    Orquestra fonte -> agregador -> saída.

    A entrada é consumida por inteiro antes de qualquer escrita: se a
    leitura falhar, nenhuma estatística é emitida e o erro é propagado.
    """

    def __init__(
        self,
        source: IDataPointSource,
        writer: IStatsWriter,
        aggregator: Optional[MarketAggregator] = None
    ):
        self.source = source
        self.writer = writer
        self.aggregator = aggregator or MarketAggregator()

    def run(self) -> RunSummary:
        """Executa a ingestão e escreve o snapshot final."""
        logger.info("--- Ingestão iniciada ---")
        start = time.time()

        try:
            self.aggregator.ingest_many(self.source.read_data_points())
        finally:
            self.source.close()

        records = self.writer.write(self.aggregator.snapshot())
        self.writer.flush()

        summary = RunSummary(
            lines_read=getattr(self.source, 'lines_read', 0),
            data_points=self.aggregator.points_ingested,
            markets=self.aggregator.market_count,
            records_written=records,
            elapsed_seconds=time.time() - start,
        )
        logger.info(
            f"Ingestão concluída - Linhas: {summary.lines_read}, "
            f"Observações: {summary.data_points}, "
            f"Mercados: {summary.markets}, "
            f"Tempo: {summary.elapsed_seconds:.3f}s"
        )
        return summary
