# infrastructure/output/json_lines_stats_writer.py
import json
import logging
import math
import sys
from typing import Any, Iterable, Optional, TextIO

from domain.entities.market_stats import MarketStats
from application.interfaces.stats_writer import IStatsWriter

logger = logging.getLogger(__name__)

class JsonLinesStatsWriter(IStatsWriter):
    """
    Implementação de IStatsWriter que escreve um objeto JSON por mercado,
    um por linha (JSON Lines), no stdout por padrão.
    """

    def __init__(self, stream: Optional[TextIO] = None):
        self.stream = stream if stream is not None else sys.stdout

    def _convert_to_serializable(self, obj: Any) -> Any:
        """Converte objetos para formato serializável. inf/NaN viram null."""
        if hasattr(obj, 'model_dump'):  # Pydantic models
            return self._convert_to_serializable(obj.model_dump())
        elif isinstance(obj, dict):
            return {k: self._convert_to_serializable(v) for k, v in obj.items()}
        elif isinstance(obj, list):
            return [self._convert_to_serializable(item) for item in obj]
        elif isinstance(obj, float) and not math.isfinite(obj):
            return None
        elif isinstance(obj, (str, int, float, bool, type(None))):
            return obj
        else:
            return str(obj)

    def write(self, stats: Iterable[MarketStats]) -> int:
        written = 0
        for market_stats in stats:
            record = self._convert_to_serializable(market_stats)
            self.stream.write(json.dumps(record, separators=(',', ':'), allow_nan=False))
            self.stream.write('\n')
            written += 1

        logger.debug(f"{written} registros de mercado escritos em JSON Lines")
        return written

    def flush(self) -> None:
        self.stream.flush()
