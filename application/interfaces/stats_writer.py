# application/interfaces/stats_writer.py
from abc import ABC, abstractmethod
from typing import Iterable
from domain.entities.market_stats import MarketStats

class IStatsWriter(ABC):
    """Interface para saídas das estatísticas finais."""

    @abstractmethod
    def write(self, stats: Iterable[MarketStats]) -> int:
        """Escreve um registro por mercado. Retorna quantos foram escritos."""

    @abstractmethod
    def flush(self) -> None:
        """Garante que todos os dados em buffer sejam escritos."""
