# application/interfaces/data_point_source.py
from abc import ABC, abstractmethod
from typing import Iterator
from domain.entities.data_point import DataPoint

class IDataPointSource(ABC):
    """Interface para fontes de observações de negócio."""

    @abstractmethod
    def read_data_points(self) -> Iterator[DataPoint]:
        """Produz observações validadas até o fim da ingestão."""

    @abstractmethod
    def close(self) -> None:
        """Libera a fonte de dados."""
