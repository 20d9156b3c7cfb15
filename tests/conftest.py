"""Configuração do pytest e fixtures compartilhadas."""

import io
from typing import Callable, List

import pytest

from domain.entities.data_point import DataPoint


def pytest_configure(config: pytest.Config) -> None:
    """Registra os marcadores customizados."""
    config.addinivalue_line("markers", "unit: teste unitário")
    config.addinivalue_line("markers", "integration: teste de ponta a ponta")
    config.addinivalue_line("markers", "property: teste baseado em propriedades")


def pytest_collection_modifyitems(config: pytest.Config, items: List[pytest.Item]) -> None:
    """Marca os testes automaticamente pelo diretório."""
    for item in items:
        path = str(item.fspath)
        if "property" in path:
            item.add_marker(pytest.mark.property)
        elif "orchestration" in path or path.endswith("test_main.py"):
            item.add_marker(pytest.mark.integration)
        else:
            item.add_marker(pytest.mark.unit)


@pytest.fixture
def make_point() -> Callable[..., DataPoint]:
    """Fábrica de DataPoint com valores padrão."""
    counter = {'id': 0}

    def _make(market: int = 7, price: float = 10.0, volume: float = 2.0, is_buy: bool = True) -> DataPoint:
        counter['id'] += 1
        return DataPoint(id=counter['id'], market=market, price=price, volume=volume, is_buy=is_buy)

    return _make


@pytest.fixture
def input_stream() -> Callable[..., io.StringIO]:
    """Monta um fluxo de texto a partir de linhas."""

    def _build(*lines: str) -> io.StringIO:
        return io.StringIO(''.join(line + '\n' for line in lines))

    return _build


@pytest.fixture
def scenario_lines() -> List[str]:
    return [
        'BEGIN',
        '{"id":1,"market":7,"price":10.0,"volume":2.0,"is_buy":true}',
        '{"id":2,"market":7,"price":20.0,"volume":2.0,"is_buy":false}',
        'END',
    ]
