# infrastructure/data_sources/stream_data_point_source.py
import json
import logging
import sys
from typing import Iterator, Optional, TextIO

from pydantic import ValidationError

from domain.entities.data_point import DataPoint
from domain.exceptions import DecodeError, StreamReadError
from application.interfaces.data_point_source import IDataPointSource

logger = logging.getLogger(__name__)

class StreamDataPointSource(IDataPointSource):
    """
    Implementação de IDataPointSource que lê uma observação JSON por linha
    de um fluxo de texto (stdin por padrão).

    A linha BEGIN é ignorada, a linha END encerra a leitura, assim como o
    fim físico da entrada. Qualquer outra linha precisa ser um objeto JSON
    válido; caso contrário a leitura inteira é abortada com DecodeError.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        begin_marker: str = 'BEGIN',
        end_marker: str = 'END'
    ):
        self.stream = stream if stream is not None else sys.stdin
        self.begin_marker = begin_marker
        self.end_marker = end_marker

        self.lines_read = 0
        self.data_points_read = 0
        self.reached_end_marker = False

    def read_data_points(self) -> Iterator[DataPoint]:
        while True:
            line = self._read_line()
            if not line:
                logger.info(f"Fim da entrada após {self.lines_read} linhas")
                return

            self.lines_read += 1
            content = line.strip()

            if content == self.begin_marker:
                continue
            if content == self.end_marker:
                self.reached_end_marker = True
                logger.info(f"Marcador {self.end_marker} encontrado na linha {self.lines_read}")
                return

            point = self._decode(line)
            self.data_points_read += 1
            yield point

    def _read_line(self) -> str:
        try:
            return self.stream.readline()
        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Erro ao ler o fluxo de entrada: {e}", exc_info=True)
            raise StreamReadError(
                f"Erro ao ler o fluxo de entrada: {e}", self.lines_read + 1
            ) from e

    def _decode(self, line: str) -> DataPoint:
        """Converte uma linha em DataPoint ou lança DecodeError."""
        try:
            payload = json.loads(line)
        except json.JSONDecodeError as e:
            raise DecodeError(self.lines_read, line, f"JSON inválido ({e})") from e

        if not isinstance(payload, dict):
            raise DecodeError(
                self.lines_read, line,
                f"esperado um objeto JSON, recebido {type(payload).__name__}"
            )

        try:
            return DataPoint(**payload)
        except ValidationError as e:
            raise DecodeError(self.lines_read, line, self._describe_errors(e)) from e

    @staticmethod
    def _describe_errors(error: ValidationError) -> str:
        parts = []
        for err in error.errors():
            field = '.'.join(str(loc) for loc in err.get('loc', ())) or '<objeto>'
            parts.append(f"{field}: {err.get('msg', 'inválido')}")
        return '; '.join(parts)

    def close(self) -> None:
        if self.stream is not sys.stdin:
            self.stream.close()
