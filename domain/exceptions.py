# domain/exceptions.py
"""
Hierarquia de exceções da ingestão.

O agregador em si não possui erros: toda falha vem da leitura ou da
decodificação da entrada e é fatal para a execução inteira.
"""
from typing import Any, Dict


class IngestionError(Exception):
    """Base para todos os erros que encerram uma execução."""

    def __init__(self, message: str, line_number: int = 0):
        super().__init__(message)
        self.message = message
        self.line_number = line_number

    def get_error_context(self) -> Dict[str, Any]:
        """Contexto estruturado para logging."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'line_number': self.line_number,
        }


class DecodeError(IngestionError):
    """Linha que não é JSON válido ou não tem os campos exigidos."""

    def __init__(self, line_number: int, raw_line: str, reason: str):
        super().__init__(f"Erro ao decodificar a linha {line_number}: {reason}", line_number)
        self.raw_line = raw_line.rstrip('\r\n')
        self.reason = reason

    def get_error_context(self) -> Dict[str, Any]:
        context = super().get_error_context()
        context.update({'raw_line': self.raw_line, 'reason': self.reason})
        return context


class StreamReadError(IngestionError):
    """O fluxo de entrada não pôde ser lido."""
