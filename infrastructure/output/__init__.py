# infrastructure/output/__init__.py
"""
Saídas das estatísticas finais por mercado.
"""

from .json_lines_stats_writer import JsonLinesStatsWriter
from .text_stats_writer import TextStatsWriter

WRITERS = {
    'jsonl': JsonLinesStatsWriter,
    'text': TextStatsWriter,
}

def create_writer(output_format: str, stream=None):
    """Cria o writer correspondente ao formato configurado."""
    try:
        writer_cls = WRITERS[output_format]
    except KeyError:
        raise ValueError(
            f"Formato de saída desconhecido: '{output_format}'. Opções: {', '.join(sorted(WRITERS))}"
        ) from None
    return writer_cls(stream=stream)

__all__ = ['JsonLinesStatsWriter', 'TextStatsWriter', 'create_writer']
