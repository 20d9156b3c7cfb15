# main.py
import logging
import sys
from pathlib import Path
from typing import Optional, TextIO

from rich.console import Console
from rich.logging import RichHandler

from config import settings
from domain.exceptions import IngestionError
from infrastructure.data_sources.stream_data_point_source import StreamDataPointSource
from infrastructure.output import create_writer
from orchestration.stats_pipeline import StatsPipeline

# stdout é reservado para as estatísticas
console = Console(stderr=True)

logger = logging.getLogger(__name__)


# --- CONFIGURAÇÃO DE LOGGING ---
def configure_logging(
    log_dir: Optional[str] = None,
    level: Optional[str] = None,
    log_to_file: Optional[bool] = None,
    console_level: Optional[str] = None
) -> None:
    system_config = settings.SYSTEM_CONFIG
    log_dir = log_dir or system_config.get('log_dir', 'logs')
    level = level or system_config.get('log_level', 'INFO')
    console_level = console_level or system_config.get('console_log_level', 'WARNING')
    if log_to_file is None:
        log_to_file = system_config.get('log_to_file', True)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    if log_to_file:
        log_path = Path(log_dir)
        log_path.mkdir(parents=True, exist_ok=True)

        file_formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')
        file_handler = logging.FileHandler(log_path / "system.log", mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(file_formatter)
        root_logger.addHandler(file_handler)

    rich_handler = RichHandler(
        console=console,
        level=console_level,
        show_time=False,
        markup=False,
        rich_tracebacks=True
    )
    root_logger.addHandler(rich_handler)


def handle_uncaught_exception(exc_type, exc_value, exc_traceback):
    if issubclass(exc_type, KeyboardInterrupt):
        sys.__excepthook__(exc_type, exc_value, exc_traceback)
        return
    logging.critical("EXCEÇÃO NÃO TRATADA", exc_info=(exc_type, exc_value, exc_traceback))


def build_pipeline(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> StatsPipeline:
    """Monta fonte, agregador e saída a partir do config.yaml."""
    source = StreamDataPointSource(
        stream=stdin,
        begin_marker=settings.INPUT_CONFIG.get('begin_marker', 'BEGIN'),
        end_marker=settings.INPUT_CONFIG.get('end_marker', 'END')
    )
    writer = create_writer(settings.OUTPUT_CONFIG.get('format', 'jsonl'), stream=stdout)
    return StatsPipeline(source=source, writer=writer)


def run(stdin: Optional[TextIO] = None, stdout: Optional[TextIO] = None) -> int:
    """Executa uma ingestão completa. Retorna o código de saída do processo."""
    pipeline = build_pipeline(stdin=stdin, stdout=stdout)
    try:
        pipeline.run()
    except IngestionError as e:
        logger.critical(f"Execução abortada: {e}", extra={'context': e.get_error_context()})
        return 1
    return 0


def main() -> int:
    """Ponto de entrada do sistema."""
    configure_logging()
    sys.excepthook = handle_uncaught_exception
    try:
        return run()
    except KeyboardInterrupt:
        console.print("\n[bold]Ingestão interrompida pelo usuário.[/bold]")
        return 130
    finally:
        logging.shutdown()


if __name__ == "__main__":
    sys.exit(main())
