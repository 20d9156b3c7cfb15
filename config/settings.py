# config/settings.py
"""Carregador de configurações do YAML."""
import yaml
from pathlib import Path

# Carrega configurações do YAML
config_path = Path(__file__).parent / 'config.yaml'
if not config_path.exists():
    raise FileNotFoundError(f"Arquivo {config_path} não encontrado!")

with open(config_path, 'r', encoding='utf-8') as f:
    config = yaml.safe_load(f) or {}

# Acesso fácil às seções de configuração
INPUT_CONFIG = config.get('input', {})
OUTPUT_CONFIG = config.get('output', {})
SYSTEM_CONFIG = config.get('system', {})
