# src/chainconf/core/config/__init__.py

"""
Camada declarativa de configuração do chainconf.

Este pacote carrega declarações de configuração (YAML/JSON), resolve
defaults + overrides locais e constrói o `Configuration` correspondente
por meio do mesmo motor de composição usado pelo operador `|`.

Responsabilidades do pacote:
    - Carregamento de arquivos de declaração (defaults + override local)
    - Override determinístico, kind a kind
    - Construção do composite a partir dos elementos registrados no domínio
    - Hash canônico do composite para rastreabilidade

Invariantes:
    - A mesma entrada sempre produz o mesmo composite
    - Erros de composição nunca são rebaixados a avisos

Limites explícitos:
    - Não valida semântica de algoritmo
    - Não interpreta flags de linha de comando
"""

from .errors import (
    ConfigDomainConflictError,
    ConfigError,
    ConfigFileNotFoundError,
    InvalidConfigRootTypeError,
    UnknownElementError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_configuration_hash
from .loader import build_configuration, load_configuration, load_declaration
from .merge import merge_declarations, normalize_declaration

__all__ = [
    "ConfigError",
    "ConfigFileNotFoundError",
    "UnsupportedConfigFormatError",
    "InvalidConfigRootTypeError",
    "UnknownElementError",
    "ConfigDomainConflictError",
    "compute_configuration_hash",
    "build_configuration",
    "load_configuration",
    "load_declaration",
    "merge_declarations",
    "normalize_declaration",
]
