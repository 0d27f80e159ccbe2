# src/chainconf/core/config/errors.py
"""
Exceções canônicas da camada declarativa de configuração.

Este módulo define a hierarquia de exceções levantadas durante o
carregamento e a resolução de declarações de configuração (YAML/JSON)
antes que elas sejam compostas em um `Configuration`.

Princípios fundamentais:
    - Exceções são tipadas e semânticas
    - Erros estruturais de arquivo são tratados como falhas fatais
    - Erros de composição (duplicidade, incompatibilidade) continuam sendo
      `CompositionError` e não são reembalados aqui

Invariantes:
    - Todas as exceções deste módulo herdam de `ConfigError`
"""


class ConfigError(Exception):
    """
    Exceção base para erros de carregamento de declarações de configuração.

    Limites explícitos:
        - Não representa violação de compatibilidade entre kinds
        - Não representa erro de valor de elemento
    """


class ConfigFileNotFoundError(ConfigError):
    """
    Arquivo de configuração base (defaults) não encontrado.

    Decisões arquiteturais:
        - O arquivo de defaults é obrigatório
        - O arquivo local é opcional e sua ausência não é erro
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Formato de arquivo não suportado.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Conteúdo raiz da declaração não é um mapeamento, ou `elements` não é
    um mapeamento, ou `domain` não é uma string.
    """


class UnknownElementError(ConfigError):
    """Nome de kind declarado que não possui elemento registrado no domínio."""


class ConfigDomainConflictError(ConfigError):
    """
    Defaults e override declaram domínios diferentes.

    Limites explícitos:
        - Não tenta converter elementos entre domínios
    """
