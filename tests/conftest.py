# tests/conftest.py
"""
Fixtures compartilhados para testes do chainconf.

Este módulo define fixtures reutilizáveis que fornecem:
- declarações YAML mínimas e determinísticas (defaults + override local)
- um domínio de brinquedo, com um par incompatível, para testes do motor
- elementos de brinquedo desse domínio
- contexto de construção controlado (BuildContext)

Decisões arquiteturais:
    - Declarações são fornecidas como strings; o I/O fica a cargo de `tmp_path`
    - O domínio de brinquedo é independente dos domínios de busca e alinhamento,
      para que os testes do core não dependam de regras de um domínio real
    - Imports do core são realizados de forma lazy dentro das fixtures

Invariantes:
    - Nenhuma fixture realiza I/O
    - Todas as fixtures são seguras para execução em paralelo
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Declarações de configuração (loader)
# =====================================================

@pytest.fixture
def search_defaults_yaml() -> str:
    """
    Declaração padrão (defaults) do domínio de busca.

    Usado por:
        - Testes do loader
        - Testes de override kind a kind
        - Testes de hashing de configuração carregada

    Returns:
        str: Conteúdo YAML de um `config.defaults.yaml`.
    """

    return """\
domain: search
elements:
  max_error:
    total: 3
  mode: all_best
  output: text_position
"""


@pytest.fixture
def search_local_yaml() -> str:
    """
    Override local do domínio de busca.

    Substitui integralmente `max_error` (sem mesclar com `total: 3` da base)
    e remove `output`.

    Returns:
        str: Conteúdo YAML de um `config.local.yaml`.
    """

    return """\
elements:
  max_error:
    substitution: 1
    insertion: 2
  output: null
"""


# =====================================================
# Domínio de brinquedo (core)
# =====================================================

@pytest.fixture
def toy_domain():
    """
    Domínio com quatro kinds (ALPHA, BETA, GAMMA, DELTA) em que apenas
    ALPHA x BETA é incompatível.
    """
    from enum import IntEnum

    from chainconf.core.domain import ConfigDomain

    class ToyKind(IntEnum):
        ALPHA = 0
        BETA = 1
        GAMMA = 2
        DELTA = 3

    return ConfigDomain.from_pairs(
        "toy",
        ToyKind,
        incompatible=[(ToyKind.ALPHA, ToyKind.BETA)],
    )


@pytest.fixture
def toy_elements(toy_domain):
    """
    Tipos de elemento do domínio de brinquedo, indexados pelo nome do kind.

    Returns:
        dict: {"alpha": Alpha, "beta": Beta, "gamma": Gamma, "delta": Delta}
    """
    from dataclasses import dataclass
    from typing import ClassVar

    from chainconf.core.element import ConfigElement

    kinds = toy_domain.kinds

    @dataclass(frozen=True)
    class Alpha(ConfigElement):
        domain: ClassVar = toy_domain
        kind: ClassVar = kinds.ALPHA

    @dataclass(frozen=True)
    class Beta(ConfigElement):
        domain: ClassVar = toy_domain
        kind: ClassVar = kinds.BETA

    @dataclass(frozen=True)
    class Gamma(ConfigElement):
        domain: ClassVar = toy_domain
        kind: ClassVar = kinds.GAMMA

    @dataclass(frozen=True)
    class Delta(ConfigElement):
        domain: ClassVar = toy_domain
        kind: ClassVar = kinds.DELTA

    return {"alpha": Alpha, "beta": Beta, "gamma": Gamma, "delta": Delta}


# =====================================================
# Contexto de construção
# =====================================================

@pytest.fixture
def build_ctx():
    """
    BuildContext com identificador e timestamp fixos.

    Returns:
        BuildContext: Contexto pronto para receber eventos.
    """
    from chainconf.core.context import BuildContext

    return BuildContext(
        build_id="build-test-001",
        created_at=datetime(2026, 1, 16, 12, 0, 0, tzinfo=timezone.utc),
        meta={"source": "pytest"},
    )
