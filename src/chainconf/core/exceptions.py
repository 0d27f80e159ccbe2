"""
chainconf - Canonical Exceptions (v1)

Este módulo define as exceções tipadas levantadas pelo motor de composição.

Objetivo:
- Permitir que domínio, elementos e composite levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para CompositionErrorPayload
- Evitar ValueError/RuntimeError genéricos em guardrails estruturais

Regras:
- Toda exceção é construída a partir de um payload canônico (ver `errors.py`)
- Exceções carregam apenas dados estruturados (serializáveis)
- Herdam de ValueError: uma composição inválida é um valor inválido,
  não uma falha de execução
"""

from __future__ import annotations

from typing import Any, Dict, Optional

from .errors import CompositionErrorPayload


class CompositionError(ValueError):
    """Base class para exceções do motor de composição.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    - Não há retry: o chamador deve corrigir a expressão de configuração
    """

    def __init__(self, payload: CompositionErrorPayload):
        super().__init__(payload.message)
        self.payload = payload

    @property
    def message(self) -> str:
        return self.payload.message

    @property
    def details(self) -> Dict[str, Any]:
        return self.payload.details

    @property
    def hint(self) -> Optional[str]:
        return self.payload.hint

    def to_payload(self) -> CompositionErrorPayload:
        return self.payload

    def __str__(self) -> str:
        return self.payload.message


# ---------------------------------------------------------------------------
# Composição
# ---------------------------------------------------------------------------

class DuplicateKindError(CompositionError):
    """Kind já presente no composite, ou sub-opção repetida em elemento derivado."""


class IncompatibleKindsError(CompositionError):
    """Par de kinds proibido pela tabela de compatibilidade do domínio."""


class DomainMismatchError(CompositionError):
    """Elemento de um domínio combinado com composite de outro domínio."""


class InvalidElementValueError(CompositionError):
    """Payload de elemento fora do intervalo representável."""


# ---------------------------------------------------------------------------
# Domínios (erros de programação)
# ---------------------------------------------------------------------------

class OutOfRangeKindError(CompositionError):
    """Kind id fora de [0, cardinality) consultado na tabela de compatibilidade."""


class InvalidCompatibilityTableError(CompositionError):
    """Tabela de compatibilidade não quadrada, assimétrica ou com diagonal verdadeira."""


class UnknownDomainError(CompositionError):
    """Domínio não registrado."""


class DuplicateDomainError(CompositionError):
    """Domínio registrado mais de uma vez."""
