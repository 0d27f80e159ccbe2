"""
chainconf - Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros de composição do chainconf.
Erros de composição são estruturais: dizem respeito a *quais* elementos de
configuração foram combinados, e não a dados de runtime. Por isso devem ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis (o chamador corrige a expressão de configuração)

Nenhuma decisão implícita é permitida: duplicidades e conflitos nunca são
resolvidos por "última escrita vence".
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CompositionErrorPayload:
    """
    Payload canônico de erro de composição.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
      (domínio, kinds envolvidos, elemento derivado, ...)
    - hint: ação sugerida ao autor da configuração
    - fatal: indica erro de programação (ex.: extensão de domínio inconsistente),
      e não erro de entrada do usuário
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None
    fatal: bool = False

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Composição
DUPLICATE_KIND = "DUPLICATE_KIND"
INCOMPATIBLE_KINDS = "INCOMPATIBLE_KINDS"
DOMAIN_MISMATCH = "DOMAIN_MISMATCH"
INVALID_ELEMENT_VALUE = "INVALID_ELEMENT_VALUE"

# Domínios / tabela de compatibilidade
OUT_OF_RANGE_KIND = "OUT_OF_RANGE_KIND"
INVALID_COMPATIBILITY_TABLE = "INVALID_COMPATIBILITY_TABLE"
UNKNOWN_DOMAIN = "UNKNOWN_DOMAIN"
DUPLICATE_DOMAIN = "DUPLICATE_DOMAIN"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def duplicate_kind(
    *,
    domain: Optional[str],
    kind: str,
    element: Optional[str] = None,
    hint: str = "Remova a ocorrência repetida: cada kind pode aparecer no máximo uma vez.",
) -> CompositionErrorPayload:
    if element is None:
        message = f"Kind '{kind}' já presente na configuração do domínio '{domain}'"
    else:
        message = f"Sub-opção '{kind}' fornecida mais de uma vez para '{element}'"
    return CompositionErrorPayload(
        type=DUPLICATE_KIND,
        message=message,
        details={
            "domain": domain,
            "kind": kind,
            "element": element,
        },
        hint=hint,
    )


def incompatible_kinds(
    *,
    domain: str,
    present_kind: str,
    added_kind: str,
    hint: str = "Escolha apenas uma das opções conflitantes; a tabela de compatibilidade do domínio proíbe o par.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=INCOMPATIBLE_KINDS,
        message=(
            f"Kinds incompatíveis no domínio '{domain}': "
            f"'{present_kind}' e '{added_kind}'"
        ),
        details={
            "domain": domain,
            "present_kind": present_kind,
            "added_kind": added_kind,
        },
        hint=hint,
    )


def domain_mismatch(
    *,
    expected_domain: str,
    actual_domain: str,
    kind: str,
    hint: str = "Combine apenas elementos do mesmo domínio de configuração.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=DOMAIN_MISMATCH,
        message=(
            f"Elemento '{kind}' pertence ao domínio '{actual_domain}', "
            f"esperado '{expected_domain}'"
        ),
        details={
            "expected_domain": expected_domain,
            "actual_domain": actual_domain,
            "kind": kind,
        },
        hint=hint,
    )


def invalid_element_value(
    *,
    element: str,
    value: Any,
    expected: str,
    hint: str = "Ajuste o valor do elemento para o intervalo representável.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=INVALID_ELEMENT_VALUE,
        message=f"Valor inválido para '{element}': {value!r} (esperado {expected})",
        details={
            "element": element,
            "value": repr(value),
            "expected": expected,
        },
        hint=hint,
    )


def out_of_range_kind(
    *,
    domain: str,
    kind_id: Any,
    cardinality: int,
    hint: str = "Erro de programação: revise a enumeração de kinds e a tabela de compatibilidade do domínio.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=OUT_OF_RANGE_KIND,
        message=f"Kind id {kind_id!r} fora do intervalo [0, {cardinality}) do domínio '{domain}'",
        details={
            "domain": domain,
            "kind_id": repr(kind_id),
            "cardinality": cardinality,
        },
        hint=hint,
        fatal=True,
    )


def invalid_compatibility_table(
    *,
    domain: str,
    reason: str,
    hint: str = "Erro de programação: a tabela deve ser quadrada, simétrica e com diagonal falsa.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=INVALID_COMPATIBILITY_TABLE,
        message=f"Tabela de compatibilidade inválida para o domínio '{domain}': {reason}",
        details={
            "domain": domain,
            "reason": reason,
        },
        hint=hint,
        fatal=True,
    )


def unknown_domain(
    *,
    domain: str,
    known: list,
    hint: str = "Registre o domínio antes de usá-lo ou corrija o nome declarado.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=UNKNOWN_DOMAIN,
        message=f"Domínio de configuração desconhecido: '{domain}'",
        details={
            "domain": domain,
            "known_domains": list(known),
        },
        hint=hint,
    )


def duplicate_domain(
    *,
    domain: str,
    hint: str = "Cada domínio deve ser registrado uma única vez.",
) -> CompositionErrorPayload:
    return CompositionErrorPayload(
        type=DUPLICATE_DOMAIN,
        message=f"Domínio já registrado: '{domain}'",
        details={"domain": domain},
        hint=hint,
        fatal=True,
    )
