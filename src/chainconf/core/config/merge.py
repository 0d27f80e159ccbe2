# src/chainconf/core/config/merge.py
"""
Política de override de declarações de configuração.

Uma declaração tem a forma:

    {"domain": "<nome>", "elements": {"<kind>": <spec>, ...}}

Política de override (v1):
    - `domain` ausente no override → herdado da base
    - `domain` diferente entre base e override → erro estrutural
    - cada kind do override SUBSTITUI integralmente o spec da base
      (nunca há merge campo a campo dentro de um elemento)
    - spec `null` no override remove o kind da declaração resultante
    - spec `null` na declaração base (`normalize_declaration`) é mantido e
      repassado ao `from_spec` do elemento; nunca remove o kind

Decisões arquiteturais:
    - Substituição por kind, e não deep-merge: elementos derivados (ex.:
      `max_error`) são resolvidos a partir do conjunto exato de sub-opções
      informadas, e mesclar sub-opções mudaria silenciosamente a resolução
    - O merge é puramente funcional: nenhum input é mutado

Invariantes:
    - A mesma entrada sempre produz a mesma saída
    - Kinds não mencionados no override são preservados da base
"""

from copy import deepcopy
from typing import Any, Dict

from .errors import ConfigDomainConflictError, InvalidConfigRootTypeError


def _elements_of(declaration: Dict[str, Any], label: str) -> Dict[str, Any]:
    elements = declaration.get("elements") or {}
    if not isinstance(elements, dict):
        raise InvalidConfigRootTypeError(
            f"'elements' de {label} deve ser dict, recebido: {type(elements).__name__}"
        )
    return elements


def normalize_declaration(declaration: Dict[str, Any]) -> Dict[str, Any]:
    """
    Valida a forma de uma declaração base e devolve uma cópia canônica.

    Specs `null` são preservados: em uma declaração base eles declaram o
    elemento sem payload, e a decisão fica com o `from_spec` do elemento.
    """
    if not isinstance(declaration, dict):
        raise InvalidConfigRootTypeError(
            f"Declaração deve ser dict, recebido: {type(declaration).__name__}"
        )
    return {
        "domain": declaration.get("domain"),
        "elements": deepcopy(_elements_of(declaration, "base")),
    }


def merge_declarations(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Aplica um override sobre uma declaração base, kind a kind.

    Args:
        base (Dict[str, Any]): Declaração base (ex.: defaults).
        override (Dict[str, Any]): Declaração de override (ex.: local).

    Returns:
        Dict[str, Any]: Nova declaração resultante.

    Raises:
        InvalidConfigRootTypeError: Se alguma das entradas não for dict.
        ConfigDomainConflictError: Se os domínios declarados divergirem.
    """
    if not isinstance(base, dict) or not isinstance(override, dict):
        raise InvalidConfigRootTypeError(
            f"Merge requer dicts no nível raiz, recebido: "
            f"{type(base).__name__} vs {type(override).__name__}"
        )

    base_domain = base.get("domain")
    override_domain = override.get("domain", base_domain)
    if base_domain is not None and override_domain != base_domain:
        raise ConfigDomainConflictError(
            f"Conflito de domínio: '{base_domain}' vs '{override_domain}'"
        )

    elements = deepcopy(_elements_of(base, "base"))
    for kind, spec in _elements_of(override, "override").items():
        if spec is None:
            elements.pop(kind, None)
            continue
        elements[kind] = deepcopy(spec)

    return {"domain": override_domain, "elements": elements}
