# src/chainconf/core/registry.py
"""
Registro de domínios de configuração.

Este módulo define o `DomainRegistry`, responsável por catalogar os domínios
de configuração conhecidos e os tipos de elemento de cada um, permitindo que
camadas declarativas (ex.: o loader YAML/JSON) resolvam nomes em tipos.

O registry atua como uma camada de proteção antecipada, garantindo que:
    - cada domínio possua um nome único
    - cada elemento registrado pertença ao domínio sob o qual é registrado
    - cada kind do domínio possua no máximo um tipo de elemento
    - a ordem de registro seja preservada

Decisões arquiteturais:
    - A validação ocorre no registro, antes de qualquer composição
    - Erros estruturais são tratados como falhas fatais
    - Um registry padrão (`default_registry`) é populado no import dos
      pacotes de domínio e não é modificado depois disso

Limites explícitos:
    - Não compõe configurações
    - Não carrega arquivos
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Iterable, List, Optional, Type

from .domain import ConfigDomain
from .element import ConfigElement
from .errors import duplicate_domain, duplicate_kind, domain_mismatch, unknown_domain
from .exceptions import (
    DomainMismatchError,
    DuplicateDomainError,
    DuplicateKindError,
    UnknownDomainError,
)


@dataclass(frozen=True)
class DomainEntry:
    """Domínio registrado e seus tipos de elemento, indexados pelo nome do kind."""

    domain: ConfigDomain
    elements: Dict[str, Type[ConfigElement]]

    def element_for(self, kind_name: str) -> Optional[Type[ConfigElement]]:
        return self.elements.get(kind_name)


@dataclass
class DomainRegistry:
    """
    Registro canônico de domínios de configuração.

    Invariantes:
        - Cada nome de domínio é único no registry
        - `list()` reflete exatamente a ordem de registro
        - Cada kind possui no máximo um tipo de elemento registrado
    """

    _domains: Dict[str, DomainEntry] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    def add(
        self,
        domain: ConfigDomain,
        elements: Iterable[Type[ConfigElement]] = (),
    ) -> DomainEntry:
        if not isinstance(domain.name, str) or not domain.name.strip():
            raise ValueError("domain.name must be a non-empty string")

        if domain.name in self._domains:
            raise DuplicateDomainError(duplicate_domain(domain=domain.name))

        by_kind: Dict[str, Type[ConfigElement]] = {}
        for element_type in elements:
            if element_type.domain != domain:
                raise DomainMismatchError(
                    domain_mismatch(
                        expected_domain=domain.name,
                        actual_domain=element_type.domain.name,
                        kind=element_type.kind_name(),
                    )
                )
            name = element_type.kind_name()
            if name in by_kind:
                raise DuplicateKindError(duplicate_kind(domain=domain.name, kind=name))
            by_kind[name] = element_type

        entry = DomainEntry(domain=domain, elements=by_kind)
        self._domains[domain.name] = entry
        self._order.append(domain.name)
        return entry

    def get(self, name: str) -> DomainEntry:
        if name not in self._domains:
            raise UnknownDomainError(unknown_domain(domain=name, known=self._order))
        return self._domains[name]

    def __contains__(self, name: object) -> bool:
        return name in self._domains

    def list(self) -> List[DomainEntry]:
        return [self._domains[name] for name in self._order]


default_registry = DomainRegistry()
