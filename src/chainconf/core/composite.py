# src/chainconf/core/composite.py
"""
Configuração composta (composite) e operador de encadeamento.

Este módulo define o `Configuration`, o agregado validado construído pelo
encadeamento de elementos de configuração, e as funções `compose` e
`compose_all`.

O encadeamento é associativo à esquerda:

    e1 | e2 | e3  ==  compose(compose(compose(empty, e1), e2), e3)

A cada passo o novo elemento é validado contra todos os kinds já
presentes:
    - kind já presente                → DuplicateKindError
    - par proibido pela tabela        → IncompatibleKindsError (nomeia os dois kinds)
    - elemento de outro domínio       → DomainMismatchError

Decisões arquiteturais:
    - Composição persistente: cada passo produz um NOVO composite; os
      operandos nunca são mutados
    - Armazenamento interno é um mapeamento somente leitura kind id → elemento
    - A validação ocorre no momento da composição, antes de qualquer algoritmo
    - Nenhum conflito é resolvido por "última escrita vence"

Invariantes:
    - No máximo um elemento por kind
    - Todo par de kinds contidos é compatível
    - `get` é total: kind ausente retorna `default`, nunca levanta

Limites explícitos:
    - Não interpreta payloads
    - Não executa algoritmos
    - Não carrega arquivos (ver `core.config.loader`)

Este módulo existe para garantir que uma configuração composta seja
internamente consistente desde o momento em que existe.
"""

from __future__ import annotations

from enum import IntEnum
from types import MappingProxyType
from typing import Any, Dict, Iterable, Iterator, List, Mapping, Optional, Type, Union

from .context import BuildContext
from .domain import ConfigDomain
from .element import ConfigElement
from .errors import domain_mismatch, duplicate_kind, incompatible_kinds
from .exceptions import (
    CompositionError,
    DomainMismatchError,
    DuplicateKindError,
    IncompatibleKindsError,
)


KindKey = Union[int, IntEnum, str, Type[ConfigElement]]


class Configuration:
    """
    Agregado imutável de elementos de configuração, indexado por kind.

    Pode ser criado vazio (`Configuration()`), vazio e já vinculado a um
    domínio (`Configuration(domain=SEARCH_DOMAIN)`) ou a partir de elementos
    (`Configuration(e1, e2)`, equivalente a `e1 | e2`).

    Um composite vazio sem domínio adota o domínio do primeiro elemento.
    """

    __slots__ = ("_domain", "_elements")

    def __init__(self, *elements: ConfigElement, domain: Optional[ConfigDomain] = None):
        self._domain: Optional[ConfigDomain] = domain
        self._elements: Mapping[int, ConfigElement] = MappingProxyType({})

        current = self
        for element in elements:
            current = current._with(element)
        self._domain = current._domain
        self._elements = current._elements

    @classmethod
    def _from_mapping(
        cls, domain: Optional[ConfigDomain], elements: Dict[int, ConfigElement]
    ) -> "Configuration":
        obj = cls.__new__(cls)
        obj._domain = domain
        obj._elements = MappingProxyType(elements)
        return obj

    @property
    def domain(self) -> Optional[ConfigDomain]:
        return self._domain

    # -----------------------------
    # Composição
    # -----------------------------
    def _with(self, element: ConfigElement) -> "Configuration":
        if not isinstance(element, ConfigElement):
            raise TypeError(
                f"Apenas ConfigElement pode ser composto, recebido: {type(element).__name__}"
            )

        domain = self._domain if self._domain is not None else element.domain
        if element.domain != domain:
            raise DomainMismatchError(
                domain_mismatch(
                    expected_domain=domain.name,
                    actual_domain=element.domain.name,
                    kind=element.kind_name(),
                )
            )

        added = int(element.kind)
        if added in self._elements:
            raise DuplicateKindError(
                duplicate_kind(domain=domain.name, kind=element.kind_name())
            )

        for present in sorted(self._elements):
            if not domain.compatible(present, added):
                raise IncompatibleKindsError(
                    incompatible_kinds(
                        domain=domain.name,
                        present_kind=domain.kind_name(present),
                        added_kind=element.kind_name(),
                    )
                )

        elements = dict(self._elements)
        elements[added] = element
        return Configuration._from_mapping(domain, elements)

    def __or__(self, other: Any) -> "Configuration":
        if isinstance(other, ConfigElement):
            return self._with(other)
        if isinstance(other, Configuration):
            if (
                self._domain is not None
                and other._domain is not None
                and self._domain != other._domain
            ):
                first = next(iter(other), None)
                raise DomainMismatchError(
                    domain_mismatch(
                        expected_domain=self._domain.name,
                        actual_domain=other._domain.name,
                        kind=first.kind_name() if first is not None else "<empty>",
                    )
                )
            # self sem domínio é necessariamente vazio
            result = self if self._domain is not None else Configuration(domain=other._domain)
            for element in other:
                result = result._with(element)
            return result
        return NotImplemented

    # -----------------------------
    # Consulta
    # -----------------------------
    def _resolve(self, kind: KindKey) -> Optional[int]:
        if self._domain is None:
            return None
        if isinstance(kind, type) and issubclass(kind, ConfigElement):
            if getattr(kind, "domain", None) != self._domain:
                return None
            return int(kind.kind)
        if isinstance(kind, IntEnum) and not isinstance(kind, self._domain.kinds):
            return None
        if isinstance(kind, str):
            if kind.upper() not in self._domain.kinds.__members__:
                return None
            return int(self._domain.kinds[kind.upper()])
        if isinstance(kind, int) and not isinstance(kind, bool):
            return int(kind)
        return None

    def get(self, kind: KindKey, default: Any = None) -> Any:
        """Retorna o payload do elemento do kind pedido, ou `default` se ausente."""
        element = self.get_element(kind)
        if element is None:
            return default
        return element.get()

    def get_element(self, kind: KindKey) -> Optional[ConfigElement]:
        key = self._resolve(kind)
        if key is None:
            return None
        return self._elements.get(key)

    def __contains__(self, kind: Any) -> bool:
        if isinstance(kind, ConfigElement):
            return self.get_element(type(kind)) == kind
        return self.get_element(kind) is not None

    def kinds(self) -> List[IntEnum]:
        if self._domain is None:
            return []
        return [self._domain.kinds(k) for k in sorted(self._elements)]

    def __iter__(self) -> Iterator[ConfigElement]:
        for key in sorted(self._elements):
            yield self._elements[key]

    def __len__(self) -> int:
        return len(self._elements)

    def __bool__(self) -> bool:
        return bool(self._elements)

    # -----------------------------
    # Valor
    # -----------------------------
    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Configuration):
            return NotImplemented
        return self._domain == other._domain and dict(self._elements) == dict(other._elements)

    def __hash__(self) -> int:
        return hash(tuple(self))

    def __repr__(self) -> str:
        inner = ", ".join(repr(e) for e in self)
        name = self._domain.name if self._domain is not None else None
        return f"Configuration(domain={name!r}, [{inner}])"

    def to_dict(self) -> Dict[str, Any]:
        return {
            "domain": self._domain.name if self._domain is not None else None,
            "elements": {e.kind_name(): e.to_spec() for e in self},
        }


def compose(lhs: Union[Configuration, ConfigElement], rhs: Union[Configuration, ConfigElement]) -> Configuration:
    """Forma funcional de `lhs | rhs`; nenhum operando é mutado."""
    if isinstance(lhs, ConfigElement):
        lhs = Configuration(lhs)
    if not isinstance(lhs, Configuration):
        raise TypeError(
            f"Operando esquerdo deve ser Configuration ou ConfigElement, recebido: {type(lhs).__name__}"
        )
    if not isinstance(rhs, (Configuration, ConfigElement)):
        raise TypeError(
            f"Operando direito deve ser Configuration ou ConfigElement, recebido: {type(rhs).__name__}"
        )
    return lhs | rhs


def compose_all(
    elements: Iterable[ConfigElement],
    *,
    domain: Optional[ConfigDomain] = None,
    ctx: Optional[BuildContext] = None,
) -> Configuration:
    """
    Compõe uma sequência de elementos da esquerda para a direita.

    Quando um `BuildContext` é fornecido, cada passo registra um evento
    estruturado: `element_added` em caso de sucesso, `composition_rejected`
    (com o payload canônico do erro) antes de propagar a exceção.

    Args:
        elements (Iterable[ConfigElement]): Elementos na ordem de encadeamento.
        domain (Optional[ConfigDomain]): Domínio esperado; se omitido, o do primeiro elemento.
        ctx (Optional[BuildContext]): Contexto de construção para o log de eventos.

    Returns:
        Configuration: Composite resultante.

    Raises:
        CompositionError: Na primeira violação de unicidade, compatibilidade ou domínio.
    """
    result = Configuration(domain=domain)
    for element in elements:
        try:
            result = result._with(element)
        except CompositionError as exc:
            if ctx is not None:
                ctx.log(
                    kind=_safe_kind_name(element),
                    level="ERROR",
                    message="composition_rejected",
                    error=exc.to_payload().to_dict(),
                )
            raise
        if ctx is not None:
            ctx.log(
                kind=element.kind_name(),
                level="INFO",
                message="element_added",
                domain=result.domain.name,
                size=len(result),
            )
    return result


def _safe_kind_name(element: Any) -> str:
    if isinstance(element, ConfigElement):
        return element.kind_name()
    return type(element).__name__
