# src/chainconf/search/max_error.py
"""
Elemento `max_error`: número máximo de erros por tipo de erro.

O limite total é um teto independente dos limites por categoria
(substituições, inserções, deleções). O elemento é construído a partir de
qualquer subconjunto das sub-opções `Total`, `Substitution`, `Insertion`
e `Deletion`, e resolvido para um `ErrorCounts` completo:

    MaxError(Total(3))                      -> ErrorCounts(3, 3, 3, 3)
    MaxError(Substitution(1), Insertion(2)) -> ErrorCounts(3, 1, 2, 0)
    MaxError(Total(5), Substitution(2))     -> ErrorCounts(5, 2, 0, 0)
    MaxError()                              -> ErrorCounts(0, 0, 0, 0)

Cada contagem é um inteiro sem sinal de 8 bits; o total implícito satura
em 255.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from chainconf.core.derived import SlotPart, resolve_slots
from chainconf.core.element import ConfigElement
from chainconf.core.errors import invalid_element_value
from chainconf.core.exceptions import InvalidElementValueError

from .detail import SEARCH_DOMAIN, SearchConfigId

MAX_COUNT = 255


@dataclass(frozen=True)
class ErrorCount(SlotPart):
    """Sub-opção de contagem de erros (0..255)."""

    value: int = 0

    def __post_init__(self) -> None:
        super().__post_init__()
        v = self.value
        if isinstance(v, bool) or not isinstance(v, int) or not 0 <= v <= MAX_COUNT:
            raise InvalidElementValueError(
                invalid_element_value(
                    element=f"max_error.{self.slot_name}",
                    value=v,
                    expected=f"inteiro em [0, {MAX_COUNT}]",
                )
            )


@dataclass(frozen=True)
class Total(ErrorCount):
    slot: ClassVar[int] = 0
    slot_name: ClassVar[str] = "total"


@dataclass(frozen=True)
class Substitution(ErrorCount):
    slot: ClassVar[int] = 1
    slot_name: ClassVar[str] = "substitution"


@dataclass(frozen=True)
class Insertion(ErrorCount):
    slot: ClassVar[int] = 2
    slot_name: ClassVar[str] = "insertion"


@dataclass(frozen=True)
class Deletion(ErrorCount):
    slot: ClassVar[int] = 3
    slot_name: ClassVar[str] = "deletion"


COUNT_PARTS = (Total, Substitution, Insertion, Deletion)


@dataclass(frozen=True)
class ErrorCounts:
    total: int = 0
    substitution: int = 0
    insertion: int = 0
    deletion: int = 0


def build_max_error(*parts: ErrorCount) -> "MaxError":
    """Resolve as sub-opções informadas e devolve o elemento `MaxError`."""
    return MaxError(*parts)


@dataclass(frozen=True, init=False)
class MaxError(ConfigElement):
    domain: ClassVar = SEARCH_DOMAIN
    kind: ClassVar = SearchConfigId.MAX_ERROR

    value: ErrorCounts = ErrorCounts()

    def __init__(self, *parts: ErrorCount):
        resolved = resolve_slots(
            parts,
            part_types=COUNT_PARTS,
            cap=MAX_COUNT,
            zero=0,
            element="max_error",
            domain=SEARCH_DOMAIN.name,
        )
        object.__setattr__(self, "value", ErrorCounts(*resolved))
        self.__post_init__()

    @classmethod
    def from_spec(cls, spec: Any) -> "MaxError":
        """
        Aceita um inteiro (equivalente a `Total(n)`) ou um mapeamento com
        qualquer subconjunto de `total`, `substitution`, `insertion`, `deletion`.
        """
        if spec is None:
            return cls()
        if isinstance(spec, int) and not isinstance(spec, bool):
            return cls(Total(spec))
        if not isinstance(spec, Mapping):
            raise InvalidElementValueError(
                invalid_element_value(
                    element="max_error",
                    value=spec,
                    expected="inteiro ou mapeamento de sub-opções",
                )
            )
        by_name = {p.slot_name: p for p in COUNT_PARTS}
        unknown = sorted(set(spec) - set(by_name))
        if unknown:
            raise InvalidElementValueError(
                invalid_element_value(
                    element="max_error",
                    value=unknown,
                    expected=f"sub-opções em {sorted(by_name)}",
                )
            )
        return cls(*(by_name[name](spec[name]) for name in spec))
