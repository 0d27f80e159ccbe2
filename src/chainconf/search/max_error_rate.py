# src/chainconf/search/max_error_rate.py
"""
Elemento `max_error_rate`: limites de erro relativos ao tamanho da query.

Mesma regra de resolução de `max_error`, com taxas em [0, 1] e total
implícito limitado a 1.0. Incompatível com `max_error` no domínio de busca.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Mapping

from chainconf.core.derived import SlotPart, resolve_slots
from chainconf.core.element import ConfigElement
from chainconf.core.errors import invalid_element_value
from chainconf.core.exceptions import InvalidElementValueError

from .detail import SEARCH_DOMAIN, SearchConfigId

MAX_RATE = 1.0


@dataclass(frozen=True)
class ErrorRate(SlotPart):
    value: float = 0.0

    def __post_init__(self) -> None:
        super().__post_init__()
        v = self.value
        if isinstance(v, bool) or not isinstance(v, (int, float)) or not 0.0 <= v <= MAX_RATE:
            raise InvalidElementValueError(
                invalid_element_value(
                    element=f"max_error_rate.{self.slot_name}",
                    value=v,
                    expected="taxa em [0, 1]",
                )
            )
        object.__setattr__(self, "value", float(v))


@dataclass(frozen=True)
class TotalRate(ErrorRate):
    slot: ClassVar[int] = 0
    slot_name: ClassVar[str] = "total"


@dataclass(frozen=True)
class SubstitutionRate(ErrorRate):
    slot: ClassVar[int] = 1
    slot_name: ClassVar[str] = "substitution"


@dataclass(frozen=True)
class InsertionRate(ErrorRate):
    slot: ClassVar[int] = 2
    slot_name: ClassVar[str] = "insertion"


@dataclass(frozen=True)
class DeletionRate(ErrorRate):
    slot: ClassVar[int] = 3
    slot_name: ClassVar[str] = "deletion"


RATE_PARTS = (TotalRate, SubstitutionRate, InsertionRate, DeletionRate)


@dataclass(frozen=True)
class ErrorRates:
    total: float = 0.0
    substitution: float = 0.0
    insertion: float = 0.0
    deletion: float = 0.0


def build_max_error_rate(*parts: ErrorRate) -> "MaxErrorRate":
    return MaxErrorRate(*parts)


@dataclass(frozen=True, init=False)
class MaxErrorRate(ConfigElement):
    domain: ClassVar = SEARCH_DOMAIN
    kind: ClassVar = SearchConfigId.MAX_ERROR_RATE

    value: ErrorRates = ErrorRates()

    def __init__(self, *parts: ErrorRate):
        resolved = resolve_slots(
            parts,
            part_types=RATE_PARTS,
            cap=MAX_RATE,
            zero=0.0,
            element="max_error_rate",
            domain=SEARCH_DOMAIN.name,
        )
        object.__setattr__(self, "value", ErrorRates(*resolved))
        self.__post_init__()

    @classmethod
    def from_spec(cls, spec: Any) -> "MaxErrorRate":
        if spec is None:
            return cls()
        if isinstance(spec, (int, float)) and not isinstance(spec, bool):
            return cls(TotalRate(spec))
        if not isinstance(spec, Mapping):
            raise InvalidElementValueError(
                invalid_element_value(
                    element="max_error_rate",
                    value=spec,
                    expected="número ou mapeamento de sub-opções",
                )
            )
        by_name = {p.slot_name: p for p in RATE_PARTS}
        unknown = sorted(set(spec) - set(by_name))
        if unknown:
            raise InvalidElementValueError(
                invalid_element_value(
                    element="max_error_rate",
                    value=unknown,
                    expected=f"sub-opções em {sorted(by_name)}",
                )
            )
        return cls(*(by_name[name](spec[name]) for name in spec))
