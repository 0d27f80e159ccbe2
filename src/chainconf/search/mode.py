# src/chainconf/search/mode.py
"""
Elementos `mode` e `output` do domínio de busca.

- `Mode`: quais hits reportar: todos (`all`), todos os de menor número de
  erros (`all_best`), apenas um dos melhores (`best`) ou os melhores mais
  `n` estratos de erro (`Strata(n)`).
- `Output`: como reportar cada hit, posição no texto ou cursor do índice.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Any, ClassVar, Mapping, Union

from chainconf.core.element import ConfigElement
from chainconf.core.errors import invalid_element_value
from chainconf.core.exceptions import InvalidElementValueError

from .detail import SEARCH_DOMAIN, SearchConfigId


class SearchMode(str, Enum):
    ALL = "all"
    ALL_BEST = "all_best"
    BEST = "best"


@dataclass(frozen=True)
class Strata:
    count: int

    def __post_init__(self) -> None:
        if isinstance(self.count, bool) or not isinstance(self.count, int) or self.count < 0:
            raise InvalidElementValueError(
                invalid_element_value(
                    element="mode.strata",
                    value=self.count,
                    expected="inteiro >= 0",
                )
            )


class SearchOutput(str, Enum):
    TEXT_POSITION = "text_position"
    INDEX_CURSOR = "index_cursor"


def _parse_enum(enum_type: type, element: str, spec: Any) -> Any:
    try:
        return enum_type(spec)
    except ValueError:
        raise InvalidElementValueError(
            invalid_element_value(
                element=element,
                value=spec,
                expected=f"um de {[m.value for m in enum_type]}",
            )
        ) from None


@dataclass(frozen=True)
class Mode(ConfigElement):
    domain: ClassVar = SEARCH_DOMAIN
    kind: ClassVar = SearchConfigId.MODE

    value: Union[SearchMode, Strata] = SearchMode.ALL

    def validate(self) -> None:
        if not isinstance(self.value, (SearchMode, Strata)):
            raise self._invalid("SearchMode ou Strata")

    @classmethod
    def from_spec(cls, spec: Any) -> "Mode":
        if spec is None:
            return cls()
        if isinstance(spec, Mapping):
            if set(spec) != {"strata"}:
                raise InvalidElementValueError(
                    invalid_element_value(
                        element="mode",
                        value=dict(spec),
                        expected="{'strata': n}",
                    )
                )
            return cls(Strata(spec["strata"]))
        return cls(_parse_enum(SearchMode, "mode", spec))

    def to_spec(self) -> Any:
        if isinstance(self.value, Strata):
            return {"strata": self.value.count}
        return self.value.value


@dataclass(frozen=True)
class Output(ConfigElement):
    domain: ClassVar = SEARCH_DOMAIN
    kind: ClassVar = SearchConfigId.OUTPUT

    value: SearchOutput = SearchOutput.TEXT_POSITION

    def validate(self) -> None:
        if not isinstance(self.value, SearchOutput):
            raise self._invalid("SearchOutput")

    @classmethod
    def from_spec(cls, spec: Any) -> "Output":
        if spec is None:
            return cls()
        return cls(_parse_enum(SearchOutput, "output", spec))
