# src/chainconf/alignment/elements.py
"""
Elementos de configuração do domínio de alinhamento.

Os payloads são opacos para o motor de composição: cada elemento valida
apenas a forma e intervalos triviais do próprio valor. A interpretação
(pontuação, banda, extremidades livres) é responsabilidade do algoritmo
de alinhamento que consulta o composite.
"""

from __future__ import annotations

from dataclasses import dataclass, fields
from enum import Enum
from typing import Any, ClassVar, Mapping, Optional

from chainconf.core.element import ConfigElement
from chainconf.core.errors import invalid_element_value
from chainconf.core.exceptions import InvalidElementValueError

from .detail import ALIGNMENT_DOMAIN, AlignConfigId


def _payload_from_spec(payload_type: type, element: str, spec: Any) -> Any:
    if not isinstance(spec, Mapping):
        raise InvalidElementValueError(
            invalid_element_value(element=element, value=spec, expected="mapeamento")
        )
    allowed = {f.name for f in fields(payload_type)}
    unknown = sorted(set(spec) - allowed)
    if unknown:
        raise InvalidElementValueError(
            invalid_element_value(
                element=element,
                value=unknown,
                expected=f"campos em {sorted(allowed)}",
            )
        )
    try:
        return payload_type(**spec)
    except TypeError as exc:
        raise InvalidElementValueError(
            invalid_element_value(element=element, value=dict(spec), expected=str(exc))
        ) from exc


def _is_int(value: Any) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


# ---------------------------------------------------------------------------
# Payloads
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class EndGaps:
    """Extremidades das duas sequências em que gaps não são penalizados."""

    first_seq_leading: bool = False
    first_seq_trailing: bool = False
    second_seq_leading: bool = False
    second_seq_trailing: bool = False

    @classmethod
    def free(cls) -> "EndGaps":
        return cls(True, True, True, True)


@dataclass(frozen=True)
class StaticBand:
    lower_bound: int
    upper_bound: int


@dataclass(frozen=True)
class GapScheme:
    extension: int = -1
    open: int = 0


@dataclass(frozen=True)
class ScoringScheme:
    match: int = 0
    mismatch: int = -1


class AlignmentResult(str, Enum):
    SCORE = "score"
    END_POSITION = "end_position"
    BEGIN_POSITION = "begin_position"
    ALIGNMENT = "alignment"


# ---------------------------------------------------------------------------
# Elementos
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class AlignedEnds(ConfigElement):
    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.ALIGNED_ENDS

    value: EndGaps = EndGaps()

    def validate(self) -> None:
        if not isinstance(self.value, EndGaps):
            raise self._invalid("EndGaps")

    @classmethod
    def from_spec(cls, spec: Any) -> "AlignedEnds":
        if spec is None:
            return cls()
        if spec == "free":
            return cls(EndGaps.free())
        if spec == "none":
            return cls(EndGaps())
        return cls(_payload_from_spec(EndGaps, "aligned_ends", spec))


@dataclass(frozen=True)
class Band(ConfigElement):
    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.BAND

    value: Optional[StaticBand] = None

    def validate(self) -> None:
        band = self.value
        if not isinstance(band, StaticBand):
            raise self._invalid("StaticBand")
        if not (_is_int(band.lower_bound) and _is_int(band.upper_bound)):
            raise self._invalid("limites inteiros")
        if band.lower_bound > band.upper_bound:
            raise self._invalid("lower_bound <= upper_bound")

    @classmethod
    def from_spec(cls, spec: Any) -> "Band":
        if spec is None:
            return cls()
        return cls(_payload_from_spec(StaticBand, "band", spec))


@dataclass(frozen=True)
class Gap(ConfigElement):
    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.GAP

    value: GapScheme = GapScheme()

    def validate(self) -> None:
        if not isinstance(self.value, GapScheme):
            raise self._invalid("GapScheme")

    @classmethod
    def from_spec(cls, spec: Any) -> "Gap":
        if spec is None:
            return cls()
        return cls(_payload_from_spec(GapScheme, "gap", spec))


@dataclass(frozen=True)
class GlobalAlignment(ConfigElement):
    """Alinhamento global; o elemento não carrega payload."""

    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.GLOBAL

    value: None = None

    def validate(self) -> None:
        if self.value is not None:
            raise self._invalid("nenhum payload")

    @classmethod
    def from_spec(cls, spec: Any) -> "GlobalAlignment":
        if spec is None or spec is True or spec == {}:
            return cls()
        raise InvalidElementValueError(
            invalid_element_value(element="global", value=spec, expected="true, {} ou null")
        )

    def to_spec(self) -> Any:
        return True


@dataclass(frozen=True)
class AlignMaxError(ConfigElement):
    """Número máximo de erros (edit distance) admitido no alinhamento."""

    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.MAX_ERROR

    value: int = 0

    def validate(self) -> None:
        if not _is_int(self.value) or self.value < 0:
            raise self._invalid("inteiro >= 0")


@dataclass(frozen=True)
class Result(ConfigElement):
    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.RESULT

    value: AlignmentResult = AlignmentResult.SCORE

    def validate(self) -> None:
        if not isinstance(self.value, AlignmentResult):
            raise self._invalid("AlignmentResult")

    @classmethod
    def from_spec(cls, spec: Any) -> "Result":
        if spec is None:
            return cls()
        try:
            result = AlignmentResult(spec)
        except ValueError:
            raise InvalidElementValueError(
                invalid_element_value(
                    element="result",
                    value=spec,
                    expected=f"um de {[m.value for m in AlignmentResult]}",
                )
            ) from None
        return cls(result)


@dataclass(frozen=True)
class Scoring(ConfigElement):
    domain: ClassVar = ALIGNMENT_DOMAIN
    kind: ClassVar = AlignConfigId.SCORING

    value: ScoringScheme = ScoringScheme()

    def validate(self) -> None:
        scheme = self.value
        if not isinstance(scheme, ScoringScheme):
            raise self._invalid("ScoringScheme")
        if not (_is_int(scheme.match) and _is_int(scheme.mismatch)):
            raise self._invalid("scores inteiros")

    @classmethod
    def from_spec(cls, spec: Any) -> "Scoring":
        if spec is None:
            return cls()
        return cls(_payload_from_spec(ScoringScheme, "scoring", spec))
