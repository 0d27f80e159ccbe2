# src/chainconf/alignment/__init__.py
"""
Domínio de configuração de alinhamento.

O domínio é registrado em `default_registry` no import deste pacote.
"""

from chainconf.core.registry import default_registry

from .detail import ALIGNMENT_DOMAIN, AlignConfigId
from .elements import (
    AlignedEnds,
    AlignMaxError,
    AlignmentResult,
    Band,
    EndGaps,
    Gap,
    GapScheme,
    GlobalAlignment,
    Result,
    Scoring,
    ScoringScheme,
    StaticBand,
)

if ALIGNMENT_DOMAIN.name not in default_registry:
    default_registry.add(
        ALIGNMENT_DOMAIN,
        [AlignedEnds, Band, Gap, GlobalAlignment, AlignMaxError, Result, Scoring],
    )

__all__ = [
    "ALIGNMENT_DOMAIN",
    "AlignConfigId",
    "AlignedEnds",
    "EndGaps",
    "Band",
    "StaticBand",
    "Gap",
    "GapScheme",
    "GlobalAlignment",
    "AlignMaxError",
    "Result",
    "AlignmentResult",
    "Scoring",
    "ScoringScheme",
]
