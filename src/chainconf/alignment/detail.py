# src/chainconf/alignment/detail.py
"""
Domínio de configuração de alinhamento: kinds e tabela de compatibilidade.

Todos os pares de kinds distintos são compatíveis; apenas a repetição de
um mesmo kind é proibida (diagonal da tabela).
"""

from __future__ import annotations

from enum import IntEnum
from itertools import combinations

from chainconf.core.domain import ConfigDomain


class AlignConfigId(IntEnum):
    ALIGNED_ENDS = 0
    BAND = 1
    GAP = 2
    GLOBAL = 3
    MAX_ERROR = 4
    RESULT = 5
    SCORING = 6


ALIGNMENT_DOMAIN = ConfigDomain.from_pairs(
    "alignment",
    AlignConfigId,
    compatible=combinations(AlignConfigId, 2),
)
