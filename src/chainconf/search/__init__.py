# src/chainconf/search/__init__.py
"""
Domínio de configuração de busca.

Elementos:
    - MaxError      → limites absolutos de erro (derivado: total + categorias)
    - MaxErrorRate  → limites relativos de erro (derivado; incompatível com MaxError)
    - Output        → forma de reportar hits
    - Mode          → estratégia de seleção de hits

O domínio é registrado em `default_registry` no import deste pacote.
"""

from chainconf.core.registry import default_registry

from .detail import SEARCH_DOMAIN, SearchConfigId
from .max_error import (
    Deletion,
    ErrorCounts,
    Insertion,
    MaxError,
    Substitution,
    Total,
    build_max_error,
)
from .max_error_rate import (
    DeletionRate,
    ErrorRates,
    InsertionRate,
    MaxErrorRate,
    SubstitutionRate,
    TotalRate,
    build_max_error_rate,
)
from .mode import Mode, Output, SearchMode, SearchOutput, Strata

if SEARCH_DOMAIN.name not in default_registry:
    default_registry.add(SEARCH_DOMAIN, [MaxError, MaxErrorRate, Output, Mode])

__all__ = [
    "SEARCH_DOMAIN",
    "SearchConfigId",
    "MaxError",
    "ErrorCounts",
    "Total",
    "Substitution",
    "Insertion",
    "Deletion",
    "build_max_error",
    "MaxErrorRate",
    "ErrorRates",
    "TotalRate",
    "SubstitutionRate",
    "InsertionRate",
    "DeletionRate",
    "build_max_error_rate",
    "Mode",
    "SearchMode",
    "Strata",
    "Output",
    "SearchOutput",
]
