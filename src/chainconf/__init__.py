# src/chainconf/__init__.py
"""
chainconf: composição tipada de configurações de algoritmos.

Uma configuração é montada encadeando elementos independentes e
autodescritivos com o operador `|`:

    from chainconf.search import MaxError, Mode, SearchMode, Substitution, Insertion

    cfg = MaxError(Substitution(1), Insertion(2)) | Mode(SearchMode.ALL_BEST)
    cfg.get(MaxError)   # ErrorCounts(total=3, substitution=1, insertion=2, deletion=0)

Cada passo do encadeamento valida o novo elemento contra os já presentes
(unicidade por kind e tabela de compatibilidade do domínio) e produz um
novo composite; nenhum operando é mutado.

Arquitetura em alto nível:
    - core            → motor de composição, independente de domínio
    - core.config     → carregamento declarativo (YAML/JSON) e hashing
    - search          → domínio de configuração de busca
    - alignment       → domínio de configuração de alinhamento

Limites explícitos:
    - Não implementa algoritmos de busca ou alinhamento
    - Não interpreta flags de linha de comando
"""

from .core.composite import Configuration, compose, compose_all
from .core.context import BuildContext
from .core.domain import ConfigDomain, build_compatibility_table
from .core.element import ConfigElement
from .core.exceptions import (
    CompositionError,
    DomainMismatchError,
    DuplicateKindError,
    IncompatibleKindsError,
    InvalidElementValueError,
    OutOfRangeKindError,
)
from .core.registry import default_registry
from . import alignment, search
from .core.config import compute_configuration_hash, load_configuration

__all__ = [
    "Configuration",
    "compose",
    "compose_all",
    "BuildContext",
    "ConfigDomain",
    "build_compatibility_table",
    "ConfigElement",
    "CompositionError",
    "DuplicateKindError",
    "IncompatibleKindsError",
    "DomainMismatchError",
    "InvalidElementValueError",
    "OutOfRangeKindError",
    "default_registry",
    "compute_configuration_hash",
    "load_configuration",
    "search",
    "alignment",
]
