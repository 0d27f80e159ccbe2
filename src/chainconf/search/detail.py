# src/chainconf/search/detail.py
"""
Domínio de configuração de busca: kinds e tabela de compatibilidade.

Kinds (ids densos):
    - MAX_ERROR       (0): limites absolutos de erro
    - MAX_ERROR_RATE  (1): limites relativos de erro
    - OUTPUT          (2): forma de reportar os hits
    - MODE            (3): estratégia de busca (todos, melhor, strata, ...)

Único par proibido: MAX_ERROR x MAX_ERROR_RATE. Um orçamento de erros é
absoluto ou relativo ao tamanho da query, nunca os dois.
"""

from __future__ import annotations

from enum import IntEnum

from chainconf.core.domain import ConfigDomain


class SearchConfigId(IntEnum):
    MAX_ERROR = 0
    MAX_ERROR_RATE = 1
    OUTPUT = 2
    MODE = 3


SEARCH_DOMAIN = ConfigDomain.from_pairs(
    "search",
    SearchConfigId,
    incompatible=[
        (SearchConfigId.MAX_ERROR, SearchConfigId.MAX_ERROR_RATE),
    ],
)
