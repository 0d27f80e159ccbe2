# src/chainconf/core/config/hashing.py
"""
Hashing canônico de configurações compostas.

O hash representa a identidade estrutural de um `Configuration` e é
usado para rastreabilidade (associar resultados de algoritmos à
configuração exata que os produziu).

Política de hashing (v1):
    - Serialização JSON canônica de `Configuration.to_dict()`
    - Ordenação estável de chaves, separadores compactos, UTF-8
    - SHA-256

Invariantes:
    - Composites com o mesmo conteúdo produzem o mesmo hash,
      independente da ordem de encadeamento dos elementos
    - O valor é sempre uma string hexadecimal de 64 caracteres
"""

import hashlib
import json

from chainconf.core.composite import Configuration


def compute_configuration_hash(configuration: Configuration) -> str:
    """Gera o hash SHA-256 determinístico de um composite."""
    if not isinstance(configuration, Configuration):
        raise TypeError(
            f"Hashing requer Configuration, recebido: {type(configuration).__name__}"
        )

    canonical_json = json.dumps(
        configuration.to_dict(),
        sort_keys=True,
        separators=(",", ":"),
        ensure_ascii=False,
    )

    return hashlib.sha256(canonical_json.encode("utf-8")).hexdigest()
