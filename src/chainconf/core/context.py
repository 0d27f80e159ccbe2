# src/chainconf/core/context.py
"""
Contexto de construção de configurações.

Este módulo define o `BuildContext`, a estrutura usada para registrar, de
forma estruturada e rastreável, o que aconteceu durante a construção de um
composite (por `compose_all` ou pelo loader de configuração).

Princípios fundamentais:
    - Isolamento por construção (cada build possui seu próprio contexto)
    - Eventos explícitos: nada é registrado implicitamente pelo operador `|`
    - Estrutura simples, serializável e testável

Invariantes:
    - Eventos sempre incluem `build_id`, `kind`, `level`, `message` e `timestamp`
    - A ordem de `events` reflete a ordem real de composição
    - Timestamps são UTC em ISO 8601

Limites explícitos:
    - Não compõe elementos
    - Não persiste eventos
    - Não rebaixa erros a warnings: falhas são registradas e propagadas
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, List


@dataclass
class BuildContext:
    """
    Contexto de uma construção de configuração.

    Campos canônicos:
    - build_id: identificador da construção
    - created_at: timestamp UTC de criação do contexto
    - meta: metadados livres (ex.: caminhos de arquivos de configuração)
    - events: log estruturado de eventos
    """

    build_id: str
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)

    def log(self, *, kind: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "build_id": self.build_id,
            "kind": kind,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def events_for(self, kind: str) -> List[Dict[str, Any]]:
        return [e for e in self.events if e["kind"] == kind]
