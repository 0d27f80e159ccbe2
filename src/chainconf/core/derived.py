# src/chainconf/core/derived.py
"""
Resolução de elementos de valor derivado.

Alguns elementos de configuração são construídos a partir de um subconjunto
de sub-opções relacionadas (ex.: limite total de erros e limites por
categoria de erro) e normalizados para um registro completo de slots, de
modo que consumidores nunca precisem saber quais campos foram de fato
informados.

Regras de resolução (slot 0 é sempre o total):
    1. Todos os slots começam em zero
    2. Cada sub-opção informada escreve seu valor no próprio slot
    3. Apenas o total informado → o total é copiado para todas as categorias
    4. Total ausente e ao menos uma categoria informada → total := soma
       saturada das categorias (limitada ao máximo representável)
    5. Caso contrário (total + categorias, ou nada) → valores como escritos

Decisões arquiteturais:
    - Sub-opção repetida é `DuplicateKindError`, verificada antes da resolução
    - Total e categorias informados juntos não são cruzados entre si
    - A resolução é atômica e ocorre uma única vez, na construção

Limites explícitos:
    - Não valida o intervalo de cada sub-opção (responsabilidade da sub-opção)
    - Não compõe elementos
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Sequence, Tuple, Type

from .errors import duplicate_kind
from .exceptions import DuplicateKindError

TOTAL_SLOT = 0


@dataclass(frozen=True)
class SlotPart:
    """Sub-opção de um elemento derivado: um valor destinado a um slot."""

    slot: ClassVar[int]
    slot_name: ClassVar[str]

    value: Any

    def __post_init__(self) -> None:
        cls = type(self)
        if getattr(cls, "slot", None) is None or getattr(cls, "slot_name", None) is None:
            raise TypeError(
                f"{cls.__name__} deve declarar 'slot' e 'slot_name' como atributos de classe"
            )

    def get(self) -> Any:
        return self.value


def resolve_slots(
    parts: Sequence[SlotPart],
    *,
    part_types: Sequence[Type[SlotPart]],
    cap: Any,
    zero: Any,
    element: str,
    domain: str,
) -> Tuple[Any, ...]:
    """
    Resolve um conjunto de sub-opções em um registro completo de slots.

    Args:
        parts (Sequence[SlotPart]): Sub-opções informadas, em qualquer ordem.
        part_types (Sequence[Type[SlotPart]]): Tipos aceitos, indexados pelo slot.
        cap (Any): Máximo representável para o total implícito.
        zero (Any): Valor neutro dos slots não informados.
        element (str): Nome do elemento derivado (para mensagens de erro).
        domain (str): Nome do domínio do elemento (para mensagens de erro).

    Returns:
        Tuple[Any, ...]: Valores resolvidos, um por slot, com o total no slot 0.

    Raises:
        TypeError: Se alguma sub-opção não for de um dos tipos aceitos.
        DuplicateKindError: Se um mesmo slot for informado mais de uma vez.
    """
    accepted = tuple(part_types)
    values = [zero] * len(accepted)
    supplied = set()

    for part in parts:
        if not isinstance(part, accepted):
            raise TypeError(
                f"Sub-opção inválida para '{element}': {type(part).__name__}"
            )
        if part.slot in supplied:
            raise DuplicateKindError(
                duplicate_kind(domain=domain, kind=part.slot_name, element=element)
            )
        supplied.add(part.slot)
        values[part.slot] = part.value

    if supplied == {TOTAL_SLOT}:
        for slot in range(1, len(values)):
            values[slot] = values[TOTAL_SLOT]
    elif supplied and TOTAL_SLOT not in supplied:
        values[TOTAL_SLOT] = min(cap, sum(values[1:], zero))

    return tuple(values)
