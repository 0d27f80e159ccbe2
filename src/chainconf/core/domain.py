# src/chainconf/core/domain.py
"""
Domínios de configuração: identidade de kinds e tabela de compatibilidade.

Um domínio (ex.: "search", "alignment") enumera as categorias discretas de
elementos de configuração que podem ser combinadas entre si. Cada categoria
(kind) recebe um id inteiro pequeno e estável; a cardinalidade do domínio é
o número de kinds.

A tabela de compatibilidade é uma matriz booleana quadrada, indexada pelos
ids de kind, que declara quais pares podem coexistir em um mesmo composite.

Responsabilidades do módulo:
    - Validar que os ids de kind são densos a partir de 0
    - Construir tabelas simétricas a partir de uma lista unidirecional de pares
    - Validar estrutura da tabela (quadrada, simétrica, diagonal falsa)
    - Responder `compatible(a, b)` com verificação de intervalo
    - Estender um domínio com novos kinds (linhas/colunas novas em `False`)

Decisões arquiteturais:
    - Kinds são `IntEnum`: o id é o próprio valor do membro
    - A metade espelhada da tabela é sempre derivada automaticamente
    - A tabela é armazenada como tupla de tuplas (somente leitura)
    - Ids fora do intervalo são erro de programação (`OutOfRangeKindError`)

Invariantes:
    - table[i][j] == table[j][i]
    - table[i][i] is False
    - len(table) == cardinality

Limites explícitos:
    - Não armazena elementos
    - Não compõe configurações
    - Não conhece payloads

Este módulo existe para garantir que as regras de coexistência de opções
sejam declaradas uma única vez, de forma estática e consistente.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable, Optional, Sequence, Tuple, Type, Union

from .errors import invalid_compatibility_table, out_of_range_kind
from .exceptions import InvalidCompatibilityTableError, OutOfRangeKindError


CompatibilityTable = Tuple[Tuple[bool, ...], ...]
KindPair = Tuple[Union[int, IntEnum], Union[int, IntEnum]]


def build_compatibility_table(
    size: int,
    *,
    compatible: Optional[Iterable[KindPair]] = None,
    incompatible: Optional[Iterable[KindPair]] = None,
    domain: str = "<anonymous>",
) -> CompatibilityTable:
    """
    Constrói uma tabela de compatibilidade simétrica a partir de pares.

    Exatamente uma das formas é usada:
        - `compatible`: todos os pares começam `False`; os pares listados
          (e seus espelhos) tornam-se `True`
        - `incompatible`: todos os pares fora da diagonal começam `True`;
          os pares listados (e seus espelhos) tornam-se `False`
        - nenhuma: tabela inteiramente `False`

    Decisões arquiteturais:
        - Cada par é declarado em uma única direção; o espelho é derivado
        - Pares com o mesmo kind nos dois lados são rejeitados
        - A diagonal é sempre `False`, independente da forma usada

    Args:
        size (int): Cardinalidade do domínio.
        compatible (Optional[Iterable[KindPair]]): Pares explicitamente compatíveis.
        incompatible (Optional[Iterable[KindPair]]): Pares explicitamente incompatíveis.
        domain (str): Nome do domínio, usado apenas em mensagens de erro.

    Returns:
        CompatibilityTable: Matriz `size x size` imutável.

    Raises:
        InvalidCompatibilityTableError: Se ambas as formas forem usadas ou um par for reflexivo.
        OutOfRangeKindError: Se algum id estiver fora de [0, size).
    """
    if compatible is not None and incompatible is not None:
        raise InvalidCompatibilityTableError(
            invalid_compatibility_table(
                domain=domain,
                reason="use apenas 'compatible' ou 'incompatible', não ambos",
            )
        )

    if incompatible is not None:
        fill, pairs = True, incompatible
    else:
        fill, pairs = False, (compatible or ())

    rows = [[fill and i != j for j in range(size)] for i in range(size)]

    for a, b in pairs:
        i = _check_range(a, size, domain)
        j = _check_range(b, size, domain)
        if i == j:
            raise InvalidCompatibilityTableError(
                invalid_compatibility_table(
                    domain=domain,
                    reason=f"par reflexivo ({i}, {j}) não pode ser declarado",
                )
            )
        rows[i][j] = not fill
        rows[j][i] = not fill

    return tuple(tuple(row) for row in rows)


def validate_compatibility_table(
    table: Sequence[Sequence[bool]], size: int, *, domain: str = "<anonymous>"
) -> None:
    """Valida forma, simetria e diagonal de uma tabela de compatibilidade."""
    if len(table) != size or any(len(row) != size for row in table):
        raise InvalidCompatibilityTableError(
            invalid_compatibility_table(
                domain=domain,
                reason=f"tabela deve ser {size}x{size}",
            )
        )
    for i in range(size):
        if table[i][i]:
            raise InvalidCompatibilityTableError(
                invalid_compatibility_table(
                    domain=domain,
                    reason=f"diagonal verdadeira no kind {i}",
                )
            )
        for j in range(i + 1, size):
            if bool(table[i][j]) != bool(table[j][i]):
                raise InvalidCompatibilityTableError(
                    invalid_compatibility_table(
                        domain=domain,
                        reason=f"assimetria entre ({i}, {j}) e ({j}, {i})",
                    )
                )


def _check_range(kind_id: Union[int, IntEnum], size: int, domain: str) -> int:
    if isinstance(kind_id, bool) or not isinstance(kind_id, int):
        raise OutOfRangeKindError(
            out_of_range_kind(domain=domain, kind_id=kind_id, cardinality=size)
        )
    idx = int(kind_id)
    if not 0 <= idx < size:
        raise OutOfRangeKindError(
            out_of_range_kind(domain=domain, kind_id=kind_id, cardinality=size)
        )
    return idx


@dataclass(frozen=True)
class ConfigDomain:
    """
    Domínio de configuração: enumeração de kinds + tabela de compatibilidade.

    Campos:
        - name: nome canônico do domínio (ex.: "search")
        - kinds: `IntEnum` com os kinds do domínio, ids densos a partir de 0
        - table: matriz de compatibilidade `cardinality x cardinality`

    Decisões arquiteturais:
        - O domínio é um valor imutável, criado uma vez no import do módulo
        - A estrutura é validada em `__post_init__`; um domínio inválido nunca existe
        - `compatible` aceita ids inteiros ou membros do `IntEnum` do domínio

    Invariantes:
        - `kinds` é denso: valores 0..cardinality-1
        - `table` é quadrada, simétrica e com diagonal falsa

    Limites explícitos:
        - Não armazena elementos nem payloads
        - Não decide semântica de algoritmo
    """

    name: str
    kinds: Type[IntEnum]
    table: CompatibilityTable

    def __post_init__(self) -> None:
        values = sorted(int(k) for k in self.kinds)
        if values != list(range(len(values))):
            raise InvalidCompatibilityTableError(
                invalid_compatibility_table(
                    domain=self.name,
                    reason=f"ids de kind devem ser densos a partir de 0, recebido: {values}",
                )
            )
        validate_compatibility_table(self.table, len(values), domain=self.name)

    @classmethod
    def from_pairs(
        cls,
        name: str,
        kinds: Type[IntEnum],
        *,
        compatible: Optional[Iterable[KindPair]] = None,
        incompatible: Optional[Iterable[KindPair]] = None,
    ) -> "ConfigDomain":
        table = build_compatibility_table(
            len(kinds),
            compatible=compatible,
            incompatible=incompatible,
            domain=name,
        )
        return cls(name=name, kinds=kinds, table=table)

    def cardinality(self) -> int:
        return len(self.table)

    def kind(self, kind_id: Union[int, IntEnum, str]) -> IntEnum:
        """Resolve um id inteiro, membro do enum ou nome de kind para o membro do enum."""
        if isinstance(kind_id, str):
            key = kind_id.upper()
            if key in self.kinds.__members__:
                return self.kinds[key]
            raise OutOfRangeKindError(
                out_of_range_kind(
                    domain=self.name, kind_id=kind_id, cardinality=self.cardinality()
                )
            )
        if isinstance(kind_id, IntEnum) and not isinstance(kind_id, self.kinds):
            raise OutOfRangeKindError(
                out_of_range_kind(
                    domain=self.name, kind_id=kind_id, cardinality=self.cardinality()
                )
            )
        return self.kinds(_check_range(kind_id, self.cardinality(), self.name))

    def kind_name(self, kind_id: Union[int, IntEnum, str]) -> str:
        return self.kind(kind_id).name.lower()

    def compatible(self, a: Union[int, IntEnum], b: Union[int, IntEnum]) -> bool:
        i = int(self.kind(a))
        j = int(self.kind(b))
        if i == j:
            return False
        return self.table[i][j]

    def extend(
        self,
        name: str,
        kinds: Type[IntEnum],
        *,
        compatible: Iterable[KindPair] = (),
    ) -> "ConfigDomain":
        """
        Cria um novo domínio a partir deste, acrescentando kinds.

        O novo enum deve repetir os kinds existentes com os mesmos nomes e ids;
        os kinds novos ocupam os ids seguintes. Linhas e colunas novas nascem
        `False` e apenas os pares em `compatible` são habilitados (com espelho).
        Os pares já existentes são preservados.
        """
        size = len(kinds)
        for member in self.kinds:
            if member.name not in kinds.__members__ or int(kinds[member.name]) != int(member):
                raise InvalidCompatibilityTableError(
                    invalid_compatibility_table(
                        domain=name,
                        reason=f"kind '{member.name.lower()}' do domínio base ausente ou com id alterado",
                    )
                )

        old_size = self.cardinality()
        rows = [
            [self.table[i][j] if i < old_size and j < old_size else False for j in range(size)]
            for i in range(size)
        ]
        for a, b in compatible:
            i = _check_range(a, size, name)
            j = _check_range(b, size, name)
            if i == j:
                raise InvalidCompatibilityTableError(
                    invalid_compatibility_table(
                        domain=name,
                        reason=f"par reflexivo ({i}, {j}) não pode ser declarado",
                    )
                )
            rows[i][j] = True
            rows[j][i] = True

        return ConfigDomain(
            name=name,
            kinds=kinds,
            table=tuple(tuple(row) for row in rows),
        )

    def __repr__(self) -> str:
        return f"ConfigDomain(name={self.name!r}, cardinality={self.cardinality()})"
