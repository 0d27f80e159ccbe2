# tests/core/domain/test_compatibility_table.py
"""
Testes da tabela de compatibilidade e da identidade de kinds.

Os testes garantem que:
- tabelas construídas a partir de pares são simétricas e com diagonal falsa
- `compatible(a, a)` é sempre falso
- ids fora do intervalo levantam `OutOfRangeKindError`
- tabelas assimétricas ou com diagonal verdadeira são rejeitadas
- a extensão de um domínio preserva pares existentes e nasce `False`

Limites explícitos:
    - Não valida composição de elementos (ver tests/core/composite)
"""

from enum import IntEnum

import pytest

try:
    from chainconf.core.domain import (
        ConfigDomain,
        build_compatibility_table,
        validate_compatibility_table,
    )
    from chainconf.core.exceptions import (
        InvalidCompatibilityTableError,
        OutOfRangeKindError,
    )
except Exception as e:  # noqa: BLE001
    ConfigDomain = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que a API de domínios esteja disponível para os testes.

    Falha imediatamente, com mensagem explícita, quando o módulo de
    domínio ou suas exceções tipadas não podem ser importados.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing domain API. Implement:\n"
            "- src/chainconf/core/domain.py (ConfigDomain, build_compatibility_table)\n"
            f"Import error: {_IMPORT_ERR}"
        )


class _Kind(IntEnum):
    A = 0
    B = 1
    C = 2


def _assert_symmetric_with_false_diagonal(table):
    size = len(table)
    for i in range(size):
        assert table[i][i] is False
        for j in range(size):
            assert table[i][j] == table[j][i]


def test_compatible_pairs_are_mirrored():
    """
    Verifica que um par declarado em uma única direção é espelhado.

    Invariantes:
        - table[a][b] == table[b][a] para todo par
        - pares não declarados permanecem falsos
    """
    _require_imports()
    table = build_compatibility_table(3, compatible=[(_Kind.A, _Kind.C)])

    _assert_symmetric_with_false_diagonal(table)
    assert table[0][2] is True
    assert table[2][0] is True
    assert table[0][1] is False
    assert table[1][2] is False


def test_incompatible_pairs_start_from_all_compatible():
    _require_imports()
    table = build_compatibility_table(3, incompatible=[(_Kind.B, _Kind.A)])

    _assert_symmetric_with_false_diagonal(table)
    assert table[0][1] is False
    assert table[0][2] is True
    assert table[1][2] is True


def test_no_pairs_yields_all_false_table():
    _require_imports()
    table = build_compatibility_table(3)
    assert all(not cell for row in table for cell in row)


def test_reflexive_pair_is_rejected():
    _require_imports()
    with pytest.raises(InvalidCompatibilityTableError):
        build_compatibility_table(3, compatible=[(_Kind.B, _Kind.B)])


def test_both_pair_forms_are_rejected():
    _require_imports()
    with pytest.raises(InvalidCompatibilityTableError):
        build_compatibility_table(3, compatible=[(0, 1)], incompatible=[(1, 2)])


def test_pair_out_of_range_is_rejected():
    _require_imports()
    with pytest.raises(OutOfRangeKindError):
        build_compatibility_table(3, compatible=[(0, 3)])


def test_asymmetric_table_is_rejected():
    """
    Verifica que uma tabela escrita à mão com assimetria é rejeitada.

    Decisões arquiteturais:
        - Um domínio inválido nunca chega a existir: a validação ocorre
          na construção do `ConfigDomain`
    """
    _require_imports()
    table = (
        (False, True, True),
        (False, False, True),
        (True, True, False),
    )
    with pytest.raises(InvalidCompatibilityTableError):
        ConfigDomain(name="broken", kinds=_Kind, table=table)


def test_true_diagonal_is_rejected():
    _require_imports()
    table = (
        (True, True),
        (True, False),
    )
    with pytest.raises(InvalidCompatibilityTableError):
        validate_compatibility_table(table, 2, domain="broken")


def test_non_dense_kind_ids_are_rejected():
    _require_imports()

    class Sparse(IntEnum):
        X = 0
        Y = 2

    with pytest.raises(InvalidCompatibilityTableError):
        ConfigDomain.from_pairs("sparse", Sparse)


def test_compatible_contract(toy_domain):
    """
    Verifica o contrato de `compatible(a, b)`.

    Invariantes:
        - falso sempre que a == b
        - simétrico
        - ids inteiros e membros do enum são equivalentes
    """
    _require_imports()
    kinds = toy_domain.kinds

    assert toy_domain.cardinality() == 4
    assert toy_domain.compatible(kinds.ALPHA, kinds.ALPHA) is False
    assert toy_domain.compatible(kinds.ALPHA, kinds.BETA) is False
    assert toy_domain.compatible(kinds.BETA, kinds.ALPHA) is False
    assert toy_domain.compatible(kinds.ALPHA, kinds.GAMMA) is True
    assert toy_domain.compatible(0, 2) is True
    assert toy_domain.compatible(3, 2) is True


@pytest.mark.parametrize("bad", [-1, 4, 99])
def test_compatible_rejects_out_of_range_ids(toy_domain, bad):
    _require_imports()
    with pytest.raises(OutOfRangeKindError) as exc_info:
        toy_domain.compatible(0, bad)
    assert exc_info.value.to_payload().fatal is True
    assert exc_info.value.details["cardinality"] == 4


def test_compatible_rejects_kind_from_another_enum(toy_domain):
    _require_imports()
    with pytest.raises(OutOfRangeKindError):
        toy_domain.compatible(_Kind.A, 1)


def test_kind_resolves_names(toy_domain):
    _require_imports()
    assert toy_domain.kind("gamma") is toy_domain.kinds.GAMMA
    assert toy_domain.kind_name(3) == "delta"
    with pytest.raises(OutOfRangeKindError):
        toy_domain.kind("epsilon")


def test_extend_adds_kinds_defaulting_to_incompatible(toy_domain):
    """
    Verifica a extensão de um domínio com um novo kind.

    Decisões arquiteturais:
        - Linhas e colunas novas nascem `False`
        - Apenas pares explicitamente habilitados tornam-se compatíveis
        - Pares do domínio base são preservados
    """
    _require_imports()

    class Extended(IntEnum):
        ALPHA = 0
        BETA = 1
        GAMMA = 2
        DELTA = 3
        EPSILON = 4

    extended = toy_domain.extend(
        "toy_extended",
        Extended,
        compatible=[(Extended.EPSILON, Extended.GAMMA)],
    )

    assert extended.cardinality() == 5
    _assert_symmetric_with_false_diagonal(extended.table)
    assert extended.compatible(Extended.EPSILON, Extended.GAMMA) is True
    assert extended.compatible(Extended.EPSILON, Extended.ALPHA) is False
    assert extended.compatible(Extended.ALPHA, Extended.BETA) is False
    assert extended.compatible(Extended.ALPHA, Extended.DELTA) is True


def test_extend_rejects_renumbered_base_kinds(toy_domain):
    _require_imports()

    class Renumbered(IntEnum):
        BETA = 0
        ALPHA = 1
        GAMMA = 2
        DELTA = 3
        EPSILON = 4

    with pytest.raises(InvalidCompatibilityTableError):
        toy_domain.extend("renumbered", Renumbered)


def test_builtin_domains_are_symmetric():
    """Todas as tabelas dos domínios registrados são simétricas e com diagonal falsa."""
    _require_imports()
    from chainconf import default_registry

    entries = default_registry.list()
    assert [e.domain.name for e in entries] == ["alignment", "search"]
    for entry in entries:
        _assert_symmetric_with_false_diagonal(entry.domain.table)
