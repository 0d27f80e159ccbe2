# tests/core/composite/test_lookup_and_persistence.py
"""
Testes da consulta tipada e da semântica persistente do composite.

Os testes garantem que:
- `get` é total: kind ausente retorna `default`, nunca levanta
- `get(K)` de `compose(C, e)` é o payload de e quando K == e.kind,
  e igual a `get(K)` de C caso contrário
- compor não altera os operandos; a mesma base pode ser estendida
  de forma independente (inclusive em threads concorrentes)
"""

from concurrent.futures import ThreadPoolExecutor

import pytest

from chainconf.core.composite import Configuration, compose
from chainconf.core.exceptions import IncompatibleKindsError


def test_get_returns_payload_for_each_key_form(toy_elements):
    Gamma = toy_elements["gamma"]
    cfg = Configuration(Gamma({"x": 1}))
    kinds = Gamma.domain.kinds

    assert cfg.get(Gamma) == {"x": 1}
    assert cfg.get(kinds.GAMMA) == {"x": 1}
    assert cfg.get(2) == {"x": 1}
    assert cfg.get("gamma") == {"x": 1}
    assert cfg.get_element(Gamma) == Gamma({"x": 1})


def test_get_is_total(toy_elements):
    """
    Verifica que a consulta nunca levanta, mesmo para chaves estranhas.

    Invariantes:
        - ausência é um resultado válido, distinto de erro
        - `default` é devolvido quando informado
    """
    cfg = Configuration(toy_elements["gamma"](1))

    assert cfg.get(toy_elements["delta"]) is None
    assert cfg.get(toy_elements["delta"], default="none") == "none"
    assert cfg.get(99) is None
    assert cfg.get("unknown") is None
    assert cfg.get(object) is None
    assert Configuration().get(toy_elements["gamma"]) is None


def test_get_does_not_confuse_kinds_across_domains(toy_elements):
    from chainconf.search import Mode, SearchConfigId

    cfg = Configuration(toy_elements["delta"]("d"))  # DELTA tem id 3, como MODE

    assert cfg.get(Mode) is None
    assert cfg.get(SearchConfigId.MODE) is None
    assert cfg.get(3) == "d"


@pytest.mark.parametrize("added", ["gamma", "delta"])
def test_lookup_after_compose(toy_elements, added):
    base = Configuration(toy_elements["alpha"]("a"))
    element = toy_elements[added](added.upper())

    result = compose(base, element)

    for name, element_type in toy_elements.items():
        if name == added:
            assert result.get(element_type) == added.upper()
        else:
            assert result.get(element_type) == base.get(element_type)


def test_contains_len_iter_and_kinds(toy_elements):
    Alpha, Gamma, Delta = toy_elements["alpha"], toy_elements["gamma"], toy_elements["delta"]
    cfg = Delta(3) | Alpha(1)

    assert Alpha in cfg
    assert Gamma not in cfg
    assert Delta(3) in cfg
    assert Delta(4) not in cfg
    assert len(cfg) == 2
    assert bool(cfg) is True
    assert bool(Configuration()) is False
    assert [k.name for k in cfg.kinds()] == ["ALPHA", "DELTA"]
    assert [e.get() for e in cfg] == [1, 3]


def test_compose_leaves_operands_untouched(toy_elements):
    """
    Verifica a semântica append-only da composição.

    Decisões arquiteturais:
        - Cada passo produz um novo composite
        - A base pode ser estendida com elementos diferentes, de forma independente
    """
    Alpha, Beta, Gamma = toy_elements["alpha"], toy_elements["beta"], toy_elements["gamma"]
    base = Configuration(Gamma("g"))
    snapshot = list(base)

    with_alpha = base | Alpha("a")
    with_beta = base | Beta("b")

    assert list(base) == snapshot
    assert len(base) == 1
    assert with_alpha.get(Alpha) == "a" and with_alpha.get(Beta) is None
    assert with_beta.get(Beta) == "b" and with_beta.get(Alpha) is None


def test_failed_compose_leaves_operand_untouched(toy_elements):
    Alpha, Beta = toy_elements["alpha"], toy_elements["beta"]
    base = Configuration(Alpha(1))

    with pytest.raises(IncompatibleKindsError):
        base | Beta(2)

    assert list(base) == [Alpha(1)]


def test_concurrent_extension_of_shared_base(toy_elements):
    Gamma, Delta = toy_elements["gamma"], toy_elements["delta"]
    base = Configuration(Gamma("shared"))

    def extend(i):
        return base | Delta(i)

    with ThreadPoolExecutor(max_workers=8) as pool:
        results = list(pool.map(extend, range(64)))

    assert [r.get(Delta) for r in results] == list(range(64))
    assert all(r.get(Gamma) == "shared" for r in results)
    assert len(base) == 1


def test_to_dict_is_ordered_by_kind(toy_elements):
    cfg = toy_elements["delta"](4) | toy_elements["gamma"](3)
    assert cfg.to_dict() == {"domain": "toy", "elements": {"gamma": 3, "delta": 4}}
    assert list(cfg.to_dict()["elements"]) == ["gamma", "delta"]


def test_equality_includes_the_bound_domain(toy_domain, toy_elements):
    from chainconf.alignment import ALIGNMENT_DOMAIN
    from chainconf.search import SEARCH_DOMAIN

    Gamma = toy_elements["gamma"]

    assert Configuration(domain=SEARCH_DOMAIN) != Configuration(domain=ALIGNMENT_DOMAIN)
    assert Configuration(domain=SEARCH_DOMAIN) != Configuration()
    assert Configuration(domain=SEARCH_DOMAIN) == Configuration(domain=SEARCH_DOMAIN)
    assert Configuration(domain=toy_domain) | Gamma(1) == Configuration(Gamma(1))
