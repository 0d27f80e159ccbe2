# tests/core/context/test_build_context.py
"""
Testes do BuildContext e do log estruturado de `compose_all`.

Os testes garantem que:
- eventos carregam os campos canônicos e extras
- `compose_all` registra um evento por elemento aceito, na ordem de composição
- a primeira violação é registrada com o payload canônico e propagada
- sem contexto, `compose_all` não registra nada e equivale a `|`
"""

import pytest

from chainconf.core.composite import Configuration, compose_all
from chainconf.core.context import BuildContext
from chainconf.core.exceptions import IncompatibleKindsError


def test_log_records_canonical_fields(build_ctx):
    build_ctx.log(kind="mode", level="INFO", message="element_added", size=1)

    (event,) = build_ctx.events
    assert event["build_id"] == "build-test-001"
    assert event["kind"] == "mode"
    assert event["level"] == "INFO"
    assert event["message"] == "element_added"
    assert event["size"] == 1
    assert event["timestamp"].endswith("+00:00")


def test_contexts_are_isolated():
    a = BuildContext(build_id="a")
    b = BuildContext(build_id="b")
    a.log(kind="x", level="INFO", message="m")
    assert b.events == []
    assert a.meta == {} and b.meta == {}
    assert a.created_at.tzinfo is not None


def test_compose_all_logs_each_accepted_element(toy_elements, build_ctx):
    Alpha, Gamma, Delta = toy_elements["alpha"], toy_elements["gamma"], toy_elements["delta"]

    cfg = compose_all([Delta(), Alpha(1), Gamma()], ctx=build_ctx)

    assert cfg == Delta() | Alpha(1) | Gamma()
    assert [e["kind"] for e in build_ctx.events] == ["delta", "alpha", "gamma"]
    assert [e["size"] for e in build_ctx.events] == [1, 2, 3]
    assert {e["domain"] for e in build_ctx.events} == {"toy"}
    assert build_ctx.events_for("alpha")[0]["level"] == "INFO"


def test_compose_all_logs_rejection_and_reraises(toy_elements, build_ctx):
    """
    Verifica o registro da primeira violação antes da propagação.

    Invariantes:
        - o erro propagado é o mesmo tipo levantado por `|`
        - o evento de rejeição carrega o payload canônico
        - elementos após a violação não são processados
    """
    Alpha, Beta, Gamma = toy_elements["alpha"], toy_elements["beta"], toy_elements["gamma"]

    with pytest.raises(IncompatibleKindsError):
        compose_all([Alpha(), Beta(), Gamma()], ctx=build_ctx)

    assert [e["message"] for e in build_ctx.events] == ["element_added", "composition_rejected"]
    rejected = build_ctx.events[-1]
    assert rejected["level"] == "ERROR"
    assert rejected["kind"] == "beta"
    assert rejected["error"]["type"] == "INCOMPATIBLE_KINDS"
    assert rejected["error"]["details"] == {
        "domain": "toy",
        "present_kind": "alpha",
        "added_kind": "beta",
    }
    assert build_ctx.events_for("gamma") == []


def test_compose_all_without_context(toy_elements, toy_domain):
    Gamma = toy_elements["gamma"]

    assert compose_all([]) == Configuration()
    empty = compose_all([], domain=toy_domain)
    assert empty.domain is toy_domain
    assert len(empty) == 0
    assert compose_all([Gamma(2)]).get(Gamma) == 2
