import pytest

hypothesis = pytest.importorskip("hypothesis")
from hypothesis import given
from hypothesis import strategies as st

from methodacl import MethodAccessController

ROLES = ["Manager", "Teller", "Dummy"]
CLASSES = ["Account", "Foo"]
METHODS = ["close", "bar", "get balance"]


def _alternatives(names):
    return st.one_of(st.just(".*"), st.sampled_from(names))


_predicates = st.sampled_from(
    [
        lambda role, clazz, method, data: True,
        lambda role, clazz, method, data: False,
        lambda role, clazz, method, data: role == "Manager",
        lambda role, clazz, method, data: bool(data) and data % 2 == 0,
    ]
)

_entries = st.fixed_dictionaries(
    {
        "roles": _alternatives(ROLES),
        "classes": _alternatives(CLASSES),
        "methods": _alternatives(METHODS),
        "strategy": st.one_of(st.booleans(), _predicates),
    }
)

_role_arg = st.one_of(st.sampled_from(ROLES), st.lists(st.sampled_from(ROLES), max_size=3))


@given(
    policy=st.lists(_entries, max_size=6),
    role=_role_arg,
    clazz=st.sampled_from(CLASSES),
    method=st.sampled_from(METHODS),
    data=st.integers(min_value=0, max_value=4),
)
def test_permit_implies_not_denied(policy, role, clazz, method, data):
    c = MethodAccessController(policy)
    if c.permits(role, clazz, method, data):
        assert c.denies(role, clazz, method, data) is False


@given(
    policy=st.lists(_entries, max_size=6),
    roles=st.lists(st.sampled_from(ROLES), max_size=3),
    clazz=st.sampled_from(CLASSES),
    method=st.sampled_from(METHODS),
)
def test_multi_role_combines_single_role_answers(policy, roles, clazz, method):
    c = MethodAccessController(policy)
    denied = [c.denies(r, clazz, method, 2) for r in roles]
    permitted = [c.permits(r, clazz, method, 2) for r in roles]
    assert c.denies(roles, clazz, method, 2) is any(denied)
    assert c.permits(roles, clazz, method, 2) is (not any(denied) and any(permitted))
