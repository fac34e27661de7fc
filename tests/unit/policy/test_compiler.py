import re

import pytest

from methodacl.core.errors import PolicyError, StrategyNotCallableError
from methodacl.core.model import PolicyEntry, ReferenceStrategy, StaticStrategy
from methodacl.policy import DEFAULT_SECURITY_POLICY, compile_entry, compile_policy


def test_compile_policy_preserves_order_and_ids():
    policy = compile_policy(
        [
            {"id": "a", "roles": "Manager", "classes": ".*", "methods": ".*", "strategy": True},
            {"id": "b", "roles": "Teller", "classes": "Foo", "methods": "bar", "strategy": "pkg:fn"},
        ]
    )
    assert [e.id for e in policy] == ["a", "b"]
    assert policy[0].strategy == StaticStrategy(True)
    assert policy[1].strategy == ReferenceStrategy("pkg:fn")
    assert isinstance(policy, tuple)


def test_entries_pass_through():
    e = PolicyEntry(roles=".*", classes=".*", methods=".*", strategy=False)
    assert compile_entry(e) is e
    assert compile_policy(iter([e])) == (e,)


@pytest.mark.parametrize(
    "raw, needle",
    [
        ({"roles": ".*", "classes": ".*", "methods": ".*"}, "missing key(s): strategy"),
        ({"roles": ".*", "classes": ".*", "methods": ".*", "strategy": True, "effect": "x"}, "unknown key(s): effect"),
        ({"roles": "(", "classes": ".*", "methods": ".*", "strategy": True}, "invalid pattern"),
        ({"roles": 1, "classes": ".*", "methods": ".*", "strategy": True}, "pattern string"),
        ({"roles": ".*", "classes": ".*", "methods": ".*", "strategy": True, "id": 7}, "'id' must be a string"),
    ],
)
def test_malformed_entries(raw, needle):
    with pytest.raises(PolicyError) as ei:
        compile_policy([{"roles": ".*", "classes": ".*", "methods": ".*", "strategy": True}, raw])
    assert "#1" in str(ei.value)
    assert needle in str(ei.value)


def test_non_mapping_entry():
    with pytest.raises(PolicyError):
        compile_policy(["not an entry"])


def test_policy_must_be_a_sequence():
    with pytest.raises(PolicyError):
        compile_policy({"roles": ".*"})
    with pytest.raises(PolicyError):
        compile_policy("roles")


def test_bad_strategy_keeps_its_own_error():
    with pytest.raises(StrategyNotCallableError):
        compile_policy([{"roles": ".*", "classes": ".*", "methods": ".*", "strategy": 3.5}])


def test_compiled_patterns_are_accepted():
    (e,) = compile_policy(
        [{"roles": re.compile("Man.*"), "classes": ".*", "methods": ".*", "strategy": True}]
    )
    assert e.roles.matches("Manager") is True


def test_default_policy_permits_everything():
    (e,) = DEFAULT_SECURITY_POLICY
    assert e.strategy == StaticStrategy(True)
    assert e.applies_to("", "", "") is True
    assert e.applies_to("anyone", "Any", "set anything") is True
