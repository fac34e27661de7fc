import re

import pytest

from methodacl.core.matchers import ANY, RegexMatcher, as_matcher


def test_regex_matcher_is_anchored():
    m = RegexMatcher("Manager")
    assert m.matches("Manager") is True
    assert m.matches("BranchManager") is False
    assert m.matches("Manager2") is False


def test_compiled_pattern_is_anchored_too():
    m = as_matcher(re.compile("get .*"))
    assert m.matches("get balance") is True
    assert m.matches("set balance") is False
    assert m.matches("xget balance") is False


def test_explicit_anchors_are_harmless():
    assert RegexMatcher("^Foo$").matches("Foo") is True


def test_any_matches_empty_and_accessors():
    assert ANY.matches("") is True
    assert ANY.matches("set owner") is True


def test_custom_matcher_passes_through():
    class Prefix:
        def matches(self, value):
            return value.startswith("Acc")

    p = Prefix()
    assert as_matcher(p) is p


def test_invalid_values():
    with pytest.raises(TypeError):
        as_matcher(123)
    with pytest.raises(re.error):
        as_matcher("(unclosed")


def test_equality_and_repr():
    assert RegexMatcher("a+") == RegexMatcher("a+")
    assert hash(RegexMatcher("a+")) == hash(RegexMatcher("a+"))
    assert "a+" in repr(RegexMatcher("a+"))
