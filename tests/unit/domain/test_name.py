from dataclasses import FrozenInstanceError

import pytest

from naming import Name


def test_name_string_access():
    name = Name.from_raw("my-project")
    assert name.value == "my-project"
    assert name.as_str() == "my-project"
    assert name.into_str() == "my-project"
    assert str(name) == "my-project"
    assert f"{name}" == "my-project"


def test_name_is_immutable():
    name = Name.from_raw("abc")
    with pytest.raises((FrozenInstanceError, AttributeError)):
        name.value = "xyz"


def test_name_structural_equality_and_hashing():
    assert Name.from_raw("abc") == Name.from_raw("abc")
    assert Name.from_raw("abc") != Name.from_raw("abd")
    lookup = {Name.from_raw("abc"): 1}
    assert lookup[Name.from_raw("abc")] == 1
    assert len({Name.from_raw("a1"), Name.from_raw("a1"), Name.from_raw("b2")}) == 2


def test_name_ordering_follows_string_ordering():
    names = [Name.from_raw(v) for v in ["zeta", "alpha", "mid-1", "mid_0"]]
    assert [n.value for n in sorted(names)] == sorted(["zeta", "alpha", "mid-1", "mid_0"])
    assert Name.from_raw("a") < Name.from_raw("b")
