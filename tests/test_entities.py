from __future__ import annotations

import numpy as np
import pytest

from mathreg.core.entities import ConstantEntity, Entity, MathEntity
from mathreg.core.ordering import compare_entities, entity_sort_key


def test_entity_satisfies_contract() -> None:
    ent = Entity(name="x")

    assert isinstance(ent, MathEntity)
    assert ent.id is None
    assert not ent.is_id_defined
    ent.id = 0
    assert ent.is_id_defined


def test_equality_is_identity() -> None:
    assert Entity(name="x") != Entity(name="x")


@pytest.mark.parametrize("bad", ["", None, 3])
def test_invalid_names_rejected(bad: object) -> None:
    with pytest.raises(ValueError):
        Entity(name=bad)  # type: ignore[arg-type]


def test_copy_from_keeps_id() -> None:
    target = ConstantEntity(name="a", value=1.0)
    target.id = 4
    donor = ConstantEntity(name="b", value=2.0, description="two", is_system=True)
    donor.id = 9

    target.copy_from(donor)

    assert target.name == "b"
    assert target.value == 2.0
    assert target.description == "two"
    assert target.is_system
    assert target.id == 4


def test_constant_value_normalized_to_float() -> None:
    assert ConstantEntity(name="a", value=np.float32(1.5)).value == 1.5
    assert ConstantEntity(name="b", value=np.asarray(3)).value == 3.0
    assert type(ConstantEntity(name="c", value=2).value) is float


@pytest.mark.parametrize("bad", [[1.0, 2.0], "pi", 1 + 2j])
def test_constant_value_must_be_real_scalar(bad: object) -> None:
    with pytest.raises(ValueError):
        ConstantEntity(name="a", value=bad)


def test_sort_key_and_compare() -> None:
    e = Entity(name="e")
    pi = Entity(name="pi")
    ab = Entity(name="ab")

    assert entity_sort_key(pi) == (2, "pi")
    assert compare_entities(e, pi) == -1
    assert compare_entities(pi, ab) == 1
    assert compare_entities(pi, Entity(name="pi")) == 0
    assert sorted([pi, ab, e], key=entity_sort_key) == [e, ab, pi]
