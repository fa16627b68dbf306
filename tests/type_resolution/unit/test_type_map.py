"""Type substitution rule tests."""

from __future__ import annotations

from dataclasses import dataclass

import pytest
from swgen.type_resolution import TypeMap, UnsupportedTypeError


@dataclass
class Money:
    amount: int


@dataclass
class Price:
    value: int


def test_rules_are_keyed_by_exact_type_of_source_sample() -> None:
    type_map = TypeMap()
    type_map.add(Money(amount=1), "")

    assert type_map.lookup(Money) == (True, "")
    assert Money in type_map
    assert type_map.lookup(Price) == (False, None)
    assert len(type_map) == 1


def test_mapping_chains_resolve_to_final_replacement() -> None:
    type_map = TypeMap()
    type_map.add(Money, Price)
    type_map.add(Price, 0.0)

    assert type_map.lookup(Money) == (True, 0.0)


def test_mapping_cycles_are_rejected() -> None:
    type_map = TypeMap()
    type_map.add(Money, Price)
    type_map.add(Price, Money)

    with pytest.raises(UnsupportedTypeError, match="cycle"):
        type_map.lookup(Money)
