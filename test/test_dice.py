"""
Tests for random sources and the modulo-mapped die.
"""

import random

import pytest

from knockout.engine.dice import Dice
from knockout.engine.errors import InvalidConfiguration, RandomSourceExhausted
from knockout.engine.random_source import (
    OneThroughOneHundred,
    OneThroughTen,
    ScriptedRandomSource,
    UniformRandomSource,
)


@pytest.mark.parametrize("sides", [1, 2, 3, 4, 6, 8, 10, 12, 20])
def test_roll_stays_in_range_for_any_generator_output(sides):
    outputs = list(range(0, 101))
    dice = Dice(sides, ScriptedRandomSource(outputs))
    for _ in outputs:
        assert 1 <= dice.roll() <= sides


def test_roll_uses_modulo_mapping():
    dice = Dice(6, ScriptedRandomSource([6, 10, 1, 5]))
    assert [dice.roll() for _ in range(4)] == [1, 5, 2, 6]


def test_d6_on_one_through_ten_keeps_its_bias():
    # 1-10 mod 6 lands on faces 2-5 twice and on 1 and 6 once
    dice = Dice(6, ScriptedRandomSource(range(1, 11)))
    faces = dice.roll_many(10)
    assert sorted(faces) == [1, 2, 2, 3, 3, 4, 4, 5, 5, 6]


def test_roll_many_returns_each_roll_in_order():
    dice = Dice(6, ScriptedRandomSource([2, 3, 4]))
    assert dice.roll_many(3) == [3, 4, 5]


def test_dice_rejects_fewer_than_one_side():
    with pytest.raises(InvalidConfiguration):
        Dice(0, OneThroughTen())


def test_one_through_ten_range():
    source = OneThroughTen(random.Random(7))
    values = {source.random() for _ in range(500)}
    assert values <= set(range(1, 11))
    assert len(values) == 10


def test_one_through_one_hundred_range():
    source = OneThroughOneHundred(random.Random(7))
    assert all(1 <= source.random() <= 100 for _ in range(500))


def test_seeded_sources_repeat():
    first = UniformRandomSource(6, 9, random.Random(42))
    second = UniformRandomSource(6, 9, random.Random(42))
    assert [first.random() for _ in range(20)] == [second.random() for _ in range(20)]


def test_uniform_source_rejects_inverted_range():
    with pytest.raises(InvalidConfiguration):
        UniformRandomSource(9, 6)


def test_scripted_source_exhausts():
    source = ScriptedRandomSource([1, 2])
    assert source.random() == 1
    assert source.random() == 2
    with pytest.raises(RandomSourceExhausted):
        source.random()


def test_scripted_source_cycles():
    source = ScriptedRandomSource([1, 2], cycle=True)
    assert [source.random() for _ in range(5)] == [1, 2, 1, 2, 1]
    assert source.calls == 5


def test_scripted_source_needs_values():
    with pytest.raises(InvalidConfiguration):
        ScriptedRandomSource([])
