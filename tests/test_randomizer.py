import random

from trivia_app.core.randomizer import shuffled


def test_shuffled_is_a_permutation(rng):
    items = list(range(20))
    result = shuffled(items, rng)
    assert sorted(result) == items
    assert len(result) == len(items)


def test_shuffled_leaves_input_untouched(rng):
    items = ["a", "b", "c", "d"]
    shuffled(items, rng)
    assert items == ["a", "b", "c", "d"]


def test_shuffled_handles_short_sequences(rng):
    assert shuffled([], rng) == []
    assert shuffled(["only"], rng) == ["only"]


def test_shuffled_is_reproducible_with_seed():
    items = list(range(10))
    assert shuffled(items, random.Random(7)) == shuffled(items, random.Random(7))


def test_shuffled_reaches_every_ordering():
    generator = random.Random(99)
    seen = {tuple(shuffled([1, 2, 3], generator)) for _ in range(300)}
    assert len(seen) == 6
