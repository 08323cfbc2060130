"""Tests for the random term picker."""

import random
from collections import Counter

from glossary_browser.models import SENTINEL_TERM, Term
from glossary_browser.picker import RandomPicker, choice_or_default, pick_random


class TestChoiceOrDefault:
    def test_empty_returns_default(self):
        assert choice_or_default([], "fallback", random.Random(0)) == "fallback"

    def test_default_never_drawn_when_items_present(self):
        """The default is only a fallback, not an extra candidate."""
        rng = random.Random(1)
        draws = {choice_or_default(["a", "b"], "fallback", rng) for _ in range(200)}
        assert draws == {"a", "b"}


class TestPickRandom:
    def test_empty_collection_returns_sentinel(self):
        assert pick_random([]) == Term("-", "-")
        assert pick_random([]) == SENTINEL_TERM

    def test_single_element_always_returned(self):
        only = Term("Only", "the one")
        assert all(pick_random([only]) == only for _ in range(20))

    def test_explicit_rng_is_used(self):
        terms = [Term(str(i), "") for i in range(10)]
        first = [pick_random(terms, random.Random(42)) for _ in range(3)]
        assert first[0] == first[1] == first[2]

    def test_roughly_uniform(self):
        """Every term is drawn with similar frequency."""
        terms = [Term(name, "") for name in "abcd"]
        picker = RandomPicker(seed=7)
        counts = Counter(picker.pick(terms).name for _ in range(4000))
        assert set(counts) == set("abcd")
        assert all(800 < c < 1200 for c in counts.values())


class TestRandomPicker:
    def test_same_seed_same_sequence(self):
        terms = [Term(str(i), "") for i in range(50)]
        a = RandomPicker(seed=3)
        b = RandomPicker(seed=3)
        assert [a.pick(terms) for _ in range(10)] == [b.pick(terms) for _ in range(10)]

    def test_accepts_existing_generator(self):
        rng = random.Random(0)
        picker = RandomPicker(rng=rng)
        assert picker.rng is rng

    def test_empty_returns_sentinel(self):
        assert RandomPicker(seed=0).pick([]) is SENTINEL_TERM
