"""Tests for the phone classifier and phonetic distance."""

from __future__ import annotations

from itertools import product

import pytest

from soundalike.phonetic.feature_groups import (
    PHONE_TO_GROUPS,
    PHONETIC_GROUPS,
    RELATED_GROUP_PAIRS,
    groups_for,
    phonetic_distance,
)

ALL_PHONES = sorted({p for phones in PHONETIC_GROUPS.values() for p in phones}) + ["q", "ʘ", " "]


class TestGroupTable:
    def test_sixteen_groups(self):
        assert len(PHONETIC_GROUPS) == 16

    def test_related_pairs_reference_known_groups(self):
        for a, b in RELATED_GROUP_PAIRS:
            assert a in PHONETIC_GROUPS
            assert b in PHONETIC_GROUPS

    def test_both_g_symbols_are_voiced_stops(self):
        assert groups_for("g") == ("voiced_stops",)
        assert groups_for("ɡ") == ("voiced_stops",)

    def test_diphthong_lookup(self):
        assert groups_for("aɪ") == ("diphthongs",)

    def test_unknown_phone_has_no_groups(self):
        assert groups_for("q") == ()

    def test_index_is_read_only(self):
        with pytest.raises(TypeError):
            PHONE_TO_GROUPS["q"] = ("voiceless_stops",)  # type: ignore[index]


class TestPhoneticDistance:
    def test_identical(self):
        assert phonetic_distance("p", "p") == 0
        assert phonetic_distance("a", "a") == 0

    def test_same_group(self):
        assert phonetic_distance("p", "t") == 0.3
        assert phonetic_distance("i", "ɪ") == 0.3

    def test_related_groups(self):
        assert phonetic_distance("p", "b") == 0.6
        assert phonetic_distance("f", "v") == 0.6
        assert phonetic_distance("e", "æ") == 0.6
        assert phonetic_distance("m", "l") == 0.6
        assert phonetic_distance("l", "w") == 0.6

    def test_unrelated(self):
        assert phonetic_distance("p", "a") == 1.0
        assert phonetic_distance("i", "æ") == 1.0
        # nasals and glides are only linked through liquids
        assert phonetic_distance("m", "w") == 1.0

    def test_unknown_phones(self):
        assert phonetic_distance("q", "q") == 0
        assert phonetic_distance("q", "p") == 1.0
        assert phonetic_distance("q", "ʘ") == 1.0

    def test_reflexive(self):
        for phone in ALL_PHONES:
            assert phonetic_distance(phone, phone) == 0

    def test_symmetric(self):
        for a, b in product(ALL_PHONES, repeat=2):
            assert phonetic_distance(a, b) == phonetic_distance(b, a)

    def test_closed_range(self):
        values = {phonetic_distance(a, b) for a, b in product(ALL_PHONES, repeat=2)}
        assert values == {0.0, 0.3, 0.6, 1.0}

