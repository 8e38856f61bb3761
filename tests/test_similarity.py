"""Tests for street_resolver.matchers.similarity module."""
from street_resolver.matchers.similarity import edit_distance_points, phonetic_points, score_match
from street_resolver.metaphone import encode


class TestScoreMatch:
    def test_identical_names_score_maximum(self):
        assert score_match("Grouse Lane", "Grouse Lane") == 100

    def test_identical_core_with_different_suffix_form(self):
        assert score_match("grouse lane,", "Grouse LN") == 100

    def test_phonetic_mishearing(self):
        # Same primary code (50) + one substitution in four letters (30)
        assert score_match("Golf Road", "Gulf Road") == 80

    def test_both_orders_with_fresh_codes(self):
        assert score_match("Golf", "Gulf Drive") == score_match("Gulf", "Golf Drive") == 80

    def test_not_symmetric_with_stored_codes(self):
        # Stored codes win over fresh encoding, so order matters when they differ
        assert score_match("Gulf", "Golf Road", ("XXXX", "YYYY")) == 30
        assert score_match("Golf Road", "Gulf") == 80

    def test_stored_codes_match_fresh_encoding(self):
        assert score_match("Gulf", "Golf Road", encode("GOLF")) == score_match("Gulf", "Golf Road")

    def test_empty_core_scores_zero(self):
        assert score_match("", "Main Street") == 0
        assert score_match("Street", "Main Street") == 0
        assert score_match("Main", "North") == 0

    def test_unrelated_names_score_low(self):
        assert score_match("Zyzzyva", "Main Street") < 30


class TestPhoneticPoints:
    def test_primary_tier(self):
        assert phonetic_points(("KLF", "KLF"), ("KLF", "XXX")) == 50

    def test_cross_tier(self):
        assert phonetic_points(("JRJ", "KRK"), ("KRK", "KRK")) == 40
        assert phonetic_points(("AAA", "KRK"), ("JRJ", "KRK")) == 30
        assert phonetic_points(("JRJ", "KRK"), ("XXX", "JRJ")) == 40

    def test_no_match(self):
        assert phonetic_points(("AB", "AB"), ("CD", "CD")) == 0


class TestEditDistancePoints:
    def test_identical(self):
        assert edit_distance_points("GROUSE", "grouse") == 40

    def test_rounds_half_up(self):
        # 3 edits over 16 letters -> 32.5 -> 33
        assert edit_distance_points("abcdefghijklmnop", "xyzdefghijklmnop") == 33
