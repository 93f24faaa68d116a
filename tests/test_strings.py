"""String matching family: every matcher agrees with a brute-force scan."""

import pytest

from algorithms.strings.boyer_moore import good_suffix_table

MATCHERS = ["naive", "kmp", "rabin_karp", "boyer_moore", "z_algorithm"]


def _occurrences(text, pattern):
    return [i for i in range(len(text) - len(pattern) + 1) if text[i:i + len(pattern)] == pattern]


@pytest.mark.parametrize("key", MATCHERS)
class TestMatchers:
    def test_sample_matches_at_ten(self, key, final_of):
        assert final_of(key)["matches"] == [10]

    @pytest.mark.parametrize("text, pattern", [
        ("AAAAA", "AA"),
        ("ABCABCABC", "CAB"),
        ("HELLO", "XYZ"),
        ("AB", "ABC"),
        ("", "A"),
        ("MISSISSIPPI", "ISSI"),
        ("ABAAABAAB", "AAB"),
    ])
    def test_agrees_with_brute_force(self, key, text, pattern, final_of):
        state = final_of(key, {"text": text, "pattern": pattern})
        assert state["matches"] == _occurrences(text, pattern)

    def test_empty_pattern_is_an_error(self, key, trace_of):
        assert trace_of(key, {"text": "ABC", "pattern": ""}).error

    def test_comparisons_are_counted(self, key, final_of):
        assert final_of(key)["comparisons"] > 0


class TestPreprocessing:
    def test_kmp_lps(self, final_of):
        assert final_of("kmp")["lps"] == [0, 0, 1, 2, 0, 1, 2, 3, 4]

    def test_good_suffix_shifts_are_positive(self):
        for pattern in ("ABABC", "AAAA", "ABCAB"):
            assert all(s > 0 for s in good_suffix_table(pattern))

    def test_boyer_moore_bad_character_table(self, final_of):
        assert final_of("boyer_moore")["bad_char"] == {"A": 2, "B": 3, "C": 4}

    def test_z_array_prefix(self, final_of):
        state = final_of("z_algorithm")
        assert state["combined"] == "ABABC$ABABDABACDABABCABAB"
        assert state["z_array"][:5] == [0, 0, 2, 0, 0]

    def test_z_separator_in_text_is_an_error(self, trace_of):
        assert trace_of("z_algorithm", {"text": "A$B", "pattern": "A"}).error
