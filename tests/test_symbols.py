import pytest

from chord_lab.symbols import clean_detected_symbol, sanitize_symbol, strip_root_prefix

SANITIZE_CASES = [
    ("Gsus4", "G", "sus4"),
    ("CM", "C", ""),
    ("C", "C", ""),
    ("Cmaj", "C", ""),
    ("CMajor", "C", ""),
    ("M", "C", ""),
    ("major", "C", ""),
    ("Cmaj7", "C", "maj7"),
    ("CM/E", "C", "/E"),
    ("CMajor/G", "C", "/G"),
    ("Cm/G", "C", "m/G"),
    ("C#m7", "C#", "m7"),
    ("C#m7", "C", "C#m7"),
    ("Abmaj7", "A", "Abmaj7"),
    ("Abmaj7", "Ab", "maj7"),
    ("m7b5", "B", "m7b5"),
    ("", "C", ""),
    ("CCm", "C", "m"),
]


class TestStripRootPrefix:
    def test_strips_plain_prefix(self):
        assert strip_root_prefix("Gsus4", "G") == "sus4"

    def test_refuses_partial_root(self):
        assert strip_root_prefix("Abmaj7", "A") is None
        assert strip_root_prefix("F#m", "F") is None

    def test_root_with_accidental(self):
        assert strip_root_prefix("Bbm", "Bb") == "m"

    def test_not_a_prefix(self):
        assert strip_root_prefix("Dm", "C") is None
        assert strip_root_prefix("Dm", "") is None


class TestSanitizeSymbol:
    @pytest.mark.parametrize("raw,root,expected", SANITIZE_CASES)
    def test_sanitize(self, raw, root, expected):
        assert sanitize_symbol(raw, root) == expected

    @pytest.mark.parametrize("raw,root,expected", SANITIZE_CASES)
    def test_idempotent(self, raw, root, expected):
        once = sanitize_symbol(raw, root)
        assert sanitize_symbol(once, root) == once

    def test_accidental_guard(self):
        assert sanitize_symbol("Abmaj7", "A") != "bmaj7"

    def test_none_inputs(self):
        assert sanitize_symbol(None, None) == ""
        assert sanitize_symbol("m7", None) == "m7"


class TestCleanDetectedSymbol:
    @pytest.mark.parametrize(
        "candidate,root,fallback,expected",
        [
            ("CM", "C", "CM", ""),
            ("CMajor", "C", "CM", ""),
            ("CM/E", "C", "CM/E", "/E"),
            ("CMajor/E", "C", "CM/E", "/E"),
            ("Am7", "A", "Am7", "m7"),
            ("Am/C", "A", "Am/C", "m/C"),
            ("CMaj7", "C", "Cmaj7", "Maj7"),
            ("Cmaj", "C", "CM", "maj"),
        ],
    )
    def test_clean(self, candidate, root, fallback, expected):
        assert clean_detected_symbol(candidate, root, fallback) == expected

    def test_falls_back_when_root_is_not_a_prefix(self):
        assert clean_detected_symbol("AbM", "A", "M") == ""
        assert clean_detected_symbol("Dm7", "C", "m7") == "m7"
