"""Unit tests for Mode resolution."""

import pytest

from plugdoc.errors import UnknownMode
from plugdoc.models import Mode, mode_from_page


class TestModeParse:
    """Tests for Mode.parse."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            (Mode.MONO, Mode.MONO),
            ("m", Mode.MONO),
            ("mono", Mode.MONO),
            ("MONO", Mode.MONO),
            (" Stereo ", Mode.STEREO),
            ("s", Mode.STEREO),
        ],
    )
    def test_parse_recognized_values(self, value: object, expected: Mode) -> None:
        """Test flags, names and Mode instances resolve."""
        assert Mode.parse(value) is expected

    @pytest.mark.parametrize("value", ["quad", "", "ms", None, 1, ["mono"]])
    def test_parse_unknown_raises(self, value: object) -> None:
        """Test that unrecognized values never default to a variant."""
        with pytest.raises(UnknownMode) as exc_info:
            Mode.parse(value)

        assert exc_info.value.value == value

    def test_unknown_mode_is_value_error(self) -> None:
        """Test UnknownMode can be caught as ValueError."""
        with pytest.raises(ValueError, match="Unknown mode"):
            Mode.parse("surround")

    def test_str_and_label(self) -> None:
        """Test display forms."""
        assert str(Mode.STEREO) == "stereo"
        assert Mode.MONO.label == "Mono"

    def test_exactly_two_variants(self) -> None:
        """Test that only mono and stereo exist."""
        assert [m.value for m in Mode] == ["m", "s"]


class TestModeFromPage:
    """Tests for page id mapping."""

    def test_known_pages(self) -> None:
        assert mode_from_page("referencer_mono") is Mode.MONO
        assert mode_from_page("referencer_stereo") is Mode.STEREO

    def test_unknown_page_raises(self) -> None:
        """Test that other pages are not treated as stereo."""
        with pytest.raises(UnknownMode, match="Unknown manual page"):
            mode_from_page("referencer_x2")
