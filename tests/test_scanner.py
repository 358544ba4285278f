"""
Tests for candidate gpEID scanning in free text.

The scanner only matches the coarse shape of a gpEID; validity is decided
by the grammar afterwards.
"""

from gpeid.core.scan import Candidate, find_candidates


class TestFindCandidates:
    """Tests for find_candidates."""

    def test_single_candidate(self) -> None:
        """Test a gpEID in the middle of a sentence."""
        text = "Install =Gebäude1+HLK_Sensor.001:Siemens.ABC123 next week"
        candidates = find_candidates(text)

        assert candidates == [
            Candidate(token="=Gebäude1+HLK_Sensor.001:Siemens.ABC123", line=0, column=8)
        ]
        assert candidates[0].end_column == 8 + len(candidates[0].token)

    def test_comma_and_semicolon_delimit_tokens(self) -> None:
        """Test that commas and semicolons end a token and may start the next."""
        text = "=A+HLK_B.001:C.D,=E+TBD_F.002:G.H;=I+VEN_J.003:K.L"
        tokens = [c.token for c in find_candidates(text)]

        assert tokens == ["=A+HLK_B.001:C.D", "=E+TBD_F.002:G.H", "=I+VEN_J.003:K.L"]

    def test_columns_and_lines(self) -> None:
        """Test coordinates across several lines."""
        text = "first line\n  =A+HLK_B.001:C.D\nx, =E+F_G:H"
        candidates = find_candidates(text)

        assert [(c.line, c.column) for c in candidates] == [(1, 2), (2, 3)]

    def test_only_newline_breaks_lines(self) -> None:
        """Test that form feeds and Unicode separators do not shift line numbers."""
        text = "a\x0cb\n=A+HLK_B.001:C.D\nc d\x0b\x85e\n  =E+F_G.002:H.I"
        candidates = find_candidates(text)

        assert [(c.line, c.column) for c in candidates] == [(1, 0), (3, 2)]

    def test_crlf_line_endings(self) -> None:
        """Test that a trailing carriage return is not part of the token."""
        candidates = find_candidates("x\r\n=A+HLK_B.001:C.D\r\n")

        assert [(c.token, c.line) for c in candidates] == [("=A+HLK_B.001:C.D", 1)]

    def test_token_must_start_after_delimiter(self) -> None:
        """Test that '=' inside a word does not start a candidate."""
        assert find_candidates("key=A+HLK_B.001:C.D") == []

    def test_components_must_appear_in_order(self) -> None:
        """Test that text without '+', '_' and ':' in order is ignored."""
        assert find_candidates("=A_B+C:D") == []
        assert find_candidates("=A+B:C") == []
        assert find_candidates("a = b + c") == []

    def test_invalid_gpeids_are_still_candidates(self) -> None:
        """Test that shape matching does not validate."""
        tokens = [c.token for c in find_candidates("=TBD+hlk_123.000:X")]
        assert tokens == ["=TBD+hlk_123.000:X"]

    def test_extensions_included(self) -> None:
        """Test that extension blocks are part of the candidate."""
        text = "tag: =Haus+HLK_Sensor.001:Siemens.Model-Config.v1$Serial.12345|Test.abc"
        tokens = [c.token for c in find_candidates(text)]

        assert tokens == ["=Haus+HLK_Sensor.001:Siemens.Model-Config.v1$Serial.12345|Test.abc"]

    def test_empty_text(self) -> None:
        """Test that empty input yields nothing."""
        assert find_candidates("") == []
