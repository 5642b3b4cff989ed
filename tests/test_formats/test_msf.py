"""
Tests for the MSF parser and writer.
"""

import pytest

from msaio.formats import msf
from msaio.formats.options import WriteOptions
from msaio.io.errors import FormatWarning, ParseError, ParseReason, ValidationError
from msaio.io.sequences import Alignment
from msaio.io.source import LineSource

HEADER = (
    "!!NA_MULTIPLE_ALIGNMENT 1.0\n"
    "\n"
    " t.msf  MSF: 8  Type: N  Check: {total}  ..\n"
    "\n"
    " Name: seq1  Len: {len1}  Check: {check1}  Weight: 1.00\n"
    " Name: seq2  Len: 8  Check: 2663  Weight: 1.00\n"
    "\n"
    "//\n"
    "\n"
)

BODY = (
    "       1      8\n"
    "seq1   ACGT..AC\n"
    "seq2   ACGTTTAC\n"
)


def _text(total=4908, len1=8, check1=2245, body=BODY):
    return HEADER.format(total=total, len1=len1, check1=check1) + body


def _parse(text, **kwargs):
    return msf.parse(LineSource.from_text(text), **kwargs)


class TestChecksum:
    """Test the GCG checksum."""

    def test_known_values(self):
        assert msf.gcg_checksum("ACGT") == 748
        assert msf.gcg_checksum("ACGT..AC") == 2245
        assert msf.gcg_checksum("ACGTTTAC") == 2663

    def test_case_insensitive(self):
        assert msf.gcg_checksum("acgt") == msf.gcg_checksum("ACGT")

    def test_empty(self):
        assert msf.gcg_checksum("") == 0

    def test_position_weights_cycle_every_57(self):
        # position 58 has weight 1 again
        assert msf.gcg_checksum("A" * 58) == (65 * sum(range(1, 58)) + 65) % 10000


class TestMsfParse:
    """Test MSF parsing."""

    def test_fixture_file(self, example_files):
        aln = msf.parse(LineSource.from_path(example_files["msf"]))

        assert aln.identifiers == ["seq1", "seq2"]
        assert aln.sequences == ["ACGT..ACGG", "ACGTTTACGA"]
        assert aln.annotations == {"name": "example.msf", "type": "N"}

    def test_minimal(self):
        aln = _parse(_text())
        assert aln.sequences == ["ACGT..AC", "ACGTTTAC"]

    def test_length_mismatch(self):
        with pytest.raises(ParseError) as excinfo:
            _parse(_text(len1=9))
        assert excinfo.value.reason == ParseReason.LENGTH_MISMATCH
        assert excinfo.value.line == 5

    def test_global_length_mismatch(self):
        text = _text().replace("MSF: 8", "MSF: 10")
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.reason == ParseReason.LENGTH_MISMATCH
        assert excinfo.value.line == 3

    def test_sequence_checksum_mismatch(self):
        with pytest.raises(ParseError) as excinfo:
            _parse(_text(check1=1234))
        assert excinfo.value.reason == ParseReason.CHECKSUM_MISMATCH
        assert excinfo.value.line == 5

    def test_total_checksum_mismatch(self):
        with pytest.raises(ParseError) as excinfo:
            _parse(_text(total=1))
        assert excinfo.value.reason == ParseReason.CHECKSUM_MISMATCH
        assert excinfo.value.line == 3

    def test_checksum_verification_can_be_disabled(self):
        aln = _parse(_text(total=1, check1=1234), checksum=None)
        assert aln.width == 8

    def test_pluggable_checksum(self):
        text = _text(total=0, check1=0).replace("Check: 2663", "Check: 0")
        aln = _parse(text, checksum=lambda seq: 0)
        assert len(aln) == 2

    def test_missing_separator(self):
        text = _text().replace("//\n", "")
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.reason == ParseReason.TRUNCATED

    def test_empty_input(self):
        with pytest.raises(ParseError) as excinfo:
            _parse("")
        assert excinfo.value.reason == ParseReason.EMPTY_INPUT

    def test_missing_msf_line(self):
        text = "!!NA_MULTIPLE_ALIGNMENT 1.0\n\n//\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.reason == ParseReason.MALFORMED_HEADER

    def test_name_without_len(self):
        text = " x  MSF: 2  Check: 0 ..\n Name: s1 Check: 0\n//\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.reason == ParseReason.MALFORMED_HEADER
        assert excinfo.value.line == 2

    def test_unknown_identifier_in_body(self):
        body = BODY + "seq3   ACGTTTAC\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(_text(body=body))
        assert excinfo.value.reason == ParseReason.INCONSISTENT_BLOCK

    def test_duplicate_name_lines(self):
        text = " x  MSF: 2 ..\n Name: s1 Len: 2\n Name: s1 Len: 2\n//\ns1 AC\n"
        with pytest.raises(ValidationError, match="s1"):
            _parse(text)

    def test_identifiers_that_look_like_header_fields(self):
        aln = Alignment.from_pairs([("MSF:1", "ACGT"), ("Len:9", "ACGA"), ("Check:1", "ACGG")])
        text = msf.write(aln, WriteOptions())
        parsed = _parse(text)

        assert parsed == aln
        assert parsed.annotations["name"] == "alignment"

    def test_tilde_gaps_preserved(self):
        text = " x  MSF: 4 ..\n Name: s1 Len: 4\n Name: s2 Len: 4\n//\ns1 ~~AC\ns2 ACAC\n"
        assert _parse(text).sequences == ["~~AC", "ACAC"]

    def test_other_banner_version_warns(self):
        text = "!!AA_MULTIPLE_ALIGNMENT 2.0\n x  MSF: 2 ..\n Name: s1 Len: 2\n//\ns1 MK\n"
        with pytest.warns(FormatWarning, match="2.0"):
            _parse(text)


class TestMsfWrite:
    """Test MSF writing."""

    def test_layout(self, small_alignment):
        text = msf.write(small_alignment, WriteOptions())
        assert text == (
            "!!NA_MULTIPLE_ALIGNMENT 1.0\n"
            "\n"
            " alignment  MSF: 8  Type: N  Check: 4897  ..\n"
            "\n"
            " Name: seq1  Len:     8  Check: 2234  Weight: 1.00\n"
            " Name: seq2  Len:     8  Check: 2663  Weight: 1.00\n"
            "\n"
            "//\n"
            "\n"
            "      1      8\n"
            "seq1  ACGT--AC\n"
            "seq2  ACGTTTAC\n"
        )

    def test_groups_of_ten(self):
        aln = Alignment.from_pairs([("s", "A" * 25)])
        lines = msf.write(aln, WriteOptions()).splitlines()
        assert lines[-1] == "s  " + " ".join(["A" * 10, "A" * 10, "A" * 5])
        assert lines[-2] == "   1" + " " * 24 + "25"

    def test_blocks_and_name_annotation(self):
        aln = Alignment.from_pairs([("s", "MKVLA" * 3)], annotations={"name": "lyso.msf"})
        text = msf.write(aln, WriteOptions(wrap_width=10))
        assert " lyso.msf  MSF: 15  Type: P" in text
        assert text.startswith("!!AA_MULTIPLE_ALIGNMENT 1.0\n")
        body = text.split("//\n")[1]
        assert body == "\n   1       10\ns  MKVLAMKVLA\n\n   11 15\ns  MKVLA\n"

    def test_header_regenerated_from_model(self, example_files):
        aln = msf.parse(LineSource.from_path(example_files["msf"]))
        text = msf.write(aln.slice_columns(0, 4), WriteOptions())
        assert "MSF: 4" in text
        assert f"Check: {msf.gcg_checksum('ACGT'):>4}" in text
