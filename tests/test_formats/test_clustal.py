"""
Tests for the Clustal parser and writer.
"""

import warnings

import pytest

from msaio.formats import clustal
from msaio.formats.options import WriteOptions
from msaio.io.errors import FormatWarning, ParseError, ParseReason, ValidationError, ValidationKind
from msaio.io.sequences import Alignment
from msaio.io.source import LineSource


def _parse(text):
    return clustal.parse(LineSource.from_text(text))


class TestClustalParse:
    """Test Clustal parsing."""

    def test_fixture_file(self, example_files):
        aln = clustal.parse(LineSource.from_path(example_files["clustal"]))

        assert len(aln) == 3
        assert aln.width == 32
        assert aln.identifiers == ["Hsa_Human", "Hla_gibbon", "Cgu/Can_colobus"]
        assert aln["Hsa_Human"].sequence == "MKVLAAGIVG-LLLAQPAWAQDNLKSRF-KEV"
        assert aln["Cgu/Can_colobus"].sequence == "MRVL--GIVGALLLAQPAWAQENLKSRFAKE-"

    def test_banner_annotations(self, example_files):
        aln = clustal.parse(LineSource.from_path(example_files["clustal"]))
        assert aln.annotations["program"] == "CLUSTAL"
        assert aln.annotations["version"] == "1.81"

    def test_other_program_banner(self):
        aln = _parse("MUSCLE (3.8) multiple sequence alignment\n\ns1 AC\ns2 AG\n")
        assert aln.annotations == {"program": "MUSCLE", "version": "3.8"}

    def test_fragments_appended_per_identifier(self):
        text = (
            "CLUSTAL W (1.83) multiple sequence alignment\n"
            "\n"
            "a   AAA\n"
            "b   BBB\n"
            "\n"
            "b   bb\n"
            "a   aa\n"
        )
        aln = _parse(text)
        assert aln.identifiers == ["a", "b"]
        assert aln.sequences == ["AAAaa", "BBBbb"]

    def test_residue_counts_ignored(self):
        text = "CLUSTAL W\n\ns1  ACGT 4\ns2  AC-T 3\n\ns1  GG 6\ns2  GG 5\n"
        assert _parse(text).sequences == ["ACGTGG", "AC-TGG"]

    def test_consensus_line_ends_block(self):
        text = "CLUSTAL\n\ns1  ACGT\ns2  ACGA\n    *** \ns1  GG\ns2  GG\n"
        assert _parse(text).sequences == ["ACGTGG", "ACGAGG"]

    def test_trailing_whitespace_insignificant(self):
        assert _parse("CLUSTAL\n\ns1  AC   \ns2  AG\t\n").sequences == ["AC", "AG"]

    def test_missing_banner(self):
        with pytest.raises(ParseError) as excinfo:
            _parse("\ns1  ACGT\n")
        assert excinfo.value.line == 2
        assert excinfo.value.reason == ParseReason.MISSING_BANNER

    def test_empty_input(self):
        with pytest.raises(ParseError) as excinfo:
            _parse("\n\n")
        assert excinfo.value.reason == ParseReason.EMPTY_INPUT
        assert excinfo.value.line == 2

    def test_new_identifier_in_later_block(self):
        text = "CLUSTAL\n\ns1  AC\ns2  AC\n\ns1  GG\ns3  GG\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.line == 7
        assert excinfo.value.reason == ParseReason.INCONSISTENT_BLOCK
        assert "s3" in str(excinfo.value)

    def test_identifier_missing_from_later_block(self):
        text = "CLUSTAL\n\ns1  AC\ns2  AC\n\ns1  GG\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.reason == ParseReason.INCONSISTENT_BLOCK
        assert "s2" in str(excinfo.value)

    def test_fragment_length_within_block(self):
        text = "CLUSTAL\n\ns1  ACGT\ns2  ACG\n"
        with pytest.raises(ParseError) as excinfo:
            _parse(text)
        assert excinfo.value.line == 4
        assert excinfo.value.reason == ParseReason.FRAGMENT_LENGTH

    def test_duplicate_in_first_block(self):
        with pytest.raises(ValidationError) as excinfo:
            _parse("CLUSTAL\n\ns1  AC\ns1  AG\n")
        assert excinfo.value.kind == ValidationKind.DUPLICATE_IDENTIFIER
        assert excinfo.value.identifiers == ("s1",)

    def test_malformed_line(self):
        with pytest.raises(ParseError) as excinfo:
            _parse("CLUSTAL\n\ns1  AC GT TT\n")
        assert excinfo.value.reason == ParseReason.MALFORMED_LINE


class TestClustalWrite:
    """Test Clustal writing."""

    def test_layout(self, small_alignment):
        text = clustal.write(small_alignment, WriteOptions(wrap_width=4))
        assert text == (
            "CLUSTAL multiple sequence alignment\n"
            "\n"
            "\n"
            "seq1      ACGT\n"
            "seq2      ACGT\n"
            "          ****\n"
            "\n"
            "seq1      --AC\n"
            "seq2      TTAC\n"
            "            **\n"
        )

    def test_version_from_annotations(self, small_alignment):
        aln = Alignment(records=small_alignment.records, annotations={"version": "1.83"})
        text = clustal.write(aln, WriteOptions())
        assert text.startswith("CLUSTAL 1.83 multiple sequence alignment\n")

    def test_conservation_is_case_insensitive(self):
        aln = Alignment.from_pairs([("a", "Ac"), ("b", "aG")])
        lines = clustal.write(aln, WriteOptions()).splitlines()
        assert lines[-1] == "       *"

    def test_no_consensus_line_without_conserved_columns(self):
        aln = Alignment.from_pairs([("a", "AC"), ("b", "GT")])
        lines = clustal.write(aln, WriteOptions()).splitlines()
        assert lines[-1] == "b      GT"

    def test_long_identifier_warns(self):
        aln = Alignment.from_pairs([("x" * 31, "AC")])
        with pytest.warns(FormatWarning, match="longer than 30"):
            clustal.write(aln, WriteOptions())

    def test_short_identifiers_do_not_warn(self, small_alignment):
        with warnings.catch_warnings():
            warnings.simplefilter("error")
            clustal.write(small_alignment, WriteOptions())

    def test_empty_alignment(self):
        assert clustal.write(Alignment(), WriteOptions()) == "CLUSTAL multiple sequence alignment\n\n\n"
