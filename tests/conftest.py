"""
Pytest configuration and shared fixtures.
"""

import pytest
from pathlib import Path
from typer.testing import CliRunner

from msaio import Alignment, SequenceRecord


@pytest.fixture
def data_dir():
    """Path to alignment fixture files."""
    return Path(__file__).parent / "data"


@pytest.fixture
def example_files(data_dir):
    """One fixture file per supported format."""
    return {
        "fasta": data_dir / "example.fasta",
        "clustal": data_dir / "clustalw.aln",
        "stockholm": data_dir / "example.sto",
        "msf": data_dir / "example.msf",
    }


@pytest.fixture
def cli_runner():
    """CLI test runner for Typer apps."""
    return CliRunner()


@pytest.fixture
def small_alignment():
    """Two-row nucleotide alignment of width 8."""
    return Alignment.from_pairs([("seq1", "ACGT--AC"), ("seq2", "ACGTTTAC")])


@pytest.fixture
def protein_alignment():
    """Three protein rows with descriptions, mixed case and both gap symbols."""
    return Alignment(records=(
        SequenceRecord("Hsa_Human", "MKVLAAGIVG-LLLAQPAWAQDNLKSRF-KEV", "human lysozyme"),
        SequenceRecord("Hla_gibbon", "MKVLTAGIVGALLLSQPA-AQDNLRSRFAKEV", "gibbon"),
        SequenceRecord("Cgu/Can_colobus", "mrvl..GIVGALLLAQPAWAQENLKSRFAKE-"),
    ))
