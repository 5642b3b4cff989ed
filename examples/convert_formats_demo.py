"""
Demonstration of reading one alignment and writing it in every supported format.

Run from the repository root so the fixture paths resolve.
"""

from pathlib import Path

from msaio import FormatKind, WriteOptions, detect, read_alignment, write
from msaio.io.alphabet import infer_sequence_type

# Path to data files
CLUSTAL = "tests/data/clustalw.aln"
STOCKHOLM = "tests/data/example.sto"

def main():
    print(f"Detected format of {CLUSTAL}: {detect(Path(CLUSTAL)).value}")
    aln = read_alignment(CLUSTAL)

    print("\n" + "=" * 80)
    print("ALIGNMENT")
    print("=" * 80)
    print(aln)
    print(f"Sequence type: {infer_sequence_type(aln.sequences).value}")

    for number, kind in enumerate([FormatKind.FASTA, FormatKind.CLUSTAL, FormatKind.STOCKHOLM, FormatKind.MSF], 1):
        print(f"\n{number}. {kind.value.upper()}")
        print("-" * 80)
        print(write(aln, kind, WriteOptions(wrap_width=20)).decode("utf-8"), end="")

    # Descriptions only survive in FASTA and Stockholm
    print("\nSTOCKHOLM DESCRIPTIONS AS FASTA HEADERS")
    print("-" * 80)
    print(write(read_alignment(STOCKHOLM), "fasta").decode("utf-8"), end="")

    # Column access
    print("\nFIRST FIVE COLUMNS")
    print("-" * 80)
    for index, column in zip(range(5), aln.iter_columns()):
        print(f"{index + 1:>3}  {column}")


if __name__ == "__main__":
    main()
