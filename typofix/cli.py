"""Command-line interface."""

import argparse
from multiprocessing import cpu_count


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        prog="typofix",
        description="Correct misspelled words in text against a word list",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Correct a phrase with the built-in word list
  %(prog)s --text "Ths is a tst."

  # Correct a file in place using your own dictionary
  %(prog)s --dictionary words.txt --input notes.txt --output notes.txt

  # Pipe text through, using the top 50000 English words
  cat draft.txt | %(prog)s --top-n 50000 > fixed.txt

  # Large files: correct line by line on 4 workers, with a report
  %(prog)s --top-n 50000 --input big.txt --lines -j 4 --report report.yml -v

Example config.json:
{
  "dictionary": "~/words.txt",
  "top_n": 20000,
  "max_edit_distance": 2,
  "max_candidates": 10,
  "node_storage": "sparse",
  "scoring": {"same_length_bonus": 100, "length_penalty": 10, "common_word_bonus": 200},
  "verbose": true
}
        """,
    )

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )

    # Word sources
    parser.add_argument("--dictionary", type=str, help="Word list file, one word per line")
    parser.add_argument("--top-n", type=int, help="Pull top N most common English words")
    parser.add_argument(
        "--english-words",
        action="store_true",
        help="Also accept every word in the english-words dictionary",
    )

    # Input / output
    source = parser.add_mutually_exclusive_group()
    source.add_argument("--text", type=str, help="Text to correct")
    source.add_argument("-i", "--input", type=str, help="File to correct (default: stdin)")
    parser.add_argument("-o", "--output", type=str, help="Output file (default: stdout)")
    parser.add_argument("--report", type=str, help="Write a YAML report of corrections")
    parser.add_argument(
        "--lines", action="store_true", help="Correct the input line by line"
    )

    # Engine parameters
    parser.add_argument(
        "--max-edit-distance",
        type=int,
        choices=[1, 2],
        help="Largest number of edits between a word and its correction",
    )
    parser.add_argument(
        "--max-candidates", type=int, help="Maximum candidates considered per word"
    )
    parser.add_argument(
        "--node-storage",
        choices=["sparse", "dense"],
        help="Prefix tree child storage (dense accepts only a-z)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("--debug", action="store_true", help="Per-word debug logging")
    parser.add_argument(
        "--debug-words",
        nargs="+",
        help="Trace these words through loading and correction (requires --debug)",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help=f"Number of parallel workers in line mode (max useful: {cpu_count()})",
    )

    return parser
