"""Command-line interface for the Shuffler project."""

import argparse


def create_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser."""
    parser = argparse.ArgumentParser(
        description="Expand words into every leetspeak variant of a substitution dictionary",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Expand two words with a dictionary file
  %(prog)s arma carro -D settings/leet.txt

  # Expand a word list in parallel, one worker per word
  %(prog)s -i words.txt -D settings/leet.txt -p -o variants.txt -v

  # Using JSON config
  %(prog)s --config config.json

Dictionary file format (one character per line, each replacement is one character):
  a -> a@4
  o -> o0
  c -> ck

Example config.json:
{
  "words": ["arma", "carro"],
  "substitutions": {"a": ["a", "@", "4"], "o": ["o", "0"]},
  "output": "variants.txt",
  "parallel": true,
  "verbose": true
}
        """,
    )

    # Words
    parser.add_argument("words", nargs="*", default=[], help="Words to expand")
    parser.add_argument("-i", "--include", type=str, help="File with words to expand")

    # Configuration
    parser.add_argument(
        "-c",
        "--config",
        type=str,
        help="JSON configuration file (CLI args override JSON values)",
    )
    parser.add_argument(
        "-D", "--dictionary", type=str, help="Substitution dictionary file"
    )

    # Output
    parser.add_argument(
        "-o",
        "--output",
        type=str,
        help="Output file (default: stdout)",
    )

    # Execution
    parser.add_argument(
        "-p",
        "--parallel",
        action="store_true",
        help="Expand each word on its own worker thread",
    )
    parser.add_argument(
        "-j",
        "--jobs",
        type=int,
        help="Maximum number of worker threads in parallel mode (default: one per word)",
    )

    # Flags
    parser.add_argument("-v", "--verbose", action="store_true", help="Verbose output")
    parser.add_argument("-d", "--debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", type=str, help="Also write log messages to this file")

    return parser
