"""
Command-line interface for textlens.

Examples:
    textlens detect "Hallo und auf Wiedersehen"
    textlens detect --scores "Il gatto è sul tavolo"
    textlens stats "Hello world. How are you?"
    echo "  नमस्ते  " | textlens normalize --language hi
    textlens analyze "Bonjour, comment ça va ?"
"""

import argparse
import json
import sys
from typing import List, Optional

from textlens.config import config
from textlens.analysis import analyze_message, format_analysis
from textlens.detector import score_languages, select_language
from textlens.languages import language_name
from textlens.stats import get_text_stats_json
from textlens.utils.text_normalize import normalize_text
from textlens.utils.logging_setup import setup_logging, get_logger

logger = get_logger(__name__)


def read_text(text: Optional[str]) -> Optional[str]:
    """
    Resolve the input text.

    Args:
        text: Text given on the command line, or None

    Returns:
        The given text, stdin contents when stdin is piped, or None
    """
    if text is not None:
        return text
    if sys.stdin is None or sys.stdin.isatty():
        return None
    data = sys.stdin.read()
    # Drop the line break added by echo or a trailing LF or CRLF
    if data.endswith("\r\n"):
        return data[:-2]
    return data[:-1] if data.endswith("\n") else data


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser."""
    parser = argparse.ArgumentParser(
        prog="textlens",
        description="Detect language, compute statistics and normalize text"
    )
    parser.add_argument(
        "--log_level",
        type=str,
        default=config.log_level,
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    detect_parser = subparsers.add_parser("detect", help="Detect the language of a text")
    detect_parser.add_argument("text", nargs="?", help="Input text (default: stdin)")
    detect_parser.add_argument(
        "--max_tokens",
        type=int,
        default=config.detection_max_tokens,
        help="Number of leading tokens used for word matching"
    )
    detect_parser.add_argument(
        "--scores",
        action="store_true",
        help="Also print the score table as JSON"
    )
    detect_parser.add_argument(
        "--name",
        action="store_true",
        help="Print the language display name next to the code"
    )

    stats_parser = subparsers.add_parser("stats", help="Print text statistics as JSON")
    stats_parser.add_argument("text", nargs="?", help="Input text (default: stdin)")

    normalize_parser = subparsers.add_parser("normalize", help="Normalize text for a language")
    normalize_parser.add_argument("text", nargs="?", help="Input text (default: stdin)")
    normalize_parser.add_argument(
        "--language",
        type=str,
        default="en",
        help="Language code (en, de, fr, it, pt, hi, es, th)"
    )

    analyze_parser = subparsers.add_parser("analyze", help="Print a one-line message summary")
    analyze_parser.add_argument("text", nargs="?", help="Input text (default: stdin)")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the CLI and return the exit code."""
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(level=args.log_level)

    text = read_text(args.text)
    if text is None:
        print("Error: No input text given and nothing on stdin", file=sys.stderr)
        return 1

    if args.command == "detect":
        if args.max_tokens < 1:
            print("Error: --max_tokens must be at least 1", file=sys.stderr)
            return 1
        scores = score_languages(text, max_tokens=args.max_tokens)
        language = select_language(scores)
        print(f"{language} ({language_name(language)})" if args.name else language)
        if args.scores:
            print(json.dumps(scores, sort_keys=True))
    elif args.command == "stats":
        print(get_text_stats_json(text))
    elif args.command == "normalize":
        print(normalize_text(text, args.language))
    elif args.command == "analyze":
        analysis = analyze_message(text, max_tokens=config.detection_max_tokens)
        print(format_analysis(analysis))

    logger.info(f"Command '{args.command}' finished")
    return 0


if __name__ == "__main__":
    exit(main())
