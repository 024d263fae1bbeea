# src/textseg/demo.py
import argparse
import json
import logging
import sys

from .errors import DuplicateKeyError, InvalidOption, PreconditionViolation
from .helpers.exceptions import message_stack
from .utils.load_config import ConfigFileNotFound, ConfigParseError, ConfigTypeError, DataDirNotFound

_LIBRARY_ERRORS = (
    PreconditionViolation,
    InvalidOption,
    DuplicateKeyError,
    DataDirNotFound,
    ConfigFileNotFound,
    ConfigParseError,
    ConfigTypeError,
)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="textseg-demo",
        description="Tokenize, split, trim, or parse text from the command line.",
    )
    parser.add_argument("--debug", action="store_true", help="Verbose debug logs")
    parser.add_argument(
        "--mode",
        default=None,
        help="Comparison mode (ordinal, ordinal_ignore_case, culture, culture_ignore_case)",
    )
    parser.add_argument("--profile", default=None, help="Profile name from profiles.json")
    sub = parser.add_subparsers(dest="command", required=True)

    p_tok = sub.add_parser("tokenize", help="Split into quote-aware tokens")
    p_tok.add_argument("text")
    p_tok.add_argument("--quote-char", dest="quote_char", default=None)
    p_tok.add_argument("--separator", default=None)

    p_split = sub.add_parser("split", help="Split on a multi-character delimiter")
    p_split.add_argument("text")
    p_split.add_argument("delimiter")
    p_split.add_argument("--remove-empty", dest="remove_empty", action="store_true")

    p_trim = sub.add_parser("trim", help="Trim boundary patterns until none matches")
    p_trim.add_argument("text")
    p_trim.add_argument("patterns", nargs="+", help="Ordered pattern set")
    p_trim.add_argument("--side", choices=("start", "end", "both"), default="both")
    p_trim.add_argument("--chars", action="store_true", help="Treat patterns as a character set")

    p_parse = sub.add_parser("parse", help="Parse an option string into name/value pairs")
    p_parse.add_argument("text")
    return parser


def _run(args: argparse.Namespace):
    from . import profiles, segmentation
    from .pipeline import parse_arguments

    prof = profiles.load_profile(args.profile) if args.profile else profiles.default_profile()
    mode = segmentation.resolve_mode(args.mode) if args.mode else prof["comparison"]

    if args.command == "tokenize":
        return segmentation.tokenize(
            args.text,
            args.quote_char or prof["quote_char"],
            args.separator or prof["separator"],
        )
    if args.command == "split":
        return segmentation.split(args.text, args.delimiter, args.remove_empty, mode)
    if args.command == "trim":
        if args.chars:
            chars = "".join(args.patterns)
            fn = {
                "start": segmentation.trim_chars_start,
                "end": segmentation.trim_chars_end,
                "both": segmentation.trim_chars,
            }[args.side]
            return fn(args.text, chars)
        fn = {
            "start": segmentation.trim_start,
            "end": segmentation.trim_end,
            "both": segmentation.trim,
        }[args.side]
        return fn(args.text, args.patterns, mode)

    if args.mode:
        prof["comparison"] = mode
    return parse_arguments(args.text, prof)


def main(argv=None):
    """CLI demo: run one segmentation operation and print the result as JSON."""
    args = _build_parser().parse_args(argv)
    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(levelname)s %(name)s: %(message)s")

    try:
        result = _run(args)
    except _LIBRARY_ERRORS as e:
        print(f"❌ Error: {message_stack(e, delimiter=': ')}", file=sys.stderr)
        return 1

    print(json.dumps(result, indent=2, ensure_ascii=False))
    return 0


if __name__ == "__main__":
    sys.exit(main())
