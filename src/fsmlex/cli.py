"""Command-line interface for fsmlex."""

from __future__ import annotations

import argparse
import sys
import tomllib
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from fsmlex.errors import EndOfInput, InternalStateError, LexError
from fsmlex.lexer import Lexer
from fsmlex.tokens import Token, TokenType, build_keywords, is_digit, is_ident_char

DEFAULT_INPUT = "input_scode.txt"
CONFIG_NAME = "fsmlex.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    keywords: Mapping[str, TokenType]
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="fsmlex",
        description="Finite-state lexical analyzer",
    )
    p.add_argument(
        "input",
        nargs="?",
        default=None,
        help=f"Source file (default: config 'input' or {DEFAULT_INPUT})",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "-k",
        "--keyword",
        action="append",
        default=[],
        metavar="WORD",
        help="Extra keyword (repeatable)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump token spans to stderr")
    return p


def parse_keyword_arg(s: str) -> str:
    """Validate a keyword: it must be a lexeme the lexer can finalize as an identifier."""
    if not s:
        raise argparse.ArgumentTypeError("invalid keyword: empty")
    if is_digit(s[0]) or not all(is_ident_char(ch) or is_digit(ch) for ch in s):
        raise argparse.ArgumentTypeError(f"invalid keyword (not an identifier): {s!r}")
    return s


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else search_dir / CONFIG_NAME

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        return tomllib.load(f)


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    # Input: config < CLI
    input_name = DEFAULT_INPUT
    cfg_input = config.get("input")
    if isinstance(cfg_input, str):
        input_name = cfg_input
    if args.input is not None:
        input_name = args.input

    # Output: config < CLI
    output_file: Path | None = None
    cfg_output = config.get("output")
    if isinstance(cfg_output, str):
        output_file = Path(cfg_output)
    if args.output:
        output_file = Path(args.output)

    # Extra keywords: config + CLI
    extra: list[str] = []
    cfg_keywords = config.get("keywords")
    if isinstance(cfg_keywords, dict):
        cfg_extra = cfg_keywords.get("extra")
        if isinstance(cfg_extra, list):
            extra.extend(parse_keyword_arg(str(w)) for w in cfg_extra)
    extra.extend(parse_keyword_arg(w) for w in args.keyword)

    return CliOptions(
        input_file=Path(input_name),
        output_file=output_file,
        keywords=build_keywords(extra),
        debug=args.debug,
    )


def lex_file(options: CliOptions) -> tuple[list[Token], LexError]:
    """Scan the input file until a terminal signal.

    Returns the tokens scanned so far and the error that stopped the scan,
    which is EndOfInput when the whole file lexed cleanly.
    """
    source = options.input_file.read_text(encoding="utf-8")
    lexer = Lexer(source, options.keywords)
    tokens: list[Token] = []
    while True:
        try:
            tokens.append(lexer.scan_one())
        except LexError as exc:
            return tokens, exc


def _write_output(text: str, options: CliOptions) -> None:
    if options.output_file:
        options.output_file.write_text(text, encoding="utf-8")
    else:
        sys.stdout.write(text)
        sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    from fsmlex.debug import dump_tokens
    from fsmlex.render import render_tokens

    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except (argparse.ArgumentTypeError, tomllib.TOMLDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        tokens, stop = lex_file(options)
    except OSError as exc:
        print(f"error: cannot read {options.input_file}: {exc.strerror}", file=sys.stderr)
        return 2
    except UnicodeDecodeError as exc:
        print(f"error: cannot read {options.input_file}: {exc.reason}", file=sys.stderr)
        return 2

    # The valid prefix is written even when the scan stopped on an error
    try:
        _write_output(render_tokens(tokens), options)
    except OSError as exc:
        target = options.output_file or "stdout"
        print(f"error: cannot write {target}: {exc.strerror}", file=sys.stderr)
        return 2

    if options.debug:
        dump_tokens(tokens)

    filename = str(options.input_file)
    if isinstance(stop, EndOfInput):
        return 0
    if isinstance(stop, InternalStateError):
        print(f"internal error ({stop.kind}):", file=sys.stderr)
        print(stop.format(filename), file=sys.stderr)
        return 2
    print(stop.format(filename), file=sys.stderr)
    return 1
