"""CLI for tokenizing and parsing article-language programs."""

from __future__ import annotations

import argparse
import sys
from typing import Sequence

from scripts.articles import ParseException, ParserManager, ParserManagerConfig, ProgramFormatter, Token

STDIN_INPUT = "-"


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Parse an article-language program and print its syntax tree."
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=STDIN_INPUT,
        help="Path to a program file, or '-' to read standard input (default).",
    )
    parser.add_argument(
        "--tokens",
        action="store_true",
        help="Print the token stream before the syntax tree.",
    )
    parser.add_argument(
        "--indent",
        default="  ",
        help="Indentation characters to use (default: two spaces).",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log tokenizer and parser activity to stderr.",
    )
    return parser.parse_args(argv)


def load_program(source: str, config: ParserManagerConfig) -> ParserManager:
    if source == STDIN_INPUT:
        return ParserManager(sys.stdin.read(), config=config)
    return ParserManager.from_path(source, config=config)


def format_token(token: Token) -> str:
    return f"{token.type.name} {token.value}"


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    config: ParserManagerConfig = {
        "tokenizer_config": {"enable_logger": args.verbose},
        "parser_config": {"enable_logger": args.verbose},
    }
    try:
        manager = load_program(args.input, config)
    except OSError as exc:
        raise SystemExit(f"Failed to read {args.input}: {exc}") from exc
    except ParseException as exc:
        raise SystemExit(f"Failed to parse {args.input}: {exc}") from exc
    if args.tokens:
        for token in manager.tokens:
            print(format_token(token))
        print()
    print(ProgramFormatter(indent=args.indent).format(manager.program))


if __name__ == "__main__":
    main()
