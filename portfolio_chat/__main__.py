"""Ask the portfolio assistant a question from the terminal.

Usage:
    python -m portfolio_chat "What AI projects have you built?"
    python -m portfolio_chat --suggestions
    python -m portfolio_chat --offline "Why should I hire you?"
"""

import argparse
import asyncio
import sys
from typing import List, Optional

from portfolio_chat._logging import LOG_LEVELS, configure_logging, get_logger
from portfolio_chat.config import Settings, build_resolver
from portfolio_chat.prompts import get_suggested_questions


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="portfolio_chat", description=__doc__.splitlines()[0])
    parser.add_argument("question", nargs="*", help="Question to ask")
    parser.add_argument("--suggestions", action="store_true", help="List suggested questions and exit")
    parser.add_argument("--offline", action="store_true", help="Use rule-based answers only")
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Log level (default: WARNING)",
    )
    return parser


async def ask(question: str, settings: Settings) -> int:
    resolver = build_resolver(settings, log=get_logger())
    await resolver.initialize()
    result = await resolver.resolve(question)
    print(result.message)
    return 0 if result.success else 1


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.log_level)

    if args.suggestions:
        for question in get_suggested_questions():
            print(question)
        return 0

    if not args.question:
        print("error: a question is required (or use --suggestions)", file=sys.stderr)
        return 2

    try:
        settings = Settings.from_env()
    except ValueError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2
    if args.offline:
        settings.test_mode = True
    return asyncio.run(ask(" ".join(args.question), settings))


if __name__ == "__main__":
    sys.exit(main())
