#!/usr/bin/env python3
"""Command line entry point for the vote service."""

from __future__ import annotations

import argparse
import asyncio
import json
import logging
import logging.config
import sys
from collections.abc import Awaitable, Callable, Sequence
from pathlib import Path
from typing import TYPE_CHECKING

from vote_service.domain.shared.messages import LogTemplates
from vote_service.domain.voting.errors import VotingError
from vote_service.utils.logging import DEFAULT_DATEFMT, DEFAULT_FORMAT

if TYPE_CHECKING:
    from vote_service.config.container import Container

_LOGGING_CONFIG_PATH = Path(__file__).resolve().parents[2] / "logging_config.json"

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_REFUSED = 2

logger = logging.getLogger(__name__)


def setup_logging(log_level: str = "INFO") -> None:
    resolved_level = getattr(logging, log_level.upper(), logging.INFO)

    try:
        with open(_LOGGING_CONFIG_PATH) as f:
            config = json.load(f)
        logging.config.dictConfig(config)
    except (FileNotFoundError, json.JSONDecodeError, ValueError):
        logging.basicConfig(level=resolved_level, format=DEFAULT_FORMAT, datefmt=DEFAULT_DATEFMT)
        logging.warning("Could not load %s, falling back to basic config", _LOGGING_CONFIG_PATH)

    logging.getLogger().setLevel(resolved_level)


def _parse_choice(value: str) -> bool:
    lowered = value.strip().lower()
    if lowered in {"yes", "y", "true", "sim", "s"}:
        return True
    if lowered in {"no", "n", "false", "nao", "não"}:
        return False
    raise argparse.ArgumentTypeError(f"expected yes or no, got {value!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="vote-service",
        description="Create topic votings, open sessions, cast votes and read results.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    p_topic = sub.add_parser("create-topic", help="Create a topic voting")
    p_topic.add_argument("description")

    p_open = sub.add_parser("open-session", help="Open a voting session on a topic")
    p_open.add_argument("topic_id", type=int)
    p_open.add_argument("--minutes", type=int, default=None, help="Session length")

    p_vote = sub.add_parser("vote", help="Cast a yes/no vote")
    p_vote.add_argument("topic_id", type=int)
    p_vote.add_argument("document")
    p_vote.add_argument("choice", type=_parse_choice, help="yes or no")

    p_result = sub.add_parser("result", help="Show the yes/no tally of a topic")
    p_result.add_argument("topic_id", type=int)

    return parser


async def _create_topic(container: Container, args: argparse.Namespace) -> str:
    topic = await container.topic_voting_service.create(args.description)
    return f"Created topic voting {topic.id}: {topic.description}"


async def _open_session(container: Container, args: argparse.Namespace) -> str:
    from vote_service.application.dtos import OpenSessionRequest
    from vote_service.domain.shared.datetime_utils import UtcDateTime

    session = await container.session_service.open_session(
        OpenSessionRequest(topic_voting_id=args.topic_id, duration_minutes=args.minutes)
    )
    return (
        f"Session open on topic voting {session.topic_voting_id} "
        f"until {UtcDateTime(session.ends_at).human_utc}"
    )


async def _vote(container: Container, args: argparse.Namespace) -> str:
    from vote_service.application.dtos import VoteRequest

    result = await container.vote_service.cast_vote(
        VoteRequest(topic_voting_id=args.topic_id, document=args.document, choice=args.choice)
    )
    return f"Vote recorded: {'yes' if result.choice else 'no'}"


async def _result(container: Container, args: argparse.Namespace) -> str:
    from vote_service.application.dtos import VoteRequest

    result = await container.vote_service.get_result(VoteRequest.for_result(args.topic_id))
    return (
        f"{result.description}: yes={result.yes_count} no={result.no_count} "
        f"total={result.total}"
    )


COMMANDS: dict[str, Callable[[Container, argparse.Namespace], Awaitable[str]]] = {
    "create-topic": _create_topic,
    "open-session": _open_session,
    "vote": _vote,
    "result": _result,
}


async def run_command(container: Container, args: argparse.Namespace) -> str:
    await container.initialize()
    try:
        return await COMMANDS[args.command](container, args)
    finally:
        await container.shutdown()


def main(argv: Sequence[str] | None = None) -> int:
    from vote_service.config.container import create_container
    from vote_service.config.settings import get_settings

    args = build_parser().parse_args(argv)

    settings = get_settings()
    setup_logging(settings.log_level)
    logger.info(LogTemplates.APP_STARTING.format(environment=settings.environment))

    container = create_container(settings)
    try:
        output = asyncio.run(run_command(container, args))
    except VotingError as e:
        print(e.message, file=sys.stderr)
        return EXIT_REFUSED
    except Exception as e:
        logger.exception(LogTemplates.APP_COMMAND_FAILED, args.command, e)
        return EXIT_FAILURE

    print(output)
    return EXIT_OK


def cli() -> None:
    """Console script entry point (used by pyproject.toml [project.scripts])."""
    sys.exit(main())


if __name__ == "__main__":
    cli()  # pragma: no cover
