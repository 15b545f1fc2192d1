# -*- coding: Utf-8 -*-
# Copyright (c) 2021-2022, Francis Clairicia-Rose-Claire-Josephine
#
#
"""resourceio command line interface"""

from __future__ import annotations

__all__ = ["COMMANDS", "configure_logging", "main"]

import logging
import sys
from argparse import SUPPRESS, ArgumentDefaultsHelpFormatter, ArgumentParser
from types import MappingProxyType
from typing import BinaryIO

from ..environ.config import DEFAULT_LOG_LEVEL, LOG_LEVEL_ENV, LOG_LEVELS, get_log_level
from ..resources.exceptions import ResourceNotFoundError
from .commands import AbstractCommand, CatCommand, InfoCommand

COMMANDS: MappingProxyType[str, type[AbstractCommand]] = MappingProxyType(
    {
        "cat": CatCommand,
        "info": InfoCommand,
    }
)

logger = logging.getLogger(__name__)


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=level,
        format="%(levelname)s:%(name)s: %(message)s",
        stream=sys.stderr,
        force=True,
    )


def main(args: list[str] | None = None, *, stdout: BinaryIO | None = None) -> int:
    parser = ArgumentParser(prog="resourceio", formatter_class=ArgumentDefaultsHelpFormatter)

    parser.add_argument(
        "--log-level",
        dest="log_level",
        type=str.upper,
        choices=LOG_LEVELS,
        default=SUPPRESS,
        help=f"logging level of the diagnostics written to stderr (default: {LOG_LEVEL_ENV} or {DEFAULT_LOG_LEVEL})",
    )

    commands_subparser = parser.add_subparsers(
        title="commands",
        dest="command",
        required=True,
    )

    for command_name, command_handler in COMMANDS.items():
        command_handler.register_to_parser(
            commands_subparser.add_parser(
                command_name,
                formatter_class=ArgumentDefaultsHelpFormatter,
                **command_handler.get_parser_kwargs(),
            )
        )

    parsed_args = parser.parse_args(args)

    if "log_level" not in parsed_args:
        try:
            parsed_args.log_level = get_log_level()
        except ValueError as exc:
            parser.error(str(exc))

    configure_logging(parsed_args.log_level)

    command: AbstractCommand = COMMANDS[parsed_args.command](stdout)

    try:
        return command.run(parsed_args)
    except ResourceNotFoundError as exc:
        logger.error("%s", exc)
        return 1
