#!/usr/bin/env python3
# run_proofer.py
# This file is part of Proofer - A Propositional Logic Proof Assistant
#
# Command-line interface for interactive proofs with configurable logging levels

import sys
import argparse
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from session import FAREWELL, WELCOME, ProofSession, SessionReply
from utils.logger import configure_logging, get_logger

PROMPT = "proofer> "


def read_script_file(filepath: Path) -> List[str]:
    """Read session commands from a file, one per line.

    Args:
        filepath: Path to the script file

    Returns:
        Lines of the script

    Raises:
        FileNotFoundError: If the script file doesn't exist
        ValueError: If the script file is empty or unreadable
    """
    try:
        with open(filepath, "r", encoding="utf-8") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise FileNotFoundError(f"Script file not found: {filepath}")
    except OSError as e:
        raise ValueError(f"Error reading script file: {e}")

    if not any(line.strip() for line in lines):
        raise ValueError("Script file is empty")

    return lines


def interactive_lines() -> Iterator[str]:
    """Yield lines typed at the prompt until end of input."""
    while True:
        try:
            yield input(PROMPT)
        except EOFError:
            return


def emit_reply(reply: SessionReply) -> None:
    """Send a session reply to the logger."""
    logger = get_logger()

    for message in reply.messages:
        logger.info(message)
    for error in reply.errors:
        logger.error(error)


def run_session(session: ProofSession, lines: Iterable[str]) -> int:
    """Feed input lines to the session until it finishes or input runs out.

    Args:
        session: Proof session receiving the input
        lines: Input lines

    Returns:
        Number of lines processed
    """
    logger = get_logger()

    for message in WELCOME:
        logger.info(message)

    processed = 0
    for line in lines:
        processed += 1
        reply = session.handle(line)
        emit_reply(reply)

        if reply.finished:
            break

    logger.info(FAREWELL)
    return processed


def create_argument_parser() -> argparse.ArgumentParser:
    """Create and configure argument parser for command line interface.

    Returns:
        Configured ArgumentParser instance
    """
    parser = argparse.ArgumentParser(
        description="Proofer - The Logic Engine",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  python run_proofer.py
  python run_proofer.py -s proof.txt
  python run_proofer.py --debug

Session:
  Enter premises one per line, type 'therefore' and enter the conclusion,
  then apply rules such as MP(1,2), Simp(3), Add(1) or DN(2,1.2).
  'facts' lists the statements, 'done' checks the conclusion.

Script file format:
  proof.txt:
    p -> q
    p
    therefore
    q
    MP(1,2)
    done
        """,
    )

    parser.add_argument(
        "-s", "--script", type=Path, help="Read session input from a file"
    )

    parser.add_argument(
        "-v", "--verbose", action="store_true", help="Enable verbose output"
    )

    parser.add_argument(
        "--debug", action="store_true", help="Enable debug output (overrides --verbose)"
    )

    parser.add_argument(
        "--verbose-rules",
        action="store_true",
        help="Show full rule names instead of abbreviations",
    )

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point for the proof assistant.

    Returns:
        Exit code (0 for success, non-zero for errors)
    """
    parser = create_argument_parser()
    args = parser.parse_args(argv)

    configure_logging(verbose=args.verbose, debug=args.debug)
    logger = get_logger()

    try:
        if args.script:
            lines: Iterable[str] = read_script_file(args.script)
            logger.debug(f"Running script: {args.script}")
        else:
            lines = interactive_lines()

        session = ProofSession(verbose_rules=args.verbose_rules)
        run_session(session, lines)
        return 0

    except (FileNotFoundError, ValueError) as e:
        logger.error(f"Script file error: {e}")
        return 3

    except KeyboardInterrupt:
        logger.error("Session interrupted by user")
        return 4

    except Exception as e:
        logger.error(f"Unexpected error: {e}")
        import traceback

        logger.debug(traceback.format_exc())
        return 5


if __name__ == "__main__":
    sys.exit(main())
