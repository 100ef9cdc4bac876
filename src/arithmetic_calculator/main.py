"""
Command-line entry point.

Usage:
- ``arithmetic-calculator`` starts an interactive session on stdin/stdout
- ``arithmetic-calculator FILE`` evaluates every line of FILE (text or archive)
  and writes the results next to it
"""

import argparse
from typing import List, Literal, Optional

from pydantic import BaseModel, FilePath, ValidationError

from arithmetic_calculator.batch.runner import BatchRunner, build_output_path
from arithmetic_calculator.common.logger import configure_logging, logger
from arithmetic_calculator.session.session import CalculatorSession

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : Optional[FilePath]
        Path to the file containing arithmetic operations; None for interactive mode.
    log_level : LogLevel
        Logging level name.
    """

    file_path: Optional[FilePath] = None
    log_level: LogLevel = "WARNING"


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param Optional[List[str]] argv: Arguments to parse (default: sys.argv[1:])

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        description="Arithmetic expression calculator (+ - * / ^ %, parentheses, unary signs)"
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        default=None,
        help="File (.txt, .zip, .tar.xz, .7z) with one expression per line; omit for interactive mode",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR, CRITICAL)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(file_path=args.file_path, log_level=args.log_level)
    except ValidationError as exc:
        parser.error(str(exc))


def main(argv: Optional[List[str]] = None) -> None:
    """
    Main function of the ``arithmetic-calculator`` command.
    """
    cli_args = parse_args(argv)
    configure_logging(cli_args.log_level)

    if cli_args.file_path is None:
        CalculatorSession().run()
        return

    output_path = build_output_path(cli_args.file_path)
    runner = BatchRunner(input_file=cli_args.file_path, output_file=output_path)
    try:
        runner.run()
    except ValueError as exc:
        logger.error(f"📄❌ Could not read {cli_args.file_path}: {exc}")
        raise SystemExit(1) from exc
    print(output_path)


if __name__ == "__main__":
    main()
