"""
Command line entrypoint.

This script either:
- Evaluates a single expression given with -e and prints the result
- Evaluates every line of an operations file (plain text or archive)
  in worker processes and writes the results next to it
"""

import argparse
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field, FilePath, ValidationError, model_validator

from infix_interpreter.batch.loader import load_expressions
from infix_interpreter.batch.runner import BatchEvaluator
from infix_interpreter.common.errors import InterpreterError
from infix_interpreter.common.interpreter import interpret
from infix_interpreter.common.logger import logger, set_log_level


class CliArgs(BaseModel):
    """
    Pydantic model used to validate CLI arguments.

    Attributes
    ----------
    file_path : FilePath, optional
        Path to the file containing arithmetic operations.
    expression : str, optional
        Single expression to evaluate instead of a file.
    output : Path, optional
        Where to write results, derived from file_path when omitted.
    workers : int, optional
        Maximum number of simultaneous worker processes.
    log_level : str
        Level of the package logger.
    """

    file_path: Optional[FilePath] = None
    expression: Optional[str] = None
    output: Optional[Path] = None
    workers: Optional[int] = Field(default=None, ge=1)
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"

    @model_validator(mode="after")
    def exactly_one_source(self) -> "CliArgs":
        """Ensure that either a file or an expression is given, not both."""
        if (self.file_path is None) == (self.expression is None):
            raise ValueError("Provide either an operations file or an expression (-e)")
        return self


def parse_args(argv: Optional[List[str]] = None) -> CliArgs:
    """
    Parse and validate command-line arguments.

    :param argv: Arguments to parse, sys.argv[1:] when None

    :return: Validated CLI arguments
    :rtype: CliArgs
    """
    parser = argparse.ArgumentParser(
        prog="infix-interpreter",
        description="Evaluate infix arithmetic expressions",
    )

    parser.add_argument(
        "file_path",
        nargs="?",
        help="Path to the file containing arithmetic operations (.txt, .zip, .tar.xz or .7z)",
    )
    parser.add_argument("-e", "--expression", help="Evaluate a single expression and print the result")
    parser.add_argument("-o", "--output", help="Path of the results file")
    parser.add_argument("-w", "--workers", type=int, help="Maximum number of worker processes")
    parser.add_argument(
        "--log-level",
        default="INFO",
        type=str.upper,
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )

    args = parser.parse_args(argv)

    try:
        return CliArgs(
            file_path=args.file_path,
            expression=args.expression,
            output=args.output,
            workers=args.workers,
            log_level=args.log_level,
        )
    except ValidationError as exc:
        parser.error(str(exc))


def build_output_path(input_path: Path) -> Path:
    """
    Construct a safe output file path based on the input file.

    - Preserves the original folder
    - Replaces dots in extensions with underscores
    - Appends '_results.txt' at the end

    Examples
    --------
    input: resources/operations_short.7z
    output: resources/operations_short_7z_results.txt

    input: resources/operations.tar.xz
    output: resources/operations_tar_xz_results.txt

    :param input_path: Path to the input file
    :return: Path to the output file
    """
    suffix_safe = "".join(input_path.suffixes).replace(".", "_")
    stem = input_path.name[: len(input_path.name) - len("".join(input_path.suffixes))]
    return input_path.with_name(f"{stem}{suffix_safe}_results.txt")


def main(argv: Optional[List[str]] = None) -> int:
    """
    Main function executed by the infix-interpreter console script.

    :return: Process exit code, 1 when an expression could not be evaluated
    """
    cli_args = parse_args(argv)
    set_log_level(cli_args.log_level)

    if cli_args.expression is not None:
        try:
            print(interpret(cli_args.expression))
        except InterpreterError as exc:
            logger.error(f"❌ Could not evaluate {cli_args.expression!r}: {exc}")
            return 1
        return 0

    input_path: Path = Path(cli_args.file_path)
    output_path: Path = cli_args.output or build_output_path(input_path)

    expressions = load_expressions(input_path)
    evaluator = BatchEvaluator(output_file=output_path, max_workers=cli_args.workers)
    results = evaluator.run(expressions)
    return 0 if all(outcome.ok for outcome in results) else 1


if __name__ == "__main__":
    raise SystemExit(main())
