"""CLI entry point for the React named-imports codemod."""
import argparse
import json
import logging
import sys
import traceback
from pathlib import Path

from dotenv import load_dotenv
from pydantic import ValidationError

from react_named_imports.config import CodemodSettings, load_settings
from react_named_imports.models import FileStatus, RunReport, TransformOptions
from react_named_imports.runner.exceptions import RunnerError
from react_named_imports.transform.exceptions import CodemodError

load_dotenv()

# Exit codes
EXIT_SUCCESS = 0
EXIT_INVALID_INPUT = 1
EXIT_TRANSFORM_ERROR = 2
EXIT_UNEXPECTED = 5
EXIT_KEYBOARD_INTERRUPT = 130

DEFAULT_STDIN_LANGUAGE = "tsx"


def build_parser() -> argparse.ArgumentParser:
    """Build and return the argument parser."""
    parser = argparse.ArgumentParser(
        prog="react-named-imports",
        description=(
            "Rewrite React.X references into named imports from 'react' "
            "across JS/TS/JSX/TSX sources"
        ),
    )
    parser.add_argument("paths", nargs="*", help="Files or directories to transform")
    parser.add_argument(
        "--dry-run", action="store_true", help="Do not write files; report what would change"
    )
    parser.add_argument(
        "--print", dest="print_output", action="store_true",
        help="Print transformed sources to stdout",
    )
    parser.add_argument(
        "--diff", action="store_true", help="Print a unified diff for every modified file"
    )
    parser.add_argument(
        "--stdin", action="store_true",
        help="Read one source unit from stdin and write the result to stdout",
    )
    parser.add_argument(
        "--stdin-language",
        type=str,
        default=DEFAULT_STDIN_LANGUAGE,
        choices=("javascript", "typescript", "tsx"),
        help=f"Grammar used for --stdin input (default: {DEFAULT_STDIN_LANGUAGE})",
    )
    parser.add_argument(
        "--extensions",
        type=str,
        default=None,
        help="Comma-separated file extensions to pick up (for example: .ts,.tsx)",
    )
    parser.add_argument(
        "--ignore",
        action="append",
        default=None,
        help="Directory or file name to skip while walking (repeatable)",
    )
    parser.add_argument(
        "--workers", type=int, default=None, help="Number of files processed concurrently"
    )
    parser.add_argument(
        "--namespace", type=str, default=None, help="Qualifying identifier (default: React)"
    )
    parser.add_argument(
        "--module", type=str, default=None, help="Module imported from (default: react)"
    )
    parser.add_argument(
        "--quote",
        type=str,
        default=None,
        choices=("single", "double"),
        help="Quote style for synthesized imports (default: detect)",
    )
    parser.add_argument(
        "--semicolons",
        action=argparse.BooleanOptionalAction,
        default=None,
        help="Terminate synthesized imports with ';' (default: detect)",
    )
    parser.add_argument(
        "--output-json", action="store_true", help="Output the run report as JSON"
    )
    parser.add_argument("--verbose", action="store_true", help="Enable verbose output")
    return parser


def resolve_settings(args: argparse.Namespace, settings: CodemodSettings) -> CodemodSettings:
    """Overlay CLI flags on top of environment settings."""
    overrides: dict[str, object] = {}
    for key in ("namespace", "module", "quote", "semicolons", "workers"):
        value = getattr(args, key)
        if value is not None:
            overrides[key] = value
    if args.extensions:
        overrides["extensions"] = [e.strip() for e in args.extensions.split(",") if e.strip()]
    if args.ignore:
        overrides["exclude_patterns"] = list(settings.exclude_patterns) + list(args.ignore)
    return CodemodSettings(**{**settings.model_dump(), **overrides})


def validate_paths(raw_paths: list[str]) -> list[str]:
    """Check that every path exists.

    Raises:
        SystemExit: If a path is missing.
    """
    for raw_path in raw_paths:
        if not Path(raw_path).exists():
            print(f"Error: '{raw_path}' does not exist.", file=sys.stderr)
            raise SystemExit(EXIT_INVALID_INPUT)
    return raw_paths


def configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def format_report_json(report: RunReport) -> str:
    """Serialize a run report, with the status counts up front."""
    payload = {"summary": report.summary(), **report.model_dump(mode="json")}
    return json.dumps(payload, indent=2, default=str)


def print_report_human(report: RunReport, verbose: bool = False) -> None:
    """Print results in human-readable format."""
    for result in report.files:
        if result.status == FileStatus.ERROR:
            print(f"ERR  {result.file_path}: {result.error}", file=sys.stderr)
        elif verbose or result.status == FileStatus.OK:
            label = {
                FileStatus.OK: "OK  ",
                FileStatus.UNMODIFIED: "NOC ",
                FileStatus.SKIPPED: "SKIP",
            }[result.status]
            print(f"{label} {result.file_path}")

    counts = report.summary()
    mode = " (dry run)" if report.dry_run else ""
    print(
        f"Results{mode}: {counts['error']} errors, {counts['unmodified']} unmodified, "
        f"{counts['skipped']} skipped, {counts['ok']} ok"
    )


def determine_exit_code(report: RunReport) -> int:
    return EXIT_TRANSFORM_ERROR if report.has_errors else EXIT_SUCCESS


def _handle_error(label: str, exc: BaseException, verbose: bool, exit_code: int) -> int:
    """Print error message to stderr and return the exit code."""
    print(f"{label}: {exc}", file=sys.stderr)
    if verbose:
        traceback.print_exc(file=sys.stderr)
    return exit_code


def run_stdin(language: str, options: TransformOptions, verbose: bool) -> int:
    """Transform a single unit from stdin; emit nothing on failure."""
    from react_named_imports.transform.pipeline import transform_source

    source = sys.stdin.read()
    try:
        result = transform_source(source, language, options, file_path="<stdin>")
    except CodemodError as exc:
        return _handle_error("Transform error", exc, verbose, EXIT_TRANSFORM_ERROR)
    sys.stdout.write(result.output)
    return EXIT_SUCCESS


def main(argv: list[str] | None = None) -> int:
    """Main CLI entry point.

    Args:
        argv: Command-line arguments (defaults to sys.argv[1:]).

    Returns:
        Exit code integer.
    """
    parser = build_parser()
    args = parser.parse_args(argv)
    configure_logging(args.verbose)

    try:
        settings = resolve_settings(args, load_settings())
    except (ValidationError, ValueError) as exc:
        return _handle_error("Invalid configuration", exc, args.verbose, EXIT_INVALID_INPUT)

    options = settings.transform_options()

    try:
        if args.stdin:
            return run_stdin(args.stdin_language, options, args.verbose)

        if not args.paths:
            print("Error: no paths given (or use --stdin).", file=sys.stderr)
            return EXIT_INVALID_INPUT
        try:
            paths = validate_paths(args.paths)
        except SystemExit as exc:
            return exc.code

        # Deferred so --help stays fast
        from react_named_imports.runner.batch_runner import BatchRunner

        runner = BatchRunner(
            options=options,
            extensions=settings.extensions,
            exclude_patterns=settings.exclude_patterns,
            workers=settings.workers,
            dry_run=args.dry_run,
            print_output=args.print_output,
            show_diff=args.diff,
        )
        report = runner.run(paths)

        if args.output_json:
            print(format_report_json(report))
        else:
            for result in report.files:
                if result.diff is not None and result.diff.diff_text:
                    print(result.diff.diff_text)
                if result.output is not None:
                    print(result.output, end="" if result.output.endswith("\n") else "\n")
            print_report_human(report, args.verbose)

        return determine_exit_code(report)

    except RunnerError as exc:
        return _handle_error("Runner error", exc, args.verbose, EXIT_INVALID_INPUT)

    except KeyboardInterrupt:
        print("\nInterrupted.", file=sys.stderr)
        return EXIT_KEYBOARD_INTERRUPT

    except Exception as exc:
        return _handle_error("Unexpected error", exc, args.verbose, EXIT_UNEXPECTED)


if __name__ == "__main__":
    sys.exit(main())
