"""Command line interface for managing locale files."""

from __future__ import annotations

import argparse
import sys
import typing as t
from typing import Self

from localeasy import __version__
from localeasy.batch import (
    AddOutcome,
    AddSummary,
    ConfirmCallback,
    OutcomeStatus,
    SortResult,
    SortSummary,
    add_to_files,
    delete_from_file,
    init_locales,
    sort_target,
)
from localeasy.config import load_config
from localeasy.errors import KeyExistsError, LocaleasyError, ValidationError
from localeasy.utils import LOG_LEVELS, configure_logging
from localeasy.validation import (
    ERR_INVALID_DIRECTORY,
    ERR_INVALID_FILE,
    ERR_INVALID_KEY,
    ERR_INVALID_VALUE,
    parse_languages,
    validate_directory_path,
    validate_file_path,
    validate_key,
    validate_value,
)

_Handler = t.Callable[[argparse.Namespace, ConfirmCallback], int]

_CONFIRM_PROMPT = "Are you sure you want to delete this entry? (y/N): "


class CliError(LocaleasyError):
    """Raised when command line options are missing or contradictory."""

    @classmethod
    def unsupported_command(cls, command: str) -> Self:
        return cls(f"unsupported command: {command}")

    @classmethod
    def missing_option(cls, option: str) -> Self:
        return cls(f"{option} is required")

    @classmethod
    def directory_required_for_all(cls) -> Self:
        return cls("Directory is required when using --all option")

    @classmethod
    def file_required(cls) -> Self:
        return cls("File is required when not using --all option")

    @classmethod
    def conflicting_targets(cls) -> Self:
        return cls("Please specify either --file or --directory, not both")

    @classmethod
    def missing_target(cls) -> Self:
        return cls("Please specify either --file or --directory")


def main(
    argv: t.Sequence[str] | None = None,
    *,
    confirm: ConfirmCallback | None = None,
) -> int:
    """Parse *argv* and dispatch the requested command.

    ``confirm`` replaces the interactive prompt used by ``delete``.
    """
    cfg = load_config()
    parser = _create_parser(cfg)
    try:
        args = parser.parse_args(argv)
    except SystemExit as exc:
        code = exc.code
        return code if isinstance(code, int) else 1

    configure_logging(args.log_level or cfg["log_level"])
    try:
        handler = _resolve_handler(args.command)
        return handler(args, confirm or _prompt_confirmation)
    except (LocaleasyError, OSError) as exc:
        _write_line(sys.stderr, f"Error: {exc}")
        return 1


def _resolve_handler(command: str) -> _Handler:
    handlers: dict[str, _Handler] = {
        "init": _handle_init,
        "add": _handle_add,
        "delete": _handle_delete,
        "sort": _handle_sort,
    }
    try:
        return handlers[command]
    except KeyError as exc:
        raise CliError.unsupported_command(command) from exc


def _create_parser(cfg: t.Mapping[str, t.Any]) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="localeasy",
        description="A CLI tool for managing localization files.",
    )
    parser.add_argument(
        "--version", action="version", version=f"%(prog)s {__version__}"
    )
    parser.add_argument(
        "--log-level",
        type=str.upper,
        choices=LOG_LEVELS,
        help="Logging verbosity (defaults to the configured level).",
    )
    subparsers = parser.add_subparsers(dest="command", required=True)

    init_parser = subparsers.add_parser(
        "init",
        help="Initialize a new locale project.",
    )
    init_parser.add_argument(
        "-d",
        "--directory",
        default=cfg["init_directory"],
        help="Directory to initialize the project in.",
    )
    init_parser.add_argument(
        "-l",
        "--languages",
        default=cfg["init_languages"],
        help="Comma-separated list of languages to create.",
    )

    add_parser = subparsers.add_parser(
        "add",
        help="Add a new translation entry.",
    )
    add_parser.add_argument("-f", "--file", help="Path to the locale file.")
    add_parser.add_argument(
        "-d", "--directory", help="Directory containing locale files."
    )
    add_parser.add_argument("-k", "--key", help="Translation key.")
    add_parser.add_argument("-v", "--value", help="Translation value.")
    add_parser.add_argument(
        "--all",
        action="store_true",
        help="Add the key to all locale files in the directory.",
    )
    add_parser.add_argument(
        "--force", action="store_true", help="Overwrite an existing key."
    )

    delete_parser = subparsers.add_parser(
        "delete",
        help="Delete a translation entry.",
    )
    delete_parser.add_argument("-f", "--file", help="Path to the locale file.")
    delete_parser.add_argument("-k", "--key", help="Translation key to delete.")
    delete_parser.add_argument(
        "--force", action="store_true", help="Delete without confirmation."
    )

    sort_parser = subparsers.add_parser(
        "sort",
        help="Sort translation entries in locale files.",
    )
    sort_parser.add_argument("-f", "--file", help="Path to the locale file to sort.")
    sort_parser.add_argument(
        "-d", "--directory", help="Directory containing locale files to sort."
    )
    sort_parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Show what would be sorted without making changes.",
    )

    return parser


def _require_key(args: argparse.Namespace) -> str:
    if args.key is None:
        raise CliError.missing_option("--key")
    if not validate_key(args.key):
        raise ValidationError(ERR_INVALID_KEY)
    return args.key


def _require_file(args: argparse.Namespace) -> str:
    if not args.file:
        raise CliError.file_required()
    if not validate_file_path(args.file):
        raise ValidationError(ERR_INVALID_FILE)
    return args.file


def _require_directory(path: str) -> str:
    if not validate_directory_path(path):
        raise ValidationError(ERR_INVALID_DIRECTORY)
    return path


def _handle_init(args: argparse.Namespace, _confirm: ConfirmCallback) -> int:
    directory = _require_directory(args.directory)
    result = init_locales(directory, parse_languages(args.languages))
    lines: list[str] = []
    if result.created_directory:
        lines.append(f"Created directory: {result.directory}")
    lines.extend(f"Created locale file: {path}" for path in result.files)
    lines.append(f"Successfully initialized locale project in {result.directory}")
    lines.append(f"Created files for languages: {', '.join(result.languages)}")
    _write_lines(sys.stdout, lines)
    return 0


def _handle_add(args: argparse.Namespace, _confirm: ConfirmCallback) -> int:
    key = _require_key(args)
    if args.value is None:
        raise CliError.missing_option("--value")
    if not validate_value(args.value):
        raise ValidationError(ERR_INVALID_VALUE)

    if args.all:
        if not args.directory:
            raise CliError.directory_required_for_all()
        target = _require_directory(args.directory)
    else:
        target = _require_file(args)

    summary = add_to_files(target, key, args.value, force=args.force)
    if summary.batch_mode:
        return _render_batch_add(target, summary)
    return _render_single_add(summary.outcomes[0])


def _render_single_add(outcome: AddOutcome) -> int:
    if outcome.status is OutcomeStatus.CONFLICT:
        raise KeyExistsError.for_key(outcome.key, outcome.existing)
    if outcome.status is OutcomeStatus.FAILED:
        _write_line(sys.stderr, f"Error processing {outcome.path}: {outcome.error}")
        return 1
    lines: list[str] = []
    if outcome.created:
        lines.append(f"Created new locale file: {outcome.path}")
    lines.extend(
        [
            "Added translation entry:",
            f"   Key: {outcome.key}",
            f"   Value: {outcome.value}",
            f"   File: {outcome.path}",
        ]
    )
    _write_lines(sys.stdout, lines)
    return 0


def _render_batch_add(directory: str, summary: AddSummary) -> int:
    if not summary.outcomes:
        _write_line(sys.stdout, f"No locale files found in directory: {directory}")
    else:
        _write_line(
            sys.stdout, f"Found {len(summary.outcomes)} locale files in {directory}"
        )
    for outcome in summary.outcomes:
        if outcome.status is OutcomeStatus.ADDED:
            if outcome.created:
                _write_line(sys.stdout, f"Created new locale file: {outcome.path}")
            _write_line(sys.stdout, f"Added to {outcome.path}")
        elif outcome.status is OutcomeStatus.SKIPPED:
            _write_line(
                sys.stdout,
                f"Key '{outcome.key}' already exists in {outcome.path} "
                f"with value: '{outcome.existing}'",
            )
        else:
            _write_line(
                sys.stderr, f"Error processing {outcome.path}: {outcome.error}"
            )

    lines = [
        "",
        "Summary:",
        f"  Files processed: {summary.processed}",
        f"  Keys added: {summary.added}",
        f"  Keys skipped (already exist): {summary.skipped}",
    ]
    if summary.failed:
        lines.append(f"  Files failed: {summary.failed}")
    if summary.created:
        lines.append(f"  New files created: {summary.created}")
    _write_lines(sys.stdout, lines)
    return 1 if summary.failed else 0


def _handle_delete(args: argparse.Namespace, confirm: ConfirmCallback) -> int:
    key = _require_key(args)
    if not args.file:
        raise CliError.missing_option("--file")
    path = _require_file(args)
    outcome = delete_from_file(
        path, key, confirm=_with_preview(_confirmed if args.force else confirm)
    )
    _write_lines(
        sys.stdout,
        [
            f"Successfully deleted translation entry: {outcome.key}",
            f"Updated file: {outcome.path}",
        ],
    )
    return 0


def _with_preview(confirm: ConfirmCallback) -> ConfirmCallback:
    def _ask(key: str, value: str) -> bool:
        _write_lines(
            sys.stdout,
            ["Found translation entry:", f"   Key: {key}", f"   Value: {value}"],
        )
        return confirm(key, value)

    return _ask


def _confirmed(_key: str, _value: str) -> bool:
    return True


def _prompt_confirmation(_key: str, _value: str) -> bool:
    try:
        answer = input(_CONFIRM_PROMPT)
    except EOFError:
        return False
    return answer.strip().lower() in {"y", "yes"}


def _handle_sort(args: argparse.Namespace, _confirm: ConfirmCallback) -> int:
    if args.file and args.directory:
        raise CliError.conflicting_targets()
    if not args.file and not args.directory:
        raise CliError.missing_target()
    target = _require_file(args) if args.file else _require_directory(args.directory)

    summary = sort_target(target, dry_run=args.dry_run)
    if summary.batch_mode:
        return _render_batch_sort(target, summary)
    return _render_single_sort(summary.results[0], dry_run=args.dry_run)


def _render_single_sort(result: SortResult, *, dry_run: bool) -> int:
    if not result.changed:
        _write_line(sys.stdout, f"File {result.path} is already sorted")
        return 0
    if dry_run:
        lines = [f"Dry run - would sort {result.path}:", "Current order:"]
        lines.extend(_numbered(result.before))
        lines.extend(["", "Sorted order:"])
        lines.extend(_numbered(result.after))
        _write_lines(sys.stdout, lines)
        return 0
    _write_lines(
        sys.stdout,
        [
            f"Successfully sorted {result.path}",
            f"Sorted {len(result.after)} translation entries",
        ],
    )
    return 0


def _render_batch_sort(directory: str, summary: SortSummary) -> int:
    if not summary.results:
        _write_line(sys.stdout, f"No locale files found in directory: {directory}")
        return 0
    _write_line(sys.stdout, f"Found {len(summary.results)} locale files in {directory}")
    for result in summary.results:
        if result.failed:
            _write_line(sys.stderr, f"Error processing {result.path}: {result.error}")
        elif not result.changed:
            if summary.dry_run:
                _write_line(sys.stdout, f"{result.path} - already sorted")
        elif summary.dry_run:
            _write_line(sys.stdout, f"{result.path} - would be sorted")
        else:
            _write_line(sys.stdout, f"Sorted {result.path}")

    label = "Files that would be sorted" if summary.dry_run else "Files sorted"
    lines = [
        "",
        "Summary:",
        f"  {label}: {summary.changed}",
        f"  Files already sorted: {summary.unchanged}",
    ]
    if summary.failed:
        lines.append(f"  Files failed: {summary.failed}")
    _write_lines(sys.stdout, lines)
    return 1 if summary.failed else 0


def _numbered(keys: t.Iterable[str]) -> list[str]:
    return [f"  {index}. {key}" for index, key in enumerate(keys, start=1)]


def _write_line(stream: t.TextIO, text: str) -> None:
    stream.write(f"{text}\n")


def _write_lines(stream: t.TextIO, lines: t.Iterable[str]) -> None:
    collected = list(lines)
    if not collected:
        return
    stream.write("\n".join(collected) + "\n")


__all__ = ["CliError", "main"]
