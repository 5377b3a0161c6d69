"""Apply locale mutations to a single file or to every file in a directory.

A target path is resolved into a list of locale files which are processed one
at a time in that order. Per-file failures in directory mode are recorded on
the returned outcome and never stop the remaining files; failures that make
the whole invocation meaningless (unknown path, unreadable directory) raise.
"""

from __future__ import annotations

import typing as t
from dataclasses import dataclass, field
from enum import StrEnum
from pathlib import Path

from localeasy import storage
from localeasy.codec import (
    LocaleData,
    find_locale_files,
    read_locale_file,
    write_locale_file,
)
from localeasy.errors import (
    KeyNotFoundError,
    LocaleasyError,
    LocaleWriteError,
    OperationCancelledError,
    PathNotFoundError,
    ValidationError,
)
from localeasy.mapping import (
    add_key,
    has_key,
    is_sorted,
    remove_key,
    seed_locale_data,
    sort_locale_data,
)
from localeasy.utils import logger
from localeasy.validation import (
    ERR_INVALID_DIRECTORY,
    ERR_INVALID_LANGUAGE,
    LOCALE_SUFFIX,
    validate_directory_path,
    validate_language,
)

ERR_NO_LANGUAGES = "At least one language code is required"

ConfirmCallback = t.Callable[[str, str], bool]


class OutcomeStatus(StrEnum):
    """Result of adding a key to one file."""

    ADDED = "added"
    SKIPPED = "skipped"
    FAILED = "failed"
    # single-file add of an existing key without force; aborts the command
    CONFLICT = "conflict"


@dataclass
class AddOutcome:
    """What happened to one file during an add."""

    path: Path
    status: OutcomeStatus
    key: str
    value: str
    created: bool = False
    existing: str | None = None
    error: str | None = None


@dataclass
class AddSummary:
    """Aggregated outcomes of :func:`add_to_files`."""

    outcomes: list[AddOutcome]
    batch_mode: bool

    def _count(self, status: OutcomeStatus) -> int:
        return sum(1 for outcome in self.outcomes if outcome.status is status)

    @property
    def added(self) -> int:
        return self._count(OutcomeStatus.ADDED)

    @property
    def skipped(self) -> int:
        return self._count(OutcomeStatus.SKIPPED)

    @property
    def failed(self) -> int:
        return self._count(OutcomeStatus.FAILED)

    @property
    def created(self) -> int:
        return sum(
            1
            for outcome in self.outcomes
            if outcome.status is OutcomeStatus.ADDED and outcome.created
        )

    @property
    def processed(self) -> int:
        return self.added + self.skipped

    @property
    def conflict(self) -> AddOutcome | None:
        """Return the outcome that aborted a single-file add, if any."""
        for outcome in self.outcomes:
            if outcome.status is OutcomeStatus.CONFLICT:
                return outcome
        return None


@dataclass
class SortResult:
    """Key order of one file before and after sorting."""

    path: Path
    before: list[str] = field(default_factory=list)
    after: list[str] = field(default_factory=list)
    changed: bool = False
    written: bool = False
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.error is not None


@dataclass
class SortSummary:
    """Aggregated results of :func:`sort_target`."""

    results: list[SortResult]
    dry_run: bool
    batch_mode: bool

    @property
    def changed(self) -> int:
        return sum(1 for result in self.results if result.changed)

    @property
    def unchanged(self) -> int:
        return sum(
            1 for result in self.results if not result.changed and not result.failed
        )

    @property
    def failed(self) -> int:
        return sum(1 for result in self.results if result.failed)


@dataclass
class DeleteOutcome:
    """The entry removed by :func:`delete_from_file`."""

    path: Path
    key: str
    value: str


@dataclass
class InitResult:
    """Files written by :func:`init_locales`."""

    directory: Path
    created_directory: bool
    files: list[Path]
    languages: list[str]


def resolve_targets(path: str | Path) -> list[Path]:
    """Return the locale files addressed by *path*.

    A directory yields its locale files; an existing file yields itself.
    Anything else raises ``PathNotFoundError``.
    """
    if storage.is_directory(path):
        return find_locale_files(path)
    if storage.is_file(path):
        return [Path(path)]
    raise PathNotFoundError.for_path(path)


def apply_add_to_file(
    path: str | Path,
    key: str,
    value: str,
    *,
    force: bool = False,
    batch_mode: bool = False,
) -> AddOutcome:
    """Add *key* to the file at *path* and report what happened.

    A missing file starts from an empty mapping and is created on write. An
    existing key is left untouched unless *force* is set: the outcome is
    ``SKIPPED`` in batch mode and ``CONFLICT`` otherwise. Read and write
    failures are reported as ``FAILED`` rather than raised so a batch can
    continue with the next file.
    """
    target = Path(path)
    created = False
    try:
        if storage.is_file(target):
            data = read_locale_file(target)
        else:
            data = {}
            created = True
            logger.info("Creating new locale file: %s", target)

        if has_key(data, key) and not force:
            existing = data[key]
            logger.info(
                "Key '%s' already exists in %s with value: '%s'", key, target, existing
            )
            status = OutcomeStatus.SKIPPED if batch_mode else OutcomeStatus.CONFLICT
            return AddOutcome(target, status, key, value, existing=existing)

        write_locale_file(target, add_key(data, key, value))
    except (LocaleasyError, OSError) as exc:
        logger.warning("Error processing %s: %s", target, exc)
        return AddOutcome(target, OutcomeStatus.FAILED, key, value, error=str(exc))

    logger.info("Added '%s' to %s", key, target)
    return AddOutcome(target, OutcomeStatus.ADDED, key, value, created=created)


def add_to_files(
    path: str | Path, key: str, value: str, *, force: bool = False
) -> AddSummary:
    """Add *key* to the file at *path* or to every locale file in a directory."""
    batch_mode = storage.is_directory(path)
    targets = resolve_targets(path)
    if batch_mode:
        logger.info("Found %d locale files in %s", len(targets), path)
        if not targets:
            logger.warning("No locale files found in directory: %s", path)
    outcomes = [
        apply_add_to_file(target, key, value, force=force, batch_mode=batch_mode)
        for target in targets
    ]
    return AddSummary(outcomes=outcomes, batch_mode=batch_mode)


def delete_key(
    data: LocaleData, key: str, *, path: str | Path | None = None
) -> LocaleData:
    """Return *data* without *key*.

    Raises ``KeyNotFoundError`` when *key* is absent; *path* only qualifies
    the message.
    """
    if not has_key(data, key):
        if path is None:
            raise KeyNotFoundError.for_mapping(key)
        raise KeyNotFoundError.for_key(key, path)
    return remove_key(data, key)


def delete_from_file(
    path: str | Path, key: str, *, confirm: ConfirmCallback | None = None
) -> DeleteOutcome:
    """Remove *key* from the file at *path*.

    ``confirm`` is called with the key and its current value before anything
    is written; a falsy answer raises ``OperationCancelledError``.
    """
    target = Path(path)
    data = read_locale_file(target)
    if not has_key(data, key):
        raise KeyNotFoundError.for_key(key, target)
    value = data[key]
    if confirm is not None and not confirm(key, value):
        raise OperationCancelledError.deletion()
    write_locale_file(target, delete_key(data, key, path=target))
    logger.info("Deleted '%s' from %s", key, target)
    return DeleteOutcome(path=target, key=key, value=value)


def _sort_file(path: Path, *, dry_run: bool) -> SortResult:
    data = read_locale_file(path)
    sorted_data = sort_locale_data(data)
    result = SortResult(
        path=path,
        before=list(data),
        after=list(sorted_data),
        changed=not is_sorted(data),
    )
    if result.changed and not dry_run:
        write_locale_file(path, sorted_data)
        result.written = True
        logger.info("Sorted %s", path)
    return result


def sort_target(path: str | Path, *, dry_run: bool = False) -> SortSummary:
    """Sort the keys of one locale file or of every file in a directory.

    In directory mode a file that cannot be read or written is recorded with
    its error and the remaining files are still processed.
    """
    batch_mode = storage.is_directory(path)
    targets = resolve_targets(path)
    results: list[SortResult] = []
    for target in targets:
        try:
            results.append(_sort_file(target, dry_run=dry_run))
        except LocaleasyError as exc:
            if not batch_mode:
                raise
            logger.warning("Error processing %s: %s", target, exc)
            results.append(SortResult(path=target, error=str(exc)))
    return SortSummary(results=results, dry_run=dry_run, batch_mode=batch_mode)


def init_locales(directory: str | Path, languages: t.Sequence[str]) -> InitResult:
    """Write one seeded locale file per language into *directory*.

    Every language code is validated before anything touches the disk.
    """
    if not validate_directory_path(directory):
        raise ValidationError(ERR_INVALID_DIRECTORY)
    codes = list(languages)
    if not codes:
        raise ValidationError(ERR_NO_LANGUAGES)
    for code in codes:
        if not validate_language(code):
            raise ValidationError(ERR_INVALID_LANGUAGE.format(code=code))

    base = Path(directory)
    created_directory = False
    if not storage.is_directory(base):
        try:
            storage.create_dir(base)
        except OSError as exc:
            raise LocaleWriteError.directory(base) from exc
        created_directory = True
        logger.info("Created directory: %s", base)

    files: list[Path] = []
    for code in codes:
        target = base / f"{code}{LOCALE_SUFFIX}"
        write_locale_file(target, seed_locale_data(code))
        logger.info("Created locale file: %s", target)
        files.append(target)
    return InitResult(
        directory=base,
        created_directory=created_directory,
        files=files,
        languages=codes,
    )


__all__ = [
    "AddOutcome",
    "AddSummary",
    "ConfirmCallback",
    "DeleteOutcome",
    "InitResult",
    "OutcomeStatus",
    "SortResult",
    "SortSummary",
    "add_to_files",
    "apply_add_to_file",
    "delete_from_file",
    "delete_key",
    "init_locales",
    "resolve_targets",
    "sort_target",
]
