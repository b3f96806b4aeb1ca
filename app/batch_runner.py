"""Batch runner orchestrating listing, sorting and renaming of a photo folder."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from pathlib import Path

import click
from loguru import logger

from core.models import DEFAULT_DELIMITER, PhotoRecord, validate_delimiter
from core.services.interfaces import RenameResult
from core.services.sort_service import SortService
from infrastructure.photo_lister import list_photos
from infrastructure.rename_service import RenameService


@dataclass
class RunOptions:
    """User choices for a single run.

    Attributes:
        delimiter: Separator between sequence number and original name.
        test: Only print what would happen.
        descending: Number the latest photo first.
        revert: Strip previously added prefixes instead of adding them.
        exact_revert: Strip the delimiter's byte length rather than two bytes.
    """

    delimiter: str = DEFAULT_DELIMITER
    test: bool = False
    descending: bool = False
    revert: bool = False
    exact_revert: bool = False


class BatchRunner:
    """Runs one rename/revert pass over a directory and reports each file.

    Mediates between the directory lister, the sort service and the rename
    service, and owns all user-facing output.
    """

    def __init__(
        self,
        sorter: SortService,
        renamer: RenameService | None = None,
        lister: Callable[[Path], list[PhotoRecord]] = list_photos,
        echo: Callable[..., None] = click.echo,
    ) -> None:
        """Create a BatchRunner.

        Args:
            sorter: Chronological sort service.
            renamer: Rename service (defaults to `RenameService`).
            lister: Callable returning the photo records of a directory.
            echo: Output function accepting `err=True` for error lines.
        """
        self._sorter = sorter
        self._renamer = renamer or RenameService()
        self._lister = lister
        self._echo = echo

    def run(self, directory: Path, options: RunOptions) -> RenameResult:
        """Apply `options` to every photo in `directory`.

        Per-file failures are reported and collected in the returned result;
        they never abort the batch.
        """
        delim = validate_delimiter(options.delimiter)
        records = self._lister(directory)
        logger.info(
            "Run on {} ({} photos, revert={}, test={}, desc={})",
            directory,
            len(records),
            options.revert,
            options.test,
            options.descending,
        )

        if options.revert:
            # Reverting works on names alone, so listing order is kept
            if options.test:
                return self._preview_revert(records, delim, options.exact_revert)
            return self._renamer.execute_revert(
                records,
                delim,
                exact=options.exact_revert,
                on_success=lambda old, new: self._echo(f"Reverted: {old} -> {new}"),
                on_skip=lambda name: self._echo(f"Not processed: {name}"),
                on_failure=lambda msg: self._echo(msg, err=True),
            )

        ordered = self._sorter.sort(records, descending=options.descending)
        if options.test:
            return self._preview_rename(ordered, delim)
        return self._renamer.execute_rename(
            ordered,
            delim,
            on_success=lambda old, new: self._echo(f"Renamed: {old} -> {new}"),
            on_failure=lambda msg: self._echo(msg, err=True),
        )

    def _preview_rename(self, records: list[PhotoRecord], delim: str) -> RenameResult:
        for item in self._renamer.plan_rename(records, delim):
            self._echo(f"{item.original_name} -> {item.new_name}")
        return RenameResult()

    def _preview_revert(self, records: list[PhotoRecord], delim: str, exact: bool) -> RenameResult:
        result = RenameResult()
        for rec, item in zip(records, self._renamer.plan_revert(records, delim, exact=exact)):
            if item.error:
                self._echo(item.error, err=True)
                result.failed.append((rec.file_path, item.error))
            elif item.new_name is None:
                self._echo(f"{item.original_name} is not renamed.")
                result.skipped.append(rec.file_path)
            else:
                self._echo(f"{item.original_name} -> {item.new_name}")
        return result
