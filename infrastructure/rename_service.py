"""Rename planning and execution service.

Provides a high-level API to preview and apply sequence-prefix renames (and
their reversal) across a batch of photo records. Each file is an independent
unit of work: a failed move is recorded and the batch carries on.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence

from loguru import logger

from core.models import PhotoRecord, get_prefix_len
from core.services.interfaces import RenameError, RenamePlanItem, RenameResult

ProgressCallback = Callable[[str, str], None]


class RenameService:
    """Coordinates rename/revert batches and their logging."""

    def plan_rename(self, records: Sequence[PhotoRecord], delim: str) -> list[RenamePlanItem]:
        """Compute prefixed names for `records` in their current order."""
        prefix_len = get_prefix_len(len(records))
        return [
            RenamePlanItem(rec.file_name, rec.create_prefixed_name(i, prefix_len, delim))
            for i, rec in enumerate(records)
        ]

    def plan_revert(
        self, records: Sequence[PhotoRecord], delim: str, exact: bool = False
    ) -> list[RenamePlanItem]:
        """Compute reverted names; `new_name` is None for files never renamed."""
        plan: list[RenamePlanItem] = []
        for rec in records:
            try:
                new_name = rec.create_reverted_name(delim, exact=exact)
            except RenameError as ex:
                plan.append(RenamePlanItem(rec.file_name, None, error=str(ex)))
                continue
            plan.append(RenamePlanItem(rec.file_name, new_name))
        return plan

    def execute_rename(
        self,
        records: Sequence[PhotoRecord],
        delim: str,
        on_success: ProgressCallback | None = None,
        on_failure: Callable[[str], None] | None = None,
    ) -> RenameResult:
        """Rename every record to its prefixed name and report per-file results."""
        result = RenameResult()
        prefix_len = get_prefix_len(len(records))
        for index, rec in enumerate(records):
            try:
                new_path = rec.rename_with_prefix(index, prefix_len, delim)
            except RenameError as ex:
                logger.error("Rename failed for {}: {}", ex.path, ex.__cause__ or ex)
                result.failed.append((str(ex.path), str(ex)))
                if on_failure:
                    on_failure(str(ex))
                continue
            result.renamed.append((rec.file_path, str(new_path)))
            if on_success:
                on_success(rec.file_name, new_path.name)

        logger.info(
            "Rename finished ({} renamed, {} failed)", len(result.renamed), len(result.failed)
        )
        return result

    def execute_revert(
        self,
        records: Sequence[PhotoRecord],
        delim: str,
        exact: bool = False,
        on_success: ProgressCallback | None = None,
        on_skip: Callable[[str], None] | None = None,
        on_failure: Callable[[str], None] | None = None,
    ) -> RenameResult:
        """Revert every record whose name contains `delim`; others are skipped."""
        result = RenameResult()
        for rec in records:
            try:
                new_path = rec.revert_name(delim, exact=exact)
            except RenameError as ex:
                logger.error("Revert failed for {}: {}", ex.path, ex.__cause__ or ex)
                result.failed.append((str(ex.path), str(ex)))
                if on_failure:
                    on_failure(str(ex))
                continue
            if new_path is None:
                logger.info("Delimiter {!r} not found in {}, skipped", delim, rec.file_name)
                result.skipped.append(rec.file_path)
                if on_skip:
                    on_skip(rec.file_name)
                continue
            result.renamed.append((rec.file_path, str(new_path)))
            if on_success:
                on_success(rec.file_name, new_path.name)

        logger.info(
            "Revert finished ({} reverted, {} skipped, {} failed)",
            len(result.renamed),
            len(result.skipped),
            len(result.failed),
        )
        return result
