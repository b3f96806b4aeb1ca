"""photo-prefixer: number photos by capture time, or undo the numbering."""

from __future__ import annotations

from pathlib import Path

import click
from loguru import logger

from app.batch_runner import BatchRunner, RunOptions
from core.models import DEFAULT_DELIMITER, validate_delimiter
from core.services.sort_service import SortService
from infrastructure.exif_reader import read_capture_time
from infrastructure.logging import init_logging
from infrastructure.photo_lister import validate_directory
from infrastructure.rename_service import RenameService
from infrastructure.settings import JsonSettings


def _directory_callback(ctx: click.Context, param: click.Parameter, value: str) -> Path:
    try:
        return validate_directory(value)
    except OSError as ex:
        raise click.BadParameter(str(ex), ctx=ctx, param=param) from ex


def _delimiter_callback(
    ctx: click.Context, param: click.Parameter, value: str | None
) -> str | None:
    if value is None:
        return None
    try:
        return validate_delimiter(value)
    except ValueError as ex:
        raise click.BadParameter(str(ex), ctx=ctx, param=param) from ex


def _setting_flag(settings: JsonSettings, key: str) -> bool:
    value = settings.get(key, False)
    if not isinstance(value, bool):
        raise click.UsageError(f"{key} in {settings.path} must be true or false, got {value!r}")
    return value


def _resolve_options(
    settings: JsonSettings,
    delim: str | None,
    test: bool,
    desc: bool,
    revert: bool,
    exact_revert: bool,
) -> RunOptions:
    """Merge command-line flags over settings-file defaults."""
    if delim is None:
        try:
            delim = validate_delimiter(settings.get("rename.delimiter", DEFAULT_DELIMITER))
        except ValueError as ex:
            raise click.UsageError(f"rename.delimiter in {settings.path}: {ex}") from ex
    return RunOptions(
        delimiter=delim,
        test=test,
        descending=desc or _setting_flag(settings, "sort.descending"),
        revert=revert,
        exact_revert=exact_revert or _setting_flag(settings, "revert.exact_delimiter"),
    )


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("directory", callback=_directory_callback)
@click.option(
    "-d",
    "--delim",
    default=None,
    callback=_delimiter_callback,
    help=f"Prefix delimiter  [default: {DEFAULT_DELIMITER}]",
)
@click.option("-t", "--test", is_flag=True, help="Test mode that only shows the new names.")
@click.option("--desc", is_flag=True, help="Number photos from latest to oldest.")
@click.option("-r", "--revert", is_flag=True, help="Revert renamed files.")
@click.option(
    "--exact-revert",
    is_flag=True,
    help="When reverting, strip the full delimiter length instead of two bytes.",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    default=None,
    help="JSON settings file (default: ~/.photo-prefixer/settings.json if present).",
)
@click.option(
    "--log-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=None,
    help="Directory for log files.",
)
@click.option("-v", "--verbose", is_flag=True, help="Also print debug logging to stderr.")
def main(
    directory: Path,
    delim: str | None,
    test: bool,
    desc: bool,
    revert: bool,
    exact_revert: bool,
    config_path: Path | None,
    log_dir: Path | None,
    verbose: bool,
) -> None:
    """Prefix the photos in DIRECTORY with their capture-time order.

    JPEG and HEIC/HEIF files are sorted by EXIF DateTimeOriginal and renamed
    to "<number><delim><original name>". Photos without a capture time are
    numbered last, in listing order.
    """
    try:
        settings = JsonSettings.load_default(config_path)
    except ValueError as ex:
        raise click.UsageError(f"Invalid settings file: {ex}") from ex
    if log_dir is None:
        log_dir = settings.get("logging.directory")
    try:
        init_logging(
            str(log_dir) if log_dir else None,
            level=str(settings.get("logging.level", "INFO")),
            verbose=verbose,
        )
    except (ValueError, OSError) as ex:
        raise click.UsageError(f"Cannot set up logging: {ex}") from ex

    options = _resolve_options(settings, delim, test, desc, revert, exact_revert)
    runner = BatchRunner(sorter=SortService(read_capture_time), renamer=RenameService())
    try:
        result = runner.run(directory, options)
    except OSError as ex:
        logger.error("Run aborted: {}", ex)
        raise click.ClickException(str(ex)) from ex

    if not result.ok:
        logger.warning("{} file(s) could not be processed", len(result.failed))


if __name__ == "__main__":
    main()
