"""Command-line interface for tu.

Responsibilities:
- Expose user-facing commands for title casing and tag derivation.
- Convert CLI arguments into `TuConfig` and print tag-store arguments.

Commands never run the tag store themselves; they print the
`set:KEY=VALUE` and `clear:KEY` arguments it accepts so output can be piped
into it.

Key public functions:
- `app`: Typer application instance.
- `main`: invoke the Typer application.
"""

from __future__ import annotations

from pathlib import Path
from typing import Annotated

import typer

from .cli_rendering import echo_assignments, echo_file_assignments, exit_with_command_error
from .config import ConfigLoader, TuConfig
from .errors import CommandStageError
from .models.datatypes import TagAssignment
from .parsing import parse_csv_list
from .tags.editing import purge_assignments, set_assignments
from .tags.fields import parse_tag_payload, titlecase_tag_sets
from .tags.numbering import number_files
from .tags.template import apply_template, parse_template
from .telemetry.logger import RunLogger

app = typer.Typer(
    name="tu",
    no_args_is_help=True,
    help="Title-case tags, derive tags from file names, and number tracks.",
)

ConfigOption = Annotated[
    Path | None,
    typer.Option("--config", help="Path to YAML config file with command defaults."),
]
PreserveOption = Annotated[
    str | None,
    typer.Option(
        "--preserve",
        help="Comma-separated words kept exactly as written (e.g. `AC/DC,feat.`).",
    ),
]
VerboseOption = Annotated[
    bool | None,
    typer.Option("--verbose/--quiet", help="Log command start/complete events to stderr."),
]
NullOption = Annotated[
    bool,
    typer.Option(
        "-0",
        "--null",
        help="Terminate arguments with NUL instead of newline, for `xargs -0 tagutil`.",
    ),
]


def _resolve_command_config(
    config_file: Path | None,
    tags: str | None = None,
    preserve: str | None = None,
    verbose: bool | None = None,
) -> TuConfig:
    """Resolve effective config from env, YAML defaults and explicit CLI overrides."""

    try:
        base_config = ConfigLoader.load(config_file)
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Config file not found: `{config_file}`.",
            hint="Provide an existing path via `--config <path.yaml>`.",
        ) from exc
    except ValueError as exc:
        raise CommandStageError(
            stage="config",
            detail=f"Invalid configuration: {exc}",
            hint="Fix config file or `TU_*` environment values and rerun.",
        ) from exc

    try:
        return base_config.with_overrides(
            tag_keys=(parse_csv_list(tags) or None) if tags is not None else None,
            preserve_words=parse_csv_list(preserve) if preserve is not None else None,
            verbose=verbose,
        )
    except ValueError as exc:
        raise CommandStageError(stage="options", detail=str(exc)) from exc


def _require_single_line(assignments: list[TagAssignment], stage: str) -> None:
    """Reject values that would break newline-separated argument output."""

    for assignment in assignments:
        if "\n" in assignment.value or "\r" in assignment.value:
            raise CommandStageError(
                stage=stage,
                detail=f"Tag `{assignment.key}` value spans several lines.",
                hint="Use `-0/--null` and pipe into `xargs -0 tagutil` for multi-line values.",
            )


def _read_tag_sets(payload: Path | None) -> list[dict[str, str]]:
    """Read and parse a tag-store JSON listing from a file or stdin."""

    try:
        return parse_tag_payload(_read_source(payload))
    except ValueError as exc:
        raise CommandStageError(
            stage="payload",
            detail=str(exc),
            hint="Pass the JSON printed by `tagutil -F json FILE`.",
        ) from exc


def _read_source(source: Path | None) -> str:
    """Read a text source, using stdin when `source` is omitted or `-`."""

    if source is None or str(source) == "-":
        return typer.get_text_stream("stdin").read()
    try:
        return source.read_text(encoding="utf-8")
    except FileNotFoundError as exc:
        raise CommandStageError(
            stage="input",
            detail=f"Input file not found: `{source}`.",
        ) from exc


@app.command("title")
def title_command(
    texts: Annotated[
        list[str] | None,
        typer.Argument(
            help="Text to convert, one result line per argument. Reads stdin when omitted.",
        ),
    ] = None,
    preserve: PreserveOption = None,
    config_file: ConfigOption = None,
    verbose: VerboseOption = None,
) -> None:
    """Title-case text and print the result."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(config_file, preserve=preserve, verbose=verbose)
        run_logger = RunLogger(verbose=config.verbose)
        sources = list(texts) if texts else [_read_source(None).rstrip("\r\n")]
        run_logger.log_command_start("title", inputs=len(sources))
        caser = config.build_caser()
        results = [caser.convert(text) for text in sources]
    except Exception as exc:
        exit_with_command_error("title", exc, run_logger)

    for result in results:
        typer.echo(result)
    run_logger.log_command_complete("title", outputs=len(results))


@app.command("tags")
def tags_command(
    payload: Annotated[
        Path | None,
        typer.Argument(
            help="Tag-store JSON (`tagutil -F json FILE`); reads stdin when omitted or `-`.",
        ),
    ] = None,
    tags: Annotated[
        str | None,
        typer.Option("-t", "--tags", help="Comma-separated tag names; all tags when omitted."),
    ] = None,
    preserve: PreserveOption = None,
    config_file: ConfigOption = None,
    null: NullOption = False,
    verbose: VerboseOption = None,
) -> None:
    """Title-case tag values and print `set:KEY=VALUE` arguments.

    Values spanning several lines are only printed in `--null` mode.
    """

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(
            config_file, tags=tags, preserve=preserve, verbose=verbose
        )
        run_logger = RunLogger(verbose=config.verbose)
        run_logger.log_command_start("tags", source=payload if payload is not None else "stdin")
        assignments = titlecase_tag_sets(
            _read_tag_sets(payload), keys=config.tag_keys, caser=config.build_caser()
        )
        if not null:
            _require_single_line(assignments, "payload")
    except Exception as exc:
        exit_with_command_error("tags", exc, run_logger)

    echo_assignments(assignments, null=null)
    run_logger.log_command_complete("tags", assignments=len(assignments))


@app.command("set")
def set_command(
    pairs: Annotated[
        list[str],
        typer.Argument(help="`TAG VALUE` pairs, e.g. `artist AC/DC year 1980`."),
    ],
    null: NullOption = False,
    verbose: VerboseOption = None,
) -> None:
    """Print `set:KEY=VALUE` arguments for explicit tag values."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(None, verbose=verbose)
        run_logger = RunLogger(verbose=config.verbose)
        run_logger.log_command_start("set", arguments=len(pairs))
        try:
            assignments = set_assignments(pairs)
        except ValueError as exc:
            raise CommandStageError(
                stage="arguments",
                detail=str(exc),
                hint="Example: `tu set artist AC/DC album \"Back in Black\"`.",
            ) from exc
        if not null:
            _require_single_line(assignments, "arguments")
    except Exception as exc:
        exit_with_command_error("set", exc, run_logger)

    echo_assignments(assignments, null=null)
    run_logger.log_command_complete("set", assignments=len(assignments))


@app.command("purge")
def purge_command(
    keys: Annotated[
        list[str] | None,
        typer.Argument(help="Tags to clear (or to keep with `--reverse`); all when omitted."),
    ] = None,
    reverse: Annotated[
        bool,
        typer.Option("-r", "--reverse", help="Clear every tag except the listed ones."),
    ] = False,
    payload: Annotated[
        Path | None,
        typer.Option(
            "--payload",
            help="Tag-store JSON used by `--reverse`; reads stdin when omitted or `-`.",
        ),
    ] = None,
    verbose: VerboseOption = None,
) -> None:
    """Print `clear:KEY` arguments for tags to remove."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(None, verbose=verbose)
        run_logger = RunLogger(verbose=config.verbose)
        keep_or_clear = list(keys) if keys else []
        run_logger.log_command_start("purge", keys=len(keep_or_clear), reverse=reverse)
        tag_sets = _read_tag_sets(payload) if reverse else None
        clears = purge_assignments(tag_sets, keep_or_clear, reverse=reverse)
    except Exception as exc:
        exit_with_command_error("purge", exc, run_logger)

    echo_assignments(clears)
    run_logger.log_command_complete("purge", clears=len(clears))


@app.command("write")
def write_command(
    pattern: Annotated[
        str,
        typer.Argument(help="Filename template with `%name` or `%{long name}` placeholders."),
    ],
    files: Annotated[list[str], typer.Argument(help="Files whose names provide tag values.")],
    verbose: VerboseOption = None,
) -> None:
    """Derive tags from file names and print `set:KEY=VALUE` arguments per file."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(None, verbose=verbose)
        run_logger = RunLogger(verbose=config.verbose)
        run_logger.log_command_start("write", files=len(files))
        try:
            pieces = parse_template(pattern)
        except ValueError as exc:
            raise CommandStageError(
                stage="template",
                detail=str(exc),
                hint="Example: `%track - %title` or `%{album artist} - %album`.",
            ) from exc
        results = [(file, apply_template(file, pieces)) for file in files]
    except Exception as exc:
        exit_with_command_error("write", exc, run_logger)

    for file, assignments in results:
        echo_file_assignments(file, assignments)
    run_logger.log_command_complete("write", files=len(results))


@app.command("number")
def number_command(
    pattern: Annotated[
        str,
        typer.Argument(help="Numbering pattern, e.g. `0n/t` renders `01/19`, `02/19`, ..."),
    ],
    files: Annotated[list[str], typer.Argument(help="Files in track order.")],
    start: Annotated[
        int, typer.Option("-s", "--start", help="Number given to the first file.")
    ] = 1,
    total: Annotated[
        int | None,
        typer.Option("-t", "--total", help="Total track count; defaults to the number of files."),
    ] = None,
    verbose: VerboseOption = None,
) -> None:
    """Number files in order and print the track tag argument per file."""

    run_logger: RunLogger | None = None
    try:
        config = _resolve_command_config(None, verbose=verbose)
        run_logger = RunLogger(verbose=config.verbose)
        run_logger.log_command_start("number", files=len(files))
        try:
            numbered = number_files(files, pattern, start=start, total=total)
        except ValueError as exc:
            raise CommandStageError(
                stage="numbering",
                detail=str(exc),
                hint="Use `0` padding with `n` (track) and `t` (total), e.g. `0n/t`.",
            ) from exc
    except Exception as exc:
        exit_with_command_error("number", exc, run_logger)

    for file, assignment in numbered:
        echo_file_assignments(file, [assignment])
    run_logger.log_command_complete("number", files=len(numbered))


def main() -> None:
    """CLI entrypoint for console scripts."""
    app()


if __name__ == "__main__":
    main()
