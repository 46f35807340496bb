from __future__ import annotations

import json
import logging
from contextlib import contextmanager
from enum import Enum
from pathlib import Path
from typing import Iterator, Optional, Sequence

import typer
from typing_extensions import Annotated

from .container import Container
from ..config.settings import AppConfig
from ..core.domain.enums import VersionStatus
from ..core.domain.models import RoundTripResult, VersionRange
from ..core.timeline import range_to_timeline, timeline_to_ranges
from ..shared.event_tokens import format_events, parse_event_token


app = typer.Typer(add_completion=False, help="Convert vulnerability version timelines to CVE5 ranges and back")


class LogLevel(str, Enum):
    OFF = "OFF"
    CRITICAL = "CRITICAL"
    ERROR = "ERROR"
    WARNING = "WARNING"
    INFO = "INFO"
    DEBUG = "DEBUG"
    NOTSET = "NOTSET"


@contextmanager
def provide_container() -> Iterator[Container]:
    container = Container()
    container.config.from_pydantic(AppConfig())
    container.init_resources()
    try:
        yield container
    finally:
        container.shutdown_resources()


@app.callback()
def main(
    log_level: Annotated[
        Optional[LogLevel],
        typer.Option(
            "--log-level",
            help="Set log level (OFF, CRITICAL, ERROR, WARNING, INFO, DEBUG, NOTSET). Default: OFF",
        ),
    ] = None,
) -> None:
    """Root command callback to configure logging if requested."""
    if log_level in (None, LogLevel.OFF):
        return

    level = logging.getLevelNamesMapping().get(log_level.value, logging.INFO)

    package_name = __package__.split(".", 1)[0] if __package__ else "cve_ranges"
    logger = logging.getLogger(package_name)

    has_stream = any(isinstance(h, logging.StreamHandler) for h in logger.handlers)
    if not has_stream:
        handler = logging.StreamHandler()
        handler.setFormatter(logging.Formatter("%(levelname)s | %(name)s | %(message)s"))
        logger.addHandler(handler)

    # Only this logger prints; avoid duplicates through the root logger
    logger.propagate = False
    logger.setLevel(level)


@app.command("ranges", help="Convert a chronological event list to CVE5 ranges plus a default status.")
def ranges_cmd(
    events: list[str] = typer.Argument(..., help="Events in order: introduced=V or fixed=V (i=/f= also accepted)", metavar="EVENT"),
) -> None:
    try:
        parsed = [parse_event_token(t) for t in events]
    except ValueError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(code=1)
    ranges, default_status = timeline_to_ranges(parsed)
    _print_ranges(ranges)
    typer.echo(f"Default: {default_status.value}")


@app.command("timeline", help="Convert a single range, read against a default status, back to events.")
def timeline_cmd(
    introduced: str = typer.Argument(..., help="Lower bound, '0' for the first version, or a constraint such as '>= 1.0.0, < 1.0.1'"),
    fixed: str = typer.Option("", "--fixed", help="Upper bound (exclusive)"),
    status: Optional[VersionStatus] = typer.Option(None, "--status", help="Range status. Default: opposite of the default status"),
    default_status: VersionStatus = typer.Option(VersionStatus.UNAFFECTED, "--default-status", help="Status of versions outside the range"),
) -> None:
    vr = VersionRange(introduced=introduced, fixed=fixed, status=status)
    events, ok = range_to_timeline(vr, default_status)
    if not ok:
        typer.echo("Not representable as a timeline", err=True)
        raise typer.Exit(code=1)
    typer.echo(format_events(events))


@app.command(help="Print CVE JSON 5.0 affected entries for every module of a report file.")
def convert(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Report JSON file"),
) -> None:
    with provide_container() as container:
        uc = container.convert_uc()
        try:
            entries = uc.execute(path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        affected = container.documents().dump_affected(entries)
    print(json.dumps({"affected": affected}, ensure_ascii=False, indent=2))


@app.command(help="Print report-style module timelines rebuilt from a CVE JSON 5.0 record.")
def reconstruct(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="CVE record JSON file"),
) -> None:
    with provide_container() as container:
        uc = container.reconstruct_uc()
        try:
            modules = uc.execute(path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
        doc = container.documents().dump_modules(modules)
    print(json.dumps(doc, ensure_ascii=False, indent=2))
    incomplete = [m.module for m in modules if not m.complete]
    if incomplete:
        typer.echo(f"Not representable: {', '.join(incomplete)}", err=True)
        raise typer.Exit(code=1)


@app.command(help="Round-trip each module timeline of a report through ranges and back. Exit 1 on any failure.")
def check(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="Report JSON file"),
) -> None:
    with provide_container() as container:
        uc = container.check_uc()
        try:
            results = uc.execute(path)
        except ValueError as e:
            typer.echo(f"Error: {e}", err=True)
            raise typer.Exit(code=1)
    _print_results(results)
    if not all(r.ok for r in results):
        raise typer.Exit(code=1)


def _print_ranges(ranges: Sequence[VersionRange]) -> None:
    print(f"{'Introduced':15} {'Fixed':15} {'Status':10}")
    for r in ranges:
        status = r.status.value if r.status else "-"
        print(f"{r.introduced:15} {r.fixed or '-':15} {status:10}")


def _print_results(results: Sequence[RoundTripResult]) -> None:
    for r in results:
        print(f"{'OK' if r.ok else 'FAIL':4} {r.module}")
        if not r.matches:
            print(f"  original:      {format_events(r.original)}")
            print(f"  reconstructed: {format_events(r.reconstructed)}")
        for issue in r.issues:
            print(f"  - {issue}")


if __name__ == "__main__":  # pragma: no cover
    app()
