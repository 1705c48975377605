"""Entry-point CLI for rendering Maestro flows from Python functions."""
from __future__ import annotations

import importlib
import os
import sys
from pathlib import Path
from typing import Callable, Optional, Tuple

import typer
from pydantic import BaseModel, Field
from rich.console import Console
from rich.markup import escape
from rich.table import Table

from .builder import FlowBuilder
from .vocabulary import VOCABULARIES

console = Console()
app = typer.Typer(help="Render Maestro flow YAML from Python flow functions")


class RenderReport(BaseModel):
    """What a render produced, for hosts that run the flow afterwards."""

    path: Path
    commands: int = Field(ge=0, description="Top-level commands in the document.")
    lines: int = Field(ge=0)
    document: str


def _env_bool(name: str, default: bool) -> bool:
    raw = os.getenv(name)
    if raw is None:
        return default
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def _load_target(target: str) -> Tuple[str, Callable[[FlowBuilder], object]]:
    module_name, sep, function_name = target.partition(":")
    if not sep or not module_name or not function_name:
        raise typer.BadParameter("Expected MODULE:FUNCTION, e.g. flows.login:login_flow")
    # console scripts do not put the working directory on sys.path
    cwd = os.getcwd()
    if cwd not in sys.path:
        sys.path.insert(0, cwd)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        raise typer.BadParameter(f"Cannot import {module_name!r}: {exc}") from exc
    function = getattr(module, function_name, None)
    if not callable(function):
        raise typer.BadParameter(f"{function_name!r} is not a callable in {module_name!r}")
    return function_name, function


def render_flow(
    function: Callable[[FlowBuilder], object],
    output: Path,
    name: str,
    app_id: str | None = None,
) -> RenderReport:
    """Drive ``function`` against a fresh builder and finalize it."""
    flow = FlowBuilder(output, name, app_id=app_id)
    function(flow)
    commands = flow.command_count
    lines = len(flow)
    path = flow.output_path
    document = flow.finalize()
    return RenderReport(path=path, commands=commands, lines=lines, document=document)


@app.command()
def render(
    target: str = typer.Argument(..., help="Flow function as MODULE:FUNCTION"),
    output: Optional[Path] = typer.Option(
        None, help="Directory for generated Maestro flows (.yaml); env MAESTRO_FLOW_DIR"
    ),
    name: Optional[str] = typer.Option(
        None, help="Flow file name; defaults to the function name"
    ),
    app_id: Optional[str] = typer.Option(
        None, help="Optional appId preamble for the flow; env MAESTRO_APP_ID"
    ),
    show: Optional[bool] = typer.Option(
        None, "--show/--no-show", help="Print the rendered document; env MAESTRO_FLOW_SHOW"
    ),
):
    """Call FUNCTION(flow) and write the resulting flow file."""
    function_name, function = _load_target(target)
    output_dir = output or Path(os.getenv("MAESTRO_FLOW_DIR", "maestro"))
    resolved_app_id = app_id or os.getenv("MAESTRO_APP_ID")
    show_document = _env_bool("MAESTRO_FLOW_SHOW", False) if show is None else show

    console.log(f"Rendering {target}...")
    try:
        report = render_flow(function, output_dir, name or function_name, resolved_app_id)
    except (ValueError, OSError) as exc:
        console.print(f"[bold red]Render failed:[/bold red] {escape(str(exc))}")
        raise typer.Exit(code=1) from exc

    _print_summary(report)
    if show_document:
        console.print(report.document, markup=False, highlight=False)


@app.command()
def vocabulary(
    kind: Optional[str] = typer.Option(
        None, help=f"One of: {', '.join(VOCABULARIES)}. Defaults to all."
    ),
):
    """List the display strings accepted for directions, keys and permissions."""
    if kind is not None and kind not in VOCABULARIES:
        raise typer.BadParameter(f"Unknown vocabulary {kind!r}")
    kinds = [kind] if kind else list(VOCABULARIES)
    for key in kinds:
        table = Table(title=key)
        table.add_column("Name")
        table.add_column("Written as")
        for member in VOCABULARIES[key]:
            table.add_row(member.name, member.value)
        console.print(table)


def _print_summary(report: RenderReport) -> None:
    table = Table(title="Flow summary")
    table.add_column("File")
    table.add_column("Commands", justify="right")
    table.add_column("Lines", justify="right")
    table.add_row(str(report.path), str(report.commands), str(report.lines))
    console.print(table)


if __name__ == "__main__":
    app()
