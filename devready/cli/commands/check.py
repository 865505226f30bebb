from __future__ import annotations

import asyncio
import json

import typer

from devready.cli.context import CLIContext, build_context
from devready.core.errors import ErrorCode
from devready.output.console import Style
from devready.services.check import CheckReport, CheckService
from devready.services.checkers import SPECS, Dependency


def check(
    dependencies: list[str] | None = typer.Argument(
        None,
        help="Dependencies to check (default: all). "
        + ", ".join(d.value for d in Dependency),
        show_default=False,
    ),
    as_json: bool = typer.Option(False, "--json", help="Print result messages as JSON"),
) -> None:
    """Check that workspace dependencies are installed."""
    selected = _parse_dependencies(dependencies)
    ctx = build_context()

    service = CheckService(checker=ctx.checker())
    report = asyncio.run(service.run(selected))

    if as_json:
        ctx.console.raw(json.dumps([m.to_dict() for m in report.messages()], indent=2))
    else:
        _print_report(ctx, report)

    if report.has_missing():
        raise typer.Exit(code=int(ErrorCode.ENV_ERROR))


def _parse_dependencies(names: list[str] | None) -> list[Dependency]:
    if not names:
        return list(Dependency)

    by_name = {d.value.lower(): d for d in Dependency}
    selected: list[Dependency] = []
    for name in names:
        dep = by_name.get(name.lower())
        if dep is None:
            typer.echo(f"error: unknown dependency: {name}", err=True)
            typer.echo(f"Available: {', '.join(d.value for d in Dependency)}", err=True)
            raise typer.Exit(code=int(ErrorCode.USER_ERROR))
        if dep not in selected:
            selected.append(dep)
    return selected


def _print_report(ctx: CLIContext, report: CheckReport) -> None:
    console = ctx.console
    if ctx.workspace is not None:
        console.print(f"workspace: {ctx.workspace.root}", Style.INFO)
    else:
        console.print("workspace: (not found)", Style.WARNING)
    console.print(f"platform: {ctx.platform}", Style.INFO)

    console.header("Dependencies")
    for dep, result in report.results.items():
        label = SPECS[dep].label
        if result.installed:
            console.print(f"{label}: installed", Style.SUCCESS)
        else:
            console.print(f"{label}: missing", Style.ERROR)
        console.print(f"  {result.info}", Style.DIM)
        if result.error is not None:
            console.print(f"  hint: {result.error}", Style.DIM)
