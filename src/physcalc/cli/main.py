"""Command-line interface for physcalc."""

from __future__ import annotations

import json
import sys
from typing import Optional, Tuple

import click
from pydantic import ValidationError

from ..config import Settings, get_settings
from ..evaluator import SAMPLE_INPUTS, EvaluationOutcome, evaluate_many
from ..observability import configure_logging
from ..parser.expression import parse_expression
from ..parser.nodes import render
from ..units.formatting import format_dimension
from ..units.table import get_table, kind_name


@click.group()
@click.option("--log-level", default=None, help="Override PHYSCALC_LOG_LEVEL.")
@click.pass_context
def cli(ctx: click.Context, log_level: Optional[str]) -> None:
    """Evaluate arithmetic over physically dimensioned numbers."""

    settings = get_settings()
    if log_level:
        try:
            settings = Settings.model_validate({**settings.model_dump(), "log_level": log_level})
        except ValidationError as exc:
            raise click.BadParameter(str(exc.errors()[0]["msg"]), param_hint="--log-level") from exc
    configure_logging(settings.log_level)
    ctx.obj = settings


def _report_failure(outcome: EvaluationOutcome) -> None:
    click.echo(
        f'error[{outcome.error.code}]: {outcome.error} (input: "{outcome.text}")',
        err=True,
    )


@cli.command("eval")
@click.argument("expressions", nargs=-1, required=True)
@click.option(
    "--output",
    type=click.Choice(["text", "json"]),
    default=None,
    help="Output format; defaults to PHYSCALC_OUTPUT.",
)
@click.option("--tree", is_flag=True, help="Print the parsed expression before its value.")
@click.option(
    "--lenient-units",
    is_flag=True,
    help="Treat unknown unit symbols as dimensionless instead of failing.",
)
@click.pass_obj
def eval_command(settings, expressions: Tuple[str, ...], output: Optional[str], tree: bool, lenient_units: bool) -> None:
    """Evaluate each EXPRESSION, e.g. '15 N m * 12 kg * 92'."""

    if lenient_units:
        settings = settings.model_copy(update={"strict_units": False})
    output = output or settings.output
    table = get_table(settings.strict_units)

    outcomes = evaluate_many(expressions, table=table, settings=settings)
    if output == "json":
        click.echo(json.dumps([outcome.to_dict() for outcome in outcomes], indent=2))
    else:
        for outcome in outcomes:
            if not outcome.ok:
                _report_failure(outcome)
                continue
            if tree:
                parsed = parse_expression(outcome.text, table=table, max_depth=settings.max_depth)
                click.echo(render(parsed, table=table))
            click.echo(outcome.display())

    if not all(outcome.ok for outcome in outcomes):
        sys.exit(1)


@cli.command()
@click.pass_obj
def demo(settings) -> None:
    """Evaluate the built-in sample expressions."""

    for outcome in evaluate_many(SAMPLE_INPUTS, settings=settings):
        click.echo(f'Input: "{outcome.text}" => result: {outcome.display()}')


@cli.command()
def units() -> None:
    """List every known unit symbol with its dimension."""

    table = get_table(True)
    for symbol, vector in table.items():
        base = " ".join(f"{e:+d}" for e in vector.exponents())
        kind = kind_name(vector) or "-"
        click.echo(f"{symbol:<4} {format_dimension(vector):<6} {kind:<22} [{base}]")


@cli.command()
@click.option("--host", default="127.0.0.1", show_default=True)
@click.option("--port", default=8000, show_default=True, type=int)
def serve(host: str, port: int) -> None:
    """Run the HTTP API."""

    import uvicorn

    uvicorn.run("physcalc.api.app:app", host=host, port=port)


if __name__ == "__main__":
    cli()
