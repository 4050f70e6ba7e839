"""Mini README: Entry point CLI for the financial statements visualizer.

This script exposes a Typer CLI with two commands: ``run`` starts the
FastAPI application under uvicorn, and ``show`` applies a sequence of
actions to the opening statements and prints the result, which is handy
for checking a scenario without a browser.
"""

from __future__ import annotations

from typing import List

import typer
import uvicorn

from finstatements.configuration import get_settings
from finstatements.logging_utils import configure_root_logger
from finstatements.presentation import format_currency, format_delta
from finstatements.session import parse_amount
from finstatements.statements import STATEMENTS, Action, FinancialState, apply_action

cli = typer.Typer(help="Launch and explore the financial statements visualizer.")


@cli.command()
def run(
    host: str = typer.Option(None, help="Host interface to bind."),
    port: int = typer.Option(None, help="Port to listen on."),
    production: bool = typer.Option(
        False, help="Use production server settings (disable auto-reload)."
    ),
) -> None:
    """Start the FastAPI application using uvicorn."""

    settings = get_settings()
    effective_host = host or settings.interface_host
    effective_port = port or settings.interface_port
    configure_root_logger(settings.log_level)

    # Browsers cannot open the 0.0.0.0 / :: wildcard addresses directly.
    browser_host = "127.0.0.1" if effective_host in {"0.0.0.0", "::"} else effective_host
    typer.echo(
        "Starting visualizer on "
        f"{effective_host}:{effective_port}.\n"
        "Open your browser at "
        f"http://{browser_host}:{effective_port}"
    )
    uvicorn.run(
        "finstatements.interface.web_app:create_application",
        host=effective_host,
        port=effective_port,
        factory=True,
        reload=not production,
    )


def _parse_token(token: str) -> Action:
    """Turn ``actionId:amount`` into an Action."""

    action_id, separator, raw_amount = token.partition(":")
    amount = parse_amount(raw_amount)
    if not separator or not action_id.strip() or amount is None:
        raise typer.BadParameter(
            f"Expected ACTION:AMOUNT with a finite amount, got '{token}'", param_hint="ACTIONS"
        )
    return Action(action_id=action_id.strip(), amount=amount)


@cli.command()
def show(
    actions: List[str] = typer.Argument(
        None, help="Actions to apply in order, e.g. sellAsset:50000 payDividend:20000."
    ),
) -> None:
    """Apply actions to the opening statements and print every line."""

    settings = get_settings()
    symbol = settings.currency_symbol
    separator = settings.thousands_separator
    opening = FinancialState.initial()
    state = opening
    for token in actions or []:
        state = apply_action(state, _parse_token(token))

    for statement in STATEMENTS:
        typer.echo(statement.title)
        for section in statement.sections:
            indent = "  "
            if section.title:
                typer.echo(f"  {section.title}")
                indent = "    "
            for item in section.items:
                value = state.value_at(item.path)
                delta = value - opening.value_at(item.path)
                line = f"{indent}{item.label}: {format_currency(value, symbol, separator)}"
                if delta:
                    line += f" {format_delta(delta, symbol, separator)}"
                typer.echo(line)
        typer.echo("")


if __name__ == "__main__":
    cli()
