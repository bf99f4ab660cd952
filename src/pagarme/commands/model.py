"""Command group: decode payloads and show how the SDK marshals them."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pagarme.commands._base import PagarMeGroup
from pagarme.services.marshal import MarshalService
from pagarme.services.result import ServiceError, ServiceResult

if TYPE_CHECKING:
    from pagarme.commands._context import AppContext

_MODEL_EXAMPLES = """\
  pagarme model inspect transaction.json
  pagarme --json model inspect subscription.json
  pagarme model export transaction.json
  pagarme model export transaction.json --mode patch"""


def _read_payload(app: AppContext, op: str, file: str) -> str | None:
    try:
        with open(file, encoding="utf-8") as f:
            return f.read()
    except OSError as exc:
        app.emit(
            ServiceResult(
                ok=False,
                op=op,
                error=ServiceError(code="invalid_file", message=f"Error reading {file}: {exc}"),
            )
        )
        return None


@click.group(cls=PagarMeGroup, examples=_MODEL_EXAMPLES)
@click.pass_obj
def model(app: AppContext) -> None:
    """Decode API payloads into models and export them back."""


@model.command(
    examples="""\
  pagarme model inspect transaction.json
  pagarme --json model inspect transaction.json"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.pass_obj
def inspect(app: AppContext, file: str) -> None:
    """Show the model type resolved for every object in FILE."""
    text = _read_payload(app, "inspect", file)
    if text is None:
        return
    app.emit(MarshalService(app.session).inspect(text))


@model.command(
    examples="""\
  pagarme model export transaction.json
  pagarme model export transaction.json --mode patch
  pagarme --json model export subscription.json --mode full"""
)
@click.argument("file", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--mode",
    type=click.Choice(["full", "patch"]),
    default=None,
    help="Export every field, or only local changes. Defaults to [serialization] full_payloads.",
)
@click.pass_obj
def export(app: AppContext, file: str, mode: str | None) -> None:
    """Show the field mapping the SDK would send for FILE."""
    text = _read_payload(app, "export", file)
    if text is None:
        return
    if mode is None:
        full = app.settings.serialization.full_payloads
    else:
        full = mode == "full"
    app.emit(MarshalService(app.session).export(text, full=full))
