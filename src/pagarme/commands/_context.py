"""AppContext — shared Click context for all commands.

Created once by the root CLI group and flows to all subcommands via
``@click.pass_obj``. Provides lazy session initialization and
centralized result emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from pagarme.output.formatters import format_result

if TYPE_CHECKING:
    from pagarme.config.settings import PagarMeSettings
    from pagarme.infrastructure.service import PagarMeService
    from pagarme.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The session is created on first use so ``--help`` and ``--version``
    never touch the SDK.
    """

    def __init__(self, settings: PagarMeSettings) -> None:
        self.settings = settings
        self._session: PagarMeService | None = None

        from pagarme.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def session(self) -> PagarMeService:
        """The session used by every command (created lazily)."""
        if self._session is None:
            from pagarme.infrastructure.service import PagarMeService

            self._session = PagarMeService(self.settings)
        return self._session

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success (``result.ok``): writes to stdout, returns normally.
          Warnings are emitted to stderr so they don't pollute piped output.
        * Failure: writes to stderr, exits with code 1.
        """
        output = format_result(
            result,
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
        )
        if result.ok:
            click.echo(output)
            # In JSON mode, warnings are already in the serialized payload.
            if not self.settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
