"""AppContext: shared Click context for all commands.

Created once by the root CLI group and passed to subcommands via
``@click.pass_obj``.  Builds the HTTP client lazily and centralizes result
emission (stdout/stderr routing + exit codes).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from annoguide.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from annoguide.config.settings import AppSettings
    from annoguide.infrastructure.http import ApiClient
    from annoguide.services.result import ServiceResult


class AppContext:
    """Shared context flowing through Click's command hierarchy.

    The API client is created on first use so ``--help`` and ``--version``
    never open a connection pool.
    """

    def __init__(self, settings: AppSettings) -> None:
        self.settings = settings
        self._client: ApiClient | None = None

        from annoguide.config.logging import configure_logging

        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    @property
    def client(self) -> ApiClient:
        """The API client (created lazily on first access)."""
        if self._client is None:
            from annoguide.infrastructure import http

            self._client = http.ApiClient(self.settings.api)
            click.get_current_context().call_on_close(self._client.close)
        return self._client

    def emit(self, result: ServiceResult) -> None:
        """Format and output a ServiceResult with correct exit semantics.

        * Success: writes to stdout, warnings to stderr.
        * Failure: writes to stderr, exits with code 1.
        """
        settings = OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )
        output = format_result(result, settings=settings)
        if result.ok:
            click.echo(output)
            if not settings.json_output:
                for warning in result.warnings:
                    click.echo(f"WARNING: {warning}", err=True)
        else:
            click.echo(output, err=True)
            raise SystemExit(1)
