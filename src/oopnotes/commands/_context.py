"""AppContext: the object every subcommand receives through ``@click.pass_obj``.

The root group builds one per invocation. Notes and plugins are loaded on
first use of :attr:`AppContext.library`, so ``--help``, ``--version`` and
``glossary`` never touch the filesystem.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import click

from oopnotes.config.logging import configure_logging
from oopnotes.output.formatters import OutputSettings, format_result

if TYPE_CHECKING:
    from oopnotes.config.settings import NotesSettings
    from oopnotes.infrastructure.library import Library
    from oopnotes.plugins.manager import PluginManager
    from oopnotes.services.result import ServiceResult

logger = logging.getLogger(__name__)


class AppContext:
    def __init__(self, settings: NotesSettings) -> None:
        self.settings = settings
        self._library: Library | None = None
        configure_logging(verbose=settings.verbose, log_json=settings.log_json)

    def _load_plugins(self) -> PluginManager | None:
        if not self.settings.plugins.enabled:
            return None
        from oopnotes.plugins.manager import PluginManager

        manager = PluginManager()
        local_dir = self.settings.resolve_path(self.settings.plugins.local_dir)
        logger.debug("Plugins loaded: %s", manager.discover_and_load(local_dir=local_dir))
        return manager

    @property
    def library(self) -> Library:
        if self._library is None:
            from oopnotes.infrastructure.library import Library

            self._library = Library(self.settings, self._load_plugins())
        return self._library

    @property
    def output_settings(self) -> OutputSettings:
        return OutputSettings(
            json_output=self.settings.json_output,
            quiet=self.settings.quiet,
            verbose=self.settings.verbose,
        )

    def emit(self, result: ServiceResult) -> None:
        """Print *result* and exit 1 if it failed.

        Successful results go to stdout and their warnings to stderr (JSON
        output already carries them). Failed results go to stderr.
        """
        output_settings = self.output_settings
        text = format_result(result, settings=output_settings)
        if not result.ok:
            click.echo(text, err=True)
            raise SystemExit(1)
        click.echo(text)
        if not output_settings.json_output:
            for warning in result.warnings:
                click.echo(f"WARNING: {warning}", err=True)
