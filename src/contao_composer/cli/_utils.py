"""Shared CLI utilities."""
from __future__ import annotations

import argparse
import sys
from pathlib import Path

from contao_composer.core.host import Composer, load_composer
from contao_composer.core.io import PluginIO
from contao_composer.core.plugin import Plugin


def get_project_dir(args: argparse.Namespace) -> Path:
    """Get the composer project directory from args, defaulting to cwd."""
    value = getattr(args, "project_dir", None)
    if value:
        return Path(value).expanduser().absolute()
    return Path.cwd()


def make_io(args: argparse.Namespace) -> PluginIO:
    """Build the IO channel for a command.

    In JSON mode informational output goes to stderr so stdout stays parseable.
    """
    json_mode = getattr(args, "json", False)
    return PluginIO(
        stream=sys.stderr if json_mode else sys.stdout,
        err_stream=sys.stderr,
        verbose=getattr(args, "verbose", False),
    )


def activate_plugin(args: argparse.Namespace, io: PluginIO) -> tuple[Plugin, Composer]:
    """Load composer.json from the project directory and activate the plugin."""
    composer = load_composer(get_project_dir(args))
    plugin = Plugin()
    plugin.activate(composer, io)
    return plugin, composer


__all__ = ["get_project_dir", "make_io", "activate_plugin"]
