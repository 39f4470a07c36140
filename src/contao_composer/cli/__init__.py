"""
Contao Composer CLI package.

Commands are auto-discovered from ``cli/commands``. Each command module
exposes ``SUMMARY``, ``register_args(parser)`` and ``main(args) -> int``.
"""
from ._output import OutputFormatter
from ._args import (
    add_json_flag,
    add_project_dir_flag,
    add_verbose_flag,
    add_standard_flags,
)
from ._utils import activate_plugin, get_project_dir, make_io

__all__ = [
    "OutputFormatter",
    "add_json_flag",
    "add_project_dir_flag",
    "add_verbose_flag",
    "add_standard_flags",
    "activate_plugin",
    "get_project_dir",
    "make_io",
]
