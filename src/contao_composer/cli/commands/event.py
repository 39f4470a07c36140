"""
Contao Composer event command.

SUMMARY: Activate the plugin and dispatch a lifecycle event
"""
from __future__ import annotations

import argparse

from contao_composer.cli import OutputFormatter, activate_plugin, add_standard_flags, make_io

SUMMARY = "Activate the plugin and dispatch a lifecycle event"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "name",
        help="Event name (pre-update-cmd, post-update-cmd, post-autoload-dump, pre-file-download)",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Dispatch one lifecycle event through the host event dispatcher."""
    from contao_composer.core.host import EventDispatcher

    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        plugin, _ = activate_plugin(args, make_io(args))
        dispatcher = EventDispatcher()
        dispatcher.add_subscriber(plugin)
        handled = dispatcher.has_listeners(args.name)
        dispatcher.dispatch(args.name)

        formatter.success(
            {"event": args.name, "handled": handled},
            f"Dispatched {args.name}" if handled else f"No handler for {args.name}",
        )
        return 0

    except Exception as e:
        formatter.error(e, error_code="event_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    parsed = parser.parse_args()
    exit(main(parsed))
