"""
Contao Composer root command.

SUMMARY: Show the Contao installation root and version
"""
from __future__ import annotations

import argparse

from contao_composer.cli import OutputFormatter, add_standard_flags, get_project_dir, make_io

SUMMARY = "Show the Contao installation root and version"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    parser.add_argument(
        "--show-config",
        action="store_true",
        help="Also print the TL_CONFIG settings read from the installation",
    )
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Resolve and print the Contao installation root."""
    from contao_composer.core.context import PluginContext
    from contao_composer.core.host import load_composer
    from contao_composer.core.root import resolve_root

    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        project_dir = get_project_dir(args)
        composer = load_composer(project_dir)
        context = PluginContext(cwd=project_dir)
        root = resolve_root(context, composer.package.extra, io=make_io(args))

        if formatter.json_mode:
            data = {
                "root": str(root),
                "version": context.version,
                "files": [str(p) for p in context.legacy.files],
            }
            if args.show_config:
                data["config"] = context.legacy.settings
            formatter.json_output(data)
        else:
            formatter.text(f"Contao root: {root}")
            formatter.text_kv("Version", context.version)
            for path in context.legacy.files:
                formatter.text_kv("Loaded", path)
            if args.show_config:
                formatter.text("  Settings:")
                for key, value in sorted(context.legacy.settings.items()):
                    formatter.text_kv(key, value, prefix="    ")

        return 0

    except Exception as e:
        formatter.error(e, error_code="root_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    parsed = parser.parse_args()
    exit(main(parsed))
