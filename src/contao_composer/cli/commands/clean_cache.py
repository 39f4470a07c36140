"""
Contao Composer clean-cache command.

SUMMARY: Clean Contao's internal cache directories
"""
from __future__ import annotations

import argparse

from contao_composer.cli import OutputFormatter, add_standard_flags, get_project_dir, make_io

SUMMARY = "Clean Contao's internal cache directories"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Delete the config, dca, language and sql caches of the Contao root."""
    from contao_composer.core.context import PluginContext
    from contao_composer.core.host import load_composer
    from contao_composer.core.lifecycle.cache import clean_cache
    from contao_composer.core.root import resolve_root

    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        io = make_io(args)
        project_dir = get_project_dir(args)
        composer = load_composer(project_dir)
        root = resolve_root(PluginContext(cwd=project_dir), composer.package.extra, io=io)
        result = clean_cache(io, root)

        if formatter.json_mode:
            formatter.json_output(
                {
                    "root": str(root),
                    "removed": list(result.removed),
                    "skipped": list(result.skipped),
                    "failures": dict(result.failures),
                }
            )
        else:
            formatter.text(f"Cleaned: {', '.join(result.removed) or 'nothing'}")
            for name, error in result.failures:
                formatter.text(f"  Failed: {name} ({error})")

        return 0 if result.success else 1

    except Exception as e:
        formatter.error(e, error_code="clean_cache_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    parsed = parser.parse_args()
    exit(main(parsed))
