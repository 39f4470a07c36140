"""
Contao Composer activate command.

SUMMARY: Activate the plugin and show effective requirements and repositories
"""
from __future__ import annotations

import argparse

from contao_composer.cli import OutputFormatter, activate_plugin, add_standard_flags, make_io

SUMMARY = "Activate the plugin and show effective requirements and repositories"


def register_args(parser: argparse.ArgumentParser) -> None:
    """Register command-specific arguments."""
    add_standard_flags(parser)


def main(args: argparse.Namespace) -> int:
    """Activate the plugin against composer.json."""
    formatter = OutputFormatter(json_mode=getattr(args, "json", False))

    try:
        plugin, composer = activate_plugin(args, make_io(args))
        repositories = [repo.to_dict() for repo in composer.repository_manager.repositories]

        if formatter.json_mode:
            formatter.json_output(
                {
                    "root": str(plugin.context.root) if plugin.context else None,
                    "requires": composer.package.requires,
                    "repositories": repositories,
                }
            )
        else:
            formatter.text("Requirements:")
            for name, constraint in sorted(composer.package.requires.items()):
                formatter.text_kv(name, constraint)
            formatter.text("Repositories:")
            for repo in repositories:
                formatter.text(f"  - [{repo['type']}] {repo['url']}")

        return 0

    except Exception as e:
        formatter.error(e, error_code="activate_error")
        return 1


if __name__ == "__main__":
    parser = argparse.ArgumentParser()
    register_args(parser)
    parsed = parser.parse_args()
    exit(main(parsed))
