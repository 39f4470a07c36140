"""Legacy Contao bootstrap file support.

Contao 2.x and 3.x define their version and global configuration in PHP
files. This package reads those files into a typed :class:`LegacyConfig`
without executing them.
"""
from __future__ import annotations

from contao_composer.core.legacy.models import (
    LegacyConfig,
    LegacySource,
    RawExpression,
    compare_version,
)
from contao_composer.core.legacy.parser import parse_legacy_file, parse_legacy_source

__all__ = [
    "LegacyConfig",
    "LegacySource",
    "RawExpression",
    "compare_version",
    "parse_legacy_file",
    "parse_legacy_source",
]
