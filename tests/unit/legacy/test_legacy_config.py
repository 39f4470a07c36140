"""Tests for layering legacy sources into a LegacyConfig."""
from __future__ import annotations

from pathlib import Path

import pytest

from contao_composer.core.legacy.models import LegacyConfig, LegacySource, compare_version


class TestCompareVersion:
    @pytest.mark.parametrize(
        ("version", "other", "expected"),
        [
            ("3.5", "3", 1),
            ("3", "3", 0),
            ("3.0.0", "3", 0),
            ("2.11", "3", -1),
            ("2.9", "2.11", -1),
            ("3.0.RC1", "3", -1),
        ],
    )
    def test_compares_contao_versions(self, version: str, other: str, expected: int) -> None:
        assert compare_version(version, other) == expected

    def test_invalid_version_raises(self) -> None:
        from contao_composer.core.exceptions import LegacyConfigError

        with pytest.raises(LegacyConfigError, match="Cannot compare"):
            compare_version("not-a-version", "3")


class TestLegacyConfig:
    def test_version_comes_from_constants(self) -> None:
        config = LegacyConfig()
        config.apply_constants(LegacySource(Path("c.php"), constants={"VERSION": "3.5"}))

        assert config.version == "3.5"
        assert config.files == [Path("c.php")]

    def test_numeric_version_constant_is_stringified(self) -> None:
        config = LegacyConfig(constants={"VERSION": 3.1})

        assert config.version == "3.1"

    def test_version_at_least_requires_version(self) -> None:
        from contao_composer.core.exceptions import LegacyConfigError

        with pytest.raises(LegacyConfigError, match="unknown"):
            LegacyConfig().version_at_least("3")

    def test_localconfig_layers_over_defaults(self) -> None:
        config = LegacyConfig()
        config.apply_settings(
            LegacySource(
                Path("default.php"),
                assignments=[(("websiteTitle",), "Contao"), (("dbHost",), "localhost")],
            )
        )
        config.apply_settings(
            LegacySource(Path("localconfig.php"), assignments=[(("websiteTitle",), "My Site")])
        )

        assert config.settings == {"websiteTitle": "My Site", "dbHost": "localhost"}
        assert config.files == [Path("default.php"), Path("localconfig.php")]

    def test_nested_assignments_merge_across_files(self) -> None:
        config = LegacyConfig()
        config.apply_settings(LegacySource(Path("a.php"), assignments=[(("db", "host"), "a")]))
        config.apply_settings(LegacySource(Path("b.php"), assignments=[(("db", "port"), 3306)]))

        assert config.settings == {"db": {"host": "a", "port": 3306}}
