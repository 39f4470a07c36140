"""Tests for Contao installation root detection and bootstrap loading."""
from __future__ import annotations

import re
from pathlib import Path

import pytest

from contao_composer.core.context import PluginContext
from contao_composer.core.root import resolve_root, select_root
from helpers.contao import ContaoLayout, write_php


class TestSelectRoot:
    """Candidate selection without touching bootstrap files."""

    def test_explicit_root_from_extra(self) -> None:
        root = select_root(Path("/srv/site"), {"contao": {"root": "app"}})

        assert root == Path("/srv/site/app")

    def test_explicit_root_wins_over_vendored_core(self, tmp_path: Path) -> None:
        (tmp_path / "vendor" / "contao" / "core").mkdir(parents=True)

        root = select_root(tmp_path, {"contao": {"root": "web"}})

        assert root == tmp_path / "web"

    def test_vendored_core(self, tmp_path: Path) -> None:
        vendored = tmp_path / "vendor" / "contao" / "core"
        vendored.mkdir(parents=True)

        assert select_root(tmp_path, {}) == vendored

    def test_defaults_to_parent_of_project_dir(self, tmp_path: Path) -> None:
        project = tmp_path / "composer"
        project.mkdir()

        assert select_root(project, {}) == tmp_path

    def test_empty_explicit_root_is_ignored(self, tmp_path: Path) -> None:
        project = tmp_path / "composer"
        project.mkdir()

        assert select_root(project, {"contao": {"root": ""}}) == tmp_path

    def test_absolute_explicit_root_stays_under_project_dir(self, tmp_path: Path) -> None:
        root = select_root(tmp_path, {"contao": {"root": "/app"}})

        assert root == tmp_path / "app"

    def test_zero_string_root_counts_as_empty(self, tmp_path: Path) -> None:
        project = tmp_path / "composer"
        project.mkdir()

        assert select_root(project, {"contao": {"root": "0"}}) == tmp_path

    def test_invalid_extra_warns_and_falls_back(self, tmp_path: Path, buffered_io) -> None:
        project = tmp_path / "composer"
        project.mkdir()

        root = select_root(project, {"contao": {"root": 42}}, io=buffered_io)

        assert root == tmp_path
        assert "Ignoring invalid Contao root configuration" in buffered_io.errors
        assert "extra.contao.root" in buffered_io.errors


class TestResolveRoot:
    def test_resolves_contao3_installation(self, contao_root: ContaoLayout) -> None:
        contao_root.contao3(websiteTitle="Contao Open Source CMS")
        context = PluginContext(cwd=contao_root.project_dir)

        root = resolve_root(context, {})

        assert root == contao_root.root
        assert context.version == "3.5"
        assert context.legacy.settings == {"websiteTitle": "Contao Open Source CMS"}
        assert context.legacy.files == [
            contao_root.config_dir / "constants.php",
            contao_root.config_dir / "default.php",
        ]

    def test_resolves_contao2_installation(self, contao_root: ContaoLayout) -> None:
        contao_root.contao2(websiteTitle="Legacy")
        context = PluginContext(cwd=contao_root.project_dir)

        resolve_root(context, {})

        assert context.version == "2.11"
        assert context.legacy.files[0] == contao_root.root / "system" / "constants.php"
        assert context.legacy.files[1] == contao_root.config_dir / "config.php"
        assert context.legacy.settings == {"websiteTitle": "Legacy"}

    def test_contao3_constants_are_preferred(self, contao_root: ContaoLayout) -> None:
        contao_root.contao3(version="3.2")
        write_php(contao_root.root / "system" / "constants.php", "define('VERSION', '2.11');\n")
        context = PluginContext(cwd=contao_root.project_dir)

        resolve_root(context, {})

        assert context.version == "3.2"

    def test_localconfig_is_layered_on_top(self, contao_root: ContaoLayout) -> None:
        contao_root.contao3(websiteTitle="Default", dbHost="localhost").localconfig(websiteTitle="Mine")
        context = PluginContext(cwd=contao_root.project_dir)

        resolve_root(context, {})

        assert context.legacy.settings == {"websiteTitle": "Mine", "dbHost": "localhost"}
        assert context.legacy.files[-1] == contao_root.config_dir / "localconfig.php"

    def test_missing_constants_is_fatal_and_names_root(self, tmp_path: Path) -> None:
        from contao_composer.core.exceptions import RootResolutionError

        project = tmp_path / "composer"
        project.mkdir()
        context = PluginContext(cwd=project)

        with pytest.raises(RootResolutionError, match=re.escape(str(tmp_path))) as excinfo:
            resolve_root(context, {})

        assert excinfo.value.context["root"] == str(tmp_path)
        assert len(excinfo.value.context["probed"]) == 2

    def test_constants_without_version_is_fatal(self, contao_root: ContaoLayout) -> None:
        from contao_composer.core.exceptions import LegacyConfigError

        write_php(contao_root.config_dir / "constants.php", "define('BUILD', '1');\n")

        with pytest.raises(LegacyConfigError, match="VERSION"):
            resolve_root(PluginContext(cwd=contao_root.project_dir), {})

    def test_missing_version_selected_config_is_fatal(self, contao_root: ContaoLayout) -> None:
        from contao_composer.core.exceptions import LegacyConfigError

        contao_root.contao3()
        (contao_root.config_dir / "default.php").unlink()

        with pytest.raises(LegacyConfigError, match="default.php"):
            resolve_root(PluginContext(cwd=contao_root.project_dir), {})

    def test_vendored_core_scenario(self, tmp_path: Path) -> None:
        vendored = ContaoLayout(tmp_path / "vendor" / "contao" / "core").contao3()

        root = resolve_root(PluginContext(cwd=tmp_path), {})

        assert root == vendored.root

    def test_explicit_root_scenario(self, tmp_path: Path) -> None:
        app = ContaoLayout(tmp_path / "app").contao3()

        root = resolve_root(PluginContext(cwd=tmp_path), {"contao": {"root": "app"}})

        assert root == app.root


class TestMemoization:
    def test_second_call_returns_same_root_after_layout_change(self, tmp_path: Path) -> None:
        ContaoLayout(tmp_path).contao3()
        project = tmp_path / "composer"
        context = PluginContext(cwd=project)

        first = resolve_root(context, {})
        # A vendored core appearing later must not change the memoized root.
        ContaoLayout(project / "vendor" / "contao" / "core").contao3()
        second = resolve_root(context, {"contao": {"root": "elsewhere"}})

        assert first == second == tmp_path

    def test_bootstrap_files_are_loaded_once(self, contao_root: ContaoLayout) -> None:
        contao_root.contao3(websiteTitle="Before")
        context = PluginContext(cwd=contao_root.project_dir)
        resolve_root(context, {})

        contao_root.localconfig(websiteTitle="After")
        resolve_root(context, {})

        assert context.legacy.settings == {"websiteTitle": "Before"}
        assert len(context.legacy.files) == 2

    def test_preloaded_context_skips_probing(self, tmp_path: Path) -> None:
        context = PluginContext(
            cwd=tmp_path,
            root=tmp_path / "somewhere",
            constants_loaded=True,
            config_loaded=True,
        )

        assert resolve_root(context, {}) == tmp_path / "somewhere"
        assert context.legacy.files == []

    def test_root_stays_memoized_after_fatal_failure(self, tmp_path: Path) -> None:
        from contao_composer.core.exceptions import RootResolutionError

        project = tmp_path / "composer"
        project.mkdir()
        context = PluginContext(cwd=project)

        with pytest.raises(RootResolutionError):
            resolve_root(context, {})

        assert context.root == tmp_path
        assert not context.constants_loaded
