"""Tests for the contao-composer CLI commands."""
from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from helpers.contao import ContaoLayout


def run(module, argv: list[str]) -> int:
    parser = argparse.ArgumentParser()
    module.register_args(parser)
    return module.main(parser.parse_args(argv))


class TestRootCommand:
    def test_prints_root_as_json(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli.commands import root as command

        contao_root.contao3(websiteTitle="Site")

        exit_code = run(command, ["--project-dir", str(contao_root.project_dir), "--json", "--show-config"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["root"] == str(contao_root.root)
        assert data["version"] == "3.5"
        assert data["config"] == {"websiteTitle": "Site"}

    def test_missing_installation_fails(self, tmp_path: Path, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli.commands import root as command

        project = tmp_path / "composer"
        project.mkdir()

        exit_code = run(command, ["--project-dir", str(project), "--json"])

        assert exit_code == 1
        error = json.loads(capsys.readouterr().err)
        assert error["error"] == "root_error"
        assert error["context"]["root"] == str(tmp_path)


class TestActivateCommand:
    def test_lists_requirements_and_repositories(
        self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture
    ) -> None:
        from contao_composer.cli.commands import activate as command

        contao_root.contao3()
        contao_root.manifest({"require": {"contao/core": "3.5.*"}})

        exit_code = run(command, ["--project-dir", str(contao_root.project_dir), "--json"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["requires"]["contao-community-alliance/composer"] == "*"
        assert data["repositories"] == [
            {"type": "composer", "url": "http://legacy-packages-via.contao-community-alliance.org/"}
        ]


class TestEventCommand:
    def test_post_update_cleans_cache(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli.commands import event as command

        contao_root.contao3().cache_dirs("language")

        exit_code = run(command, ["post-update-cmd", "--project-dir", str(contao_root.project_dir)])

        assert exit_code == 0
        out = capsys.readouterr().out
        assert "Clean contao internal language cache" in out
        assert "Dispatched post-update-cmd" in out
        assert not (contao_root.root / "system" / "cache" / "language").exists()

    def test_unknown_event_succeeds(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli.commands import event as command

        contao_root.contao3()

        exit_code = run(command, ["post-install-cmd", "--project-dir", str(contao_root.project_dir), "--json"])

        assert exit_code == 0
        assert json.loads(capsys.readouterr().out) == {
            "status": "success",
            "event": "post-install-cmd",
            "handled": False,
        }


class TestCleanCacheCommand:
    def test_reports_removed(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli.commands import clean_cache as command

        contao_root.contao3().cache_dirs("dca", "sql")

        exit_code = run(command, ["--project-dir", str(contao_root.project_dir), "--json"])

        assert exit_code == 0
        data = json.loads(capsys.readouterr().out)
        assert data["removed"] == ["dca", "sql"]
        assert data["failures"] == {}


class TestDispatcher:
    def test_discovers_all_commands(self) -> None:
        from contao_composer.cli._dispatcher import discover_commands

        assert set(discover_commands()) == {"root", "activate", "event", "clean_cache"}

    def test_main_runs_command(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli._dispatcher import main

        contao_root.contao3()

        exit_code = main(["root", "--project-dir", str(contao_root.project_dir)])

        assert exit_code == 0
        assert f"Contao root: {contao_root.root}" in capsys.readouterr().out

    def test_main_reports_each_warning_once(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli._dispatcher import main

        contao_root.contao3()
        contao_root.manifest({"extra": {"contao": {"root": 5}}})

        exit_code = main(["root", "--project-dir", str(contao_root.project_dir)])

        assert exit_code == 0
        err = capsys.readouterr().err
        assert err.count("Ignoring invalid Contao root configuration") == 1

    def test_main_reports_cache_cleaning_once(self, contao_root: ContaoLayout, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli._dispatcher import main

        contao_root.contao3().cache_dirs("dca")

        exit_code = main(["clean-cache", "--project-dir", str(contao_root.project_dir)])

        assert exit_code == 0
        captured = capsys.readouterr()
        assert (captured.out + captured.err).count("Clean contao internal dca cache") == 1

    def test_main_without_command_prints_help(self, capsys: pytest.CaptureFixture) -> None:
        from contao_composer.cli._dispatcher import main

        assert main([]) == 0
        assert "contao-composer" in capsys.readouterr().out
