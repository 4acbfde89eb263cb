"""End-to-end tests for the searchpaths CLI commands via the dispatcher."""
from __future__ import annotations

import json
import os
from pathlib import Path

import pytest
import yaml

from searchpaths.cli._dispatcher import build_parser, discover_commands, main


def test_discover_commands_finds_all_commands() -> None:
    commands = discover_commands()

    assert set(commands) >= {"config", "exists", "qualify", "show"}
    for info in commands.values():
        assert callable(info["main"])
        assert callable(info["register_args"])
        assert info["summary"]


def test_no_command_prints_help(capsys: pytest.CaptureFixture[str]) -> None:
    assert main([]) == 0
    assert "usage: searchpaths" in capsys.readouterr().out


def test_version_flag(capsys: pytest.CaptureFixture[str]) -> None:
    with pytest.raises(SystemExit) as excinfo:
        build_parser().parse_args(["--version"])

    assert excinfo.value.code == 0
    assert "searchpaths 1.0.0" in capsys.readouterr().out


class TestExists:
    def test_found(self, make_file, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_file("assets/wood.png")

        code = main(["exists", "wood.png", "--path", str(tmp_path / "assets")])

        assert code == 0
        assert capsys.readouterr().out.strip() == "yes"

    def test_not_found(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["exists", "wood.png", "--path", str(tmp_path / "assets")])

        assert code == 1
        assert capsys.readouterr().out.strip() == "no"

    def test_json(self, make_file, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_file("proj/wood.png")

        code = main(["exists", "wood.png", "--root", str(tmp_path / "proj"), "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert code == 0
        assert payload == {"status": "found", "target": "wood.png", "exists": True}

    def test_seeded_from_environment(
        self, make_file, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_file("env/wood.png")
        monkeypatch.setenv("MYPATHS", str(tmp_path / "env"))

        assert main(["exists", "wood.png", "--envvar", "MYPATHS"]) == 0

    def test_bad_separator_is_reported(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["exists", "x", "--separator", "::"])

        assert code == 2
        assert capsys.readouterr().err.startswith("Error:")


class TestQualify:
    def test_prints_qualified_path_and_origin(
        self, make_file, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_file("proj/shaders/plastic.osl")

        code = main(
            ["qualify", "plastic.osl", "--root", str(tmp_path / "proj"), "--path", "shaders", "--show-origin"]
        )

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines[0] == str(tmp_path / "proj" / "shaders" / "plastic.osl")
        assert lines[1] == "  search path: shaders"

    def test_unresolved_target_is_echoed(self, capsys: pytest.CaptureFixture[str]) -> None:
        code = main(["qualify", "ghost.png", "--show-origin"])

        lines = capsys.readouterr().out.splitlines()
        assert code == 0
        assert lines == ["ghost.png", "  search path: <none>"]

    def test_json(self, make_file, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        make_file("proj/plastic.osl")

        main(["qualify", "plastic.osl", "--root", str(tmp_path / "proj"), "--json"])

        payload = json.loads(capsys.readouterr().out)
        assert payload == {
            "target": "plastic.osl",
            "path": str(tmp_path / "proj" / "plastic.osl"),
            "searchPath": None,
            "found": True,
        }

    def test_split_paths_use_configured_separator(
        self, make_file, tmp_path: Path, capsys: pytest.CaptureFixture[str]
    ) -> None:
        make_file("b/f")
        paths = "|".join([str(tmp_path / "a"), str(tmp_path / "b")])

        main(["qualify", "f", "--separator", "|", "--paths", paths])

        assert capsys.readouterr().out.strip() == str(tmp_path / "b" / "f")


class TestShow:
    def test_serialized_order(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        root = tmp_path / "proj"
        abs_dir = tmp_path / "abs"

        code = main(["show", "--root", str(root), "--path", "textures", "--path", str(abs_dir)])

        expected = os.pathsep.join([str(root), str(root / "textures"), str(abs_dir)])
        assert code == 0
        assert capsys.readouterr().out.strip() == expected

    def test_reversed(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        root = tmp_path / "proj"

        main(["show", "--root", str(root), "--path", "textures", "--reversed", "--separator", ";"])

        assert capsys.readouterr().out.strip() == f"{root / 'textures'};{root}"

    def test_list_annotates_origins(
        self, tmp_path: Path, monkeypatch: pytest.MonkeyPatch, capsys: pytest.CaptureFixture[str]
    ) -> None:
        monkeypatch.setenv("MYPATHS", str(tmp_path / "env"))

        main(["show", "--envvar", "MYPATHS", "--root", str(tmp_path), "--path", "textures", "--list"])

        rows = [line.split() for line in capsys.readouterr().out.splitlines()]
        assert rows == [
            ["explicit", "textures"],
            ["environment", str(tmp_path / "env")],
            ["root", str(tmp_path)],
        ]

    def test_json(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        main(["show", "--path", str(tmp_path / "a"), "--path", "rel", "--json", "--separator", ";"])

        payload = json.loads(capsys.readouterr().out)
        assert payload["separator"] == ";"
        assert payload["root"] is None
        assert payload["paths"] == [str(tmp_path / "a")]
        assert payload["serialized"] == str(tmp_path / "a")
        assert [layer["path"] for layer in payload["layers"]] == ["rel", str(tmp_path / "a")]

    def test_project_config_file(self, workdir: Path, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        (workdir / "searchpaths.yaml").write_text(
            yaml.safe_dump({"search": {"root": str(tmp_path), "paths": ["osl"], "separator": ";"}}),
            encoding="utf-8",
        )

        main(["show"])

        assert capsys.readouterr().out.strip() == f"{tmp_path};{tmp_path / 'osl'}"


class TestConfig:
    def test_key_as_yaml(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["config", "search.envvar"]) == 0

        assert yaml.safe_load(capsys.readouterr().out) == {"search": {"envvar": "SEARCH_PATH"}}

    def test_full_config_as_json(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["config", "--json"]) == 0

        payload = json.loads(capsys.readouterr().out)
        assert set(payload) == {"search", "logging"}

    def test_unknown_key(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["config", "search.nope"]) == 1
        assert "Key not found: search.nope" in capsys.readouterr().err

    def test_invalid_config_file_json_error(self, tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
        bad = tmp_path / "bad.yaml"
        bad.write_text("search: {separator: '::'}\n", encoding="utf-8")

        assert main(["config", "--config", str(bad), "--json"]) == 1

        payload = json.loads(capsys.readouterr().err)
        assert payload["error"] == "config_error"
        assert payload["details"]["code"] == "ConfigError"
