"""Tests for the springgen command line."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from springgen.cli import create_parser, main

JAVA_ROOT = Path("src", "main", "java", "com", "example", "api")


class TestParser:
    """Tests for argument parsing."""

    def test_defaults(self) -> None:
        args = create_parser().parse_args(["p.json", "--name", "shop"])
        assert args.file == "p.json"
        assert args.output == "out"
        assert args.log_level == "WARNING"
        assert not args.interface and not args.demo and not args.inc and not args.api

    def test_file_and_url_exclusive(self) -> None:
        with pytest.raises(SystemExit):
            create_parser().parse_args(["p.json", "--url", "https://example.com/p.json"])


class TestMain:
    """Tests for main() exit codes and effects."""

    def test_generate_project(self, petstore_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        code = main([str(petstore_file), "--name", "petstore", "-o", str(out)])

        assert code == 0
        assert (out / JAVA_ROOT / "pet" / "PetResource.java").is_file()
        assert (out / JAVA_ROOT / "PetstoreApplication.java").is_file()
        assert (out / "pom.xml").is_file()

    def test_generation_options(self, petstore_file: Path, tmp_path: Path) -> None:
        out = tmp_path / "out"
        code = main(
            [
                str(petstore_file),
                "--name",
                "petstore",
                "-o",
                str(out),
                "--interface",
                "--api",
                "--pkg",
                "org.shop.server",
            ]
        )

        assert code == 0
        server = out / "src" / "main" / "java" / "org" / "shop" / "server"
        assert (server / "pet" / "IPetResource.java").is_file()
        assert (out / JAVA_ROOT / "PetInfo.java").is_file()

    def test_missing_name(self, petstore_file: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "out"
        assert main([str(petstore_file), "-o", str(out)]) == 1
        assert "--name" in capsys.readouterr().out
        assert not out.exists()

    def test_invalid_package(self, petstore_file: Path, tmp_path: Path) -> None:
        assert main([str(petstore_file), "--name", "x", "--pkg", "9bad", "-o", str(tmp_path)]) == 1

    def test_missing_input(self) -> None:
        assert main(["--name", "petstore"]) == 1

    def test_missing_file(self, tmp_path: Path) -> None:
        assert main([str(tmp_path / "nope.json"), "--name", "petstore"]) == 1

    def test_malformed_project(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text(json.dumps({"modules": {}}))
        assert main([str(path), "--name", "petstore", "-o", str(tmp_path / "out")]) == 1

    def test_dry_run_writes_nothing(self, petstore_file: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "out"
        code = main([str(petstore_file), "--name", "petstore", "-o", str(out), "--dry-run"])

        assert code == 0
        assert not out.exists()
        assert "PetResource" in capsys.readouterr().out

    def test_config_file(self, petstore_file: Path, tmp_path: Path) -> None:
        config = tmp_path / "spring.json"
        config.write_text(json.dumps({"name": "petstore", "use_interface": True}))
        out = tmp_path / "out"

        assert main([str(petstore_file), "--config", str(config), "-o", str(out)]) == 0
        assert (out / JAVA_ROOT / "pet" / "IPetResource.java").is_file()

    def test_url_input(
        self, petstore_document, tmp_path: Path, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        def fake_load(file_path=None, url=None):
            assert url == "https://example.com/p.json"
            return url, petstore_document

        monkeypatch.setattr("springgen.cli.load_project_document", fake_load)
        out = tmp_path / "out"
        code = main(["--url", "https://example.com/p.json", "--name", "petstore", "-o", str(out)])

        assert code == 0
        assert (out / "pom.xml").is_file()

    def test_list_languages(self, capsys) -> None:
        assert main(["--list-languages"]) == 0
        output = capsys.readouterr().out
        assert "spring" in output
        assert "java" in output

    def test_verbose_shows_warnings(self, petstore_file: Path, tmp_path: Path, capsys) -> None:
        out = tmp_path / "out"
        code = main([str(petstore_file), "--name", "petstore", "-o", str(out), "--verbose"])

        assert code == 0
        assert "PatchPet" in capsys.readouterr().out
