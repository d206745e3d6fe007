"""Tests for the fsseam CLI."""

from __future__ import annotations

import argparse
import json
from pathlib import Path

import pytest

from fsseam.cli.main import build_arg_parser, main, run_import
from fsseam.core.config import AppConfig
from fsseam.core.io import AbsolutePath, FakeFileSystem


@pytest.fixture(autouse=True)
def _no_config_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    """Run from an empty directory so no fsseam.yaml is picked up."""
    monkeypatch.chdir(tmp_path)
    monkeypatch.delenv("FSSEAM_LOG_LEVEL", raising=False)


def test_parser_requires_subcommand():
    """A subcommand is mandatory."""
    with pytest.raises(SystemExit):
        build_arg_parser().parse_args([])


def test_import_file_prints_json(tmp_path: Path, dealership_csv: str, capsys):
    """Importing a real file prints one JSON object per record."""
    csv_path = tmp_path / "dealers.csv"
    csv_path.write_text(dealership_csv, encoding="utf-8")

    code = main(["--log-level", "ERROR", "import", str(csv_path), "--json"])

    assert code == 0
    records = json.loads(capsys.readouterr().out)
    assert len(records) == 5
    assert records[0]["name"] == "Acme Motors"


def test_import_directory(tmp_path: Path, capsys):
    """A directory path imports every CSV file in it."""
    inbox = tmp_path / "inbox"
    inbox.mkdir()
    (inbox / "a.csv").write_text("Acme\n", encoding="utf-8")
    (inbox / "b.csv").write_text("Bayside\n", encoding="utf-8")

    code = main(["--log-level", "ERROR", "import", str(inbox), "--json"])

    assert code == 0
    assert [r["name"] for r in json.loads(capsys.readouterr().out)] == ["Acme", "Bayside"]


def test_missing_file_exits_1(tmp_path: Path, capsys):
    """A missing input reports an error and exit code 1."""
    code = main(["--log-level", "ERROR", "import", str(tmp_path / "nope.csv")])

    assert code == 1
    assert "Not found" in capsys.readouterr().out


def test_parse_error_exits_1(tmp_path: Path, capsys):
    """An invalid line reports its location and exit code 1."""
    csv_path = tmp_path / "bad.csv"
    csv_path.write_text("Acme\n,missing name\n", encoding="utf-8")

    code = main(["--log-level", "ERROR", "import", str(csv_path)])

    assert code == 1
    assert "bad.csv:2" in capsys.readouterr().out


def test_missing_config_exits_1(tmp_path: Path, capsys):
    """An explicit config path that does not exist is an error."""
    code = main(["--config", str(tmp_path / "fsseam.yaml"), "import", "x.csv"])

    assert code == 1
    assert "Config not found" in capsys.readouterr().out


def test_run_import_with_injected_filesystem(dealership_csv: str, capsys):
    """run_import reads through whatever FileSystem it is given."""
    fs = FakeFileSystem({"/data/dealers.csv": dealership_csv})
    args = argparse.Namespace(path="/data/dealers.csv", json=True)

    assert run_import(args, AppConfig(), fs) == 0
    assert len(json.loads(capsys.readouterr().out)) == 5


def test_options_accepted_after_subcommand(tmp_path: Path, dealership_csv: str, capsys):
    """--config and --log-level may follow the subcommand."""
    csv_path = tmp_path / "dealers.csv"
    csv_path.write_text(dealership_csv, encoding="utf-8")
    config_path = tmp_path / "app.yaml"
    config_path.write_text("logging:\n  level: INFO\n", encoding="utf-8")

    code = main(
        ["import", str(csv_path), "--config", str(config_path), "--log-level", "ERROR", "--json"]
    )

    assert code == 0
    assert len(json.loads(capsys.readouterr().out)) == 5


def test_subcommand_option_overrides_global():
    """An option repeated after the subcommand wins; otherwise the global one is kept."""
    parser = build_arg_parser()

    args = parser.parse_args(["--log-level", "DEBUG", "import", "x.csv", "--log-level", "ERROR"])
    assert args.log_level == "ERROR"

    args = parser.parse_args(["--log-level", "DEBUG", "import", "x.csv"])
    assert args.log_level == "DEBUG"
    assert args.config is None


def test_undecodable_file_exits_1(tmp_path: Path, capsys):
    """A file that is not valid in the configured encoding is reported, not raised."""
    csv_path = tmp_path / "latin1.csv"
    csv_path.write_bytes("Café Motors\n".encode("latin-1"))

    code = main(["import", str(csv_path), "--log-level", "ERROR"])

    assert code == 1
    assert "Cannot decode" in capsys.readouterr().out


class _VanishingDirFileSystem(FakeFileSystem):
    """Directory that is replaced by a file between is_dir and listdir."""

    async def is_dir(self, path: AbsolutePath) -> bool:
        return True

    async def listdir(self, path: AbsolutePath) -> list[str]:
        raise NotADirectoryError(20, "Not a directory", str(path))


def test_other_os_errors_exit_1(capsys):
    """Unexpected OSErrors are reported with exit code 1."""
    args = argparse.Namespace(path="/data/inbox", json=True)

    assert run_import(args, AppConfig(), _VanishingDirFileSystem()) == 1
    assert "Not a directory" in capsys.readouterr().out
