"""Tests for configuration helpers."""

from pathlib import Path

import pytest

from nutrilog.config import Settings, resolve_export_path


def test_settings_read_prefixed_environment(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("NUTRILOG_DATA_FILE", "/tmp/custom.json")
    monkeypatch.setenv("NUTRILOG_AUTOSAVE", "false")

    settings = Settings()

    assert settings.data_file == Path("/tmp/custom.json")
    assert settings.autosave is False


@pytest.mark.parametrize(
    ("filename", "expected"),
    [
        (None, "nutrition_export.csv"),
        ("  ", "nutrition_export.csv"),
        ("day", "day.csv"),
        ("day.CSV", "day.CSV"),
        ("../../etc/passwd", "passwd.csv"),
    ],
)
def test_resolve_export_path(filename: str | None, expected: str) -> None:
    assert resolve_export_path(Path("exports"), filename) == Path("exports") / expected
