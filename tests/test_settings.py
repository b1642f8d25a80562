import os

from buspages.settings import get_settings_filename_path


def test_format(monkeypatch, tmp_path):
    home = str(tmp_path)
    monkeypatch.setenv("HOME", home)
    assert get_settings_filename_path("file") == f"{home}{os.sep}file"


def test_path_starts_with_home(monkeypatch):
    monkeypatch.setenv("HOME", "/home/someone")
    result = get_settings_filename_path("settings.yaml")
    assert result.startswith("/home/someone")
    assert result.endswith("settings.yaml")
    assert len(result) == len("/home/someone") + len(os.sep) + len("settings.yaml")