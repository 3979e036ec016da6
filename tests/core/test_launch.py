from __future__ import annotations

import subprocess
from pathlib import Path

import pytest

from envpick.core import launch
from envpick.core.exceptions import BrowserOpenError, EditorError, UnsupportedPlatformError
from helpers.fakes import RecordingPopen


def test_editor_defaults_to_vi() -> None:
    assert launch.editor_command(Path("/cfg/config.toml"), environ={}) == ["vi", "/cfg/config.toml"]


def test_editor_from_environment_with_arguments() -> None:
    cmd = launch.editor_command(Path("/cfg/config.toml"), environ={"EDITOR": "code --wait"})

    assert cmd == ["code", "--wait", "/cfg/config.toml"]


def test_blank_editor_falls_back_to_vi() -> None:
    assert launch.editor_command(Path("f"), environ={"EDITOR": "  "})[0] == "vi"


def test_open_in_editor_waits_for_editor(monkeypatch, tmp_path) -> None:
    calls = []

    def _run(cmd, check=False):
        calls.append(cmd)
        return subprocess.CompletedProcess(cmd, 0)

    monkeypatch.setenv("EDITOR", "nano")
    monkeypatch.setattr(launch.subprocess, "run", _run)

    launch.open_in_editor(tmp_path / "config.toml")

    assert calls == [["nano", str(tmp_path / "config.toml")]]


def test_open_in_editor_non_zero_exit(monkeypatch, tmp_path) -> None:
    monkeypatch.setattr(
        launch.subprocess, "run", lambda cmd, check=False: subprocess.CompletedProcess(cmd, 1)
    )

    with pytest.raises(EditorError) as excinfo:
        launch.open_in_editor(tmp_path / "config.toml")
    assert excinfo.value.context == {"returncode": 1}


def test_open_in_editor_missing_binary(monkeypatch, tmp_path) -> None:
    def _run(cmd, check=False):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(launch.subprocess, "run", _run)

    with pytest.raises(EditorError):
        launch.open_in_editor(tmp_path / "config.toml")


@pytest.mark.parametrize(
    "platform, expected",
    [
        ("darwin", ["open", "https://x.test"]),
        ("linux", ["xdg-open", "https://x.test"]),
        ("win32", ["rundll32", "url.dll,FileProtocolHandler", "https://x.test"]),
    ],
)
def test_browser_command(platform: str, expected: list[str]) -> None:
    assert launch.browser_command("https://x.test", platform=platform) == expected


def test_browser_command_unsupported_platform() -> None:
    with pytest.raises(UnsupportedPlatformError) as excinfo:
        launch.browser_command("https://x.test", platform="plan9")
    assert str(excinfo.value) == "unsupported platform: plan9"


def test_open_browser_does_not_wait(monkeypatch) -> None:
    popen = RecordingPopen()
    monkeypatch.setattr(launch.sys, "platform", "linux")
    monkeypatch.setattr(launch.subprocess, "Popen", popen)

    process = launch.open_browser("https://x.test")

    assert process is popen
    assert popen.commands == [["xdg-open", "https://x.test"]]
    assert popen.kwargs[0]["start_new_session"] is True


def test_open_browser_failure(monkeypatch) -> None:
    def _popen(cmd, **kwargs):
        raise FileNotFoundError(cmd[0])

    monkeypatch.setattr(launch.sys, "platform", "linux")
    monkeypatch.setattr(launch.subprocess, "Popen", _popen)

    with pytest.raises(BrowserOpenError):
        launch.open_browser("https://x.test")
