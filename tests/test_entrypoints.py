"""Process-level checks for the direct-execution versus import distinction."""

from __future__ import annotations

import os
import subprocess
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]


def _env() -> dict[str, str]:
    pythonpath = os.pathsep.join(filter(None, [str(PROJECT_ROOT / "src"), os.environ.get("PYTHONPATH")]))
    env = os.environ | {"PYTHONPATH": pythonpath}
    env.pop("HELLO_DEVCONTAINER_LOG_LEVEL", None)
    return env


def _run(args: list[str], cwd: Path, extra_env: dict[str, str] | None = None) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        [sys.executable, *args],
        cwd=cwd,
        env=_env() | (extra_env or {}),
        capture_output=True,
        text=True,
        timeout=60,
        check=False,
    )


def test_running_the_module_prints_exactly_three_lines(tmp_path: Path) -> None:
    result = _run(["-m", "hello_devcontainer"], tmp_path)

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert lines[0] == "Hello, world."
    assert lines[1].startswith("Current Time: ")
    assert lines[2].startswith("Ruby Version ")


def test_importing_the_package_prints_nothing(tmp_path: Path) -> None:
    result = _run(["-c", "import hello_devcontainer, hello_devcontainer.__main__, hello_devcontainer.cli"], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout == ""


def test_explicit_call_after_import_greets_once(tmp_path: Path) -> None:
    result = _run(["-c", "import hello_devcontainer; hello_devcontainer.greet()"], tmp_path)

    assert result.returncode == 0, result.stderr
    assert result.stdout.count("Hello, world.") == 1
    assert len(result.stdout.splitlines()) == 3


def test_running_the_module_ignores_a_bad_level_in_the_environment(tmp_path: Path) -> None:
    result = _run(["-m", "hello_devcontainer"], tmp_path, {"HELLO_DEVCONTAINER_LOG_LEVEL": "verbose"})

    assert result.returncode == 0, result.stderr
    lines = result.stdout.splitlines()
    assert len(lines) == 3
    assert lines[0] == "Hello, world."


def test_running_the_module_ignores_a_nearby_dotenv(tmp_path: Path) -> None:
    (tmp_path / ".env").write_text("HELLO_DEVCONTAINER_LOG_LEVEL=nope\n")

    result = _run(["-m", "hello_devcontainer"], tmp_path)

    assert result.returncode == 0, result.stderr
    assert len(result.stdout.splitlines()) == 3
    assert result.stderr == ""
