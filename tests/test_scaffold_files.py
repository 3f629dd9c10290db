import os
from pathlib import Path
import stat
import sys

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aac_cli.config import Config
from aac_cli.models import FileSpec, Framework, PythonProjectAnalysis
from aac_cli.tools import file_tools
from aac_cli.tools.file_tools import enforce_lf, find_conflicts, write_files
from aac_cli.workflows import apply_scaffold, files_for_framework, plan_scaffold


EXPECTED_NAMES = [".dockerignore", "entrypoint.sh", "Dockerfile"]


def _mode(path: Path) -> int:
    return stat.S_IMODE(os.stat(path).st_mode)


# ---------------------------------------------------------------------------
# File planner
# ---------------------------------------------------------------------------


@pytest.mark.parametrize("framework", list(Framework))
def test_planner_returns_three_files_in_fixed_order(framework):
    files = files_for_framework(framework)

    assert [spec.name for spec in files] == EXPECTED_NAMES
    assert [spec.mode for spec in files] == [0o644, 0o755, 0o644]


def test_planner_playwright_uses_requested_image_version():
    files = files_for_framework(Framework.PLAYWRIGHT, playwright_version="1.48.2")
    dockerfile = files[2].content

    assert dockerfile.startswith("FROM mcr.microsoft.com/playwright:v1.48.2-jammy")
    assert "RUN npm ci" in dockerfile
    assert "exec npx playwright test" in files[1].content


def test_planner_pytest_defaults_to_pip_requirements():
    files = files_for_framework(Framework.PYTEST)
    dockerfile = files[2].content

    assert dockerfile.startswith("FROM python:3.11-slim")
    assert "pip install --no-cache-dir -r requirements.txt" in dockerfile
    assert "playwright install" not in dockerfile
    assert "exec pytest" in files[1].content


def test_planner_pytest_follows_poetry_analysis():
    analysis = PythonProjectAnalysis(
        package_manager="poetry",
        python_version="3.12",
        has_playwright=True,
        is_api_only=False,
    )
    dockerfile = files_for_framework(Framework.PYTEST, analysis=analysis)[2].content

    assert dockerfile.startswith("FROM python:3.12-slim")
    assert "poetry install" in dockerfile
    assert "RUN playwright install --with-deps chromium" in dockerfile


@pytest.mark.parametrize("framework", list(Framework))
def test_entrypoint_removes_env_and_accepts_folder(framework):
    entrypoint = files_for_framework(framework)[1].content

    assert entrypoint.startswith("#!/bin/sh\n")
    assert "FOLDER=$1" in entrypoint
    assert "rm .env" in entrypoint
    assert '[ "$FOLDER" = "all" ]' in entrypoint


# ---------------------------------------------------------------------------
# Conflict detection
# ---------------------------------------------------------------------------


def test_find_conflicts_returns_existing_subset_in_plan_order(tmp_path):
    (tmp_path / "Dockerfile").write_text("FROM scratch\n")
    (tmp_path / ".dockerignore").write_text(".git\n")

    files = files_for_framework(Framework.PLAYWRIGHT)

    assert find_conflicts(tmp_path, files) == [".dockerignore", "Dockerfile"]


def test_find_conflicts_empty_directory(tmp_path):
    assert find_conflicts(tmp_path, files_for_framework(Framework.PYTEST)) == []


def test_find_conflicts_treats_stat_errors_as_no_conflict(tmp_path, monkeypatch):
    (tmp_path / "Dockerfile").write_text("FROM scratch\n")
    (tmp_path / "entrypoint.sh").write_text("#!/bin/sh\n")
    real_stat = os.stat

    def guarded_stat(path, *args, **kwargs):
        if Path(path).name == "Dockerfile":
            raise PermissionError("permission denied")
        return real_stat(path, *args, **kwargs)

    monkeypatch.setattr(file_tools.os, "stat", guarded_stat)

    files = files_for_framework(Framework.PYTEST)
    assert find_conflicts(tmp_path, files) == ["entrypoint.sh"]


# ---------------------------------------------------------------------------
# File writer
# ---------------------------------------------------------------------------


def test_enforce_lf_replaces_every_crlf():
    assert enforce_lf("a\r\nb\r\n\r\nc") == "a\nb\n\nc"
    assert enforce_lf("plain\n") == "plain\n"


def test_write_files_normalizes_line_endings_and_modes(tmp_path):
    files = [
        FileSpec(name="run.sh", content="#!/bin/sh\r\necho hi\r\n", mode=0o755),
        FileSpec(name="notes.txt", content="one\r\ntwo\n", mode=0o644),
    ]

    result = write_files(tmp_path, files)

    assert result == {"success": True, "written": ["run.sh", "notes.txt"]}
    assert (tmp_path / "run.sh").read_bytes() == b"#!/bin/sh\necho hi\n"
    assert b"\r\n" not in (tmp_path / "notes.txt").read_bytes()
    assert _mode(tmp_path / "run.sh") == 0o755
    assert _mode(tmp_path / "notes.txt") == 0o644


def test_write_files_never_writes_skipped_names(tmp_path):
    (tmp_path / "Dockerfile").write_text("ORIGINAL")
    files = files_for_framework(Framework.PLAYWRIGHT)

    result = write_files(tmp_path, files, {"Dockerfile"})

    assert result["written"] == [".dockerignore", "entrypoint.sh"]
    assert (tmp_path / "Dockerfile").read_text() == "ORIGINAL"


def test_write_files_overwrites_and_resets_mode(tmp_path):
    target = tmp_path / "entrypoint.sh"
    target.write_text("old")
    os.chmod(target, 0o600)

    write_files(tmp_path, files_for_framework(Framework.PYTEST))

    assert "exec pytest" in target.read_text()
    assert _mode(target) == 0o755


def test_write_files_stops_on_first_error_and_keeps_partial_list(tmp_path):
    files = [
        FileSpec(name="first.txt", content="1"),
        FileSpec(name="missing-dir/second.txt", content="2"),
        FileSpec(name="third.txt", content="3"),
    ]

    result = write_files(tmp_path, files)

    assert result["success"] is False
    assert result["written"] == ["first.txt"]
    assert result["failed"] == "missing-dir/second.txt"
    assert "missing-dir/second.txt" in result["error"]
    assert (tmp_path / "first.txt").exists()
    assert not (tmp_path / "third.txt").exists()


# ---------------------------------------------------------------------------
# Scaffold workflow
# ---------------------------------------------------------------------------


def test_scaffold_empty_directory_playwright(tmp_path):
    plan = plan_scaffold(Framework.PLAYWRIGHT, tmp_path, Config())

    assert plan.conflicts == []
    assert plan.playwright_version == "1.50.0"

    result = apply_scaffold(plan)

    assert result["success"] is True
    assert result["written"] == EXPECTED_NAMES
    for name in EXPECTED_NAMES:
        assert (tmp_path / name).is_file()


def test_scaffold_declined_dockerfile_is_not_written(tmp_path):
    (tmp_path / "Dockerfile").write_text("FROM custom\n")

    plan = plan_scaffold(Framework.PLAYWRIGHT, tmp_path, Config())
    assert plan.conflicts == ["Dockerfile"]

    result = apply_scaffold(plan, skip=["Dockerfile"])

    assert result["written"] == [".dockerignore", "entrypoint.sh"]
    assert result["skipped"] == ["Dockerfile"]
    assert (tmp_path / "Dockerfile").read_text() == "FROM custom\n"
    assert (tmp_path / ".dockerignore").is_file()
    assert (tmp_path / "entrypoint.sh").is_file()


def test_scaffold_all_skipped_is_successful_noop(tmp_path):
    for name in EXPECTED_NAMES:
        (tmp_path / name).write_text("keep")

    plan = plan_scaffold(Framework.PYTEST, tmp_path, Config())
    result = apply_scaffold(plan, skip=plan.conflicts)

    assert result == {
        "success": True,
        "written": [],
        "skipped": EXPECTED_NAMES,
        "all_skipped": True,
    }
    for name in EXPECTED_NAMES:
        assert (tmp_path / name).read_text() == "keep"


def test_scaffold_pytest_carries_platforms_from_browser_config(tmp_path):
    (tmp_path / "requirements.txt").write_text("pytest\npytest-playwright\n")
    (tmp_path / "pytest.ini").write_text("[pytest]\naddopts = --browser-channel chrome\n")

    plan = plan_scaffold(Framework.PYTEST, tmp_path, Config())

    assert plan.platforms == ["linux/amd64"]
    assert "linux/amd64 only" in plan.warning
    assert "RUN playwright install chrome" in plan.files[2].content
