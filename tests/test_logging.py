import io
import logging
from pathlib import Path
import sys

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from aac_cli.utils.logging import configure_logging, get_directory_logger


def test_configure_logging_installs_single_handler():
    configure_logging("debug")
    configure_logging(logging.INFO)

    package_logger = logging.getLogger("aac_cli")
    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.INFO
    assert package_logger.propagate is False


def test_configure_logging_unknown_level_falls_back_to_warning():
    configure_logging("chatty")

    assert logging.getLogger("aac_cli").level == logging.WARNING


def test_directory_logger_writes_to_current_stderr(monkeypatch, tmp_path):
    configure_logging("INFO")
    captured = io.StringIO()
    monkeypatch.setattr(sys, "stderr", captured)

    get_directory_logger("tools.file", tmp_path).info("파일 생성 | 파일=%s", "Dockerfile")

    line = captured.getvalue()
    assert f"[{tmp_path}] 파일 생성 | 파일=Dockerfile" in line
    assert "aac_cli.tools.file" in line
