"""aac_cli 도구들."""

from .file_tools import enforce_lf, find_conflicts, write_files
from .detect_tools import detect_framework, detect_playwright_version, detect_project_name
from .analyzer_tools import analyze_python_project, detect_browser_config
from .docker_tools import (
    build_and_push,
    create_buildx_builder,
    docker_login,
    image_reference,
)

__all__ = [
    # file_tools.py
    "enforce_lf",
    "find_conflicts",
    "write_files",
    # detect_tools.py
    "detect_framework",
    "detect_playwright_version",
    "detect_project_name",
    # analyzer_tools.py
    "analyze_python_project",
    "detect_browser_config",
    # docker_tools.py
    "build_and_push",
    "create_buildx_builder",
    "docker_login",
    "image_reference",
]
