"""Python 테스트 프로젝트 분석 도구."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Union

from aac_cli.models import BrowserConfig, PythonProjectAnalysis
from aac_cli.utils.logging import get_directory_logger

from .file_tools import read_project_text

PathLike = Union[str, Path]

BROWSER_CONFIG_FILES = ("pytest.ini", "setup.cfg", "pyproject.toml")


def detect_browser_config(directory: PathLike) -> BrowserConfig:
    """pytest 설정 파일의 --browser / --browser-channel 옵션을 해석합니다."""

    root = Path(directory)
    config_text = "\n".join(
        read_project_text(root / name) for name in BROWSER_CONFIG_FILES
    ).lower()

    # 브랜드 채널은 linux/arm64 를 지원하지 않음
    for channel, product in (("chrome", "Google Chrome"), ("msedge", "Microsoft Edge")):
        if f"--browser-channel {channel}" in config_text:
            return BrowserConfig(
                browser="chromium",
                channel=channel,
                requires_amd64_only=True,
                docker_install_command=f"RUN playwright install {channel}",
                platforms=["linux/amd64"],
                warning_message=(
                    f"{product} does not support Linux ARM64. "
                    "Building for linux/amd64 only."
                ),
            )

    if "--browser firefox" in config_text:
        browser = "firefox"
    elif "--browser webkit" in config_text:
        browser = "webkit"
    else:
        browser = "chromium"
    return BrowserConfig(browser=browser)


def analyze_python_project(directory: PathLike) -> PythonProjectAnalysis:
    """
    requirements.txt / pyproject.toml 등을 읽어 Dockerfile 구성을 결정합니다.

    Args:
        directory: 프로젝트 루트

    Returns:
        PythonProjectAnalysis
    """
    root = Path(directory)
    logger = get_directory_logger("tools.analyzer", root)

    dependencies = ""
    package_manager = "pip"
    python_version = None

    pyproject = read_project_text(root / "pyproject.toml")
    if pyproject and (
        (root / "poetry.lock").is_file() or "[tool.poetry]" in pyproject
    ):
        package_manager = "poetry"
        dependencies += pyproject
        # python = "^3.11" / ">=3.9,<3.12" 에서 첫 X.Y 만 사용
        match = re.search(r"python\s*=\s*\"([^\"]+)\"", pyproject)
        if match:
            version = re.search(r"(\d+\.\d+)", match.group(1))
            if version:
                python_version = version.group(1)

    if python_version is None:
        pinned = re.search(r"(\d+\.\d+)", read_project_text(root / ".python-version"))
        if pinned:
            python_version = pinned.group(1)

    dependencies += "\n" + read_project_text(root / "requirements.txt")

    has_playwright = "playwright" in dependencies
    has_selenium = "selenium" in dependencies
    has_allure = "allure-pytest" in dependencies

    playwright_version = None
    strict = re.search(r"^playwright==(\d+\.\d+\.\d+)", dependencies, re.MULTILINE)
    if strict:
        playwright_version = strict.group(1)

    analysis = PythonProjectAnalysis(
        has_playwright=has_playwright,
        has_allure=has_allure,
        has_selenium=has_selenium,
        is_api_only=not has_playwright and not has_selenium,
        package_manager=package_manager,
        python_version=python_version,
        playwright_version=playwright_version,
        browser_config=detect_browser_config(root),
    )
    logger.info(
        "Python 프로젝트 분석 완료 | 패키지 관리자=%s | python=%s | playwright=%s",
        analysis.package_manager,
        analysis.python_version,
        analysis.has_playwright,
    )
    return analysis
