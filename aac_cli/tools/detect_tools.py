"""프로젝트 프레임워크/버전/이름 감지 도구들."""

from __future__ import annotations

import json
import logging
import re
from pathlib import Path
from typing import Any, Dict, Optional, Union

from aac_cli.models import Framework

from .file_tools import read_project_text


LOGGER = logging.getLogger("aac_cli.tools.detect")

PathLike = Union[str, Path]

PLAYWRIGHT_PACKAGE = "@playwright/test"
PLAYWRIGHT_CONFIG_FILES = (
    "playwright.config.ts",
    "playwright.config.js",
    "playwright.config.mjs",
)
PYTEST_MARKER_FILES = (
    "requirements.txt",
    "pyproject.toml",
    "pytest.ini",
    "setup.cfg",
    "conftest.py",
)


def _read_package_json(directory: PathLike) -> Optional[Dict[str, Any]]:
    path = Path(directory) / "package.json"
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except FileNotFoundError:
        return None
    except (OSError, ValueError) as e:
        LOGGER.warning("package.json 읽기 실패 | 경로=%s | 이유=%s", path, e)
        return None
    return data if isinstance(data, dict) else None


def _playwright_spec(package: Dict[str, Any]) -> Optional[str]:
    for section in ("devDependencies", "dependencies"):
        deps = package.get(section)
        if isinstance(deps, dict) and PLAYWRIGHT_PACKAGE in deps:
            return str(deps[PLAYWRIGHT_PACKAGE])
    return None


def detect_framework(directory: PathLike) -> Optional[Framework]:
    """
    디렉토리 구성으로부터 테스트 프레임워크를 추정합니다.

    Args:
        directory: 프로젝트 루트

    Returns:
        감지된 Framework, 판단할 수 없으면 None
    """
    root = Path(directory)

    package = _read_package_json(root)
    if package is not None and _playwright_spec(package) is not None:
        LOGGER.debug("Playwright 감지 | package.json")
        return Framework.PLAYWRIGHT
    if any((root / name).is_file() for name in PLAYWRIGHT_CONFIG_FILES):
        LOGGER.debug("Playwright 감지 | playwright.config")
        return Framework.PLAYWRIGHT

    if any((root / name).is_file() for name in PYTEST_MARKER_FILES):
        LOGGER.debug("Pytest 감지")
        return Framework.PYTEST

    return None


def detect_playwright_version(directory: PathLike, default: str) -> str:
    """package.json 의 @playwright/test 버전에서 범위 접두사를 제거해 반환합니다."""

    package = _read_package_json(directory)
    if package is None:
        return default

    spec = _playwright_spec(package)
    if not spec:
        return default

    # ^, ~, >=, =, v 등 범위 문자 제거
    version = re.sub(r"^[^\d]*", "", spec)
    return version or default


def _sanitize_image_name(name: str) -> str:
    name = re.sub(r"[^a-z0-9._-]+", "-", name.strip().lower())
    return name.strip("-._") or "my-automation-tests"


def detect_project_name(directory: PathLike) -> str:
    """이미지 이름으로 쓸 프로젝트 이름을 감지합니다."""

    root = Path(directory).resolve()

    package = _read_package_json(root)
    if package and isinstance(package.get("name"), str) and package["name"]:
        # npm 스코프 제거 (@org/name -> name)
        return _sanitize_image_name(re.sub(r"^@[^/]+/", "", package["name"]))

    match = re.search(
        r"^\[(?:project|tool\.poetry)\][^\[]*?^name\s*=\s*[\"']([^\"']+)[\"']",
        read_project_text(root / "pyproject.toml"),
        re.MULTILINE | re.DOTALL,
    )
    # 디코딩할 수 없는 이름은 디렉토리 이름으로 대체
    if match and "\ufffd" not in match.group(1):
        return _sanitize_image_name(match.group(1))

    return _sanitize_image_name(root.name)
