"""Pytest (Python) 프로젝트 템플릿."""

from typing import List, Optional

from aac_cli.models import PythonProjectAnalysis

from .common import entrypoint_script

PYTHON_DEFAULT_VERSION = "3.11"

_PIP_INSTALL = """COPY requirements.txt ./
RUN pip install --no-cache-dir -r requirements.txt"""

_POETRY_INSTALL = """COPY pyproject.toml poetry.lock* ./
RUN pip install --no-cache-dir poetry \\
    && poetry config virtualenvs.create false \\
    && poetry install --no-interaction --no-ansi --no-root"""


def pytest_dockerfile(
    analysis: Optional[PythonProjectAnalysis] = None,
    default_python_version: str = PYTHON_DEFAULT_VERSION,
) -> str:
    """분석 결과에 맞춘 Pytest Dockerfile.

    분석 결과가 없으면 pip + requirements.txt 기반 기본 이미지를 사용합니다.
    """
    analysis = analysis or PythonProjectAnalysis()
    python_version = analysis.python_version or default_python_version

    blocks: List[str] = [
        f"FROM python:{python_version}-slim",
        "WORKDIR /app",
        _POETRY_INSTALL if analysis.package_manager == "poetry" else _PIP_INSTALL,
    ]

    if analysis.has_playwright:
        browser = analysis.browser_config
        if browser.docker_install_command:
            blocks.append(
                f"RUN playwright install-deps\n{browser.docker_install_command}"
            )
        else:
            blocks.append(
                f"RUN playwright install --with-deps {browser.browser or 'chromium'}"
            )

    blocks.append("COPY . .")
    blocks.append("RUN chmod +x /app/entrypoint.sh")
    return "\n\n".join(blocks) + "\n"


PYTEST_ENTRYPOINT = entrypoint_script("pytest")
