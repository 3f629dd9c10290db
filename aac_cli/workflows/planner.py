"""프레임워크별 생성 파일 목록을 계획합니다."""

from typing import List, Optional

from aac_cli.models import FileSpec, Framework, PythonProjectAnalysis
from aac_cli.templates import (
    DOCKERIGNORE,
    PLAYWRIGHT_ENTRYPOINT,
    PYTEST_ENTRYPOINT,
    playwright_dockerfile,
    pytest_dockerfile,
)
from aac_cli.templates.playwright import PLAYWRIGHT_DEFAULT_VERSION
from aac_cli.templates.pytest import PYTHON_DEFAULT_VERSION

DOCKERIGNORE_NAME = ".dockerignore"
ENTRYPOINT_NAME = "entrypoint.sh"
DOCKERFILE_NAME = "Dockerfile"


def files_for_framework(
    framework: Framework,
    *,
    playwright_version: str = PLAYWRIGHT_DEFAULT_VERSION,
    analysis: Optional[PythonProjectAnalysis] = None,
    python_version: str = PYTHON_DEFAULT_VERSION,
) -> List[FileSpec]:
    """
    생성할 파일 목록을 고정된 순서로 반환합니다.

    .dockerignore, entrypoint.sh(실행 권한), Dockerfile 순서이며 옵션 인자는
    파일 내용에만 영향을 줍니다.
    """
    if framework is Framework.PLAYWRIGHT:
        entrypoint = PLAYWRIGHT_ENTRYPOINT
        dockerfile = playwright_dockerfile(playwright_version)
    else:
        entrypoint = PYTEST_ENTRYPOINT
        dockerfile = pytest_dockerfile(analysis, default_python_version=python_version)

    return [
        FileSpec(name=DOCKERIGNORE_NAME, content=DOCKERIGNORE, mode=0o644),
        FileSpec(name=ENTRYPOINT_NAME, content=entrypoint, mode=0o755),
        FileSpec(name=DOCKERFILE_NAME, content=dockerfile, mode=0o644),
    ]
