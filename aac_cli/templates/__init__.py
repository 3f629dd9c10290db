"""프레임워크별 통합 파일 템플릿."""

from .common import DOCKERIGNORE
from .playwright import PLAYWRIGHT_ENTRYPOINT, playwright_dockerfile
from .pytest import PYTEST_ENTRYPOINT, pytest_dockerfile

__all__ = [
    "DOCKERIGNORE",
    "PLAYWRIGHT_ENTRYPOINT",
    "playwright_dockerfile",
    "PYTEST_ENTRYPOINT",
    "pytest_dockerfile",
]
