"""aac_cli의 설정 관리."""

import logging
import os
import re

from pydantic import BaseModel
from dotenv import load_dotenv

# 환경 변수 로드
load_dotenv()

_VERSION_PATTERN = re.compile(r"^\d+\.\d+(\.\d+)?$")


class Config(BaseModel):
    """aac_cli 설정."""

    # 로깅 설정
    log_level: str = os.getenv("AAC_LOG_LEVEL", "WARNING")

    # 템플릿 기본값
    playwright_default_version: str = os.getenv(
        "AAC_PLAYWRIGHT_DEFAULT_VERSION", "1.50.0"
    )
    python_default_version: str = os.getenv("AAC_PYTHON_DEFAULT_VERSION", "3.11")

    # Docker 배포 설정
    buildx_builder_name: str = os.getenv("AAC_BUILDX_BUILDER", "agnox-builder")
    image_tag: str = os.getenv("AAC_IMAGE_TAG", "latest")
    dashboard_name: str = os.getenv("AAC_DASHBOARD_NAME", "AAC Dashboard")

    @classmethod
    def from_env(cls) -> "Config":
        """환경 변수로부터 설정 생성."""
        return cls()

    def validate(self) -> bool:
        """필수 설정 검증."""
        if not isinstance(logging.getLevelName(self.log_level.upper()), int):
            raise ValueError(f"Unknown log level: {self.log_level}")
        if not _VERSION_PATTERN.match(self.playwright_default_version):
            raise ValueError(
                f"Invalid Playwright version: {self.playwright_default_version}"
            )
        if not _VERSION_PATTERN.match(self.python_default_version):
            raise ValueError(
                f"Invalid Python version: {self.python_default_version}"
            )
        if not self.buildx_builder_name.strip():
            raise ValueError("AAC_BUILDX_BUILDER must not be empty")
        if not self.image_tag.strip():
            raise ValueError("AAC_IMAGE_TAG must not be empty")
        return True
