"""Python 프로젝트 분석 결과 모델들."""

from typing import List, Optional

from pydantic import BaseModel, Field

MULTI_PLATFORM = ["linux/amd64", "linux/arm64"]


class BrowserConfig(BaseModel):
    """pytest 설정에서 추출한 브라우저 실행 정보."""

    browser: Optional[str] = Field(
        default="chromium",
        description="chromium / firefox / webkit",
    )
    channel: Optional[str] = Field(
        default=None,
        description="chrome / msedge (브랜드 채널 사용 시)",
    )
    requires_amd64_only: bool = False
    docker_install_command: Optional[str] = Field(
        default=None,
        description="예: RUN playwright install chrome",
    )
    platforms: List[str] = Field(default_factory=lambda: list(MULTI_PLATFORM))
    warning_message: Optional[str] = None


class PythonProjectAnalysis(BaseModel):
    """Python 테스트 프로젝트의 의존성 및 구성 분석 결과.

    package_manager, python_version, has_playwright, browser_config 는 Dockerfile
    구성에 쓰이고, 나머지 필드는 init 실행 시 요약 출력용입니다.
    """

    has_playwright: bool = False
    has_allure: bool = False
    has_selenium: bool = False
    is_api_only: bool = True
    package_manager: str = Field(default="pip", description="pip / poetry")
    python_version: Optional[str] = None
    playwright_version: Optional[str] = None
    browser_config: BrowserConfig = Field(default_factory=BrowserConfig)

    def summary(self) -> str:
        """사용자에게 보여줄 한 줄 분석 요약."""
        details = [f"Python {self.python_version or 'default'}"]
        if self.has_playwright:
            details.append(
                f"Playwright {self.playwright_version}"
                if self.playwright_version
                else "Playwright"
            )
        if self.has_selenium:
            details.append("Selenium")
        if self.has_allure:
            details.append("Allure")
        if self.is_api_only:
            details.append("API only")
        return f"Detected {self.package_manager} project ({', '.join(details)})"
