"""테스트 프레임워크 열거형."""

from enum import Enum


class Framework(Enum):
    """지원하는 테스트 자동화 프레임워크."""

    PLAYWRIGHT = "playwright"
    PYTEST = "pytest"

    @property
    def label(self) -> str:
        """프롬프트에 표시할 이름."""
        return _LABELS[self]


_LABELS = {
    Framework.PLAYWRIGHT: "Playwright (TypeScript/Node.js)",
    Framework.PYTEST: "Pytest (Python)",
}
