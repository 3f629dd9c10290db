"""Playwright (TypeScript/Node.js) 프로젝트 템플릿."""

from .common import entrypoint_script

PLAYWRIGHT_DEFAULT_VERSION = "1.50.0"


def playwright_dockerfile(version: str = PLAYWRIGHT_DEFAULT_VERSION) -> str:
    """Playwright 공식 이미지 버전을 반영한 Dockerfile."""
    return f"""FROM mcr.microsoft.com/playwright:v{version}-jammy

WORKDIR /app

COPY package*.json ./
RUN npm ci

COPY . .

RUN chmod +x /app/entrypoint.sh
"""


PLAYWRIGHT_ENTRYPOINT = entrypoint_script(
    "npx playwright test",
    preamble='echo "Running against BASE_URL: $BASE_URL"\n',
)
