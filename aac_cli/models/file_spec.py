"""생성할 파일 명세 모델."""

from pydantic import BaseModel, Field


class FileSpec(BaseModel):
    """생성 대상 파일 하나의 이름, 내용, 권한 비트."""

    name: str
    content: str
    mode: int = Field(default=0o644, ge=0, le=0o777)

    class Config:
        """Pydantic 설정."""
        frozen = True
