"""
AAC(Agnostic Automation Center) 통합 파일 생성 CLI.

테스트 자동화 저장소에 Dockerfile, entrypoint.sh, .dockerignore 를 생성하여
AAC 컨테이너 플랫폼에서 실행할 수 있도록 준비합니다.
"""

from .models import FileSpec, Framework

__version__ = "2.0.4"
__all__ = ["FileSpec", "Framework", "__version__"]
