"""파일 충돌 감지 및 쓰기 도구들."""

from __future__ import annotations

import codecs
import logging
import os
from pathlib import Path
from typing import Any, Collection, Dict, List, Sequence, Union

from aac_cli.models import FileSpec
from aac_cli.utils.logging import get_directory_logger


LOGGER = logging.getLogger("aac_cli.tools.file")

PathLike = Union[str, Path]


def read_project_text(path: PathLike) -> str:
    """
    프로젝트 설정 파일을 텍스트로 읽습니다. 파일이 없거나 읽을 수 없으면 빈 문자열.

    UTF-16 BOM 이 있으면 UTF-16 으로 해석하고 (PowerShell 의 pip freeze 출력),
    그 외에는 UTF-8 로 해석하되 잘못된 바이트는 대체 문자로 바꿉니다.
    """
    try:
        raw = Path(path).read_bytes()
    except FileNotFoundError:
        return ""
    except OSError as e:
        LOGGER.warning("파일 읽기 실패 | 경로=%s | 이유=%s", path, e)
        return ""

    if raw.startswith((codecs.BOM_UTF16_LE, codecs.BOM_UTF16_BE)):
        return raw.decode("utf-16", errors="replace")
    return raw.decode("utf-8-sig", errors="replace")


def enforce_lf(content: str) -> str:
    """CRLF 줄바꿈을 LF 로 통일합니다.

    Windows 에서 생성한 entrypoint.sh 가 리눅스 컨테이너에서
    "bad interpreter" 로 실패하지 않도록 합니다.
    """
    return content.replace("\r\n", "\n")


def find_conflicts(directory: PathLike, files: Sequence[FileSpec]) -> List[str]:
    """
    대상 디렉토리에 이미 존재하는 파일 이름을 계획 순서대로 반환합니다.

    Args:
        directory: 대상 디렉토리
        files: 생성 예정 파일 목록

    Returns:
        이미 존재하는 파일 이름 목록
    """
    logger = get_directory_logger("tools.file", directory)
    conflicts: List[str] = []

    for spec in files:
        path = Path(directory) / spec.name
        try:
            os.stat(path)
        except FileNotFoundError:
            continue
        except OSError as e:
            # stat 실패는 충돌 없음으로 간주
            logger.warning("파일 상태 확인 실패 | 파일=%s | 이유=%s", spec.name, e)
            continue
        conflicts.append(spec.name)

    logger.debug("충돌 검사 완료 | 충돌=%s", conflicts)
    return conflicts


def write_files(
    directory: PathLike,
    files: Sequence[FileSpec],
    skip: Collection[str] = (),
) -> Dict[str, Any]:
    """
    건너뛸 파일을 제외한 모든 파일을 LF 줄바꿈으로 기록합니다.

    첫 번째 쓰기 오류에서 즉시 중단하며, 이미 기록된 파일은 되돌리지 않습니다.

    Args:
        directory: 대상 디렉토리
        files: 생성할 파일 목록
        skip: 덮어쓰지 않기로 한 파일 이름들

    Returns:
        기록된 파일 목록과 결과를 담은 딕셔너리
    """
    logger = get_directory_logger("tools.file", directory)
    written: List[str] = []

    for spec in files:
        if spec.name in skip:
            logger.info("파일 건너뜀 | 파일=%s", spec.name)
            continue

        path = Path(directory) / spec.name
        content = enforce_lf(spec.content)

        try:
            path.write_bytes(content.encode("utf-8"))
            os.chmod(path, spec.mode)
        except OSError as e:
            logger.exception("파일 쓰기 실패 | 파일=%s", spec.name)
            return {
                "success": False,
                "written": written,
                "failed": spec.name,
                "error": f"failed to write {spec.name}: {e}",
            }

        logger.info("파일 생성 | 파일=%s | 모드=%o", spec.name, spec.mode)
        written.append(spec.name)

    return {"success": True, "written": written}
