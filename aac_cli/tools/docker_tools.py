"""Docker 로그인 및 buildx 빌드/푸시 도구들."""

from __future__ import annotations

import subprocess
from pathlib import Path
from typing import Any, Dict, List, Sequence, Union

from aac_cli.utils.logging import get_directory_logger

PathLike = Union[str, Path]


def image_reference(username: str, project_name: str, tag: str = "latest") -> str:
    """Docker Hub 이미지 참조 문자열을 만듭니다."""
    return f"{username.strip()}/{project_name.strip()}:{tag}"


def buildx_create_command(builder: str) -> List[str]:
    return ["docker", "buildx", "create", "--name", builder, "--use"]


def buildx_build_command(image: str, platforms: Sequence[str]) -> List[str]:
    return [
        "docker",
        "buildx",
        "build",
        "--platform",
        ",".join(platforms),
        "-t",
        image,
        "--push",
        ".",
    ]


def docker_login(directory: PathLike) -> Dict[str, Any]:
    """
    대화형 docker login 을 실행합니다.

    Returns:
        로그인 결과를 담은 딕셔너리
    """
    logger = get_directory_logger("tools.docker", directory)
    logger.info("Docker 로그인 시도")

    try:
        subprocess.run(["docker", "login"], cwd=str(directory), check=True)
    except subprocess.CalledProcessError as e:
        logger.exception("Docker 로그인 실패")
        return {"success": False, "error": f"docker login failed: {e}"}
    except OSError as e:
        logger.exception("docker 실행 실패")
        return {"success": False, "error": f"Unable to run docker: {e}"}

    return {"success": True}


def create_buildx_builder(directory: PathLike, builder: str) -> Dict[str, Any]:
    """
    buildx 빌더를 생성하고 활성화합니다.

    Returns:
        생성 결과를 담은 딕셔너리 (action: created / existing)
    """
    logger = get_directory_logger("tools.docker", directory)

    try:
        result = subprocess.run(
            buildx_create_command(builder),
            cwd=str(directory),
            capture_output=True,
            text=True,
        )
    except OSError as e:
        logger.exception("docker 실행 실패")
        return {"success": False, "builder": builder, "error": f"Unable to run docker: {e}"}

    if result.returncode == 0:
        logger.info("buildx 빌더 생성 | 이름=%s", builder)
        return {"success": True, "builder": builder, "action": "created"}

    # 이미 존재하는 빌더는 그대로 사용
    logger.info(
        "기존 buildx 빌더 사용 | 이름=%s | 출력=%s", builder, result.stderr.strip()
    )
    return {"success": True, "builder": builder, "action": "existing"}


def build_and_push(
    directory: PathLike,
    image: str,
    platforms: Sequence[str],
) -> Dict[str, Any]:
    """
    멀티 플랫폼 이미지를 빌드하고 레지스트리에 푸시합니다.

    Args:
        directory: 빌드 컨텍스트
        image: 이미지 참조 (user/name:tag)
        platforms: 대상 플랫폼 목록

    Returns:
        빌드 결과를 담은 딕셔너리
    """
    logger = get_directory_logger("tools.docker", directory)
    logger.info("이미지 빌드 시작 | 이미지=%s | 플랫폼=%s", image, ",".join(platforms))

    try:
        subprocess.run(
            buildx_build_command(image, platforms),
            cwd=str(directory),
            check=True,
        )
    except subprocess.CalledProcessError as e:
        logger.exception("이미지 빌드 실패")
        return {"success": False, "image": image, "error": f"docker build failed: {e}"}
    except OSError as e:
        logger.exception("docker 실행 실패")
        return {"success": False, "image": image, "error": f"Unable to run docker: {e}"}

    logger.info("이미지 푸시 완료 | 이미지=%s", image)
    return {"success": True, "image": image}
