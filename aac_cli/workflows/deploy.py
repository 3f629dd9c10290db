"""Docker 이미지 빌드 및 배포 워크플로우."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional, Sequence

from aac_cli.config import Config
from aac_cli.tools import (
    build_and_push,
    create_buildx_builder,
    docker_login,
    image_reference,
)
from aac_cli.tools.docker_tools import buildx_build_command, buildx_create_command
from aac_cli.utils.logging import get_directory_logger


def manual_build_commands(
    image: str, platforms: Sequence[str], builder: str
) -> Sequence[str]:
    """사용자가 직접 실행할 buildx 명령어 목록."""
    return [
        " ".join(buildx_create_command(builder)),
        " ".join(buildx_build_command(image, platforms)),
    ]


def run_deploy(
    directory: Path,
    username: str,
    project_name: str,
    platforms: Sequence[str],
    *,
    login: bool = True,
    config: Optional[Config] = None,
) -> Dict[str, Any]:
    """
    로그인 → buildx 빌더 준비 → 빌드 및 푸시 순서로 실행합니다.

    Returns:
        success, image, stage, error 를 담은 딕셔너리
    """
    config = config or Config.from_env()
    logger = get_directory_logger("workflows.deploy", directory)
    image = image_reference(username, project_name, config.image_tag)

    if login:
        login_result = docker_login(directory)
        if not login_result["success"]:
            return {
                "success": False,
                "image": image,
                "stage": "login",
                "error": login_result["error"],
            }

    builder_result = create_buildx_builder(directory, config.buildx_builder_name)
    if not builder_result["success"]:
        return {
            "success": False,
            "image": image,
            "stage": "builder",
            "error": builder_result["error"],
        }

    build_result = build_and_push(directory, image, platforms)
    if not build_result["success"]:
        return {
            "success": False,
            "image": image,
            "stage": "build",
            "error": build_result["error"],
        }

    logger.info("배포 완료 | 이미지=%s", image)
    return {
        "success": True,
        "image": image,
        "stage": "done",
        "builder_action": builder_result["action"],
    }
