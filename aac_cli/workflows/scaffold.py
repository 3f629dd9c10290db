"""통합 파일 생성 워크플로우."""

from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional

from aac_cli.config import Config
from aac_cli.models import FileSpec, Framework, PythonProjectAnalysis
from aac_cli.models.analysis import MULTI_PLATFORM
from aac_cli.tools import (
    analyze_python_project,
    detect_playwright_version,
    find_conflicts,
    write_files,
)
from aac_cli.utils.logging import get_directory_logger

from .planner import files_for_framework


@dataclass
class ScaffoldPlan:
    """한 번의 init 실행에서 생성할 파일과 부가 정보를 보관합니다."""

    framework: Framework
    directory: Path
    files: List[FileSpec]
    conflicts: List[str] = field(default_factory=list)
    platforms: List[str] = field(default_factory=lambda: list(MULTI_PLATFORM))
    playwright_version: Optional[str] = None
    analysis: Optional[PythonProjectAnalysis] = None

    @property
    def warning(self) -> Optional[str]:
        if self.analysis is None:
            return None
        return self.analysis.browser_config.warning_message


def plan_scaffold(
    framework: Framework,
    directory: Path,
    config: Optional[Config] = None,
) -> ScaffoldPlan:
    """
    프로젝트를 분석해 생성 파일을 결정하고 기존 파일과의 충돌을 찾습니다.

    Args:
        framework: 선택된 프레임워크
        directory: 대상 디렉토리
        config: 기본 버전 등을 담은 설정

    Returns:
        ScaffoldPlan
    """
    config = config or Config.from_env()
    logger = get_directory_logger("workflows.scaffold", directory)

    plan_kwargs: Dict[str, Any] = {}
    if framework is Framework.PLAYWRIGHT:
        version = detect_playwright_version(
            directory, default=config.playwright_default_version
        )
        logger.info("Playwright 버전 감지 | v%s", version)
        files = files_for_framework(framework, playwright_version=version)
        plan_kwargs["playwright_version"] = version
    else:
        analysis = analyze_python_project(directory)
        files = files_for_framework(
            framework,
            analysis=analysis,
            python_version=config.python_default_version,
        )
        plan_kwargs["analysis"] = analysis
        plan_kwargs["platforms"] = list(analysis.browser_config.platforms)

    conflicts = find_conflicts(directory, files)
    logger.info(
        "생성 계획 완료 | 프레임워크=%s | 충돌=%d", framework.value, len(conflicts)
    )
    return ScaffoldPlan(
        framework=framework,
        directory=Path(directory),
        files=files,
        conflicts=conflicts,
        **plan_kwargs,
    )


def apply_scaffold(plan: ScaffoldPlan, skip: Iterable[str] = ()) -> Dict[str, Any]:
    """
    건너뛸 파일을 제외하고 계획된 파일을 기록합니다.

    모든 파일을 건너뛰면 아무것도 쓰지 않고 성공으로 처리합니다.

    Returns:
        success, written, skipped, all_skipped 를 담은 딕셔너리
    """
    logger = get_directory_logger("workflows.scaffold", plan.directory)
    skip_names = set(skip)
    skipped = [spec.name for spec in plan.files if spec.name in skip_names]

    if len(skipped) == len(plan.files):
        logger.info("모든 파일 건너뜀 | 변경 없음")
        return {"success": True, "written": [], "skipped": skipped, "all_skipped": True}

    result = write_files(plan.directory, plan.files, skipped)
    result["skipped"] = skipped
    result["all_skipped"] = False
    return result
