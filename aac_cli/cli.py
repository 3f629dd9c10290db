"""
AAC 통합 파일 생성기의 명령줄 인터페이스.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional, Sequence, Tuple

import click

from . import __version__
from .config import Config
from .models import Framework
from .models.analysis import MULTI_PLATFORM
from .tools import detect_framework, detect_project_name, image_reference
from .utils.logging import configure_logging
from .workflows import apply_scaffold, manual_build_commands, plan_scaffold, run_deploy
from .workflows.scaffold import ScaffoldPlan


def _resolve_directory() -> Path:
    try:
        return Path.cwd()
    except OSError as e:
        click.echo(f"❌ failed to determine working directory: {e}", err=True)
        sys.exit(1)


def _cancelled() -> None:
    click.echo("\n❌ prompt cancelled: operation aborted by user", err=True)
    sys.exit(1)


def _choose_framework(directory: Path) -> Framework:
    """감지 결과를 먼저 제안하고, 거절하면 수동 선택을 받습니다."""
    detected = detect_framework(directory)
    if detected is not None:
        if click.confirm(
            f"Detected {detected.value.upper()} project. Use this framework?",
            default=True,
        ):
            return detected

    click.echo("Select your automation project framework:")
    for framework in Framework:
        click.echo(f"  {framework.value:<12}{framework.label}")
    choice = click.prompt(
        "Framework",
        type=click.Choice([framework.value for framework in Framework]),
        show_choices=True,
    )
    return Framework(choice)


def _collect_skips(conflicts: Sequence[str]) -> List[str]:
    skip = []
    for name in conflicts:
        if not click.confirm(f"File '{name}' already exists. Overwrite?", default=False):
            skip.append(name)
    return skip


def _print_next_steps(plan: ScaffoldPlan, written: Sequence[str], config: Config) -> None:
    click.echo("")
    for name in written:
        click.echo(f"  📄 Created: {name}")

    platforms = ",".join(plan.platforms)
    click.echo("\n✅ AAC Integration files generated successfully!")
    click.echo("\nNext steps to connect your project to the AAC:")
    click.echo("\n  1. Build your Docker image:")
    click.echo(
        f"     docker buildx build --platform {platforms} "
        f"-t your-username/my-automation-tests:{config.image_tag} ."
    )
    click.echo("\n  2. Push the image to your registry:")
    click.echo(f"     docker push your-username/my-automation-tests:{config.image_tag}")
    click.echo(f"\n  3. Go to the {config.dashboard_name} and enter this image name")
    click.echo("     in your environment setup.")


def _prompt_identity(directory: Path) -> Tuple[str, str]:
    username = click.prompt("What is your Docker Hub username?").strip()
    while not username:
        click.echo("Username is required.")
        username = click.prompt("What is your Docker Hub username?").strip()

    detected_name = detect_project_name(directory)
    if click.confirm(
        f'Detected project name "{detected_name}". Use this for the image?',
        default=True,
    ):
        return username, detected_name

    project_name = click.prompt("Enter the image name").strip()
    while not project_name:
        click.echo("Image name is required.")
        project_name = click.prompt("Enter the image name").strip()
    return username, project_name


def _deploy(
    directory: Path,
    username: str,
    project_name: str,
    platforms: Sequence[str],
    config: Config,
    login: bool,
) -> None:
    image = image_reference(username, project_name, config.image_tag)
    if login:
        login = click.confirm(
            f"I need to log you into Docker as {username}. Send request?",
            default=True,
        )

    if not click.confirm(
        f"Build multi-platform image {image} for {','.join(platforms)} "
        "and push to Docker Hub?",
        default=True,
    ):
        click.echo("⚠️ Build skipped. You can build manually later:")
        for command in manual_build_commands(
            image, platforms, config.buildx_builder_name
        ):
            click.echo(f"  {command}")
        return

    result = run_deploy(
        directory,
        username,
        project_name,
        platforms,
        login=login,
        config=config,
    )
    if not result["success"]:
        click.echo(
            f"❌ Deployment failed at {result['stage']}: {result['error']}", err=True
        )
        sys.exit(1)

    click.echo(f"\n✅ Image {result['image']} pushed successfully!")
    click.echo(f"   Go to the {config.dashboard_name} and enter: {result['image']}")


@click.group()
@click.version_option(version=__version__, prog_name="aac", message="%(prog)s version %(version)s")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@click.pass_context
def cli(ctx, verbose: bool):
    """
    AAC CLI — Agnostic Automation Center.

    테스트 자동화 저장소를 AAC 컨테이너 플랫폼에서 실행할 수 있도록
    통합 파일을 준비합니다. 시작하려면 'aac init' 을 실행하세요.
    """
    ctx.ensure_object(dict)

    # Initialize configuration
    try:
        config = Config.from_env()
        config.validate()
        ctx.obj["config"] = config
    except Exception as e:
        click.echo(f"❌ Configuration error: {e}", err=True)
        sys.exit(1)

    configure_logging(logging.DEBUG if verbose else config.log_level)


@cli.command()
@click.option(
    "--framework",
    type=click.Choice([framework.value for framework in Framework], case_sensitive=False),
    help="Skip detection and use this framework",
)
@click.option(
    "--deploy/--no-deploy",
    default=None,
    help="Build and push the image after generating files (prompted if omitted)",
)
@click.pass_context
def init(ctx, framework: Optional[str], deploy: Optional[bool]):
    """
    AAC 통합 파일(Dockerfile, entrypoint.sh, .dockerignore)을 생성합니다.

    예제:
        aac init
        aac init --framework pytest --no-deploy
    """
    config = ctx.obj["config"]

    try:
        directory = _resolve_directory()
        selected = (
            Framework(framework.lower()) if framework else _choose_framework(directory)
        )

        plan = plan_scaffold(selected, directory, config)
        if plan.playwright_version:
            click.echo(f"🔍 Detected Playwright version: v{plan.playwright_version}")
        if plan.analysis is not None:
            click.echo(f"🔍 {plan.analysis.summary()}")
        if plan.warning:
            click.echo(f"⚠️ {plan.warning}")

        skip = _collect_skips(plan.conflicts)
        result = apply_scaffold(plan, skip)

        if result["all_skipped"]:
            click.echo("\n⚠️  All files were skipped. No changes were made.")
            return

        if not result["success"]:
            for name in result["written"]:
                click.echo(f"  📄 Created: {name}")
            click.echo(f"❌ {result['error']}", err=True)
            sys.exit(1)

        _print_next_steps(plan, result["written"], config)

        if deploy is None:
            deploy = click.confirm(
                "\nDo you want to build and push the image to Docker Hub right now?",
                default=False,
            )
        if deploy:
            username, project_name = _prompt_identity(directory)
            _deploy(directory, username, project_name, plan.platforms, config, login=True)

    except click.Abort:
        _cancelled()


@cli.command()
@click.option("--username", "-u", help="Docker Hub username")
@click.option("--name", "project_name", help="Image name (default: detected project name)")
@click.option(
    "--platform",
    "platforms",
    multiple=True,
    help="Target platform, repeatable (default: linux/amd64 and linux/arm64)",
)
@click.option("--no-login", is_flag=True, help="Skip docker login")
@click.pass_context
def deploy(
    ctx,
    username: Optional[str],
    project_name: Optional[str],
    platforms: Tuple[str, ...],
    no_login: bool,
):
    """
    현재 디렉토리의 Dockerfile 로 이미지를 빌드하고 Docker Hub 에 푸시합니다.

    예제:
        aac deploy --username alice
        aac deploy -u alice --name e2e-suite --platform linux/amd64
    """
    config = ctx.obj["config"]

    try:
        directory = _resolve_directory()
        if not (directory / "Dockerfile").is_file():
            click.echo("❌ Dockerfile not found. Run 'aac init' first.", err=True)
            sys.exit(1)

        if username:
            project_name = project_name or detect_project_name(directory)
        else:
            username, project_name = _prompt_identity(directory)

        _deploy(
            directory,
            username,
            project_name,
            list(platforms) or list(MULTI_PLATFORM),
            config,
            login=not no_login,
        )
    except click.Abort:
        _cancelled()


@cli.command()
def version():
    """
    CLI 버전을 출력합니다.
    """
    click.echo(f"aac version {__version__}")


if __name__ == "__main__":
    cli()
