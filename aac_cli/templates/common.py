"""프레임워크 공통 템플릿."""

DOCKERIGNORE = """.git
.env
node_modules
__pycache__
.venv
"""

ENV_CLEANUP = """if [ -f .env ]; then
  echo "Removing local .env to enforce injected configuration..."
  rm .env
fi
"""


def entrypoint_script(command: str, preamble: str = "") -> str:
    """Render an entrypoint that runs ``command`` for a folder or the whole suite."""

    parts = ["#!/bin/sh\n", "FOLDER=$1\n", ENV_CLEANUP]
    if preamble:
        parts.append(preamble)
    parts.append(
        f"""if [ -z "$FOLDER" ] || [ "$FOLDER" = "all" ]; then
  echo "Running ALL tests..."
  exec {command}
else
  echo "Running tests in folder: $FOLDER"
  exec {command} "$FOLDER"
fi
"""
    )
    return "\n".join(parts)
