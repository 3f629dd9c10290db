from .planner import files_for_framework
from .scaffold import ScaffoldPlan, apply_scaffold, plan_scaffold
from .deploy import manual_build_commands, run_deploy


__all__ = [
    "files_for_framework",
    "ScaffoldPlan",
    "plan_scaffold",
    "apply_scaffold",
    "manual_build_commands",
    "run_deploy",
]
