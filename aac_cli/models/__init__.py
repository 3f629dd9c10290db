"""모델 패키지."""

from .framework import Framework
from .file_spec import FileSpec
from .analysis import BrowserConfig, PythonProjectAnalysis

__all__ = [
    "Framework",
    "FileSpec",
    "BrowserConfig",
    "PythonProjectAnalysis",
]
