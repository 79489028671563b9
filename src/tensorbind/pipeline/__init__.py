"""Generation pipeline entry points."""

from .models import GenerationOptions, GenerationResult
from .runner import build_emitters, collect_functions, generate, render_artifacts

__all__ = [
    "GenerationOptions",
    "GenerationResult",
    "build_emitters",
    "collect_functions",
    "generate",
    "render_artifacts",
]
