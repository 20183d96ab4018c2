"""Deterministic prompt construction for the AI tasks.

Each builder turns a ``CandidateProfile`` plus task inputs into a
``PromptPair`` (fixed system prompt, interpolated user prompt). Builders are
pure: identical inputs always yield byte-identical output.
"""

from .builders import (
    SmartAnswerInput,
    build_answer_prompt,
    build_cover_letter_prompt,
    build_resume_optimization_prompt,
    build_smart_answer_prompt,
)

__all__ = [
    "SmartAnswerInput",
    "build_answer_prompt",
    "build_cover_letter_prompt",
    "build_resume_optimization_prompt",
    "build_smart_answer_prompt",
]
