"""Prompt builders, one per AI task.

Every builder returns a :class:`PromptPair`. Templates are fixed strings;
only profile fields and task inputs are interpolated, and absent optional
fields render as ``N/A``. No randomness, no timestamps.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..base.models import CandidateProfile, PromptPair
from . import formatting as fmt
from .templates import (
    ANSWER_SYSTEM,
    CHAR_LIMIT_CLAUSE,
    COVER_LETTER_SYSTEM,
    RESUME_OPTIMIZATION_SYSTEM,
    SMART_ANSWER_SYSTEM,
)


@dataclass(frozen=True)
class SmartAnswerInput:
    """Question plus optional job context scraped from an application form.

    ``max_length`` (characters) adds a hard limit clause to the system prompt
    when given.
    """

    question: str
    company_name: Optional[str] = None
    company_info: Optional[str] = None
    job_description: Optional[str] = None
    job_url: Optional[str] = None
    job_title: Optional[str] = None
    max_length: Optional[int] = None


def _profile_block(profile: CandidateProfile) -> str:
    return (
        "--- CANDIDATE PROFILE ---\n"
        f"Name: {fmt.name_line(profile)}\n"
        f"Summary: {fmt.or_placeholder(profile.summary)}\n"
        "Experience:\n"
        f"{fmt.brief_experience(profile)}\n"
        f"Skills: {fmt.skill_names(profile)}\n"
    )


def build_cover_letter_prompt(profile: CandidateProfile, job_description: str) -> PromptPair:
    """Cover letter tailored to ``job_description`` from the profile only."""
    user = (
        "Write a cover letter for this job:\n"
        "\n"
        "--- JOB DESCRIPTION ---\n"
        f"{job_description}\n"
        "\n"
        "--- CANDIDATE PROFILE ---\n"
        f"Name: {fmt.name_line(profile)}\n"
        f"Summary: {fmt.or_placeholder(profile.summary)}\n"
        "Experience:\n"
        f"{fmt.detailed_experience(profile)}\n"
        f"Skills: {fmt.skill_names(profile)}\n"
        f"Education: {fmt.education(profile)}\n"
    )
    return PromptPair(system=COVER_LETTER_SYSTEM, user=user)


def build_answer_prompt(
    profile: CandidateProfile, question: str, context: Optional[str] = None
) -> PromptPair:
    """Short answer to an application question, optionally with job context."""
    user = (
        "Answer this job application question:\n"
        "\n"
        f'"{question}"\n'
        "\n"
        f"Context about the job: {fmt.or_placeholder(context)}\n"
        "\n"
        f"{_profile_block(profile)}"
    )
    return PromptPair(system=ANSWER_SYSTEM, user=user)


def build_smart_answer_prompt(profile: CandidateProfile, data: SmartAnswerInput) -> PromptPair:
    """Context-aware form answer with an optional character limit."""
    system = SMART_ANSWER_SYSTEM
    if data.max_length:
        system += CHAR_LIMIT_CLAUSE.format(max_length=data.max_length)
    user = (
        "Answer this job application question:\n"
        "\n"
        f'"{data.question}"\n'
        "\n"
        "--- JOB CONTEXT ---\n"
        f"Company: {fmt.or_placeholder(data.company_name)}\n"
        f"Role: {fmt.or_placeholder(data.job_title)}\n"
        f"About the company: {fmt.or_placeholder(data.company_info)}\n"
        f"Job description: {fmt.or_placeholder(data.job_description)}\n"
        f"Job URL: {fmt.or_placeholder(data.job_url)}\n"
        "\n"
        f"{_profile_block(profile)}"
    )
    return PromptPair(system=system, user=user)


def build_resume_optimization_prompt(profile: CandidateProfile, job_description: str) -> PromptPair:
    """Numbered list of resume improvements for ``job_description``."""
    user = (
        "Optimize this resume for the job below:\n"
        "\n"
        "--- JOB DESCRIPTION ---\n"
        f"{job_description}\n"
        "\n"
        "--- CURRENT RESUME ---\n"
        f"{fmt.name_line(profile)}\n"
        f"{fmt.or_placeholder(profile.summary)}\n"
        "\n"
        "Experience:\n"
        f"{fmt.resume_experience(profile)}\n"
        "\n"
        f"Skills: {fmt.skills_with_proficiency(profile)}\n"
        "\n"
        f"Education: {fmt.education(profile)}\n"
    )
    return PromptPair(system=RESUME_OPTIMIZATION_SYSTEM, user=user)


__all__ = [
    "SmartAnswerInput",
    "build_cover_letter_prompt",
    "build_answer_prompt",
    "build_smart_answer_prompt",
    "build_resume_optimization_prompt",
]
