"""Rendering of candidate profile sections.

Absent values render as ``N/A`` so every template keeps the same line
structure regardless of how complete the profile is.
"""

from __future__ import annotations

from typing import Iterable, Optional

from ..base.models import CandidateProfile, EducationEntry, ExperienceEntry
from .templates import PLACEHOLDER


def or_placeholder(value: Optional[str]) -> str:
    if value is None:
        return PLACEHOLDER
    value = value.strip()
    return value or PLACEHOLDER


def _joined(items: Iterable[str], separator: str) -> str:
    return separator.join(items) or PLACEHOLDER


def name_line(profile: CandidateProfile) -> str:
    return or_placeholder(profile.full_name)


def experience_period(entry: ExperienceEntry) -> str:
    end = "Present" if entry.is_current else or_placeholder(entry.end_date)
    return f"{or_placeholder(entry.start_date)} - {end}"


def detailed_experience(profile: CandidateProfile) -> str:
    """``- {title} at {company} ({start} - {end}): {description}`` per entry."""
    return _joined(
        (
            f"- {or_placeholder(e.title)} at {or_placeholder(e.company)} "
            f"({experience_period(e)}): {or_placeholder(e.description)}"
            for e in profile.experience
        ),
        "\n",
    )


def brief_experience(profile: CandidateProfile) -> str:
    """``- {title} at {company}: {description}`` per entry."""
    return _joined(
        (
            f"- {or_placeholder(e.title)} at {or_placeholder(e.company)}: {or_placeholder(e.description)}"
            for e in profile.experience
        ),
        "\n",
    )


def resume_experience(profile: CandidateProfile) -> str:
    """Multi-line blocks with achievements, separated by blank lines."""
    return _joined(
        (
            f"{or_placeholder(e.title)} at {or_placeholder(e.company)}\n"
            f"{or_placeholder(e.description)}\n"
            f"Achievements: {_joined(e.achievements, '; ')}"
            for e in profile.experience
        ),
        "\n\n",
    )


def skill_names(profile: CandidateProfile) -> str:
    return _joined((s.name for s in profile.skills if s.name), ", ")


def skills_with_proficiency(profile: CandidateProfile) -> str:
    return _joined(
        (f"{s.name} ({or_placeholder(s.proficiency)})" for s in profile.skills if s.name),
        ", ",
    )


def _education_line(entry: EducationEntry) -> str:
    return (
        f"{or_placeholder(entry.degree)} in {or_placeholder(entry.field)} "
        f"from {or_placeholder(entry.institution)}"
    )


def education(profile: CandidateProfile) -> str:
    return _joined((_education_line(e) for e in profile.education), "; ")


__all__ = [
    "or_placeholder",
    "name_line",
    "detailed_experience",
    "brief_experience",
    "resume_experience",
    "skill_names",
    "skills_with_proficiency",
    "education",
]
