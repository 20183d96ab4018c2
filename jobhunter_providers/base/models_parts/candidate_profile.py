"""
Read-only candidate profile projection.

Supplied by the profile collaborator as camelCase JSON and consumed by the
prompt builders. Entries keep the collaborator's ordering (most recent
first) and every field is optional so partially filled profiles still render.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Tuple


def _text(data: Mapping[str, Any], *keys: str) -> Optional[str]:
    for key in keys:
        value = data.get(key)
        if value is None:
            continue
        value = str(value).strip()
        if value:
            return value
    return None


def _sequence(data: Mapping[str, Any], key: str) -> Tuple[Any, ...]:
    # JSON arrays only; a bare string or object is not a list of entries
    raw = data.get(key)
    return tuple(raw) if isinstance(raw, (list, tuple)) else ()


def _items(data: Mapping[str, Any], key: str) -> Tuple[Mapping[str, Any], ...]:
    return tuple(item for item in _sequence(data, key) if isinstance(item, Mapping))


def _flag(data: Mapping[str, Any], *keys: str) -> bool:
    for key in keys:
        value = data.get(key)
        if isinstance(value, bool):
            return value
    return False


@dataclass(frozen=True)
class ExperienceEntry:
    title: Optional[str] = None
    company: Optional[str] = None
    description: Optional[str] = None
    start_date: Optional[str] = None
    end_date: Optional[str] = None
    is_current: bool = False
    achievements: Tuple[str, ...] = ()

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "ExperienceEntry":
        return cls(
            title=_text(data, "title"),
            company=_text(data, "company"),
            description=_text(data, "description"),
            start_date=_text(data, "startDate", "start_date"),
            end_date=_text(data, "endDate", "end_date"),
            is_current=_flag(data, "isCurrent", "is_current"),
            achievements=tuple(str(a) for a in _sequence(data, "achievements") if str(a).strip()),
        )


@dataclass(frozen=True)
class EducationEntry:
    degree: Optional[str] = None
    field: Optional[str] = None
    institution: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "EducationEntry":
        return cls(
            degree=_text(data, "degree"),
            field=_text(data, "field"),
            institution=_text(data, "institution"),
        )


@dataclass(frozen=True)
class SkillEntry:
    name: Optional[str] = None
    proficiency: Optional[str] = None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "SkillEntry":
        return cls(name=_text(data, "name"), proficiency=_text(data, "proficiency"))


@dataclass(frozen=True)
class CustomAnswer:
    question: str
    answer: str

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CustomAnswer":
        return cls(question=_text(data, "question") or "", answer=_text(data, "answer") or "")


@dataclass(frozen=True)
class CandidateProfile:
    """Structured projection of a user's career data.

    Attributes:
        first_name / last_name: Display name parts.
        summary: Free-form professional summary.
        experience: Work history entries.
        education: Education entries.
        skills: Skills with optional proficiency.
        custom_answers: Saved question/answer pairs.
    """

    first_name: Optional[str] = None
    last_name: Optional[str] = None
    summary: Optional[str] = None
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    skills: Tuple[SkillEntry, ...] = ()
    custom_answers: Tuple[CustomAnswer, ...] = ()

    @property
    def full_name(self) -> Optional[str]:
        name = " ".join(part for part in (self.first_name, self.last_name) if part)
        return name or None

    @classmethod
    def from_dict(cls, data: Mapping[str, Any]) -> "CandidateProfile":
        """Build a profile from the collaborator's JSON document.

        Accepts camelCase keys (``firstName``, ``startDate`` ...) and their
        snake_case equivalents; unknown keys are ignored.
        """
        return cls(
            first_name=_text(data, "firstName", "first_name"),
            last_name=_text(data, "lastName", "last_name"),
            summary=_text(data, "summary"),
            experience=tuple(ExperienceEntry.from_dict(e) for e in _items(data, "experience")),
            education=tuple(EducationEntry.from_dict(e) for e in _items(data, "education")),
            skills=tuple(SkillEntry.from_dict(s) for s in _items(data, "skills")),
            custom_answers=tuple(
                CustomAnswer.from_dict(a)
                for a in (_items(data, "customAnswers") or _items(data, "custom_answers"))
            ),
        )


__all__ = [
    "CandidateProfile",
    "ExperienceEntry",
    "EducationEntry",
    "SkillEntry",
    "CustomAnswer",
]
