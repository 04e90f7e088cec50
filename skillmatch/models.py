# skillmatch/models.py
from dataclasses import dataclass, field, asdict
from datetime import date
from typing import Optional, Tuple, Dict, Any, Iterable
from enum import Enum


class ExperienceLevel(Enum):
    """Seniority levels, ordered from least to most senior"""
    ENTRY = "entry"
    JUNIOR = "junior"
    MID = "mid"
    SENIOR = "senior"
    LEAD = "lead"
    EXECUTIVE = "executive"

    @property
    def ordinal(self) -> int:
        return _LEVEL_ORDER.index(self)

    @classmethod
    def from_value(cls, value: str) -> "ExperienceLevel":
        """Parse 'senior', 'SENIOR' or ' Senior ' into a level"""
        try:
            return cls(value.strip().lower())
        except ValueError:
            valid = ", ".join(level.value for level in cls)
            raise ValueError(f"Unknown experience level '{value}' (expected one of: {valid})")


_LEVEL_ORDER = tuple(ExperienceLevel)


@dataclass(frozen=True)
class SkillRef:
    """Reference to a catalogue skill. Two refs are equal when their ids are."""
    id: str
    name: str = field(default="", compare=False)

    def __str__(self):
        return self.name or self.id


@dataclass(frozen=True)
class ExperienceEntry:
    """Work experience interval"""
    start_date: date
    end_date: Optional[date] = None
    current: bool = False
    title: Optional[str] = None
    company: Optional[str] = None

    def end_year(self, reference_year: int) -> int:
        """Year the interval ends in, open or current intervals end now"""
        if self.current or self.end_date is None:
            return reference_year
        return self.end_date.year


@dataclass(frozen=True)
class EducationEntry:
    """Education entry"""
    degree: str
    field: str = ""
    institution: Optional[str] = None


def _unique_skills(skills: Iterable[SkillRef]) -> Tuple[SkillRef, ...]:
    seen = set()
    unique = []
    for skill in skills:
        if skill.id not in seen:
            seen.add(skill.id)
            unique.append(skill)
    return tuple(unique)


@dataclass(frozen=True)
class JobPosting:
    """Job posting, fully loaded by the caller before scoring"""
    id: str
    required_skills: Tuple[SkillRef, ...] = ()
    preferred_skills: Tuple[SkillRef, ...] = ()
    experience_level: Optional[ExperienceLevel] = None
    description: str = ""
    title: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'required_skills', _unique_skills(self.required_skills))
        object.__setattr__(self, 'preferred_skills', _unique_skills(self.preferred_skills))

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['experience_level'] = self.experience_level.value if self.experience_level else None
        return data

    def __repr__(self):
        return f"<JobPosting: {self.title or self.id} | {len(self.required_skills)} required skills>"


@dataclass(frozen=True)
class CandidateProfile:
    """Candidate profile, fully loaded by the caller before scoring"""
    id: str
    skills: Tuple[SkillRef, ...] = ()
    experience: Tuple[ExperienceEntry, ...] = ()
    education: Tuple[EducationEntry, ...] = ()
    name: Optional[str] = None

    def __post_init__(self):
        object.__setattr__(self, 'skills', _unique_skills(self.skills))
        object.__setattr__(self, 'experience', tuple(self.experience))
        object.__setattr__(self, 'education', tuple(self.education))

    @property
    def skill_ids(self) -> frozenset:
        return frozenset(skill.id for skill in self.skills)

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['experience'] = [
            {
                **entry,
                'start_date': entry['start_date'].isoformat(),
                'end_date': entry['end_date'].isoformat() if entry['end_date'] else None,
            }
            for entry in data['experience']
        ]
        return data

    def __repr__(self):
        return f"<CandidateProfile: {self.name or self.id} | {len(self.skills)} skills>"
