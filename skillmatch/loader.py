# skillmatch/loader.py
"""
Build job and candidate value objects from YAML files or plain dicts.

Used by the CLI scripts; services that already hold loaded records build
the value objects directly.
"""

import logging
from datetime import date, datetime
from pathlib import Path
from typing import Any, Dict, Optional, Union
import yaml
from dateutil import parser as dateutil_parser

from skillmatch.models import (
    SkillRef, ExperienceEntry, EducationEntry, JobPosting, CandidateProfile, ExperienceLevel
)

logger = logging.getLogger(__name__)

OPEN_END_MARKERS = {'present', 'current', 'now', 'today'}

TRUE_VALUES = {'true', 'yes', '1'}
FALSE_VALUES = {'false', 'no', '0'}

# Missing month/day parts default to January 1st
_DEFAULT_DATE = datetime(2000, 1, 1)


def parse_date(value: Any) -> Optional[date]:
    """
    Parse a date from YAML

    Accepts date/datetime objects, bare years (2018) and strings dateutil
    understands ("2018-03", "Mar 2018"). Returns None for empty values and
    open-end markers such as "present".
    """
    if value is None or value == "":
        return None

    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, int):
        return date(value, 1, 1)

    text = str(value).strip()
    if text.lower() in OPEN_END_MARKERS:
        return None

    try:
        return dateutil_parser.parse(text, default=_DEFAULT_DATE).date()
    except (ValueError, OverflowError) as e:
        raise ValueError(f"Unparseable date '{value}': {e}") from e


def parse_flag(value: Any) -> bool:
    """Parse a yes/no flag, None counts as False"""
    if value is None or isinstance(value, bool):
        return bool(value)
    if isinstance(value, int):
        if value in (0, 1):
            return bool(value)
        raise ValueError(f"Invalid flag value: {value!r}")

    text = str(value).strip().lower()
    if text in TRUE_VALUES:
        return True
    if text in FALSE_VALUES:
        return False
    raise ValueError(f"Invalid flag value: {value!r}")


def skill_from_value(value: Union[str, Dict[str, Any]]) -> SkillRef:
    """A skill is either {id, name} or a plain string used as both"""
    if isinstance(value, dict):
        if 'id' not in value:
            raise ValueError(f"Skill entry without id: {value}")
        skill_id = str(value['id'])
        return SkillRef(id=skill_id, name=str(value.get('name') or skill_id))
    return SkillRef(id=str(value), name=str(value))


def job_posting_from_dict(data: Dict[str, Any]) -> JobPosting:
    """Build a JobPosting from a mapping"""
    if not data.get('id'):
        raise ValueError("Job posting requires an 'id'")

    level = data.get('experience_level')

    return JobPosting(
        id=str(data['id']),
        title=data.get('title'),
        required_skills=tuple(skill_from_value(s) for s in data.get('required_skills') or []),
        preferred_skills=tuple(skill_from_value(s) for s in data.get('preferred_skills') or []),
        experience_level=ExperienceLevel.from_value(level) if level else None,
        description=data.get('description') or "",
    )


def experience_from_dict(data: Dict[str, Any]) -> ExperienceEntry:
    start_date = parse_date(data.get('start_date'))
    if start_date is None:
        raise ValueError(f"Experience entry without start_date: {data}")

    raw_end = data.get('end_date')
    end_date = parse_date(raw_end)
    current = parse_flag(data.get('current')) or (
        isinstance(raw_end, str) and raw_end.strip().lower() in OPEN_END_MARKERS
    )

    return ExperienceEntry(
        start_date=start_date,
        end_date=end_date,
        current=current,
        title=data.get('title'),
        company=data.get('company'),
    )


def education_from_dict(data: Dict[str, Any]) -> EducationEntry:
    return EducationEntry(
        degree=data.get('degree') or "",
        field=data.get('field') or "",
        institution=data.get('institution'),
    )


def candidate_profile_from_dict(data: Dict[str, Any]) -> CandidateProfile:
    """Build a CandidateProfile from a mapping"""
    if not data.get('id'):
        raise ValueError("Candidate profile requires an 'id'")

    return CandidateProfile(
        id=str(data['id']),
        name=data.get('name'),
        skills=tuple(skill_from_value(s) for s in data.get('skills') or []),
        experience=tuple(experience_from_dict(e) for e in data.get('experience') or []),
        education=tuple(education_from_dict(e) for e in data.get('education') or []),
    )


def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
    path = Path(path)
    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    with open(path, 'r', encoding='utf-8') as f:
        data = yaml.safe_load(f) or {}

    if not isinstance(data, dict):
        raise ValueError(f"Expected a mapping at the top of {path}")
    return data


def load_job_posting(path: Union[str, Path]) -> JobPosting:
    """Load a job posting from a YAML file"""
    logger.debug(f"Loading job posting: {path}")
    return job_posting_from_dict(_load_yaml(path))


def load_candidate_profile(path: Union[str, Path]) -> CandidateProfile:
    """Load a candidate profile from a YAML file"""
    logger.debug(f"Loading candidate profile: {path}")
    return candidate_profile_from_dict(_load_yaml(path))
