# skillmatch/__init__.py
"""
SkillMatch job/candidate compatibility scoring
"""

from skillmatch.models import (
    SkillRef, ExperienceEntry, EducationEntry, JobPosting, CandidateProfile, ExperienceLevel
)
from skillmatch.scoring import MatchScorer, MatchResult, CandidateRanker
from skillmatch.search import QueryTermExtractor, SearchCriteria, CandidateFilter

__version__ = "1.0.0"

__all__ = [
    'SkillRef',
    'ExperienceEntry',
    'EducationEntry',
    'JobPosting',
    'CandidateProfile',
    'ExperienceLevel',
    'MatchScorer',
    'MatchResult',
    'CandidateRanker',
    'QueryTermExtractor',
    'SearchCriteria',
    'CandidateFilter',
]
