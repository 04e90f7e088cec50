# skillmatch/scoring/constants.py
"""
Fixed scoring tables.

These are structural constants of the scoring model, read-only mappings so
nothing can retune them at runtime.
"""

from types import MappingProxyType

from skillmatch.models import ExperienceLevel
from skillmatch.scoring.models import FitDimension

# Skill score: required skills weigh more than preferred ones
SKILL_WEIGHTS = MappingProxyType({
    'required': 0.7,
    'preferred': 0.3,
})

# Overall score
DIMENSION_WEIGHTS = MappingProxyType({
    FitDimension.SKILL: 0.5,
    FitDimension.EXPERIENCE: 0.3,
    FitDimension.EDUCATION: 0.2,
})

# Minimum total years for each level
EXPERIENCE_YEAR_THRESHOLDS = MappingProxyType({
    ExperienceLevel.ENTRY: 0,
    ExperienceLevel.JUNIOR: 1,
    ExperienceLevel.MID: 3,
    ExperienceLevel.SENIOR: 5,
    ExperienceLevel.LEAD: 8,
    ExperienceLevel.EXECUTIVE: 10,
})

EXPERIENCE_DISTANCE_PENALTY = 20
NEUTRAL_SCORE = 50.0

# Degree ranks, matched as substrings of the degree text (0 = unranked)
DEGREE_RANKS = MappingProxyType({
    'high school': 1,
    'associate': 2,
    'bachelor': 3,
    'master': 4,
    'phd': 5,
})

# Education terms looked for in job descriptions and search queries
EDUCATION_KEYWORDS = (
    'bachelor',
    'master',
    'phd',
    'doctorate',
    'degree',
    'diploma',
    'certification',
)

EDUCATION_BASE_SCORE = 70.0
EDUCATION_NO_ENTRIES_SCORE = 50.0
EDUCATION_KEYWORD_BONUS = 30.0

# Feedback classification
STRENGTH_THRESHOLD = 80.0    # score >= threshold
GAP_THRESHOLD = 50.0         # score < threshold

MAX_SCORE = 100.0
