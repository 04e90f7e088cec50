# skillmatch/scoring/__init__.py
"""
Job/candidate compatibility scoring module
"""

from skillmatch.scoring.models import (
    MatchResult, MatchComparison, Feedback, FitDimension, FitLevel
)
from skillmatch.scoring.skill_matcher import SkillMatcher
from skillmatch.scoring.experience_evaluator import ExperienceEvaluator
from skillmatch.scoring.education_evaluator import EducationEvaluator
from skillmatch.scoring.feedback_generator import FeedbackGenerator
from skillmatch.scoring.fit_scorer import MatchScorer
from skillmatch.scoring.ranker import CandidateRanker

__all__ = [
    'MatchResult',
    'MatchComparison',
    'Feedback',
    'FitDimension',
    'FitLevel',
    'SkillMatcher',
    'ExperienceEvaluator',
    'EducationEvaluator',
    'FeedbackGenerator',
    'MatchScorer',
    'CandidateRanker',
]
