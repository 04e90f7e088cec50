# skillmatch/scoring/models.py
from dataclasses import dataclass, field
from typing import List, Dict, Optional, Tuple, Any
from enum import Enum


class FitDimension(Enum):
    """Scored dimensions, in feedback evaluation order"""
    SKILL = "skill"
    EXPERIENCE = "experience"
    EDUCATION = "education"


class FitLevel(Enum):
    """Overall fit level"""
    EXCELLENT = "excellent"      # 90-100
    STRONG = "strong"            # 80-89
    GOOD = "good"                # 70-79
    MODERATE = "moderate"        # 60-69
    WEAK = "weak"                # 50-59
    POOR = "poor"                # <50

    @classmethod
    def from_score(cls, score: float) -> "FitLevel":
        if score >= 90:
            return cls.EXCELLENT
        elif score >= 80:
            return cls.STRONG
        elif score >= 70:
            return cls.GOOD
        elif score >= 60:
            return cls.MODERATE
        elif score >= 50:
            return cls.WEAK
        else:
            return cls.POOR


@dataclass(frozen=True)
class Feedback:
    """Strengths, gaps and recommendations for one match"""
    strengths: Tuple[str, ...] = ()
    gaps: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()
    strength_dimensions: Tuple[FitDimension, ...] = ()
    gap_dimensions: Tuple[FitDimension, ...] = ()


@dataclass(frozen=True)
class MatchResult:
    """Job/candidate compatibility result, created fresh for every call"""
    overall_score: float         # 0-100
    skill_score: float           # 0-100
    experience_score: float      # 0-100
    education_score: float       # 0-100

    strengths: Tuple[str, ...] = ()
    gaps: Tuple[str, ...] = ()
    recommendations: Tuple[str, ...] = ()

    strength_dimensions: Tuple[FitDimension, ...] = ()
    gap_dimensions: Tuple[FitDimension, ...] = ()
    missing_skills: Tuple[str, ...] = ()

    job_id: Optional[str] = None
    candidate_id: Optional[str] = None

    @property
    def fit_level(self) -> FitLevel:
        return FitLevel.from_score(self.overall_score)

    def score_for(self, dimension: FitDimension) -> float:
        return {
            FitDimension.SKILL: self.skill_score,
            FitDimension.EXPERIENCE: self.experience_score,
            FitDimension.EDUCATION: self.education_score,
        }[dimension]

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for JSON export"""
        return {
            'job_id': self.job_id,
            'candidate_id': self.candidate_id,
            'overall_score': self.overall_score,
            'fit_level': self.fit_level.value,
            'component_scores': {
                'skill': self.skill_score,
                'experience': self.experience_score,
                'education': self.education_score,
            },
            'strengths': list(self.strengths),
            'gaps': list(self.gaps),
            'recommendations': list(self.recommendations),
            'missing_skills': list(self.missing_skills),
        }


@dataclass
class MatchComparison:
    """Compare multiple candidates for the same job"""
    job_id: str
    results: List[MatchResult] = field(default_factory=list)

    @property
    def ranked_results(self) -> List[MatchResult]:
        """Results ranked by overall score, input order kept for ties"""
        return sorted(self.results, key=lambda r: r.overall_score, reverse=True)

    @property
    def best_candidate(self) -> Optional[MatchResult]:
        """Get best fit candidate"""
        if not self.results:
            return None
        return self.ranked_results[0]

    @property
    def average_score(self) -> float:
        if not self.results:
            return 0.0
        return sum(r.overall_score for r in self.results) / len(self.results)

    def top(self, n: int) -> List[MatchResult]:
        return self.ranked_results[:n]

    def to_dict(self) -> Dict[str, Any]:
        return {
            'job_id': self.job_id,
            'total_candidates': len(self.results),
            'average_score': self.average_score,
            'candidates': [
                {'rank': rank, **result.to_dict()}
                for rank, result in enumerate(self.ranked_results, 1)
            ],
        }
