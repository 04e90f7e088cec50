# skillmatch/scoring/fit_scorer.py
import logging
from typing import Optional

from skillmatch.models import JobPosting, CandidateProfile
from skillmatch.scoring.models import MatchResult, FitDimension
from skillmatch.scoring.constants import DIMENSION_WEIGHTS
from skillmatch.scoring.skill_matcher import SkillMatcher
from skillmatch.scoring.experience_evaluator import ExperienceEvaluator
from skillmatch.scoring.education_evaluator import EducationEvaluator
from skillmatch.scoring.feedback_generator import FeedbackGenerator

logger = logging.getLogger(__name__)


class MatchScorer:
    """
    Calculate the job/candidate compatibility score

    Stateless apart from the reference year, so one instance can be shared
    across threads.
    """

    WEIGHTS = DIMENSION_WEIGHTS

    def __init__(self, reference_year: Optional[int] = None):
        self.skill_matcher = SkillMatcher()
        self.experience_evaluator = ExperienceEvaluator(reference_year)
        self.education_evaluator = EducationEvaluator()
        self.feedback_generator = FeedbackGenerator()

    @classmethod
    def aggregate(
        cls,
        skill_score: float,
        experience_score: float,
        education_score: float
    ) -> float:
        """Weighted sum of the three dimension scores"""
        return (
            skill_score * cls.WEIGHTS[FitDimension.SKILL] +
            experience_score * cls.WEIGHTS[FitDimension.EXPERIENCE] +
            education_score * cls.WEIGHTS[FitDimension.EDUCATION]
        )

    def score_match(
        self,
        job: JobPosting,
        candidate: CandidateProfile
    ) -> MatchResult:
        """
        Score a candidate against a job

        Args:
            job: Fully loaded job posting
            candidate: Fully loaded candidate profile

        Returns:
            MatchResult with scores and feedback

        Raises:
            ValueError: If job or candidate is missing
        """
        if job is None:
            raise ValueError("job is required")
        if candidate is None:
            raise ValueError("candidate is required")

        logger.info(f"Scoring candidate {candidate.id} for job {job.id}")

        # 1. Skills
        skill_score = self.skill_matcher.calculate_skill_score(job, candidate)
        missing_skills = self.skill_matcher.missing_required_skills(job, candidate)

        # 2. Experience
        experience_score = self.experience_evaluator.calculate_experience_score(job, candidate)

        # 3. Education
        education_score = self.education_evaluator.calculate_education_score(job, candidate)

        overall_score = self.aggregate(skill_score, experience_score, education_score)

        feedback = self.feedback_generator.generate(
            {
                FitDimension.SKILL: skill_score,
                FitDimension.EXPERIENCE: experience_score,
                FitDimension.EDUCATION: education_score,
            },
            missing_skills=missing_skills,
            required_level=job.experience_level,
        )

        logger.info(
            f"Match {job.id}/{candidate.id}: overall={overall_score:.1f} "
            f"(skill={skill_score:.1f}, experience={experience_score:.1f}, "
            f"education={education_score:.1f})"
        )

        return MatchResult(
            overall_score=overall_score,
            skill_score=skill_score,
            experience_score=experience_score,
            education_score=education_score,
            strengths=feedback.strengths,
            gaps=feedback.gaps,
            recommendations=feedback.recommendations,
            strength_dimensions=feedback.strength_dimensions,
            gap_dimensions=feedback.gap_dimensions,
            missing_skills=tuple(str(skill) for skill in missing_skills),
            job_id=job.id,
            candidate_id=candidate.id,
        )
