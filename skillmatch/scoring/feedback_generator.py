# skillmatch/scoring/feedback_generator.py
import logging
from typing import Dict, Optional, Sequence

from skillmatch.models import SkillRef, ExperienceLevel
from skillmatch.scoring.models import Feedback, FitDimension
from skillmatch.scoring.constants import STRENGTH_THRESHOLD, GAP_THRESHOLD

logger = logging.getLogger(__name__)


class FeedbackGenerator:
    """
    Turn dimension scores into strengths, gaps and recommendations
    """

    STRENGTH_MESSAGES = {
        FitDimension.SKILL: "Strong match with the required and preferred skills",
        FitDimension.EXPERIENCE: "Experience level fits the role",
        FitDimension.EDUCATION: "Education background fits the role",
    }

    GAP_MESSAGES = {
        FitDimension.SKILL: "Missing several required skills",
        FitDimension.EXPERIENCE: "Experience level is far from the role's requirement",
        FitDimension.EDUCATION: "Education does not match the role's requirements",
    }

    def classify(self, score: float) -> str:
        """'strength', 'gap' or 'neutral'"""
        if score >= STRENGTH_THRESHOLD:
            return "strength"
        if score < GAP_THRESHOLD:
            return "gap"
        return "neutral"

    def generate(
        self,
        scores: Dict[FitDimension, float],
        missing_skills: Sequence[SkillRef] = (),
        required_level: Optional[ExperienceLevel] = None
    ) -> Feedback:
        """
        Build feedback for the three dimensions, always in the order
        skill, experience, education.

        Args:
            scores: Score per dimension
            missing_skills: Required skills the candidate lacks
            required_level: Job's experience level, used in the recommendation
        """
        strengths = []
        gaps = []
        recommendations = []
        strength_dimensions = []
        gap_dimensions = []

        for dimension in FitDimension:
            verdict = self.classify(scores[dimension])

            if verdict == "strength":
                strengths.append(self.STRENGTH_MESSAGES[dimension])
                strength_dimensions.append(dimension)
            elif verdict == "gap":
                gaps.append(self.GAP_MESSAGES[dimension])
                gap_dimensions.append(dimension)
                recommendations.append(
                    self._recommendation(dimension, missing_skills, required_level)
                )

        logger.debug(
            f"Feedback: strengths={[d.value for d in strength_dimensions]} "
            f"gaps={[d.value for d in gap_dimensions]}"
        )

        return Feedback(
            strengths=tuple(strengths),
            gaps=tuple(gaps),
            recommendations=tuple(recommendations),
            strength_dimensions=tuple(strength_dimensions),
            gap_dimensions=tuple(gap_dimensions),
        )

    def _recommendation(
        self,
        dimension: FitDimension,
        missing_skills: Sequence[SkillRef],
        required_level: Optional[ExperienceLevel]
    ) -> str:
        if dimension is FitDimension.SKILL:
            if missing_skills:
                names = ", ".join(str(skill) for skill in missing_skills)
                return f"Develop the missing required skills: {names}"
            return "Develop more of the skills this role asks for"

        if dimension is FitDimension.EXPERIENCE:
            if required_level is not None:
                return f"Align experience with the {required_level.value} level this role requires"
            return "Align experience with the level this role requires"

        return "Pursue the education or certifications named in the job description"
