# skillmatch/scoring/skill_matcher.py
import logging
from typing import List, Iterable, AbstractSet

from skillmatch.models import JobPosting, CandidateProfile, SkillRef
from skillmatch.scoring.constants import SKILL_WEIGHTS, MAX_SCORE

logger = logging.getLogger(__name__)


class SkillMatcher:
    """
    Match candidate skills against required and preferred job skills
    """

    WEIGHTS = SKILL_WEIGHTS

    def calculate_skill_score(
        self,
        job: JobPosting,
        candidate: CandidateProfile
    ) -> float:
        """
        Calculate skill fit score (0-100)

        A job that lists no skills of a kind gives full credit for that kind.
        """
        candidate_ids = candidate.skill_ids

        required_ratio = self._coverage(job.required_skills, candidate_ids)
        preferred_ratio = self._coverage(job.preferred_skills, candidate_ids)

        score = (
            required_ratio * self.WEIGHTS['required'] +
            preferred_ratio * self.WEIGHTS['preferred']
        ) * MAX_SCORE

        logger.debug(
            f"Skill coverage: required={required_ratio:.2f} "
            f"preferred={preferred_ratio:.2f} -> {score:.1f}"
        )
        return score

    def missing_required_skills(
        self,
        job: JobPosting,
        candidate: CandidateProfile
    ) -> List[SkillRef]:
        """Required skills the candidate lacks, in the job's order"""
        candidate_ids = candidate.skill_ids
        return [s for s in job.required_skills if s.id not in candidate_ids]

    def _coverage(self, wanted: Iterable[SkillRef], candidate_ids: AbstractSet[str]) -> float:
        wanted_ids = {skill.id for skill in wanted}
        if not wanted_ids:
            return 1.0
        return len(wanted_ids & candidate_ids) / len(wanted_ids)
