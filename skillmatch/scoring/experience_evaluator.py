# skillmatch/scoring/experience_evaluator.py
import logging
from typing import Iterable, Optional
from datetime import date

from skillmatch.models import ExperienceEntry, ExperienceLevel, JobPosting, CandidateProfile
from skillmatch.scoring.constants import (
    EXPERIENCE_YEAR_THRESHOLDS, EXPERIENCE_DISTANCE_PENALTY, NEUTRAL_SCORE, MAX_SCORE
)

logger = logging.getLogger(__name__)


class ExperienceEvaluator:
    """
    Compare the candidate's accumulated tenure with the job's level
    """

    YEAR_THRESHOLDS = EXPERIENCE_YEAR_THRESHOLDS

    def __init__(self, reference_year: Optional[int] = None):
        """
        Args:
            reference_year: Year open-ended roles run until (default: this year)
        """
        self.reference_year = reference_year

    @property
    def current_year(self) -> int:
        return self.reference_year or date.today().year

    def calculate_total_years(self, entries: Iterable[ExperienceEntry]) -> int:
        """
        Sum whole-year durations of all entries.

        Overlapping roles are counted once each, not merged.
        """
        total = 0
        year = self.current_year

        for entry in entries:
            duration = entry.end_year(year) - entry.start_date.year
            if duration < 0:
                logger.warning(
                    f"Experience entry ends before it starts "
                    f"({entry.start_date} -> {entry.end_date}), counting 0 years"
                )
                continue
            total += duration

        return total

    def determine_level(self, total_years: float) -> ExperienceLevel:
        """Highest level whose year threshold is met"""
        level = ExperienceLevel.ENTRY
        for candidate_level, threshold in self.YEAR_THRESHOLDS.items():
            if total_years >= threshold:
                level = candidate_level
        return level

    def calculate_experience_score(
        self,
        job: JobPosting,
        candidate: CandidateProfile
    ) -> float:
        """
        Calculate experience fit score (0-100)

        Returns the neutral score when the job sets no level or the
        candidate lists no experience.
        """
        if job.experience_level is None or not candidate.experience:
            return NEUTRAL_SCORE

        total_years = self.calculate_total_years(candidate.experience)
        candidate_level = self.determine_level(total_years)
        distance = abs(job.experience_level.ordinal - candidate_level.ordinal)

        score = max(0.0, MAX_SCORE - EXPERIENCE_DISTANCE_PENALTY * distance)

        logger.debug(
            f"Experience: {total_years} years -> {candidate_level.value}, "
            f"job wants {job.experience_level.value} (distance {distance}) -> {score:.1f}"
        )
        return score
