# skillmatch/scoring/education_evaluator.py
import logging
from typing import List, Optional, Sequence

from skillmatch.models import EducationEntry, JobPosting, CandidateProfile
from skillmatch.scoring.constants import (
    DEGREE_RANKS, EDUCATION_KEYWORDS, EDUCATION_BASE_SCORE,
    EDUCATION_NO_ENTRIES_SCORE, EDUCATION_KEYWORD_BONUS, MAX_SCORE
)

logger = logging.getLogger(__name__)


class EducationEvaluator:
    """
    Rank candidate education against education hints in the job description
    """

    DEGREE_RANKS = DEGREE_RANKS
    KEYWORDS = EDUCATION_KEYWORDS

    def extract_keywords(self, description: str) -> List[str]:
        """Education keywords mentioned in a job description"""
        if not description:
            return []

        text_lower = description.lower()
        return [kw for kw in self.KEYWORDS if kw in text_lower]

    def degree_rank(self, entry: EducationEntry) -> int:
        """Rank of the highest table degree named in the entry, 0 if none"""
        degree_lower = (entry.degree or "").lower()
        rank = 0
        for name, value in self.DEGREE_RANKS.items():
            if name in degree_lower and value > rank:
                rank = value
        return rank

    def top_entry(self, entries: Sequence[EducationEntry]) -> Optional[EducationEntry]:
        """Highest ranked entry, earlier entries win ties"""
        best = None
        best_rank = -1
        for entry in entries:
            rank = self.degree_rank(entry)
            if rank > best_rank:
                best, best_rank = entry, rank
        return best

    def calculate_education_score(
        self,
        job: JobPosting,
        candidate: CandidateProfile
    ) -> float:
        """
        Calculate education fit score (0-100)

        A candidate without education entries always gets the lower base
        score, whatever the job description asks for.
        """
        if not candidate.education:
            return EDUCATION_NO_ENTRIES_SCORE

        base = EDUCATION_BASE_SCORE
        keywords = self.extract_keywords(job.description)
        if not keywords:
            return base

        top = self.top_entry(candidate.education)
        entry_text = f"{top.degree or ''} {top.field or ''}".lower()
        overlap = sum(1 for kw in keywords if kw in entry_text) / len(keywords)

        score = min(MAX_SCORE, base + EDUCATION_KEYWORD_BONUS * overlap)

        logger.debug(
            f"Education: keywords={keywords} top='{top.degree}' "
            f"overlap={overlap:.2f} -> {score:.1f}"
        )
        return score
