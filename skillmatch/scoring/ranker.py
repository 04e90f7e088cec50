# skillmatch/scoring/ranker.py
import logging
from typing import Iterable, Optional

from skillmatch.models import JobPosting, CandidateProfile
from skillmatch.scoring.models import MatchComparison
from skillmatch.scoring.fit_scorer import MatchScorer

logger = logging.getLogger(__name__)


class CandidateRanker:
    """Score many candidates against one job"""

    def __init__(self, scorer: Optional[MatchScorer] = None):
        self.scorer = scorer or MatchScorer()

    def rank(
        self,
        job: JobPosting,
        candidates: Iterable[CandidateProfile]
    ) -> MatchComparison:
        if job is None:
            raise ValueError("job is required")

        comparison = MatchComparison(job_id=job.id)
        for candidate in candidates:
            comparison.results.append(self.scorer.score_match(job, candidate))

        logger.info(
            f"Ranked {len(comparison.results)} candidates for job {job.id} "
            f"(average {comparison.average_score:.1f})"
        )
        return comparison
