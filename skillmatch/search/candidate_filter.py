# skillmatch/search/candidate_filter.py
import logging
from datetime import date
from typing import Iterable, List, Optional

from skillmatch.models import CandidateProfile
from skillmatch.search.models import SearchCriteria

logger = logging.getLogger(__name__)


class CandidateFilter:
    """
    Apply parsed search criteria to loaded candidate profiles

    Skill hints come from free text, so they are compared with skill names
    (case-insensitive) rather than skill ids.
    """

    def __init__(self, reference_year: Optional[int] = None):
        self.reference_year = reference_year

    @property
    def current_year(self) -> int:
        return self.reference_year or date.today().year

    def filter(
        self,
        criteria: SearchCriteria,
        candidates: Iterable[CandidateProfile]
    ) -> List[CandidateProfile]:
        candidates = list(candidates)
        if criteria.is_empty:
            return candidates

        matched = [c for c in candidates if self.matches(criteria, c)]
        logger.info(f"Search filter: {len(candidates)} -> {len(matched)} candidates")
        return matched

    def matches(self, criteria: SearchCriteria, candidate: CandidateProfile) -> bool:
        """Every criterion that is set must hold"""
        if criteria.skills and not self._has_any_skill(criteria.skills, candidate):
            return False

        if criteria.experience_years is not None and not self._has_years(
            criteria.experience_years, candidate
        ):
            return False

        if criteria.role and not self._has_role(criteria.role, candidate):
            return False

        for term in (criteria.education, criteria.field_of_study):
            if term and not self._has_education(term, candidate):
                return False

        return True

    def _has_any_skill(self, skills, candidate: CandidateProfile) -> bool:
        wanted = {s.lower() for s in skills}
        return any(skill.name.lower() in wanted for skill in candidate.skills)

    def _has_years(self, years: int, candidate: CandidateProfile) -> bool:
        # Any single role that started long enough ago
        return any(
            self.current_year - entry.start_date.year >= years
            for entry in candidate.experience
        )

    def _has_role(self, role: str, candidate: CandidateProfile) -> bool:
        role_lower = role.lower()
        return any(
            role_lower in (entry.title or "").lower()
            for entry in candidate.experience
        )

    def _has_education(self, term: str, candidate: CandidateProfile) -> bool:
        term_lower = term.lower()
        return any(
            term_lower in (entry.degree or "").lower() or term_lower in (entry.field or "").lower()
            for entry in candidate.education
        )
