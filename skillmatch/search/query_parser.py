# skillmatch/search/query_parser.py
import re
import logging
from typing import List, Optional

from skillmatch.scoring.constants import EDUCATION_KEYWORDS
from skillmatch.search.models import SearchCriteria

logger = logging.getLogger(__name__)


class QueryTermExtractor:
    """
    Parse recruiter search text into filter hints

    Only recognises fixed vocabularies, anything else in the query is ignored.
    """

    # Technology vocabulary, grouped by area
    SKILL_PATTERNS = {
        'languages_frameworks': r'react\.?js|angular|vue\.?js|node\.?js|python|java(?!script)|typescript|javascript|aws|docker|kubernetes',
        'databases': r'sql|nosql|mongodb|postgresql|mysql',
        'web': r'html5?|css3?|sass',
        'tooling': r'git|ci/cd|jenkins|terraform',
        'ml': r'machine learning|deep learning|ai|nlp',
    }

    # Later tiers override earlier ones: "software engineer" is an engineer
    ROLE_PATTERNS = (
        r'frontend|backend|full.?stack|dev.?ops|data scientist|software|developer',
        r'engineer|architect|lead|manager|director',
    )

    FIELD_OF_STUDY_PATTERN = (
        r'computer science|information technology|data science|mathematics|engineering'
    )

    YEARS_PATTERN = r'(\d+)\+?\s*years?'

    def __init__(self):
        skill_union = '|'.join(f'(?:{p})' for p in self.SKILL_PATTERNS.values())
        self.skill_regex = re.compile(rf'\b(?:{skill_union})\b')
        self.years_regex = re.compile(self.YEARS_PATTERN)
        self.role_regexes = [re.compile(rf'\b(?:{p})\b') for p in self.ROLE_PATTERNS]
        education_union = '|'.join(re.escape(kw) for kw in EDUCATION_KEYWORDS)
        self.education_regex = re.compile(rf"\b({education_union})(?:'?s)?\b")
        self.field_regex = re.compile(rf'\b(?:{self.FIELD_OF_STUDY_PATTERN})\b')

    def extract(self, query: str) -> SearchCriteria:
        """
        Extract filter hints from a search query

        Args:
            query: Free-text search, e.g. "senior python developer with 5+ years"

        Returns:
            SearchCriteria, fields left empty when nothing matched
        """
        if not query:
            return SearchCriteria()

        query_lower = query.lower()

        criteria = SearchCriteria(
            skills=tuple(self.extract_skills(query_lower)),
            experience_years=self.extract_years(query_lower),
            role=self.extract_role(query_lower),
            education=self.extract_education(query_lower),
            field_of_study=self._first_match(self.field_regex, query_lower),
        )

        logger.debug(f"Parsed query '{query}' -> {criteria}")
        return criteria

    def extract_skills(self, text: str) -> List[str]:
        """All vocabulary skills in text, first occurrence order"""
        found = []
        for match in self.skill_regex.finditer(text.lower()):
            skill = match.group(0)
            if skill not in found:
                found.append(skill)
        return found

    def extract_years(self, text: str) -> Optional[int]:
        match = self.years_regex.search(text.lower())
        if match:
            return int(match.group(1))
        return None

    def extract_role(self, text: str) -> Optional[str]:
        """First role word of the last tier that matches"""
        role = None
        for regex in self.role_regexes:
            role = self._first_match(regex, text.lower()) or role
        return role

    def extract_education(self, text: str) -> Optional[str]:
        match = self.education_regex.search(text.lower())
        if match:
            return match.group(1)
        return None

    def _first_match(self, pattern: re.Pattern, text: str) -> Optional[str]:
        match = pattern.search(text)
        return match.group(0) if match else None
