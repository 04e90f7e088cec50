# skillmatch/search/__init__.py
"""
Candidate search helpers
"""

from skillmatch.search.models import SearchCriteria
from skillmatch.search.query_parser import QueryTermExtractor
from skillmatch.search.candidate_filter import CandidateFilter

__all__ = [
    'SearchCriteria',
    'QueryTermExtractor',
    'CandidateFilter',
]
