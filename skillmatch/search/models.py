# skillmatch/search/models.py
from dataclasses import dataclass, asdict
from typing import Optional, Tuple, Dict, Any


@dataclass(frozen=True)
class SearchCriteria:
    """Filter hints parsed from a free-text candidate search"""
    skills: Tuple[str, ...] = ()
    experience_years: Optional[int] = None
    role: Optional[str] = None
    education: Optional[str] = None
    field_of_study: Optional[str] = None

    @property
    def is_empty(self) -> bool:
        return not self.skills and all(
            value is None for value in (
                self.experience_years, self.role, self.education, self.field_of_study
            )
        )

    def to_dict(self) -> Dict[str, Any]:
        data = asdict(self)
        data['skills'] = list(self.skills)
        return data
