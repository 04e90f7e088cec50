"""
Tests for filtering candidates with parsed search criteria.
"""

import pytest
from datetime import date

from skillmatch.models import SkillRef, ExperienceEntry, EducationEntry, CandidateProfile
from skillmatch.search.models import SearchCriteria
from skillmatch.search.candidate_filter import CandidateFilter


@pytest.fixture
def candidate_filter():
    return CandidateFilter(reference_year=2025)


@pytest.fixture
def python_dev():
    return CandidateProfile(
        id="py",
        skills=(SkillRef("s1", "Python"), SkillRef("s2", "Docker")),
        experience=(
            ExperienceEntry(start_date=date(2017, 1, 1), end_date=date(2020, 1, 1),
                            title="Junior Developer"),
            ExperienceEntry(start_date=date(2020, 1, 1), current=True,
                            title="Senior Backend Engineer"),
        ),
        education=(EducationEntry(degree="Master of Science", field="Computer Science"),),
    )


@pytest.fixture
def designer():
    return CandidateProfile(
        id="ux",
        skills=(SkillRef("s9", "Figma"),),
        experience=(ExperienceEntry(start_date=date(2023, 1, 1), title="Product Designer"),),
        education=(EducationEntry(degree="Bachelor of Arts", field="Design"),),
    )


class TestMatches:
    """Single criteria."""

    def test_empty_criteria_keeps_everyone(self, candidate_filter, python_dev, designer):
        assert candidate_filter.filter(SearchCriteria(), [python_dev, designer]) == [python_dev, designer]

    def test_skill_names_case_insensitive(self, candidate_filter, python_dev, designer):
        criteria = SearchCriteria(skills=("python",))
        assert candidate_filter.filter(criteria, [python_dev, designer]) == [python_dev]

    def test_any_skill_is_enough(self, candidate_filter, python_dev):
        criteria = SearchCriteria(skills=("kubernetes", "docker"))
        assert candidate_filter.matches(criteria, python_dev)

    def test_years_from_single_role(self, candidate_filter, python_dev, designer):
        """The earliest role started 8 years before the reference year."""
        assert candidate_filter.matches(SearchCriteria(experience_years=8), python_dev)
        assert not candidate_filter.matches(SearchCriteria(experience_years=9), python_dev)
        assert not candidate_filter.matches(SearchCriteria(experience_years=3), designer)

    def test_role_in_any_title(self, candidate_filter, python_dev, designer):
        criteria = SearchCriteria(role="backend")
        assert candidate_filter.filter(criteria, [python_dev, designer]) == [python_dev]

    def test_education_and_field(self, candidate_filter, python_dev, designer):
        assert candidate_filter.matches(SearchCriteria(education="master"), python_dev)
        assert not candidate_filter.matches(SearchCriteria(education="master"), designer)
        assert candidate_filter.matches(SearchCriteria(field_of_study="computer science"), python_dev)


class TestCombined:
    """Several criteria together."""

    def test_all_must_hold(self, candidate_filter, python_dev):
        criteria = SearchCriteria(skills=("python",), role="engineer", education="phd")
        assert not candidate_filter.matches(criteria, python_dev)

    def test_no_experience_fails_years_and_role(self, candidate_filter):
        candidate = CandidateProfile(id="new")
        assert not candidate_filter.matches(SearchCriteria(experience_years=0), candidate)
        assert not candidate_filter.matches(SearchCriteria(role="developer"), candidate)
