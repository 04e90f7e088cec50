"""
Tests for input value objects.
"""

import pytest
from dataclasses import FrozenInstanceError
from datetime import date

from skillmatch.models import (
    SkillRef, ExperienceEntry, JobPosting, CandidateProfile, ExperienceLevel
)


class TestExperienceLevel:
    """Ordinal experience levels."""

    def test_ordinals_follow_seniority(self):
        ordinals = [level.ordinal for level in ExperienceLevel]
        assert ordinals == [0, 1, 2, 3, 4, 5]
        assert ExperienceLevel.ENTRY.ordinal < ExperienceLevel.EXECUTIVE.ordinal

    def test_from_value_is_case_insensitive(self):
        assert ExperienceLevel.from_value(" Senior ") is ExperienceLevel.SENIOR

    def test_from_value_rejects_unknown(self):
        with pytest.raises(ValueError, match="Unknown experience level"):
            ExperienceLevel.from_value("intern")


class TestSkillRef:
    """Skill identity."""

    def test_equality_by_id_only(self):
        assert SkillRef(id="1", name="Go") == SkillRef(id="1", name="golang")
        assert SkillRef(id="1", name="Go") != SkillRef(id="2", name="Go")

    def test_hash_by_id(self):
        assert len({SkillRef(id="1", name="Go"), SkillRef(id="1", name="GO")}) == 1


class TestExperienceEntry:
    """End-year resolution."""

    def test_closed_interval(self):
        entry = ExperienceEntry(start_date=date(2018, 1, 1), end_date=date(2024, 1, 1))
        assert entry.end_year(2030) == 2024

    def test_current_ignores_end_date(self):
        entry = ExperienceEntry(
            start_date=date(2018, 1, 1), end_date=date(2020, 1, 1), current=True
        )
        assert entry.end_year(2030) == 2030

    def test_missing_end_date_is_open(self):
        entry = ExperienceEntry(start_date=date(2018, 1, 1))
        assert entry.end_year(2030) == 2030


class TestJobPosting:
    """Job value object."""

    def test_duplicate_skills_removed(self):
        job = JobPosting(
            id="j",
            required_skills=[SkillRef("1", "Go"), SkillRef("1", "Go"), SkillRef("2", "SQL")],
        )
        assert job.required_skills == (SkillRef("1"), SkillRef("2"))

    def test_is_frozen(self):
        job = JobPosting(id="j")
        with pytest.raises(FrozenInstanceError):
            job.description = "changed"

    def test_to_dict(self):
        job = JobPosting(id="j", experience_level=ExperienceLevel.MID)
        assert job.to_dict()['experience_level'] == "mid"


class TestCandidateProfile:
    """Candidate value object."""

    def test_lists_become_tuples(self):
        candidate = CandidateProfile(id="c", skills=[SkillRef("1", "Go")], experience=[])
        assert isinstance(candidate.skills, tuple)
        assert isinstance(candidate.experience, tuple)

    def test_skill_ids(self):
        candidate = CandidateProfile(id="c", skills=(SkillRef("1", "Go"), SkillRef("2", "SQL")))
        assert candidate.skill_ids == frozenset({"1", "2"})

    def test_to_dict_serialises_dates(self):
        candidate = CandidateProfile(
            id="c",
            experience=(ExperienceEntry(start_date=date(2020, 5, 1)),),
        )
        data = candidate.to_dict()
        assert data['experience'][0]['start_date'] == "2020-05-01"
        assert data['experience'][0]['end_date'] is None
