"""
Pytest configuration and shared fixtures.
"""

import pytest
from datetime import date
from pathlib import Path

from skillmatch.models import (
    SkillRef, ExperienceEntry, EducationEntry, JobPosting, CandidateProfile, ExperienceLevel
)
from skillmatch.scoring.fit_scorer import MatchScorer

REFERENCE_YEAR = 2025


@pytest.fixture
def skills():
    """Catalogue skills keyed by short name."""
    return {
        'go': SkillRef(id="skill-go", name="Go"),
        'sql': SkillRef(id="skill-sql", name="SQL"),
        'kubernetes': SkillRef(id="skill-k8s", name="Kubernetes"),
        'python': SkillRef(id="skill-python", name="Python"),
        'docker': SkillRef(id="skill-docker", name="Docker"),
    }


@pytest.fixture
def scorer() -> MatchScorer:
    return MatchScorer(reference_year=REFERENCE_YEAR)


@pytest.fixture
def backend_job(skills) -> JobPosting:
    """Senior backend job requiring Go and SQL, preferring Kubernetes."""
    return JobPosting(
        id="job-1",
        title="Senior Backend Engineer",
        required_skills=(skills['go'], skills['sql']),
        preferred_skills=(skills['kubernetes'],),
        experience_level=ExperienceLevel.SENIOR,
        description="We need a backend engineer. Bachelor's degree required.",
    )


@pytest.fixture
def strong_candidate(skills) -> CandidateProfile:
    """Candidate covering every backend_job requirement."""
    return CandidateProfile(
        id="cand-1",
        name="Ada Lovelace",
        skills=(skills['go'], skills['sql'], skills['kubernetes']),
        experience=(
            ExperienceEntry(
                start_date=date(2018, 1, 1),
                end_date=date(2024, 6, 30),
                title="Backend Engineer",
            ),
        ),
        education=(
            EducationEntry(degree="Bachelor of Science", field="Computer Science"),
        ),
    )


@pytest.fixture
def empty_candidate() -> CandidateProfile:
    return CandidateProfile(id="cand-empty")


@pytest.fixture
def job_yaml(tmp_path) -> Path:
    path = tmp_path / "job.yaml"
    path.write_text(
        "id: job-1\n"
        "title: Senior Backend Engineer\n"
        "experience_level: senior\n"
        "description: Bachelor's degree in computer science required.\n"
        "required_skills:\n"
        "  - {id: skill-go, name: Go}\n"
        "  - {id: skill-sql, name: SQL}\n"
        "preferred_skills:\n"
        "  - {id: skill-k8s, name: Kubernetes}\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def candidate_yaml(tmp_path) -> Path:
    path = tmp_path / "ada.yaml"
    path.write_text(
        "id: cand-1\n"
        "name: Ada Lovelace\n"
        "skills:\n"
        "  - {id: skill-go, name: Go}\n"
        "  - {id: skill-sql, name: SQL}\n"
        "experience:\n"
        "  - start_date: 2018-01-01\n"
        "    end_date: Jun 2024\n"
        "    title: Backend Engineer\n"
        "    company: Acme\n"
        "education:\n"
        "  - degree: Bachelor of Science\n"
        "    field: Computer Science\n",
        encoding="utf-8",
    )
    return path


@pytest.fixture
def config_yaml(tmp_path, monkeypatch) -> Path:
    """Point SKILLMATCH_CONFIG at a config that logs into tmp_path."""
    path = tmp_path / "skillmatch.yaml"
    path.write_text(
        "matching:\n"
        f"  log_dir: {tmp_path / 'logs'}\n"
        "  log_level: DEBUG\n"
        f"  reference_year: {REFERENCE_YEAR}\n"
        "  ranking_top_n: 5\n",
        encoding="utf-8",
    )
    monkeypatch.setenv("SKILLMATCH_CONFIG", str(path))
    return path
