# scripts/rank_candidates.py
#!/usr/bin/env python3
"""
Rank multiple candidates for the same job

Usage:
    python scripts/rank_candidates.py --job data/jobs/backend.yaml --candidates data/candidates/*.yaml
    python scripts/rank_candidates.py --job data/jobs/backend.yaml --candidates data/candidates/*.yaml --query "python developer 5+ years"
    python scripts/rank_candidates.py --job data/jobs/backend.yaml --candidates data/candidates/*.yaml --output reports/ranking.json
"""

import argparse
import glob
import json
import logging
import sys
from pathlib import Path

sys.path.insert(0, str(Path(__file__).parent.parent))

from skillmatch.config import get_config
from skillmatch.loader import load_job_posting, load_candidate_profile
from skillmatch.scoring.fit_scorer import MatchScorer
from skillmatch.scoring.ranker import CandidateRanker
from skillmatch.search.query_parser import QueryTermExtractor
from skillmatch.search.candidate_filter import CandidateFilter
from skillmatch.utils import setup_logging

logger = logging.getLogger(__name__)


def expand_paths(patterns):
    """Expand wildcards, keeping literal paths that match nothing"""
    paths = []
    for pattern in patterns:
        matches = sorted(glob.glob(pattern))
        paths.extend(matches or [pattern])
    return paths


def load_candidates(paths):
    """Load candidate files, skipping the ones that fail"""
    candidates = []
    for path in paths:
        try:
            candidates.append(load_candidate_profile(path))
        except (OSError, ValueError) as e:
            logger.error(f"Error loading {path}: {e}")
    return candidates


def apply_query(query, candidates, reference_year=None):
    """Narrow candidates down with a free-text search query"""
    criteria = QueryTermExtractor().extract(query)
    logger.info(f"Search criteria: {criteria.to_dict()}")
    return CandidateFilter(reference_year).filter(criteria, candidates)


def format_comparison(comparison, job, names, top_n) -> str:
    """Comparison table"""
    lines = [
        "=" * 80,
        f"{'CANDIDATE RANKING':^80}",
        "=" * 80,
        f"Position: {job.title or job.id}",
        "",
        f"{'Rank':<6} {'Candidate':<25} {'Overall':<10} {'Skills':<10} {'Exp':<10} {'Edu':<10}",
        "-" * 80,
    ]

    for rank, result in enumerate(comparison.top(top_n), 1):
        name = names.get(result.candidate_id) or result.candidate_id
        if len(name) > 24:
            name = name[:21] + "..."

        lines.append(
            f"{rank:<6} {name:<25} "
            f"{result.overall_score:5.1f}/100 "
            f"{result.skill_score:5.1f}/100 "
            f"{result.experience_score:5.1f}/100 "
            f"{result.education_score:5.1f}/100"
        )

    lines.append("=" * 80)
    lines.append(f"Average score: {comparison.average_score:.1f}/100")
    return "\n".join(lines)


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Rank candidates for a job posting'
    )

    parser.add_argument(
        '--job',
        required=True,
        help='Path to job posting file (.yaml)'
    )

    parser.add_argument(
        '--candidates',
        nargs='+',
        required=True,
        help='Candidate profile files (supports wildcards)'
    )

    parser.add_argument(
        '--query',
        help='Free-text search used to filter candidates before ranking'
    )

    parser.add_argument(
        '--top',
        type=int,
        help='Number of candidates to show'
    )

    parser.add_argument(
        '--output',
        help='Output file for ranking report (JSON)'
    )

    args = parser.parse_args(argv)
    config = get_config()
    setup_logging(config.log_dir, config.log_level)

    try:
        job = load_job_posting(args.job)
        candidates = load_candidates(expand_paths(args.candidates))

        if args.query:
            candidates = apply_query(args.query, candidates, config.reference_year)

        if not candidates:
            print("ERROR: No candidates to rank")
            return 1

        ranker = CandidateRanker(MatchScorer(reference_year=config.reference_year))
        comparison = ranker.rank(job, candidates)

        names = {c.id: c.name for c in candidates}
        print(format_comparison(comparison, job, names, args.top or config.ranking_top_n))

        if args.output:
            output_path = Path(args.output)
            output_path.parent.mkdir(parents=True, exist_ok=True)
            with open(output_path, 'w', encoding='utf-8') as f:
                json.dump(comparison.to_dict(), f, indent=2, ensure_ascii=False)
            print(f"✓ Ranking report saved to: {args.output}")

        return 0

    except Exception as e:
        logger.error(f"ERROR: {e}", exc_info=True)
        return 2


if __name__ == '__main__':
    sys.exit(main())
