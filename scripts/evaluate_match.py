# scripts/evaluate_match.py
#!/usr/bin/env python3
"""
Score one candidate against one job

Usage:
    python scripts/evaluate_match.py --job data/jobs/backend.yaml --candidate data/candidates/ada.yaml
    python scripts/evaluate_match.py --job data/jobs/backend.yaml --candidate data/candidates/ada.yaml --output reports/match.json
"""

import argparse
import json
import logging
import sys
from pathlib import Path

# Add parent directory to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from skillmatch.config import get_config
from skillmatch.loader import load_job_posting, load_candidate_profile
from skillmatch.scoring.fit_scorer import MatchScorer
from skillmatch.utils import setup_logging

logger = logging.getLogger(__name__)


def format_summary(result, job, candidate) -> str:
    """Human readable match summary"""
    lines = [
        "=" * 70,
        f"{'MATCH EVALUATION':^70}",
        "=" * 70,
        "",
        f"Candidate: {candidate.name or candidate.id}",
        f"Position: {job.title or job.id}",
        "",
        f"Overall Score: {result.overall_score:.1f}/100 ({result.fit_level.value.upper()})",
        "",
        "Component Breakdown:",
        f"  Skills:      {result.skill_score:5.1f}/100  {'█' * int(result.skill_score / 10)}",
        f"  Experience:  {result.experience_score:5.1f}/100  {'█' * int(result.experience_score / 10)}",
        f"  Education:   {result.education_score:5.1f}/100  {'█' * int(result.education_score / 10)}",
        "",
    ]

    for title, items in (
        ("STRENGTHS", result.strengths),
        ("GAPS", result.gaps),
        ("RECOMMENDATIONS", result.recommendations),
    ):
        if not items:
            continue
        lines.append(title)
        lines.extend(f"  {i}. {item}" for i, item in enumerate(items, 1))
        lines.append("")

    return "\n".join(lines)


def save_report(result, output_file):
    """Save JSON report"""
    output_path = Path(output_file)
    output_path.parent.mkdir(parents=True, exist_ok=True)

    with open(output_path, 'w', encoding='utf-8') as f:
        json.dump(result.to_dict(), f, indent=2, ensure_ascii=False)

    print(f"\n✓ Report saved to: {output_file}")


def main(argv=None):
    parser = argparse.ArgumentParser(
        description='Score a candidate against a job posting'
    )

    parser.add_argument(
        '--job',
        required=True,
        help='Path to job posting file (.yaml)'
    )

    parser.add_argument(
        '--candidate',
        required=True,
        help='Path to candidate profile file (.yaml)'
    )

    parser.add_argument(
        '--output',
        help='Output file for JSON report'
    )

    args = parser.parse_args(argv)
    config = get_config()
    setup_logging(config.log_dir, config.log_level)

    try:
        job = load_job_posting(args.job)
        candidate = load_candidate_profile(args.candidate)

        scorer = MatchScorer(reference_year=config.reference_year)
        result = scorer.score_match(job, candidate)

        print(format_summary(result, job, candidate))

        if args.output:
            save_report(result, args.output)

        return 0

    except Exception as e:
        logger.error(f"ERROR: {e}", exc_info=True)
        return 2


if __name__ == '__main__':
    sys.exit(main())
