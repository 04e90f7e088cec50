# skillmatch/config.py
import os
from dataclasses import dataclass
from typing import Optional
from pathlib import Path
import yaml


@dataclass
class MatchingConfig:
    """Configuration for the scoring tools

    Scoring weights and thresholds are fixed and deliberately not part of it.
    """

    # Logging
    log_level: str = "INFO"
    log_dir: Path = Path("data/logs")

    # Year that current/open-ended roles run until (None = this year)
    reference_year: Optional[int] = None

    # Ranking
    ranking_top_n: int = 10

    def __post_init__(self):
        self.log_dir = Path(self.log_dir)

    @classmethod
    def from_yaml(cls, path: str):
        """Load configuration from YAML file"""
        with open(path, 'r') as f:
            data = yaml.safe_load(f) or {}
        return cls(**data.get('matching', {}))


def get_config() -> MatchingConfig:
    """Get matching configuration"""
    config_path = os.getenv('SKILLMATCH_CONFIG', 'config/skillmatch.yaml')

    if os.path.exists(config_path):
        return MatchingConfig.from_yaml(config_path)
    return MatchingConfig()
