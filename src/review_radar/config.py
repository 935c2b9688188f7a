"""Configuration management."""

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

import yaml


@dataclass
class AcquisitionConfig:
    """Acquisition simulator settings."""
    tick_interval: float = 0.25
    timeout: float = 12.0
    min_reviews: int = 80
    max_reviews: int = 180
    min_step: int = 8
    max_step: int = 20
    min_fake_step: int = 0
    max_fake_step: int = 2
    max_sample_reviews: int = 80


@dataclass
class AnalysisConfig:
    """Analysis pipeline settings."""
    tick_interval: float = 0.15
    timeout: float = 8.0
    settle_delay: float = 0.3
    min_step: float = 20.0
    step_spread: float = 15.0


@dataclass
class ValidationConfig:
    """Review text limits."""
    min_length: int = 50
    max_length: int = 50_000
    min_words: int = 10


@dataclass
class PathsConfig:
    """Path settings."""
    output_dir: Path = Path("reports")


@dataclass
class LoggingConfig:
    """Logging settings."""
    level: str = "WARNING"
    json_output: bool = False
    log_file: Optional[str] = None


@dataclass
class Settings:
    """Application settings."""

    # Fixed seed for reproducible runs (environment or YAML)
    seed: Optional[int] = None

    # Config sections
    acquisition: AcquisitionConfig = field(default_factory=AcquisitionConfig)
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    validation: ValidationConfig = field(default_factory=ValidationConfig)
    paths: PathsConfig = field(default_factory=PathsConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    @property
    def output_dir(self) -> Path:
        return self.paths.output_dir

    @property
    def log_level(self) -> str:
        return self.logging.level


def load_config(config_path: Path = Path("config.yaml")) -> dict:
    """Load configuration from YAML file."""
    if not config_path.exists():
        return {}

    with open(config_path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}


def get_settings(config_path: Path = Path("config.yaml")) -> Settings:
    """Get application settings from YAML config and environment."""
    config = load_config(config_path)

    settings = Settings(seed=config.get("seed"))

    for section in ("acquisition", "analysis", "validation", "logging"):
        if section in config:
            target = getattr(settings, section)
            for key, value in (config[section] or {}).items():
                if not hasattr(target, key):
                    raise ValueError(f"Unknown setting '{section}.{key}' in {config_path}")
                setattr(target, key, value)

    if "paths" in config:
        for key, value in (config["paths"] or {}).items():
            if not hasattr(settings.paths, key):
                raise ValueError(f"Unknown setting 'paths.{key}' in {config_path}")
            setattr(settings.paths, key, Path(value))

    # Environment overrides
    log_level = os.getenv("REVIEW_RADAR_LOG_LEVEL")
    if log_level:
        settings.logging.level = log_level

    seed = os.getenv("REVIEW_RADAR_SEED")
    if seed:
        settings.seed = int(seed)

    return settings
