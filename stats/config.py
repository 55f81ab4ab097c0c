"""Experiment configuration."""

import os
from dataclasses import dataclass
from typing import List, Optional


@dataclass
class ExperimentConfig:
    """Configuration for experiment runs."""

    # Reproducibility
    seed: Optional[int] = 42

    # Experiment parameters
    sizes: List[int] = None
    variants: List[str] = None
    repetitions: int = 100

    # Logging
    log_level: str = "INFO"

    def __post_init__(self):
        if self.sizes is None:
            self.sizes = [10, 100, 1000, 10_000]
        if self.variants is None:
            self.variants = ["iterative", "recursive", "optimized"]
        if self.repetitions < 1:
            raise ValueError(f"repetitions must be >= 1, got {self.repetitions}")

    @classmethod
    def from_env(cls) -> "ExperimentConfig":
        """Create config from environment variables."""
        seed = os.environ.get("ZIPTREE_SEED", "42")
        return cls(
            seed=int(seed) if seed.lower() != "none" else None,
            repetitions=int(os.environ.get("ZIPTREE_REPETITIONS", "100")),
            log_level=os.environ.get("ZIPTREE_LOG_LEVEL", "INFO"),
        )


def configure_logging(log_level: str, log_subdir: str) -> str:
    """Log to a timestamped file below ``stats/logs`` and to the console; returns the file path."""
    import logging
    from datetime import datetime

    log_dir = os.path.join(os.getcwd(), "stats/logs", log_subdir)
    os.makedirs(log_dir, exist_ok=True)

    ts = datetime.now().strftime("%Y%m%d_%H%M%S")
    log_path = os.path.join(log_dir, f"run_{ts}.log")

    level = getattr(logging, log_level)
    logging.basicConfig(
        level=level,
        format="%(asctime)s [%(levelname)s] %(message)s",
        handlers=[
            logging.FileHandler(log_path, mode="w"),
            logging.StreamHandler(),
        ],
        force=True,  # Override any existing logging configuration
    )
    # Also apply the chosen level to the library logger
    logging.getLogger("zip_trees").setLevel(level)
    return log_path
