"""Engine configuration schemas and loading.

The defaults reproduce the classic heuristic weights and difficulty depths;
a YAML file or dot-list overrides can tune them without code changes::

    cfg = load_config("engine.yaml", overrides=["search.hard_depth=8"])
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

from omegaconf import DictConfig, OmegaConf


@dataclass
class EvaluatorConfig:
    """Weights for the static position evaluation."""

    normal_value: float = 1.0
    king_value: float = 5.0
    advancement_weight: float = 0.1  # per row advanced, normal pieces only
    center_bonus: float = 0.2
    center_min_col: int = 2
    center_max_col: int = 5

    def __post_init__(self) -> None:
        if not 0 <= self.center_min_col <= self.center_max_col <= 7:
            msg = (
                f"center columns must satisfy 0 <= min <= max <= 7, "
                f"got {self.center_min_col}..{self.center_max_col}"
            )
            raise ValueError(msg)


@dataclass
class SearchConfig:
    """Search depth per difficulty and optional wall-clock budget."""

    easy_depth: int = 2
    medium_depth: int = 4
    hard_depth: int = 6
    time_limit_s: Optional[float] = None

    def __post_init__(self) -> None:
        for name in ("easy_depth", "medium_depth", "hard_depth"):
            if getattr(self, name) < 1:
                msg = f"{name} must be at least 1, got {getattr(self, name)}"
                raise ValueError(msg)
        if self.time_limit_s is not None and self.time_limit_s <= 0:
            msg = f"time_limit_s must be positive, got {self.time_limit_s}"
            raise ValueError(msg)


@dataclass
class EngineConfig:
    evaluator: EvaluatorConfig = field(default_factory=EvaluatorConfig)
    search: SearchConfig = field(default_factory=SearchConfig)


def load_config(
    config_path: Union[str, Path, None] = None,
    overrides: Optional[List[str]] = None,
) -> EngineConfig:
    """Load engine configuration.

    Args:
        config_path: Optional YAML file merged over the defaults.
        overrides: Optional dot-list overrides (e.g. ``["search.easy_depth=1"]``).

    Returns:
        A validated ``EngineConfig`` instance.
    """
    config = OmegaConf.structured(EngineConfig)

    if config_path is not None:
        config_path = Path(config_path)
        if not config_path.exists():
            msg = f"Config file not found: {config_path}"
            raise FileNotFoundError(msg)
        config = OmegaConf.merge(config, OmegaConf.load(config_path))

    if overrides:
        config = OmegaConf.merge(config, OmegaConf.from_dotlist(overrides))

    return OmegaConf.to_object(config)  # type: ignore[return-value]


def save_config(config: Union[EngineConfig, DictConfig, Dict[str, Any]], path: Union[str, Path]) -> None:
    """Write a configuration to a YAML file."""
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)

    if not isinstance(config, DictConfig):
        config = OmegaConf.structured(config) if isinstance(config, EngineConfig) else OmegaConf.create(config)

    OmegaConf.save(config, path)
