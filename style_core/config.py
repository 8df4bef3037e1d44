import os
from dataclasses import dataclass
from typing import List, Optional

from .constants import BLOCKED_PATTERNS, MAX_CLASS_LENGTH


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{raw}'")


@dataclass
class MergeConfig:
    """Limits and cache settings for class merging"""
    max_class_length: int = MAX_CLASS_LENGTH
    blocked_patterns: List[str] = None
    cache_max_size: Optional[int] = None
    cache_shards: int = 16
    strict: bool = False

    def __post_init__(self):
        if self.blocked_patterns is None:
            self.blocked_patterns = list(BLOCKED_PATTERNS)
        self.blocked_patterns = [p.lower() for p in self.blocked_patterns]
        if self.max_class_length <= 0:
            raise ValueError(f"max_class_length must be positive, got {self.max_class_length}")
        if self.cache_shards <= 0:
            raise ValueError(f"cache_shards must be positive, got {self.cache_shards}")
        if self.cache_max_size is not None and self.cache_max_size <= 0:
            raise ValueError(f"cache_max_size must be positive, got {self.cache_max_size}")

    @classmethod
    def from_env(cls) -> 'MergeConfig':
        """
        Build a config from STYLE_* environment variables.
        Unset variables keep the dataclass defaults.
        """
        return cls(
            max_class_length=_env_int("STYLE_MAX_CLASS_LENGTH", MAX_CLASS_LENGTH),
            cache_max_size=_env_int("STYLE_CACHE_MAX_SIZE", None),
            cache_shards=_env_int("STYLE_CACHE_SHARDS", 16),
            strict=os.getenv("STYLE_MERGE_STRICT", "false").lower() == "true",
        )
