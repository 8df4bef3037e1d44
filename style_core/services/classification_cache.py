import logging
import threading
from collections import OrderedDict
from typing import Callable, Dict, Iterable, Optional

from ..config import MergeConfig
from ..types import ClassificationResult

logger = logging.getLogger(__name__)

Classifier = Callable[[str], ClassificationResult]


class _Shard:
    __slots__ = ("entries", "lock")

    def __init__(self, bounded: bool):
        self.entries: Dict[str, ClassificationResult] = OrderedDict() if bounded else {}
        self.lock = threading.Lock()


class ClassificationCache:
    """
    Memoizes raw token -> ClassificationResult.

    Entries are spread across independently locked shards so concurrent
    renders never queue on one lock. Without a size cap reads are plain dict
    lookups and only writes take their shard's lock. With ``max_size`` every
    shard is an LRU holding ``max_size // shards`` entries (at least one).
    """

    def __init__(self, shards: int = 16, max_size: Optional[int] = None):
        if shards <= 0:
            raise ValueError(f"shards must be positive, got {shards}")
        if max_size is not None and max_size <= 0:
            raise ValueError(f"max_size must be positive, got {max_size}")
        self.max_size = max_size
        self._bounded = max_size is not None
        self._shard_capacity = max(1, max_size // shards) if self._bounded else None
        self._shards = [_Shard(self._bounded) for _ in range(shards)]
        self._hits = 0
        self._misses = 0

    @classmethod
    def from_config(cls, config: MergeConfig) -> 'ClassificationCache':
        return cls(shards=config.cache_shards, max_size=config.cache_max_size)

    def _shard_for(self, token: str) -> _Shard:
        return self._shards[hash(token) % len(self._shards)]

    def get(self, token: str) -> Optional[ClassificationResult]:
        shard = self._shard_for(token)
        if not self._bounded:
            return shard.entries.get(token)
        with shard.lock:
            entry = shard.entries.get(token)
            if entry is not None:
                shard.entries.move_to_end(token)
            return entry

    def set(self, token: str, result: ClassificationResult):
        shard = self._shard_for(token)
        with shard.lock:
            shard.entries[token] = result
            if self._bounded:
                shard.entries.move_to_end(token)
                while len(shard.entries) > self._shard_capacity:
                    shard.entries.popitem(last=False)

    def get_or_classify(self, token: str, classify: Classifier) -> ClassificationResult:
        """
        Returns the cached result, classifying and storing it on a miss.
        Two threads missing on the same token may both classify; the result
        is a pure function of the token so either write is correct.
        """
        entry = self.get(token)
        if entry is not None:
            self._hits += 1
            return entry
        self._misses += 1
        result = classify(token)
        self.set(token, result)
        return result

    def warm(self, tokens: Iterable[str], classify: Classifier) -> int:
        """Pre-classify known class names. Returns how many were added."""
        added = 0
        for token in tokens:
            if self.get(token) is None:
                self.set(token, classify(token))
                added += 1
        logger.info(f"Warmed classification cache with {added} tokens")
        return added

    def clear(self):
        for shard in self._shards:
            with shard.lock:
                shard.entries.clear()
        self._hits = 0
        self._misses = 0

    def __len__(self) -> int:
        return sum(len(shard.entries) for shard in self._shards)

    def __contains__(self, token: str) -> bool:
        return token in self._shard_for(token).entries

    def stats(self) -> dict:
        """Hit/miss counters are approximate under concurrent use."""
        return {
            "size": len(self),
            "shards": len(self._shards),
            "max_size": self.max_size,
            "hits": self._hits,
            "misses": self._misses,
        }


_default_cache: Optional[ClassificationCache] = None
_default_lock = threading.Lock()


def get_default_cache() -> ClassificationCache:
    """Process-wide cache, built on first use from STYLE_* settings."""
    global _default_cache
    if _default_cache is None:
        with _default_lock:
            if _default_cache is None:
                config = MergeConfig.from_env()
                _default_cache = ClassificationCache.from_config(config)
                logger.info(
                    f"Classification cache ready (shards={config.cache_shards}, "
                    f"max_size={config.cache_max_size or 'unbounded'})"
                )
    return _default_cache
