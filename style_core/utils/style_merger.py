import logging
import threading
from typing import Dict, Iterable, Iterator, List, Optional, Union

from ..classifier import classify
from ..config import MergeConfig
from ..errors import ClassificationError
from ..security import ClassNameValidator
from ..services.classification_cache import ClassificationCache, get_default_cache
from ..types import ClassToken

logger = logging.getLogger(__name__)

Fragments = Union[str, Iterable[Optional[str]]]


class StyleMerger:
    def __init__(self, config: Optional[MergeConfig] = None, cache: Optional[ClassificationCache] = None):
        self.config = config or MergeConfig.from_env()
        self.validator = ClassNameValidator(self.config)
        self.cache = cache if cache is not None else get_default_cache()

    def tokenize(self, fragments: Fragments) -> Iterator[ClassToken]:
        """
        Flatten fragments into one ordered token stream.
        Fragments failing the character check are skipped whole and do not
        consume indices.
        """
        if isinstance(fragments, str):
            fragments = [fragments]
        index = 0
        for fragment in fragments:
            if not fragment or not self.validator.is_safe_fragment(fragment):
                continue
            for value in fragment.split():
                yield ClassToken(value, index)
                index += 1

    def merge(self, fragments: Fragments) -> str:
        """
        Merge class fragments, resolving utility conflicts.

        Strategy:
        1. Flatten every fragment into tokens, keeping global order.
        2. Drop tokens that fail the safety check.
        3. Classify each token (cached). Grouped tokens overwrite any earlier
           token with the same group key; unknown tokens are always kept.
        4. Emit the survivors in their original order.

        Pass base styles first and the caller's override fragment last so
        the override wins ties.
        """
        grouped: Dict[str, ClassToken] = {}
        ungrouped: List[ClassToken] = []

        for token in self.tokenize(fragments):
            if not self.validator.is_safe_class(token.value):
                continue
            try:
                result = self.cache.get_or_classify(token.value, classify)
            except Exception as e:
                error = ClassificationError(token.value, e)
                if self.config.strict:
                    raise error from e
                logger.exception(str(error))
                ungrouped.append(token)
                continue

            if result.group is not None:
                grouped[result.group] = token
            else:
                ungrouped.append(token)

        survivors = sorted([*grouped.values(), *ungrouped], key=lambda t: t.index)
        return " ".join(t.value for t in survivors)


_default_merger: Optional[StyleMerger] = None
_default_lock = threading.Lock()


def get_default_merger() -> StyleMerger:
    global _default_merger
    if _default_merger is None:
        with _default_lock:
            if _default_merger is None:
                _default_merger = StyleMerger()
    return _default_merger


def merge(fragments: Fragments) -> str:
    """Merge class fragments with the process-wide merger."""
    return get_default_merger().merge(fragments)


def cn(*fragments: Optional[str]) -> str:
    """
    Variadic form of merge() for component style code:
        cn("px-4 py-2 rounded-md", when(active, "bg-primary"), user_class)
    None, False and empty values are skipped.
    """
    return merge([f for f in fragments if isinstance(f, str) and f])


def when(condition, classes: str) -> str:
    return classes if condition else ""
