import logging
from typing import Optional

from .config import MergeConfig
from .constants import SAFE_CLASS_RE, SAFE_FRAGMENT_RE

logger = logging.getLogger(__name__)


class ClassNameValidator:
    """
    Gate for class names before any classification work.
    Never raises: callers drop whatever fails a check.
    """

    def __init__(self, config: Optional[MergeConfig] = None):
        self.config = config or MergeConfig()

    def is_safe_class(self, token: Optional[str]) -> bool:
        if token is None or not token.strip():
            return False
        if len(token) > self.config.max_class_length:
            logger.debug(f"Rejected class token over {self.config.max_class_length} chars")
            return False
        lowered = token.lower()
        for pattern in self.config.blocked_patterns:
            if pattern in lowered:
                logger.debug(f"Rejected class token containing '{pattern}': {token!r}")
                return False
        if not SAFE_CLASS_RE.match(token):
            logger.debug(f"Rejected class token with disallowed characters: {token!r}")
            return False
        return True

    def is_safe_fragment(self, fragment: Optional[str]) -> bool:
        """
        Character check for a whole input fragment before it is split.
        Markup such as '<img src=x onerror=...>' is discarded as one unit so
        its harmless-looking pieces never reach the output.
        """
        if not fragment:
            return False
        if not SAFE_FRAGMENT_RE.match(fragment):
            logger.debug(f"Rejected class fragment with disallowed characters: {fragment[:80]!r}")
            return False
        return True
