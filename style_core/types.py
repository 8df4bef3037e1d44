from dataclasses import dataclass
from typing import Optional, Tuple

ModifierChain = Tuple[str, ...]


@dataclass(frozen=True)
class ClassToken:
    """A single class name and its position in the flattened input."""
    value: str
    index: int


@dataclass(frozen=True)
class ClassificationResult:
    """Group key for a raw token. ``group`` is None for custom classes."""
    group: Optional[str]
    modifiers: ModifierChain = ()

    @property
    def is_grouped(self) -> bool:
        return self.group is not None
