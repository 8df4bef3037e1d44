from .config import MergeConfig
from .security import ClassNameValidator
from .classifier import classify, classify_base
from .errors import ClassificationError
from .types import ClassToken, ClassificationResult
from .services.classification_cache import ClassificationCache, get_default_cache
from .utils.modifiers import split_modifiers
from .utils.style_merger import StyleMerger, get_default_merger, merge, cn, when
