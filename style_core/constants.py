import re

# Constants
SAFE_CLASS_RE = re.compile(r"^[A-Za-z0-9_\-:/.\[\]()%!@#&>+~=, ]+$")
SAFE_FRAGMENT_RE = re.compile(r"^[A-Za-z0-9_\-:/.\[\]()%!@#&>+~=,\s]*$")
BLOCKED_PATTERNS = ("expression", "javascript", "url(", "import")
MAX_CLASS_LENGTH = 200

# Classifier patterns
NUMBER = r"\d+(?:\.\d+)?"
ARBITRARY = r"\[[^\]]+\]"

SPACING_RE = re.compile(rf"^(p|px|py|pt|pr|pb|pl|m|mx|my|mt|mr|mb|ml)-({NUMBER}|auto|px|{ARBITRARY})$")
SIZING_RE = re.compile(r"^(min-w|min-h|max-w|max-h|w|h)-(.+)$")
GAP_RE = re.compile(rf"^(gap-x|gap-y|gap)-({NUMBER}|px|{ARBITRARY})$")
COLOR_RE = re.compile(
    rf"^(text|bg|border)-([a-z]+(?:-[a-z]+)*(?:-\d{{1,3}})?|{ARBITRARY})(?:/(\d+|{ARBITRARY}))?$"
)
ARBITRARY_LENGTH_RE = re.compile(r"^\[(?:length:)?-?\d*\.?\d+(?:px|rem|em|%|vh|vw|pt|ch)?\]$")
BORDER_WIDTH_RE = re.compile(r"^border(-\d+)?$")
OPACITY_RE = re.compile(r"^opacity-(\d+)$")
Z_INDEX_RE = re.compile(r"^z-(\d+|auto)$")
GRID_COLS_RE = re.compile(r"^grid-cols-(\d+|none)$")
GRID_ROWS_RE = re.compile(r"^grid-rows-(\d+|none)$")
DURATION_RE = re.compile(r"^duration-(\d+)$")
ANIMATE_DURATION_RE = re.compile(r"^animate-duration-(\d+)$")
DELAY_RE = re.compile(r"^delay-(\d+)$")
ANIMATE_EASE_RE = re.compile(r"^animate-ease-(.+)$")
EASE_RE = re.compile(r"^ease-(.+)$")
ANIMATE_NAME_RE = re.compile(r"^animate-([a-z]+)$")
TRANSLATE_RE = re.compile(r"^(-?(?:translate-x|translate-y|translate))-(.+)$")
INSET_RE = re.compile(r"^(-?(?:inset-x|inset-y|inset|top|right|bottom|left))-(.+)$")
SHADOW_RE = re.compile(r"^shadow(-.+)?$")
