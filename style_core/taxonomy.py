"""Static utility-group tables used by the classifier.

Every table is a module-level constant built once at import. ``STATIC_GROUPS``
maps a complete base class to its group; the prefix tables map the captured
prefix of a parametric utility (``px`` in ``px-4``) to its group.
"""
from types import MappingProxyType
from typing import Dict, Iterable


def _group(name: str, classes: Iterable[str]) -> Dict[str, str]:
    return {c: name for c in classes}


_STATIC: Dict[str, str] = {}
_STATIC.update(_group("display", [
    "block", "inline-block", "inline", "flex", "inline-flex",
    "grid", "inline-grid", "hidden",
]))
_STATIC.update(_group("position", ["static", "fixed", "absolute", "relative", "sticky"]))
_STATIC.update(_group("flex-direction", ["flex-row", "flex-row-reverse", "flex-col", "flex-col-reverse"]))
_STATIC.update(_group("justify-content", [
    "justify-start", "justify-end", "justify-center",
    "justify-between", "justify-around", "justify-evenly",
]))
_STATIC.update(_group("align-items", [
    "items-start", "items-end", "items-center", "items-baseline", "items-stretch",
]))
_STATIC.update(_group("border-radius", [
    "rounded-none", "rounded-sm", "rounded", "rounded-md", "rounded-lg",
    "rounded-xl", "rounded-2xl", "rounded-3xl", "rounded-full",
]))
_STATIC.update(_group("font-weight", [
    "font-thin", "font-extralight", "font-light", "font-normal", "font-medium",
    "font-semibold", "font-bold", "font-extrabold", "font-black",
]))
_STATIC.update(_group("font-size", [
    "text-xs", "text-sm", "text-base", "text-lg", "text-xl",
    "text-2xl", "text-3xl", "text-4xl", "text-5xl",
]))
# Keywords that share a prefix with a color family and would otherwise be
# read as colors.
_STATIC.update(_group("text-align", [
    "text-left", "text-center", "text-right", "text-justify", "text-start", "text-end",
]))
_STATIC.update(_group("border-style", [
    "border-solid", "border-dashed", "border-dotted", "border-double",
    "border-hidden", "border-none",
]))
_STATIC.update(_group("overflow", [
    "overflow-auto", "overflow-hidden", "overflow-clip", "overflow-visible", "overflow-scroll",
]))

STATIC_GROUPS = MappingProxyType(_STATIC)

SPACING_GROUPS = MappingProxyType({
    # Padding
    "p": "padding",
    "px": "padding-x",
    "py": "padding-y",
    "pt": "padding-top",
    "pr": "padding-right",
    "pb": "padding-bottom",
    "pl": "padding-left",
    # Margin
    "m": "margin",
    "mx": "margin-x",
    "my": "margin-y",
    "mt": "margin-top",
    "mr": "margin-right",
    "mb": "margin-bottom",
    "ml": "margin-left",
})

SIZING_GROUPS = MappingProxyType({
    "w": "width",
    "min-w": "min-width",
    "max-w": "max-width",
    "h": "height",
    "min-h": "min-height",
    "max-h": "max-height",
})

GAP_GROUPS = MappingProxyType({
    "gap": "gap",
    "gap-x": "gap-x",
    "gap-y": "gap-y",
})

COLOR_GROUPS = MappingProxyType({
    "text": "text-color",
    "bg": "background-color",
    "border": "border-color",
})

# Group an arbitrary length value (``text-[14px]``) belongs to instead of the
# color group. Families missing here leave the token unclassified.
ARBITRARY_LENGTH_GROUPS = MappingProxyType({
    "text": "font-size",
    "border": "border-width",
})

# First segment of a value that is not a color for the given family.
NON_COLOR_KEYWORDS = MappingProxyType({
    "text": frozenset({
        "left", "center", "right", "justify", "start", "end",
        "ellipsis", "clip", "wrap", "nowrap", "balance", "pretty",
    }),
    "bg": frozenset({
        "auto", "cover", "contain", "fixed", "local", "scroll", "center",
        "top", "bottom", "left", "right", "repeat", "no", "clip", "origin",
        "gradient", "blend", "none",
    }),
    "border": frozenset({
        "t", "r", "b", "l", "x", "y", "s", "e",
        "solid", "dashed", "dotted", "double", "hidden", "none",
        "collapse", "separate", "spacing",
    }),
})
