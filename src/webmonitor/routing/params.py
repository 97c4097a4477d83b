"""Placeholder converters for pattern segments.

Built-in converters for placeholders like ``{id:int}``. A bare ``{id}``
uses ``str``. Unknown converter names fall back to ``str`` so a
mistyped pattern still matches one segment instead of failing.
"""

# regex for each supported converter
CONVERTERS: dict[str, str] = {
    "str": r"[^/]+",
    "int": r"\d+",
    "float": r"\d+(?:\.\d+)?",
    "path": r".+",
}

DEFAULT_CONVERTER = "str"


def parse_placeholder(inner: str) -> tuple[str, str]:
    """Split the text between braces into ``(name, converter)``.

    Examples::

        "id"       -> ("id", "str")
        "id:int"   -> ("id", "int")
        "rest:path" -> ("rest", "path")
    """
    if ":" in inner:
        name, param_type = inner.split(":", 1)
        return name.strip(), param_type.strip() or DEFAULT_CONVERTER
    return inner.strip(), DEFAULT_CONVERTER


def placeholder_regex(inner: str) -> str:
    """Regex fragment for a placeholder body, unknown converters as ``str``."""
    _, param_type = parse_placeholder(inner)
    return CONVERTERS.get(param_type, CONVERTERS[DEFAULT_CONVERTER])
