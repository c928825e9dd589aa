"""
Utility functions for identifier case conversion.
"""

import re

# Lower/digit followed by upper marks a camelCase boundary ("createdAt")
_CAMEL_BOUNDARY = re.compile(r"([a-z0-9])([A-Z])")
# Acronym followed by a capitalised word ("HTTPServer" -> "HTTP Server")
_ACRONYM_BOUNDARY = re.compile(r"([A-Z])([A-Z][a-z])")
_SEPARATORS = re.compile(r"[^A-Za-z0-9]+")


def split_words(text: str) -> list[str]:
    """Split text into words on separators and camelCase boundaries.

    Examples:
        "createdAt" -> ["created", "At"]
        "list-widgets_v1" -> ["list", "widgets", "v1"]
        "HTTPServer" -> ["HTTP", "Server"]
    """
    if not text:
        return []
    text = _CAMEL_BOUNDARY.sub(r"\1 \2", text)
    text = _ACRONYM_BOUNDARY.sub(r"\1 \2", text)
    return [word for word in _SEPARATORS.split(text) if word]


def pascal_case(text: str) -> str:
    """Convert text to PascalCase ("list-widgets" -> "ListWidgets")."""
    return "".join(word[0].upper() + word[1:].lower() for word in split_words(text))


def camel_case(text: str) -> str:
    """Convert text to camelCase ("get-list-widgets" -> "getListWidgets")."""
    words = split_words(text)
    if not words:
        return ""
    return words[0].lower() + "".join(word[0].upper() + word[1:].lower() for word in words[1:])


def constant_case(text: str) -> str:
    """Convert text to CONSTANT_CASE ("listWidgets-Default-Sorts" -> "LIST_WIDGETS_DEFAULT_SORTS")."""
    return "_".join(word.upper() for word in split_words(text))


def sentence_case(text: str) -> str:
    """Convert text to sentence case ("createdAt" -> "Created at", "ACTIVE" -> "Active")."""
    words = split_words(text)
    if not words:
        return ""
    first, rest = words[0], words[1:]
    return " ".join([first[0].upper() + first[1:].lower()] + [word.lower() for word in rest])


def last_path_segment(name: str) -> str:
    """Return the last dotted segment of a field path ("metadata.createdAt" -> "createdAt")."""
    return name.split(".")[-1] or name
