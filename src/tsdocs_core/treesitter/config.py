"""
Tree-sitter configuration module.

Contains grammar mappings and file extension associations for the
TypeScript dialects the extractor understands.
"""

from typing import Dict, Optional, Tuple


# =============================================================================
# GRAMMAR EXTENSIONS MAPPING
# =============================================================================
# Maps tree-sitter-language-pack grammar names to their file extensions.
# JSX syntax needs the separate "tsx" grammar; both share the same
# interface/type node shapes.

LANGUAGE_EXTENSIONS: Dict[str, Tuple[str, ...]] = {
    "typescript": (".ts", ".mts", ".cts"),
    "tsx": (".tsx",),
}

DEFAULT_LANGUAGE = "typescript"


# =============================================================================
# EXTENSION TO LANGUAGE MAPPING (Reverse Lookup)
# =============================================================================

EXTENSION_TO_LANGUAGE: Dict[str, str] = {
    ext: lang
    for lang, extensions in LANGUAGE_EXTENSIONS.items()
    for ext in extensions
}


# =============================================================================
# HELPER FUNCTIONS
# =============================================================================

def get_language_by_extension(extension: str) -> Optional[str]:
    """
    Get the grammar name for a given file extension.

    Args:
        extension: File extension (with or without leading dot).
                   Examples: ".ts", "ts", ".tsx"

    Returns:
        Grammar name if found, None otherwise.

    Examples:
        >>> get_language_by_extension(".ts")
        'typescript'
        >>> get_language_by_extension("tsx")
        'tsx'
        >>> get_language_by_extension(".py")
        None
    """
    if not extension.startswith("."):
        extension = f".{extension}"

    return EXTENSION_TO_LANGUAGE.get(extension.lower())


def get_extensions_by_language(language: str) -> Tuple[str, ...]:
    """
    Get all file extensions associated with a grammar.

    Returns:
        Tuple of file extensions, or empty tuple if language not found.
    """
    return LANGUAGE_EXTENSIONS.get(language, ())


def is_supported_language(language: str) -> bool:
    """Check if a grammar name is supported."""
    return language in LANGUAGE_EXTENSIONS


def is_supported_extension(extension: str) -> bool:
    """
    Check if a file extension is supported.

    Examples:
        >>> is_supported_extension(".mts")
        True
        >>> is_supported_extension("js")
        False
    """
    return get_language_by_extension(extension) is not None
