"""
Configuration for the syntax tree provider and symbol resolution.
"""

from pathlib import PurePosixPath
from typing import Any, Dict

from tsedit.exceptions import ConfigError

# Mapping of file extensions to the tree-sitter grammar used to parse them
SUPPORTED_LANGUAGES = {
    ".ts": "typescript",
    ".mts": "typescript",
    ".cts": "typescript",
    ".tsx": "tsx",
}

PROVIDER_CONFIG = {
    "default_language": "typescript",
    "incremental_reparse": True,  # Reuse the old tree after Tree.edit()
    "collect_diagnostics": True,
}

RESOLUTION_CONFIG = {
    "alias_resolution": "transitive",  # "transitive" or "single"
    "max_alias_depth": 32,
    # Candidates tried, in order, when resolving a relative module specifier
    "module_suffixes": [".ts", ".tsx", ".d.ts", "/index.ts", "/index.tsx"],
}


def validate_language(language: str) -> str:
    """
    Validate that a grammar is supported.

    Args:
        language: Grammar name ("typescript" or "tsx")

    Returns:
        The language name.

    Raises:
        ConfigError: If the language is not supported.
    """
    supported = sorted(set(SUPPORTED_LANGUAGES.values()))
    if language not in supported:
        raise ConfigError(
            f"Language '{language}' is not supported. Supported languages: {', '.join(supported)}"
        )
    return language


def language_for_path(file_path: str) -> str:
    """
    Resolve the grammar for a file path from its extension.

    Declaration files (.d.ts) use the typescript grammar.

    Raises:
        ConfigError: If the extension is not supported.
    """
    suffix = PurePosixPath(file_path).suffix.lower()
    if suffix not in SUPPORTED_LANGUAGES:
        supported = ", ".join(SUPPORTED_LANGUAGES.keys())
        raise ConfigError(
            f"File extension '{suffix}' is not supported. Supported extensions: {supported}"
        )
    return SUPPORTED_LANGUAGES[suffix]


def validate_resolution_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Check alias resolution settings and return the merged config."""
    merged = {**RESOLUTION_CONFIG, **(config or {})}
    if merged["alias_resolution"] not in ("transitive", "single"):
        raise ConfigError(
            f"alias_resolution must be 'transitive' or 'single', got '{merged['alias_resolution']}'"
        )
    if not isinstance(merged["max_alias_depth"], int) or merged["max_alias_depth"] < 1:
        raise ConfigError("max_alias_depth must be a positive integer")
    return merged
