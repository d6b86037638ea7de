"""
Configuration for text manipulation.

Contains edit engine settings and the whitespace rules used when removing
keywords and statements.
"""

from typing import Any, Dict

from tsedit.exceptions import ConfigError

MANIPULATION_CONFIG = {
    "ledger_enabled": True,
    "ledger_max_entries": 1000,       # Oldest entries are dropped beyond this
    "warn_on_syntax_regression": True,  # Log when an edit adds syntax errors
}

# Whitespace swallowed after a removed node, by removal style
TRAILING_WHITESPACE = {
    "keyword": b" \t",
    "statement": b" \t",
}


def validate_manipulation_config(config: Dict[str, Any]) -> Dict[str, Any]:
    """Merge overrides into MANIPULATION_CONFIG and check their types."""
    merged = {**MANIPULATION_CONFIG, **(config or {})}
    unknown = set(merged) - set(MANIPULATION_CONFIG)
    if unknown:
        raise ConfigError(f"Unknown manipulation config keys: {', '.join(sorted(unknown))}")
    if not isinstance(merged["ledger_max_entries"], int) or merged["ledger_max_entries"] < 0:
        raise ConfigError("ledger_max_entries must be a non-negative integer")
    return merged
