"""
Logging for tsedit.

Every module logs through a component logger (provider, manipulation,
symbols, structures, project) so the console output of a long edit session
can be narrowed to one layer:

    TSEDIT_LOG_LEVEL=DEBUG TSEDIT_LOG_COMPONENTS=manipulation python script.py

TSEDIT_MACHINE_MODE=1 suppresses console output entirely, which is what the
test suite and embedding tools use.
"""

import os
import sys
from typing import Iterable, Optional

from loguru import logger

COMPONENTS = ("provider", "compiler", "manipulation", "symbols", "structures", "project")

CONSOLE_FORMAT = (
    "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | "
    "<cyan>{extra[component]: <12}</cyan> | <level>{message}</level>"
)

# Flag to track if logging has been configured
_logging_configured = False

logger.configure(extra={"component": "tsedit"})


def _env_flag(name: str) -> bool:
    return os.getenv(name, "").lower() in ("1", "true", "yes")


def _env_components() -> Optional[frozenset]:
    raw = os.getenv("TSEDIT_LOG_COMPONENTS", "")
    names = [name.strip() for name in raw.split(",") if name.strip()]
    return frozenset(names) or None


def get_logger(component: str):
    """Logger whose records carry the given component name."""
    if component not in COMPONENTS:
        raise ValueError(f"Unknown log component '{component}'")
    return logger.bind(component=component)


def setup_logging(
    level: Optional[str] = None,
    suppress_console: Optional[bool] = None,
    force: bool = False,
    components: Optional[Iterable[str]] = None,
):
    """
    Configures the console sink.

    Args:
        level: Minimum level. If None, TSEDIT_LOG_LEVEL or INFO.
        suppress_console: If True, add no console sink. If None, check TSEDIT_MACHINE_MODE.
        force: Reconfigure even if logging was already set up (used by the test suite).
        components: Only show records of these components. If None, TSEDIT_LOG_COMPONENTS or all.
    """
    global _logging_configured

    # Only configure once to avoid duplicate handlers
    if _logging_configured and not force:
        return
    _logging_configured = True

    logger.remove()

    if suppress_console is None:
        suppress_console = _env_flag("TSEDIT_MACHINE_MODE")
    if suppress_console:
        return

    if level is None:
        level = os.getenv("TSEDIT_LOG_LEVEL", "INFO").upper()
    wanted = frozenset(components) if components is not None else _env_components()

    def component_filter(record) -> bool:
        return wanted is None or record["extra"].get("component") in wanted

    logger.add(
        sys.stderr,
        level=level,
        format=CONSOLE_FORMAT,
        filter=component_filter,
        colorize=True,
    )


# Configure the logger on import (will check env vars for machine mode)
setup_logging()
