"""
Console logging helpers.

Components take a `verbose` flag and log through a `[Component]` prefix, so
the engine prints nothing unless asked.
"""

from typing import Callable, Optional, Sequence


def print_with_prefix(prefix: str, message: Optional[str], enabled: bool = True) -> None:
    """Print every line of `message` behind `prefix`; blank lines print the bare prefix."""
    if not enabled:
        return
    for line in ("" if message is None else str(message)).splitlines() or [""]:
        print(f"{prefix} {line}" if line else prefix)


def log_section(
    log_fn: Callable[[str], None],
    title: str,
    width: int = 70,
    char: str = "=",
) -> None:
    rule = char * width
    for line in (rule, title, rule):
        log_fn(line)


def format_limited(items: Sequence[str], shown: int) -> str:
    """Join the first `shown` items and summarise the rest: "a, b +3 more"."""
    text = ", ".join(items[:shown])
    hidden = len(items) - shown
    if hidden > 0:
        text += f" +{hidden} more"
    return text
