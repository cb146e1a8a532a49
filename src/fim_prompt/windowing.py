"""Line-count windowing for prompt prefix and suffix."""
from __future__ import annotations

UNBOUNDED = -1


def _keep_count(lines: list[str], max_lines: int) -> int:
    # The line touching the cursor is always kept in addition to max_lines.
    return min(len(lines) - 1, max_lines) + 1


def window_prefix(text: str, max_lines: int = UNBOUNDED) -> str:
    """Keep the tail of *text*: at most ``max_lines + 1`` lines.

    A negative *max_lines* disables windowing and returns *text* unchanged.
    """
    if max_lines < 0:
        return text
    lines = text.split("\n")
    keep = _keep_count(lines, max_lines)
    return "\n".join(lines[len(lines) - keep:])


def window_suffix(text: str, max_lines: int = UNBOUNDED) -> str:
    """Keep the head of *text*: at most ``max_lines + 1`` lines."""
    if max_lines < 0:
        return text
    lines = text.split("\n")
    keep = _keep_count(lines, max_lines)
    return "\n".join(lines[:keep])
