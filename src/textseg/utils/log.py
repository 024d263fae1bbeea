"""
log.py.

Does: Topic-filtered debug printer controlled by TEXTSEG_DEBUG_TOPICS (comma-sep or 'all').
Returns: Timestamped "[ts] [topic][LEVEL] msg" lines on stderr. Used by profiles, pipeline, CLI.
"""

import os
import sys
from datetime import datetime
from typing import TextIO

__all__ = ["debug", "is_topic_enabled", "reload_topics"]

ENV_VAR = "TEXTSEG_DEBUG_TOPICS"


def _load_topics() -> set[str]:
    raw = os.getenv(ENV_VAR, "")
    return {t.strip().lower() for t in raw.split(",") if t.strip()}


_DEBUG_TOPICS = _load_topics()


def reload_topics() -> None:
    """Does: Re-read enabled topics from TEXTSEG_DEBUG_TOPICS."""
    global _DEBUG_TOPICS
    _DEBUG_TOPICS = _load_topics()


def is_topic_enabled(topic: str) -> bool:
    """Does: Tell whether `topic` is on. Nothing is enabled while the env var is unset."""
    if not _DEBUG_TOPICS:
        return False
    return "all" in _DEBUG_TOPICS or topic.lower().strip() in _DEBUG_TOPICS


def debug(
    msg: str,
    topic: str = "segmentation",
    *,
    level: str = "DEBUG",
    stream: TextIO | None = None,
) -> None:
    """Does: Print a timestamped line with topic and level when the topic is enabled."""
    topic_key = topic.lower().strip()
    if not is_topic_enabled(topic_key):
        return
    if stream is None:
        stream = sys.stderr
    ts = datetime.now().strftime("%Y-%m-%d %H:%M:%S")
    print(f"[{ts}] [{topic_key}][{level.upper()}] {msg}", file=stream)
