"""
Text formulas for TF-IDF matching.

Defines HOW text is extracted from threads, read history, and disliked threads.
The same thread formula is used on both sides of every comparison:

    "{title} {category} {tags joined by space}"

The reading history and the IDF corpus additionally carry a short,
tag-stripped content summary (and, for history, the author name).
"""

import re
from typing import Dict, Iterable, List, Optional

from ..models.events import DislikedThread, ReadEvent
from ..models.thread import Thread

_HTML_TAG = re.compile(r"<[^>]*>")


def _base_text(title: Optional[str], category: Optional[str], tags: Iterable[str]) -> str:
    return f"{title or ''} {category or ''} {' '.join(tags)}"


def get_thread_text(thread: Thread) -> str:
    """Text used for the candidate side of similarity and the dislike penalty."""
    return _base_text(thread.title, thread.category, thread.tags)


def content_summary(content: Optional[str], max_chars: int = 200) -> str:
    """First max_chars characters of content with HTML tags removed."""
    if not content:
        return ""
    return _HTML_TAG.sub("", content)[:max_chars]


def get_corpus_text(thread: Thread, content_chars: int = 200) -> str:
    """Document text for the IDF corpus: thread text plus content summary."""
    text = get_thread_text(thread)
    summary = content_summary(thread.content, content_chars)
    if summary:
        text += f" {summary}"
    return text


def get_history_text(
    completed_events: List[ReadEvent],
    thread_by_id: Dict[str, Thread],
    content_chars: int = 200,
) -> str:
    """
    Concatenated text of every completed read.

    Each read contributes its thread's corpus text plus the author name when
    known. Reads whose thread is not in the catalog are skipped.
    """
    texts = []
    for event in completed_events:
        thread = thread_by_id.get(event.thread_id)
        if thread is None:
            continue
        text = get_corpus_text(thread, content_chars)
        if thread.author_name:
            text += f" {thread.author_name}"
        texts.append(text)
    return " ".join(texts)


def get_disliked_text(disliked: DislikedThread, thread_by_id: Dict[str, Thread]) -> str:
    """Disliked thread text from its snapshot, else from the catalog thread."""
    if disliked.title or disliked.category or disliked.tags:
        return _base_text(disliked.title, disliked.category, disliked.tags)
    thread = thread_by_id.get(disliked.thread_id)
    if thread is None:
        return ""
    return get_thread_text(thread)
