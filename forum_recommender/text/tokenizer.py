"""
Tokenizer for mixed Chinese/English thread text.

Keeps CJK ideographs, ASCII letters, digits and whitespace; everything else
becomes a separator. Short tokens, stop words and pure numbers are dropped.
"""

import re
from typing import List

STOP_WORDS = frozenset([
    "的", "了", "在", "是", "我", "有", "和", "就", "不", "人", "都", "一", "一个",
    "上", "也", "很", "到", "说", "要", "去", "你", "会", "着", "没有", "看", "好",
    "自己", "这",
    "the", "a", "an", "and", "or", "but", "in", "on", "at", "to", "for", "of",
    "with", "by", "is", "are", "was", "were", "be", "been", "have", "has", "had",
    "do", "does", "did", "will", "would", "could", "should",
])

_NON_TOKEN_CHARS = re.compile(r"[^\u4e00-\u9fa5a-zA-Z0-9\s]")
_DIGITS_ONLY = re.compile(r"^[0-9]+$")


def tokenize(text: str) -> List[str]:
    """Lowercase tokens of length >= 2 that are neither stop words nor pure digits."""
    if not text:
        return []
    cleaned = _NON_TOKEN_CHARS.sub(" ", text.lower())
    return [
        token
        for token in cleaned.split()
        if len(token) > 1 and token not in STOP_WORDS and not _DIGITS_ONLY.match(token)
    ]
