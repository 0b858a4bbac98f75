"""Text pipeline: tokenizer, thread text formulas, and cached TF-IDF similarity."""

from .cache import SimilarityCache
from .tfidf import DocumentCorpus, TfidfSimilarity, term_frequencies, tfidf_vector
from .thread_text import (
    content_summary,
    get_corpus_text,
    get_disliked_text,
    get_history_text,
    get_thread_text,
)
from .tokenizer import STOP_WORDS, tokenize

__all__ = [
    "DocumentCorpus",
    "SimilarityCache",
    "STOP_WORDS",
    "TfidfSimilarity",
    "content_summary",
    "get_corpus_text",
    "get_disliked_text",
    "get_history_text",
    "get_thread_text",
    "term_frequencies",
    "tfidf_vector",
    "tokenize",
]
