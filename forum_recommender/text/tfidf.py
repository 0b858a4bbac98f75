"""
TF-IDF similarity between two texts, relative to a reference corpus.

    tf(term)  = count / total tokens
    idf(term) = ln(|corpus| / df(term)), 0 when df is 0, 1 when the corpus is empty
    similarity = cosine(tf * idf of text A, tf * idf of text B), clamped to [0, 1]

df counts corpus documents that contain the term as a case-insensitive
substring. Results are memoized in a SimilarityCache keyed on the text pair,
scoped by whether a reference corpus was used so corpus-weighted and plain
similarities never share an entry.
"""

import math
from collections import Counter
from typing import Dict, List, Optional, Sequence, Union

from ..utils.similarity import sparse_cosine_similarity
from .cache import SimilarityCache
from .tokenizer import tokenize


class DocumentCorpus:
    """Reference documents for IDF; lowercases once and memoizes idf per term."""

    def __init__(self, documents: Sequence[str] = ()):
        self._documents = [doc.lower() if doc else "" for doc in documents]
        self._idf: Dict[str, float] = {}

    def __len__(self) -> int:
        return len(self._documents)

    def document_frequency(self, term: str) -> int:
        term = term.lower()
        return sum(1 for doc in self._documents if doc and term in doc)

    def idf(self, term: str) -> float:
        if not self._documents:
            return 1.0
        cached = self._idf.get(term)
        if cached is not None:
            return cached
        df = self.document_frequency(term)
        value = math.log(len(self._documents) / df) if df > 0 else 0.0
        self._idf[term] = value
        return value


CorpusLike = Union[DocumentCorpus, Sequence[str], None]

# Cache scopes: IDF from a reference corpus vs. the empty-corpus IDF of 1
CORPUS_SCOPE = "corpus"
PLAIN_SCOPE = "plain"


def term_frequencies(tokens: List[str]) -> Dict[str, float]:
    total = len(tokens)
    if total == 0:
        return {}
    return {term: count / total for term, count in Counter(tokens).items()}


def tfidf_vector(tokens: List[str], corpus: DocumentCorpus) -> Dict[str, float]:
    return {term: tf * corpus.idf(term) for term, tf in term_frequencies(tokens).items()}


def _as_corpus(corpus: CorpusLike) -> DocumentCorpus:
    if isinstance(corpus, DocumentCorpus):
        return corpus
    return DocumentCorpus(corpus or ())


class TfidfSimilarity:
    """TF-IDF cosine similarity with a bounded memo shared across calls."""

    def __init__(self, cache: Optional[SimilarityCache] = None):
        self.cache = cache if cache is not None else SimilarityCache()

    def similarity(self, text_a: Optional[str], text_b: Optional[str], corpus: CorpusLike = None) -> float:
        """Similarity in [0, 1]; 0 when either text is empty."""
        if not text_a or not text_b:
            return 0.0

        docs = _as_corpus(corpus)
        key = self.cache.make_key(text_a, text_b, CORPUS_SCOPE if len(docs) else PLAIN_SCOPE)
        cached = self.cache.get(key)
        if cached is not None:
            return cached

        tokens_a = tokenize(text_a)
        tokens_b = tokenize(text_b)
        if not tokens_a or not tokens_b:
            value = 0.0
        else:
            value = sparse_cosine_similarity(tfidf_vector(tokens_a, docs), tfidf_vector(tokens_b, docs))
            value = min(1.0, max(0.0, value))

        self.cache.put(key, value)
        return value

    def clear_cache(self) -> None:
        self.cache.clear()

    def cache_stats(self) -> Dict[str, int]:
        return self.cache.stats()
