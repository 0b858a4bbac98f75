"""
Tokenizer tests.

Scenarios:
- Mixed CJK / ASCII text splits on punctuation and whitespace
- Stop words, single characters, and pure numbers are dropped
"""

from forum_recommender.text import tokenize


class TestTokenize:
    def test_empty_text(self):
        assert tokenize("") == []
        assert tokenize(None) == []

    def test_lowercases_and_splits_on_punctuation(self):
        assert tokenize("Python,AsyncIO!tips") == ["python", "asyncio", "tips"]

    def test_drops_stop_words_short_tokens_and_numbers(self):
        assert tokenize("the a x 2024 and python is 3d") == ["python", "3d"]

    def test_keeps_cjk_runs(self):
        assert tokenize("机器学习 入门") == ["机器学习", "入门"]

    def test_cjk_stop_word_removed(self):
        assert tokenize("没有 自己 深度") == ["深度"]

    def test_only_stop_words(self):
        assert tokenize("the and of") == []
