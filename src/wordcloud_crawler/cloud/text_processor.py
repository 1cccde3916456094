"""
Tokenization and stop-word filtering for the word cloud.
"""
import logging
import os
from functools import lru_cache

import nltk
from nltk.probability import FreqDist
from nltk.tokenize import RegexpTokenizer

from wordcloud_crawler.common.config import MIN_TOKEN_LENGTH, STOPWORDS_LANGUAGE, STOPWORDS_SOURCE

logger = logging.getLogger(__name__)

STOPWORDS_FILE = os.path.join(os.path.dirname(os.path.abspath(__file__)), 'stopwords.txt')

WORD_PATTERN = r'[a-z]+'


class Tokenizer:
    """Splits text into lowercase alphabetic words of a minimum length."""
    def __init__(self, min_length=MIN_TOKEN_LENGTH):
        if min_length < 2:
            raise ValueError("min_length must be >= 2")
        self.min_length = min_length
        self._tokenizer = RegexpTokenizer(WORD_PATTERN)

    def tokenize(self, text):
        if not text:
            return []
        return [
            token for token in self._tokenizer.tokenize(text.lower())
            if len(token) >= self.min_length
        ]


class StopWordFilter:
    """
    A set of lowercase words excluded from counting.

    Entries are split the way text is tokenized, so "don't" also stops the
    fragment "don".
    """
    _splitter = RegexpTokenizer(WORD_PATTERN)

    def __init__(self, words=()):
        stop_words = set()
        for word in words:
            if not word or not word.strip():
                continue
            word = word.strip().lower()
            stop_words.add(word)
            stop_words.update(self._splitter.tokenize(word))
        self.words = frozenset(stop_words)

    def __contains__(self, word):
        return word in self.words

    def __len__(self):
        return len(self.words)

    def union(self, words):
        return StopWordFilter(self.words | set(words))

    @classmethod
    def from_file(cls, path):
        """Load one word per line, '#' starts a comment line."""
        with open(path, encoding='utf-8') as f:
            words = [line for line in f if not line.lstrip().startswith('#')]
        return cls(words)

    @classmethod
    def default(cls):
        """Stop words bundled with the package."""
        return cls.from_file(STOPWORDS_FILE)

    @classmethod
    def from_nltk(cls, language=STOPWORDS_LANGUAGE):
        """NLTK's stop-word corpus for a language merged with the bundled list."""
        try:
            nltk.data.find('corpora/stopwords')
        except LookupError:
            logger.info("Downloading NLTK stopwords corpus")
            nltk.download('stopwords', quiet=True)
        from nltk.corpus import stopwords

        return cls.default().union(stopwords.words(language))


@lru_cache(maxsize=None)
def load_stop_words(source=STOPWORDS_SOURCE, language=STOPWORDS_LANGUAGE):
    """
    Stop words selected by config, loaded once per process.

    'nltk' uses the NLTK corpus merged with the bundled list and falls back to
    the bundled list when the corpus cannot be loaded; 'bundled' uses the list alone.
    """
    if source == 'bundled':
        return StopWordFilter.default()
    if source != 'nltk':
        raise ValueError(f"unknown stop-word source: {source!r}")

    try:
        stop_words = StopWordFilter.from_nltk(language)
    except LookupError as e:
        logger.warning(f"NLTK stopwords for {language!r} unavailable, using bundled list: {e}")
        return StopWordFilter.default()
    logger.info(f"Loaded {len(stop_words)} {language} stop words from NLTK")
    return stop_words


class TextProcessor:
    """
    Turns raw document text into content tokens.

    Tokens found in the stop-word filter or in ``excluded`` are dropped.
    """
    def __init__(self, tokenizer=None, stop_words=None, excluded=()):
        self.tokenizer = tokenizer or Tokenizer()
        self.stop_words = stop_words if stop_words is not None else load_stop_words()
        self.excluded = frozenset(self.tokenizer.tokenize(' '.join(excluded)))

    def process(self, text):
        return [
            token for token in self.tokenizer.tokenize(text)
            if token not in self.stop_words and token not in self.excluded
        ]

    def frequencies(self, text):
        """Frequency distribution of the content tokens of a text."""
        return FreqDist(self.process(text))
