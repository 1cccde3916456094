"""
Word cloud processing: drains a document source, counts content words across a
pool of workers and selects the most frequent terms.
"""
import logging
import time
from concurrent.futures import ThreadPoolExecutor

from wordcloud_crawler.cloud.frequency import FrequencyIndex
from wordcloud_crawler.cloud.text_processor import TextProcessor
from wordcloud_crawler.common.config import (
    DEFAULT_MAX_DEPTH, DEFAULT_MIN_COUNT, DEFAULT_SIZE, DEFAULT_WORKERS, EXCLUDE_SEED_TERMS
)
from wordcloud_crawler.common.utils import get_memory_usage
from wordcloud_crawler.crawler.crawler_node import WebCrawlSource

logger = logging.getLogger(__name__)


class Wordcloud:
    """The target of a run: a seed term and the number of words to keep."""
    def __init__(self, seed, size=DEFAULT_SIZE):
        if not seed or not seed.strip():
            raise ValueError("seed must be a non-empty string")
        if size < 1:
            raise ValueError("size must be >= 1")
        self.seed = seed.strip()
        self.size = size

    def __repr__(self):
        return f"Wordcloud(seed={self.seed!r}, size={self.size})"


class WordcloudProcessor:
    """
    Builds the word frequencies of a Wordcloud.

    Args:
        wordcloud (Wordcloud): seed and size of the cloud
        max_depth (int): link hops followed by the web crawler
        workers (int): number of tokenization workers
        min_count (int): minimum occurrences for a term to be kept
        source (DocumentSource): documents to process, crawled from the seed when omitted
        text_processor (TextProcessor): tokenizer and stop-word filter
        stop_words (StopWordFilter): stop words of the default text processor, chosen by config when omitted
        exclude_seed (bool): drop the seed's own words from the counts
    """
    def __init__(self, wordcloud, max_depth=DEFAULT_MAX_DEPTH, workers=DEFAULT_WORKERS,
                 min_count=DEFAULT_MIN_COUNT, source=None, text_processor=None,
                 stop_words=None, exclude_seed=EXCLUDE_SEED_TERMS):
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if workers < 1:
            raise ValueError("workers must be >= 1")
        if min_count < 1:
            raise ValueError("min_count must be >= 1")

        self.wordcloud = wordcloud
        self.max_depth = max_depth
        self.workers = workers
        self.min_count = min_count
        if source is None:
            source = WebCrawlSource(wordcloud.seed, max_depth=max_depth)
        self.source = source

        if text_processor is None:
            excluded = [wordcloud.seed] if exclude_seed else []
            text_processor = TextProcessor(stop_words=stop_words, excluded=excluded)
        self.text_processor = text_processor

    def _count_document(self, document, index):
        counts = self.text_processor.frequencies(document.text)
        index.merge(counts)
        logger.debug(f"Counted {counts.N()} tokens from {document.origin}")
        return counts.N()

    def process(self):
        """
        Count the words of every document and return the top entries.

        Returns:
            list[FrequencyEntry]: at most wordcloud.size entries, most frequent first
        """
        start = time.time()
        index = FrequencyIndex()
        documents = 0

        logger.info(f"Processing {self.wordcloud} with {self.workers} workers")
        with ThreadPoolExecutor(max_workers=self.workers, thread_name_prefix='wordcloud') as pool:
            futures = []
            for document in self.source.documents():
                futures.append(pool.submit(self._count_document, document, index))
                documents += 1

            # result() re-raises the first worker failure
            tokens = sum(future.result() for future in futures)

        entries = index.top(self.wordcloud.size, min_count=self.min_count)
        logger.info(
            f"Processed {documents} documents: {tokens} tokens, {len(index)} distinct terms, "
            f"{len(entries)} kept in {time.time() - start:.2f}s "
            f"(memory: {get_memory_usage():.1f}MB)"
        )
        return entries
