"""
Main script to build a word cloud for a seed term.
Prints one "term: count" line per word, most frequent first.
"""
import argparse
import logging
import sys
from concurrent.futures import ThreadPoolExecutor

from wordcloud_crawler.cloud.text_processor import load_stop_words
from wordcloud_crawler.cloud.wordcloud import Wordcloud, WordcloudProcessor
from wordcloud_crawler.common.config import (
    DEFAULT_MAX_DEPTH, DEFAULT_MIN_COUNT, DEFAULT_SEED, DEFAULT_SIZE, DEFAULT_WORKERS,
    LOG_FILE, LOG_LEVEL, POOL_SIZE, STOPWORDS_LANGUAGE, STOPWORDS_SOURCE
)
from wordcloud_crawler.common.utils import configure_logging
from wordcloud_crawler.crawler.sources import FileSource

logger = logging.getLogger(__name__)


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description='Build a word cloud from documents crawled for a seed term')
    parser.add_argument('--seed', default=DEFAULT_SEED, help='Search term the crawl starts from')
    parser.add_argument('--size', type=int, default=DEFAULT_SIZE, help='Number of words in the cloud')
    parser.add_argument('--max-depth', type=int, default=DEFAULT_MAX_DEPTH, help='Link hops followed from the search page')
    parser.add_argument('--workers', type=int, default=DEFAULT_WORKERS, help='Number of tokenization workers')
    parser.add_argument('--min-count', type=int, default=DEFAULT_MIN_COUNT, help='Minimum occurrences of a word')
    parser.add_argument('--pool-size', type=int, default=POOL_SIZE, help='Size of the driver pool')
    parser.add_argument('--files', nargs='+', help='Read documents from files or directories instead of crawling')
    parser.add_argument('--stopwords', choices=['nltk', 'bundled'], default=STOPWORDS_SOURCE,
                        help='Stop-word list: NLTK corpus merged with the bundled list, or the bundled list alone')
    parser.add_argument('--log-level', default=LOG_LEVEL, help='Logging level')
    parser.add_argument('--log-file', default=LOG_FILE, help='Also write logs to this file')
    return parser.parse_args(argv)


def build_processor(args):
    wordcloud = Wordcloud(args.seed, args.size)
    source = FileSource(args.files) if args.files else None
    stop_words = load_stop_words(args.stopwords, STOPWORDS_LANGUAGE)
    return WordcloudProcessor(
        wordcloud, args.max_depth, args.workers, args.min_count,
        source=source, stop_words=stop_words
    )


def run(processor, pool_size=POOL_SIZE, out=None):
    """Run the processor on a worker pool, wait for it and print its entries."""
    out = out or sys.stdout
    pool = ThreadPoolExecutor(max_workers=pool_size)
    try:
        future = pool.submit(processor.process)
        entries = future.result()
    except KeyboardInterrupt:
        # Do not wait for a running crawl
        pool.shutdown(wait=False, cancel_futures=True)
        raise
    except Exception:
        pool.shutdown()
        raise
    pool.shutdown()

    for entry in entries:
        print(entry, file=out)
    return entries


def main(argv=None):
    args = parse_args(argv)
    configure_logging('Wordcloud', level=args.log_level, log_file=args.log_file)

    try:
        processor = build_processor(args)
        run(processor, pool_size=args.pool_size)
    except KeyboardInterrupt:
        logger.critical("Interrupted")
        return 130
    except Exception as e:
        logger.critical(f"Word cloud failed: {e}", exc_info=True)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
