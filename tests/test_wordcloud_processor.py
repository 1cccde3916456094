"""
Tests for the word cloud processor.
"""
import unittest
from unittest.mock import Mock, patch

from wordcloud_crawler.cloud.frequency import FrequencyEntry
from wordcloud_crawler.cloud.text_processor import StopWordFilter, TextProcessor
from wordcloud_crawler.cloud.wordcloud import Wordcloud, WordcloudProcessor
from wordcloud_crawler.crawler.crawler_node import WebCrawlSource
from wordcloud_crawler.crawler.sources import TextSource

_stop_words_patcher = patch(
    'wordcloud_crawler.cloud.text_processor.load_stop_words',
    return_value=StopWordFilter.default()
)


def setUpModule():
    _stop_words_patcher.start()


def tearDownModule():
    _stop_words_patcher.stop()


CORPUS = [
    "The cat sat on the mat.",
    "The cat ran after the dog.",
    "A dog and a cat met a bird.",
    "Books about a cat and a dog.",
]


class TestWordcloud(unittest.TestCase):
    def test_validation(self):
        with self.assertRaises(ValueError):
            Wordcloud('  ', 10)
        with self.assertRaises(ValueError):
            Wordcloud('book', 0)

    def test_seed_is_stripped(self):
        self.assertEqual(Wordcloud(' book ', 5).seed, 'book')


class TestWordcloudProcessor(unittest.TestCase):
    def make_processor(self, texts=CORPUS, size=3, workers=3, min_count=1, **kwargs):
        return WordcloudProcessor(
            Wordcloud('book', size), 0, workers, min_count,
            source=TextSource(texts), **kwargs
        )

    def test_process_returns_top_entries(self):
        processor = self.make_processor()
        self.assertEqual(
            processor.process(),
            [FrequencyEntry('cat', 4), FrequencyEntry('dog', 3), FrequencyEntry('bird', 1)]
        )

    def test_min_count_filters_rare_terms(self):
        processor = self.make_processor(size=10, min_count=3)
        self.assertEqual(processor.process(), [('cat', 4), ('dog', 3)])

    def test_result_bounded_and_distinct(self):
        entries = self.make_processor(size=2).process()
        self.assertEqual(len(entries), 2)
        self.assertEqual(len({entry.term for entry in entries}), 2)

    def test_tie_break_on_two_letter_words(self):
        processor = WordcloudProcessor(
            Wordcloud('zz', 2), 0, 2, 1,
            source=TextSource(["aa aa bb", "bb cc"]),
            text_processor=TextProcessor(stop_words=StopWordFilter())
        )
        self.assertEqual(processor.process(), [('aa', 2), ('bb', 2)])

    def test_process_is_idempotent(self):
        processor = self.make_processor(size=10)
        self.assertEqual(processor.process(), processor.process())

    def test_seed_terms_excluded(self):
        processor = WordcloudProcessor(
            Wordcloud('book', 5), 0, 1, 1,
            source=TextSource(["book book novel"])
        )
        self.assertEqual(processor.process(), [('novel', 1)])

    def test_seed_kept_when_not_excluded(self):
        processor = WordcloudProcessor(
            Wordcloud('book', 5), 0, 1, 1,
            source=TextSource(["book book novel"]), exclude_seed=False
        )
        self.assertEqual(processor.process(), [('book', 2), ('novel', 1)])

    def test_contraction_fragments_not_counted(self):
        processor = WordcloudProcessor(
            Wordcloud('book', 3), 0, 2, 1,
            source=TextSource(["You don't read. We don't write. Novel isn't bad."])
        )
        self.assertEqual(processor.process(), [('bad', 1), ('novel', 1), ('read', 1)])

    def test_stop_words_parameter(self):
        processor = WordcloudProcessor(
            Wordcloud('book', 5), 0, 1, 1,
            source=TextSource(["the cat and the hat"]),
            stop_words=StopWordFilter(['cat'])
        )
        self.assertEqual(processor.process(), [('the', 2), ('and', 1), ('hat', 1)])

    def test_empty_source(self):
        self.assertEqual(self.make_processor(texts=[]).process(), [])

    def test_worker_failure_propagates(self):
        text_processor = Mock()
        text_processor.frequencies.side_effect = RuntimeError("tokenizer broke")
        processor = self.make_processor(text_processor=text_processor)

        with self.assertRaises(RuntimeError):
            processor.process()

    def test_invalid_parameters(self):
        wordcloud = Wordcloud('book', 5)
        source = TextSource([])
        with self.assertRaises(ValueError):
            WordcloudProcessor(wordcloud, -1, 1, 1, source=source)
        with self.assertRaises(ValueError):
            WordcloudProcessor(wordcloud, 1, 0, 1, source=source)
        with self.assertRaises(ValueError):
            WordcloudProcessor(wordcloud, 1, 1, 0, source=source)

    def test_default_source_crawls_seed(self):
        processor = WordcloudProcessor(Wordcloud('book', 20), 1, 5, 3)
        self.assertIsInstance(processor.source, WebCrawlSource)
        self.assertEqual(processor.source.max_depth, 1)
        self.assertIn('q=book', processor.source.start_url)


if __name__ == '__main__':
    unittest.main()
