"""
Tests for the in-memory and file document sources.
"""
import os
import tempfile
import unittest

from wordcloud_crawler.crawler.sources import Document, FileSource, TextSource


class TestTextSource(unittest.TestCase):
    def test_documents(self):
        source = TextSource(['first text', 'second text'], origin_prefix='doc')
        self.assertEqual(list(source), [
            Document('doc-0', 'first text'),
            Document('doc-1', 'second text'),
        ])

    def test_can_be_drained_twice(self):
        source = TextSource(['only'])
        self.assertEqual(list(source.documents()), list(source.documents()))


class TestFileSource(unittest.TestCase):
    def setUp(self):
        self.tmp = tempfile.TemporaryDirectory()
        self.root = self.tmp.name
        self.write('b.txt', 'plain words')
        self.write('a.html', '<html><body><p>page words</p><style>p {}</style></body></html>')
        self.write('ignored.bin', 'binary')
        os.mkdir(os.path.join(self.root, 'sub'))
        self.write(os.path.join('sub', 'c.txt'), 'nested words')

    def tearDown(self):
        self.tmp.cleanup()

    def write(self, name, content):
        with open(os.path.join(self.root, name), 'w', encoding='utf-8') as f:
            f.write(content)

    def test_walks_directories_in_order(self):
        documents = list(FileSource(self.root))
        self.assertEqual(
            [os.path.relpath(doc.origin, self.root) for doc in documents],
            ['a.html', 'b.txt', os.path.join('sub', 'c.txt')]
        )

    def test_html_is_reduced_to_text(self):
        documents = list(FileSource(os.path.join(self.root, 'a.html')))
        self.assertEqual(documents[0].text, 'page words')

    def test_missing_file_is_skipped(self):
        missing = os.path.join(self.root, 'missing.txt')
        with self.assertLogs('wordcloud_crawler.crawler.sources', level='ERROR'):
            documents = list(FileSource([missing, os.path.join(self.root, 'b.txt')]))
        self.assertEqual([doc.text for doc in documents], ['plain words'])


if __name__ == '__main__':
    unittest.main()
