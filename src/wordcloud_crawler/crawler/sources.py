"""
Document sources feeding the word cloud processor.
A source produces a finite stream of documents; the web crawler is one of them.
"""
import logging
import os

from wordcloud_crawler.common.utils import extract_text_from_html

logger = logging.getLogger(__name__)

HTML_EXTENSIONS = ('.html', '.htm')
TEXT_EXTENSIONS = ('.txt', '.text', '.md') + HTML_EXTENSIONS


class Document:
    """A text payload and the identifier it came from."""
    __slots__ = ('origin', 'text', 'title', 'depth')

    def __init__(self, origin, text, title='', depth=0):
        self.origin = origin
        self.text = text or ''
        self.title = title or ''
        self.depth = depth

    def __eq__(self, other):
        if not isinstance(other, Document):
            return NotImplemented
        return (self.origin, self.text, self.title, self.depth) == \
            (other.origin, other.text, other.title, other.depth)

    def __repr__(self):
        return f"Document(origin={self.origin!r}, chars={len(self.text)}, depth={self.depth})"


class DocumentSource:
    """
    Produces the documents of one processing run.
    """
    def documents(self):
        """Return an iterable of Document."""
        raise NotImplementedError

    def __iter__(self):
        return iter(self.documents())


class TextSource(DocumentSource):
    """In-memory texts, mostly useful for tests and piping."""
    def __init__(self, texts, origin_prefix='text'):
        self.texts = list(texts)
        self.origin_prefix = origin_prefix

    def documents(self):
        for i, text in enumerate(self.texts):
            yield Document(origin=f"{self.origin_prefix}-{i}", text=text)


class FileSource(DocumentSource):
    """
    Reads documents from files. Directories are walked recursively and only
    files with a known text extension are read; HTML files are reduced to text.
    """
    def __init__(self, paths, encoding='utf-8'):
        if isinstance(paths, (str, os.PathLike)):
            paths = [paths]
        self.paths = [os.fspath(p) for p in paths]
        self.encoding = encoding

    def _iter_paths(self):
        for path in self.paths:
            if os.path.isdir(path):
                for root, dirs, files in os.walk(path):
                    dirs.sort()
                    for name in sorted(files):
                        if name.lower().endswith(TEXT_EXTENSIONS):
                            yield os.path.join(root, name)
            else:
                yield path

    def documents(self):
        for path in self._iter_paths():
            try:
                with open(path, encoding=self.encoding, errors='replace') as f:
                    content = f.read()
            except OSError as e:
                logger.error(f"Error reading {path}: {e}")
                continue

            if path.lower().endswith(HTML_EXTENSIONS):
                content = extract_text_from_html(content)
            logger.debug(f"Read {len(content)} characters from {path}")
            yield Document(origin=path, text=content)
