from wordcloud_crawler.crawler.sources import Document, DocumentSource, FileSource, TextSource
from wordcloud_crawler.crawler.crawler_node import (
    CrawlError, CrawlTimeoutError, CrawlerNode, WebCrawlSource, WebSpider, build_search_url
)

__all__ = [
    "Document", "DocumentSource", "FileSource", "TextSource",
    "CrawlError", "CrawlTimeoutError", "CrawlerNode", "WebCrawlSource", "WebSpider",
    "build_search_url",
]
