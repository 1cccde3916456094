"""
Crawler Node for the word cloud crawler.
Responsible for fetching web pages for a seed term and extracting their text and links.
"""
import logging
import time
import traceback
from collections import Counter
from urllib.parse import quote_plus

import crochet
import scrapy
from itemloaders.processors import Join, MapCompose, TakeFirst
from scrapy import signals
from scrapy.crawler import CrawlerRunner
from scrapy.http import TextResponse
from scrapy.item import Field, Item
from scrapy.loader import ItemLoader
from scrapy.utils.project import get_project_settings

from wordcloud_crawler.common.config import (
    CRAWL_TIMEOUT, CRAWLER_CONCURRENT_REQUESTS, CRAWLER_DOWNLOAD_DELAY,
    CRAWLER_DOWNLOAD_TIMEOUT, CRAWLER_RETRY_HTTP_CODES, CRAWLER_RETRY_TIMES,
    CRAWLER_USER_AGENT, MAX_PAGES, ROBOTSTXT_OBEY, SEARCH_URL_TEMPLATE
)
from wordcloud_crawler.common.utils import (
    extract_text_from_html, get_domain, is_crawlable, normalize_url
)
from wordcloud_crawler.crawler.sources import Document, DocumentSource

logger = logging.getLogger(__name__)


class CrawlError(Exception):
    """A crawl could not be completed."""


class CrawlTimeoutError(CrawlError):
    """A crawl did not finish within its timeout."""


def build_search_url(seed, template=SEARCH_URL_TEMPLATE):
    """Search page URL the crawl for a seed term starts from."""
    if not seed or not seed.strip():
        raise ValueError("seed must be a non-empty string")
    return template.format(query=quote_plus(seed.strip()))


class WebPage(Item):
    """Scrapy Item for storing web page data."""
    url = Field(output_processor=TakeFirst())
    title = Field(input_processor=MapCompose(str.strip), output_processor=Join(' '))
    text = Field(output_processor=TakeFirst())
    links = Field()
    depth = Field(output_processor=TakeFirst())


class WebSpider(scrapy.Spider):
    """Scrapy spider that follows links breadth-first from a start page."""
    name = 'wordcloud_spider'

    def __init__(self, url=None, max_depth=1, max_pages=MAX_PAGES, *args, **kwargs):
        super(WebSpider, self).__init__(*args, **kwargs)

        self.start_urls = [url] if url else []
        self.max_depth = max_depth
        self.max_pages = max_pages
        self.visited = {normalize_url(url)} if url else set()
        self.results = []

    def parse(self, response):
        """Parse the response, store its page and follow its links."""
        if not isinstance(response, TextResponse):
            logger.debug(f"Skipping non-text response: {response.url}")
            return

        depth = response.meta.get('crawl_depth', 0)
        try:
            loader = ItemLoader(item=WebPage(), response=response)
            loader.add_value('url', response.url)
            loader.add_xpath('title', '//title/text()')
            loader.add_value('text', extract_text_from_html(response.text))
            loader.add_css('links', 'a::attr(href)')
            loader.add_value('depth', depth)
            item = loader.load_item()
        except Exception as e:
            logger.error(f"Error parsing {response.url}: {e}")
            logger.debug(traceback.format_exc())
            return

        self.results.append(item)
        logger.info(f"Parsed {response.url} (depth: {depth}/{self.max_depth})")

        if depth >= self.max_depth:
            return

        for href in item.get('links', []):
            if len(self.visited) >= self.max_pages:
                logger.debug(f"Page limit of {self.max_pages} reached")
                break

            absolute = response.urljoin(href)
            if not is_crawlable(absolute):
                continue
            discovered_url = normalize_url(absolute)
            if discovered_url in self.visited:
                continue

            self.visited.add(discovered_url)
            yield response.follow(
                discovered_url,
                callback=self.parse,
                meta={'crawl_depth': depth + 1}
            )


class CrawlerNode:
    """
    Crawler Node class that runs WebSpider and returns the fetched pages as documents.
    """
    def __init__(self, timeout=CRAWL_TIMEOUT):
        self.timeout = timeout

        # Initialize Scrapy settings
        self.settings = get_project_settings()
        self.settings.update({
            'USER_AGENT': CRAWLER_USER_AGENT,
            'ROBOTSTXT_OBEY': ROBOTSTXT_OBEY,
            'DOWNLOAD_DELAY': CRAWLER_DOWNLOAD_DELAY,
            'CONCURRENT_REQUESTS': CRAWLER_CONCURRENT_REQUESTS,
            'LOG_ENABLED': False,
            'DOWNLOAD_TIMEOUT': CRAWLER_DOWNLOAD_TIMEOUT,
            'RETRY_TIMES': CRAWLER_RETRY_TIMES,
            'RETRY_HTTP_CODES': CRAWLER_RETRY_HTTP_CODES,
            # crochet installs the default reactor
            'TWISTED_REACTOR': None,
        })
        logger.debug("Scrapy settings initialized")

    def crawl(self, url, max_depth=1, max_pages=MAX_PAGES):
        """
        Crawl from a start URL.

        Args:
            url (str): Start URL
            max_depth (int): Number of link hops followed from the start page
            max_pages (int): Maximum number of pages requested

        Returns:
            list[Document]: One document per parsed page with text
        """
        if max_depth < 0:
            raise ValueError("max_depth must be >= 0")
        if max_pages < 1:
            raise ValueError("max_pages must be >= 1")

        crochet.setup()
        runner = CrawlerRunner(self.settings)
        pages = []

        def handle_spider_closed(spider, reason):
            logger.info(f"Spider closed for URL: {url} ({reason})")
            pages.extend(getattr(spider, 'results', []))

        @crochet.wait_for(timeout=self.timeout)
        def run_spider():
            crawler = runner.create_crawler(WebSpider)
            crawler.signals.connect(handle_spider_closed, signal=signals.spider_closed)
            return runner.crawl(crawler, url=url, max_depth=max_depth, max_pages=max_pages)

        logger.info(f"Starting spider for URL: {url} (max depth: {max_depth}, max pages: {max_pages})")
        start = time.time()
        try:
            run_spider()
        except crochet.TimeoutError as e:
            logger.error(f"Spider timed out for URL: {url}")
            raise CrawlTimeoutError(f"crawl of {url} exceeded {self.timeout}s") from e

        logger.info(f"Spider completed for URL: {url} with {len(pages)} pages in {time.time() - start:.2f}s")
        if pages:
            pages_per_domain = Counter(get_domain(page.get('url', '')) for page in pages)
            logger.info(f"Pages per domain: {dict(pages_per_domain.most_common())}")
        return self.to_documents(pages)

    @staticmethod
    def to_documents(pages):
        """Convert WebPage items to documents, dropping pages without text."""
        documents = []
        for page in pages:
            title = page.get('title', '')
            text = page.get('text', '')
            if not text and not title:
                logger.warning(f"No text extracted from {page.get('url')}")
                continue
            documents.append(Document(
                origin=page.get('url'),
                text=text or title,
                title=title,
                depth=page.get('depth', 0)
            ))
        return documents


class WebCrawlSource(DocumentSource):
    """Documents crawled from the search page of a seed term."""
    def __init__(self, seed, max_depth=1, max_pages=MAX_PAGES, crawler=None):
        self.start_url = build_search_url(seed)
        self.max_depth = max_depth
        self.max_pages = max_pages
        self.crawler = crawler or CrawlerNode()

    def documents(self):
        return self.crawler.crawl(self.start_url, max_depth=self.max_depth, max_pages=self.max_pages)
