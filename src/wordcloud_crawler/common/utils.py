"""
Utility functions for the word cloud crawler.
"""
from urllib.parse import urlparse, urlunparse
import logging

import psutil
from bs4 import BeautifulSoup

from wordcloud_crawler.common.config import LOG_FILE, LOG_LEVEL


def get_domain(url):
    """Extract the domain from a URL."""
    parsed = urlparse(url)
    return parsed.netloc

def normalize_url(url):
    """Normalize a URL by removing fragments and trailing slashes."""
    if not url:
        return None

    # Add scheme if missing
    if not url.startswith(('http://', 'https://')):
        url = f"https://{url}"

    parsed = urlparse(url)
    parsed = parsed._replace(fragment='', netloc=parsed.netloc.lower())

    path = parsed.path
    if path.endswith('/') and len(path) > 1:
        path = path[:-1]
    parsed = parsed._replace(path=path)

    return urlunparse(parsed)

def is_crawlable(url):
    """True for absolute http(s) URLs."""
    if not url:
        return False
    parsed = urlparse(url)
    return parsed.scheme in ('http', 'https') and bool(parsed.netloc)

def extract_text_from_html(html_content):
    """Extract and clean text from HTML content."""
    if not html_content:
        return ''

    soup = BeautifulSoup(html_content, 'html.parser')

    # Remove script and style elements
    for element in soup(["script", "style", "noscript"]):
        element.decompose()

    text = soup.get_text()

    lines = (line.strip() for line in text.splitlines())
    chunks = (phrase.strip() for line in lines for phrase in line.split("  "))
    return '\n'.join(chunk for chunk in chunks if chunk)

def get_memory_usage():
    """Resident memory of the current process in MB."""
    process = psutil.Process()
    return process.memory_info().rss / 1024 / 1024

def configure_logging(component, level=None, log_file=LOG_FILE):
    """
    Configure root logging for a command line entry point.

    Args:
        component (str): Tag shown in every record, e.g. 'Wordcloud'
        level (str): Log level name, defaults to config.LOG_LEVEL
        log_file (str): Optional path of a log file
    """
    handlers = [logging.StreamHandler()]
    if log_file:
        handlers.append(logging.FileHandler(log_file))

    logging.basicConfig(
        level=getattr(logging, (level or LOG_LEVEL).upper(), logging.INFO),
        format=f'%(asctime)s [%(levelname)s] [{component}] %(message)s',
        handlers=handlers,
        force=True
    )
