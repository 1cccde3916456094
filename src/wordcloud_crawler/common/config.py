"""
Configuration settings for the word cloud crawler.
"""

# Crawler settings
CRAWLER_USER_AGENT = 'Mozilla/5.0 (Windows NT 10.0; Win64; x64) AppleWebKit/537.36 (KHTML, like Gecko) Chrome/91.0.4472.124 Safari/537.36'
CRAWLER_DOWNLOAD_DELAY = 1.0  # seconds
CRAWLER_CONCURRENT_REQUESTS = 4
CRAWLER_DOWNLOAD_TIMEOUT = 30  # seconds per request
CRAWLER_RETRY_TIMES = 2
CRAWLER_RETRY_HTTP_CODES = [500, 502, 503, 504, 408, 429]
ROBOTSTXT_OBEY = True

CRAWL_TIMEOUT = 300  # seconds for a whole crawl
MAX_PAGES = 50       # maximum pages fetched per crawl

# The seed is sent to an HTML-only search page, results are followed from there
SEARCH_URL_TEMPLATE = 'https://html.duckduckgo.com/html/?q={query}'

# Word cloud defaults
DEFAULT_SEED = 'book'
DEFAULT_SIZE = 20
DEFAULT_MAX_DEPTH = 1
DEFAULT_WORKERS = 5
DEFAULT_MIN_COUNT = 3
POOL_SIZE = 5  # driver pool

# Text processing
MIN_TOKEN_LENGTH = 2
EXCLUDE_SEED_TERMS = True
STOPWORDS_LANGUAGE = 'english'
STOPWORDS_SOURCE = 'nltk'  # 'nltk' (corpus + bundled list) or 'bundled'

# Logging
LOG_LEVEL = 'INFO'
LOG_FILE = None  # e.g. 'wordcloud.log'
