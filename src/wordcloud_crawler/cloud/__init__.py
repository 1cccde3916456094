from wordcloud_crawler.cloud.frequency import FrequencyEntry, FrequencyIndex
from wordcloud_crawler.cloud.text_processor import StopWordFilter, TextProcessor, Tokenizer
from wordcloud_crawler.cloud.wordcloud import Wordcloud, WordcloudProcessor

__all__ = [
    "FrequencyEntry", "FrequencyIndex", "StopWordFilter", "TextProcessor", "Tokenizer",
    "Wordcloud", "WordcloudProcessor",
]
