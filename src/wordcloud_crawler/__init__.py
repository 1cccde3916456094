"""
Word cloud crawler: crawls documents from a seed term and surfaces the most
frequent content words.
"""
__version__ = "1.0.0"
