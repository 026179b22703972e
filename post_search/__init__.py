"""
Keyword and synonym relevance search for saved X/Twitter posts.
"""

__version__ = '0.1.0'
