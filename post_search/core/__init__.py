"""
Core functionality for the saved-post search engine.
This package contains the keyword extractor, synonym expansion,
relevance scoring, ranking and chat context building.
"""

from .keywords import extract_keywords
from .scoring import RelevanceScorer
from .search import PostSearch, ScoredPost, semantic_search
from .synonyms import SynonymExpander

__all__ = [
    'extract_keywords',
    'PostSearch',
    'RelevanceScorer',
    'ScoredPost',
    'SynonymExpander',
    'semantic_search',
]
