import re
from typing import AbstractSet, List, Optional

from post_search.config.constants import STOP_WORDS

_PUNCTUATION = re.compile(r'[^\w\s]')

# Tokens must be longer than this to count as keywords
MIN_KEYWORD_LENGTH = 2


def extract_keywords(query: Optional[str], stop_words: AbstractSet[str] = STOP_WORDS) -> List[str]:
    """Extract meaningful keywords from a search query.

    Punctuation becomes a space so neighbouring words never merge. Short
    tokens and stop words are dropped; duplicates keep their first position.
    """
    if not query:
        return []

    tokens = _PUNCTUATION.sub(' ', query.lower()).split()
    keywords = dict.fromkeys(
        token for token in tokens
        if len(token) > MIN_KEYWORD_LENGTH and token not in stop_words
    )
    return list(keywords)
