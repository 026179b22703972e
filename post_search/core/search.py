import logging
from dataclasses import dataclass
from typing import Any, Dict, Iterable, List, Mapping, Optional

from .keywords import extract_keywords
from .post_fields import AUTHOR_USERNAME, get_text, get_topic_names
from .scoring import RelevanceScorer
from .synonyms import SynonymExpander, default_expander

logger = logging.getLogger(__name__)

SCORE_FIELD = 'relevance_score'


@dataclass(frozen=True)
class ScoredPost:
    """A candidate post with the relevance score from one search"""
    post: Any
    score: float
    position: int

    def to_dict(self) -> Dict[str, Any]:
        """Copy of the post's fields plus its relevance score"""
        data = _record_fields(self.post)
        data[SCORE_FIELD] = self.score
        return data


def _record_fields(post: Any) -> Dict[str, Any]:
    """Field values of a mapping, namedtuple, plain object or __slots__ record"""
    if isinstance(post, Mapping):
        return dict(post)
    if hasattr(post, '_asdict'):
        return dict(post._asdict())
    if hasattr(post, '__dict__'):
        return dict(vars(post))

    fields = {}
    for cls in type(post).__mro__:
        slots = getattr(cls, '__slots__', ())
        if isinstance(slots, str):
            slots = [slots]
        for name in slots:
            if name not in fields and hasattr(post, name):
                fields[name] = getattr(post, name)
    return fields or {'post': post}


class PostSearch:
    """Keyword + synonym relevance search over saved posts"""

    def __init__(self,
                 expander: Optional[SynonymExpander] = None,
                 scorer: Optional[RelevanceScorer] = None):
        self.expander = expander or default_expander
        self._scorer = scorer

    @property
    def scorer(self) -> RelevanceScorer:
        # Built on first use so weight overrides set before the first search apply
        if self._scorer is None:
            self._scorer = RelevanceScorer()
        return self._scorer

    def create_search_patterns(self, query: Optional[str]) -> List[str]:
        """Expanded keywords plus the full lower-cased query"""
        if not query or not query.strip():
            return []

        keywords = extract_keywords(query)
        patterns = self.expander.expand(keywords)

        full_query = query.lower()
        if full_query not in patterns:
            patterns.append(full_query)

        return patterns

    def rank(self, posts: Iterable[Any], patterns: List[str]) -> List[ScoredPost]:
        """Score posts, drop the ones that did not match and sort best first"""
        scored = []
        for position, post in enumerate(posts):
            score = self.scorer.score_post(post, patterns)
            if score > 0:
                scored.append(ScoredPost(post=post, score=score, position=position))

        # Equal scores keep their input order
        scored.sort(key=lambda s: (-s.score, s.position))
        return scored

    def search_posts(self, posts: Iterable[Any], query: Optional[str]) -> List[Any]:
        """
        Rank posts against a free-text query.

        A blank query is not a filter: the posts come back unchanged and
        unscored, in their original order. Otherwise the result is a list of
        ScoredPost with score > 0, highest first.
        """
        posts = list(posts)
        if not query or not query.strip():
            return posts

        patterns = self.create_search_patterns(query)
        logger.debug(f"Search patterns for '{query}': {patterns}")

        results = self.rank(posts, patterns)
        logger.info(f"📊 Found {len(results)} relevant posts for '{query}'")
        return results

    def search(self,
               posts: Iterable[Any],
               query: Optional[str] = "",
               categories: Optional[List[str]] = None,
               limit: Optional[int] = None) -> List[Any]:
        """
        Search posts with optional topic filtering.

        Args:
            posts: Candidate posts
            query: Free-text query; blank keeps the input order
            categories: Only keep posts tagged with any of these topics
            limit: Maximum number of results (None or 0 for all)

        Returns:
            Ranked posts as dicts with a relevance_score, or the untouched
            posts when the query is blank
        """
        posts = list(posts)
        if categories:
            posts = self.filter_by_categories(posts, categories)

        results = self.search_posts(posts, query)
        results = [r.to_dict() if isinstance(r, ScoredPost) else r for r in results]

        if limit:
            results = results[:limit]
        return results

    @staticmethod
    def filter_by_categories(posts: Iterable[Any], categories: Iterable[str]) -> List[Any]:
        """Posts carrying at least one of the given topic labels (case-insensitive)"""
        wanted = {c.strip().lower() for c in categories if c and c.strip()}
        if not wanted:
            return list(posts)

        matches = [
            post for post in posts
            if any(name.lower() in wanted for name in get_topic_names(post))
        ]
        logger.info(f"🔍 {len(matches)} posts in categories: {', '.join(sorted(wanted))}")
        return matches

    @staticmethod
    def search_by_user(posts: Iterable[Any], username: str) -> List[Any]:
        """
        Posts written by a specific username
        :param username: username (with or without @)
        """
        username = (username or '').strip().lstrip('@').lower()
        if not username:
            return []

        matches = [
            post for post in posts
            if get_text(post, AUTHOR_USERNAME).strip().lstrip('@').lower() == username
        ]
        logger.info(f"🔍 Found {len(matches)} posts from @{username}")
        return matches


# Shared engine for callers that do not need custom tables or weights
semantic_search = PostSearch()
