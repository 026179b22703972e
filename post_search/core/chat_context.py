"""
Builds the saved-post context block handed to the AI chat model.
Posts are ranked against the user's question and the best ones are
rendered as numbered references the model can cite as [1], [2], ...
"""

import logging
from datetime import date, datetime
from typing import Any, Dict, Iterable, List, Optional, Tuple

from post_search.config.constants import NO_POSTS_MESSAGE
from .post_fields import AUTHOR_NAME, AUTHOR_USERNAME, CONTENT, get_field, get_text, get_topic_names
from .search import PostSearch, ScoredPost, semantic_search

logger = logging.getLogger(__name__)

DEFAULT_CONTEXT_LIMIT = 20


def format_post_date(value: Any) -> str:
    """Render created_at as YYYY-MM-DD; unparseable strings are kept as-is"""
    if not value:
        return 'Unknown'
    if isinstance(value, (datetime, date)):
        return value.strftime('%Y-%m-%d')
    try:
        return datetime.fromisoformat(str(value).replace('Z', '+00:00')).strftime('%Y-%m-%d')
    except ValueError:
        return str(value)


def format_post(index: int, post: Any) -> str:
    """Format one post as a numbered context entry"""
    topics = ', '.join(get_topic_names(post)) or 'No topics'
    return (
        f"[{index}] Post by @{get_text(post, AUTHOR_USERNAME)} ({get_text(post, AUTHOR_NAME)}):\n"
        f"Content: \"{get_text(post, CONTENT)}\"\n"
        f"Topics: {topics}\n"
        f"Date: {format_post_date(get_field(post, 'created_at'))}\n"
        f"URL: {get_text(post, 'x_url')}"
    )


def select_posts(posts: Iterable[Any],
                 question: Optional[str],
                 limit: int = DEFAULT_CONTEXT_LIMIT,
                 search: PostSearch = semantic_search) -> List[Any]:
    """
    Most relevant posts for a question, best first.

    When nothing matches the question the posts are used in their original
    order, so the model still sees the user's collection.
    """
    posts = list(posts)
    results = search.search_posts(posts, question)
    selected = [r.post if isinstance(r, ScoredPost) else r for r in results]
    if not selected:
        if posts:
            logger.info(f"No posts matched '{question}', using saved posts in order")
        selected = posts
    return selected[:limit] if limit else selected


def build_posts_context(posts: Iterable[Any],
                        question: Optional[str],
                        limit: int = DEFAULT_CONTEXT_LIMIT,
                        search: PostSearch = semantic_search) -> Tuple[str, List[Dict[str, Any]]]:
    """
    Build the context text and source list for a chat question.

    Returns:
        (context, sources) where sources holds the id and x_url of each
        post in the order it appears in the context
    """
    selected = select_posts(posts, question, limit=limit, search=search)
    if not selected:
        logger.info("No saved posts for chat context")
        return NO_POSTS_MESSAGE, []

    context = '\n\n'.join(format_post(i, post) for i, post in enumerate(selected, 1))
    sources = [
        {'id': get_field(post, 'id'), 'x_url': get_field(post, 'x_url')}
        for post in selected
    ]
    logger.info(f"✓ Built chat context from {len(selected)} posts")
    return context, sources
