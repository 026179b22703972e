"""
Read-only access to the scorable fields of a candidate post.

Posts arrive either as mappings (JSON rows from the data store) or as
objects with attributes. Missing fields read as empty.
"""

from typing import Any, List, Mapping

CONTENT = 'content'
AUTHOR_NAME = 'author_name'
AUTHOR_USERNAME = 'author_username'
POST_TOPICS = 'post_topics'

# Flat label lists checked when there is no post_topics join
LABEL_FIELDS = ('topics', 'categories')


def get_field(post: Any, name: str, default: Any = None) -> Any:
    """Look up a field on a mapping or an attribute-style record"""
    if post is None:
        return default
    if isinstance(post, Mapping):
        return post.get(name, default)
    return getattr(post, name, default)


def get_text(post: Any, name: str) -> str:
    """Text value of a field, or '' when it is missing or null"""
    value = get_field(post, name)
    if value is None:
        return ''
    return value if isinstance(value, str) else str(value)


def _label_name(item: Any) -> str:
    if isinstance(item, str):
        return item
    name = get_field(item, 'name')
    return name if isinstance(name, str) else ''


def get_topic_names(post: Any) -> List[str]:
    """
    Topic labels attached to a post.

    Prefers the joined ``post_topics[*].topics.name`` shape; falls back to a
    flat ``topics`` or ``categories`` list of strings or ``{'name': ...}``.
    """
    post_topics = get_field(post, POST_TOPICS)
    if post_topics:
        names = []
        for entry in post_topics:
            name = _label_name(get_field(entry, 'topics'))
            if name:
                names.append(name)
        return names

    for field in LABEL_FIELDS:
        labels = get_field(post, field)
        if labels:
            if isinstance(labels, str):
                labels = [labels]
            return [name for name in (_label_name(label) for label in labels) if name]

    return []
