import pytest

from post_search.config.search_config import reset_search_config
from post_search.core.search import PostSearch


@pytest.fixture(autouse=True)
def fresh_search_config():
    """Each test starts from the default scoring weights"""
    reset_search_config()
    yield
    reset_search_config()


@pytest.fixture
def search():
    """A search engine using the built-in tables and default weights"""
    return PostSearch()


@pytest.fixture
def sample_posts():
    """Saved posts in the shape returned by the data store"""
    return [
        {
            'id': 'p1',
            'content': 'New AI breakthroughs in machine learning',
            'author_name': 'Research Daily',
            'author_username': 'researchdaily',
            'created_at': '2024-03-05T10:00:00Z',
            'x_url': 'https://x.com/researchdaily/status/1',
            'post_topics': [{'topics': {'id': 't1', 'name': 'Technology', 'color': '#00f'}}],
        },
        {
            'id': 'p2',
            'content': 'LeBron James had an amazing game last night',
            'author_name': 'Hoops Fan',
            'author_username': 'hoopsfan',
            'created_at': '2024-03-06T21:30:00Z',
            'x_url': 'https://x.com/hoopsfan/status/2',
            'post_topics': [{'topics': {'id': 't2', 'name': 'Sports', 'color': '#f00'}}],
        },
        {
            'id': 'p3',
            'content': 'My favourite pasta recipe for busy weeknights',
            'author_name': 'Home Cook',
            'author_username': 'homecook',
            'created_at': '2024-03-07T08:15:00Z',
            'x_url': 'https://x.com/homecook/status/3',
            'post_topics': [],
        },
        {
            'id': 'p4',
            'content': 'Ten coding tips every developer should know',
            'author_name': 'Dev Notes',
            'author_username': 'devnotes',
            'created_at': '2024-03-08T12:00:00Z',
            'x_url': 'https://x.com/devnotes/status/4',
            'post_topics': [{'topics': {'id': 't1', 'name': 'Technology', 'color': '#00f'}}],
        },
        {
            'id': 'p5',
            'content': 'Watching a classic film tonight',
            'author_name': 'Cinema Buff',
            'author_username': 'cinemabuff',
            'created_at': None,
            'x_url': 'https://x.com/cinemabuff/status/5',
        },
    ]
