import copy
from collections import namedtuple
from types import SimpleNamespace

import pytest

from post_search.core.search import PostSearch, ScoredPost, semantic_search


def ids(results):
    return [r.post['id'] if isinstance(r, ScoredPost) else r['id'] for r in results]


@pytest.mark.parametrize('query', ['', '   ', None])
def test_blank_query_returns_posts_unchanged(search, sample_posts, query):
    results = search.search_posts(sample_posts, query)
    assert results == sample_posts
    assert all(a is b for a, b in zip(results, sample_posts))


def test_results_are_positive_and_sorted(search, sample_posts):
    for query in ['tech', 'game', 'coding tips', 'movie', 'recipe', 'zzz']:
        results = search.search_posts(sample_posts, query)
        scores = [r.score for r in results]
        assert all(score > 0 for score in scores)
        assert scores == sorted(scores, reverse=True)


def test_search_is_repeatable(search, sample_posts):
    first = search.search_posts(sample_posts, 'machine learning')
    second = search.search_posts(sample_posts, 'machine learning')
    assert first == second


def test_search_does_not_mutate_posts(search, sample_posts):
    snapshot = copy.deepcopy(sample_posts)
    search.search(sample_posts, 'tech')
    search.search_posts(sample_posts, 'game')
    assert sample_posts == snapshot


def test_tech_query_matches_technology_label(search, sample_posts):
    """A post tagged 'Technology' is found for 'tech' even when its text never says so"""
    ai_post = sample_posts[0]
    results = search.search_posts([ai_post], 'tech')
    assert len(results) == 1

    untagged = dict(ai_post, post_topics=[])
    assert search.search_posts([untagged], 'tech') == []


def test_lebron_basketball(search, sample_posts):
    results = search.search_posts(sample_posts, 'LeBron basketball')
    assert ids(results)[0] == 'p2'
    assert results[0].score > 0


def test_synonym_symmetry(search):
    movie_post = {'id': 'm', 'content': 'Best movie of the year'}
    film_post = {'id': 'f', 'content': 'Best film of the year'}

    assert ids(search.search_posts([movie_post], 'film')) == ['m']
    assert ids(search.search_posts([film_post], 'movie')) == ['f']


def test_label_beats_identity_field(search):
    by_label = {'id': 'label', 'content': 'great night', 'post_topics': [{'topics': {'name': 'lebron'}}]}
    by_username = {'id': 'user', 'content': 'great night', 'author_username': 'lebron'}

    results = search.search_posts([by_username, by_label], 'lebron')
    assert ids(results) == ['label', 'user']
    assert results[0].score == 4 * results[1].score


def test_stop_word_phrase_still_matches_full_query(search):
    """'to be' is all stop words, but the full query is still tested as a phrase"""
    post = {'id': 'p', 'content': 'To be or not to be'}
    assert search.create_search_patterns('to be') == ['to be']
    assert ids(search.search_posts([post], 'to be')) == ['p']


def test_create_search_patterns(search):
    patterns = search.create_search_patterns('The Movie')
    assert patterns[0] == 'movie'
    assert 'film' in patterns
    assert patterns[-1] == 'the movie'
    assert len(patterns) == len(set(patterns))


def test_full_query_not_duplicated(search):
    assert search.create_search_patterns('zebra').count('zebra') == 1


def test_blank_query_has_no_patterns(search):
    assert search.create_search_patterns('   ') == []
    assert search.create_search_patterns(None) == []


def test_ties_keep_input_order(search):
    posts = [
        {'id': 'a', 'content': 'coding tips'},
        {'id': 'b', 'content': 'coding tips'},
        {'id': 'c', 'content': 'coding tips'},
    ]
    results = search.search_posts(posts, 'coding')
    assert ids(results) == ['a', 'b', 'c']
    assert [r.position for r in results] == [0, 1, 2]


def test_scored_post_to_dict_copies_post(search, sample_posts):
    result = search.search_posts(sample_posts, 'recipe')[0]
    data = result.to_dict()
    assert data['id'] == 'p3'
    assert data['relevance_score'] == result.score
    assert 'relevance_score' not in sample_posts[2]


def test_attribute_style_posts(search):
    post = SimpleNamespace(id='obj', content='Weekend hiking trip', author_name='', author_username='')
    results = search.search(posts=[post], query='travel')
    assert results == [{
        'id': 'obj',
        'content': 'Weekend hiking trip',
        'author_name': '',
        'author_username': '',
        'relevance_score': results[0]['relevance_score'],
    }]
    assert results[0]['relevance_score'] > 0


def test_namedtuple_posts():
    Post = namedtuple('Post', ['id', 'content'])
    results = PostSearch().search([Post('a', 'coding tips')], 'coding')
    assert len(results) == 1
    assert results[0]['id'] == 'a'
    assert results[0]['content'] == 'coding tips'
    assert results[0]['relevance_score'] > 0


def test_slotted_posts():
    class SlottedPost:
        __slots__ = ('id', 'content')

        def __init__(self, id, content):
            self.id = id
            self.content = content

    results = PostSearch().search([SlottedPost('s', 'coding tips')], 'coding')
    assert results[0]['id'] == 's'
    assert results[0]['content'] == 'coding tips'
    assert results[0]['relevance_score'] > 0


def test_search_returns_dicts_with_scores(search, sample_posts):
    results = search.search(sample_posts, 'coding')
    assert ids(results)[0] == 'p4'
    assert all('relevance_score' in r for r in results)


def test_search_blank_query_passes_through(search, sample_posts):
    assert search.search(sample_posts, '') == sample_posts


def test_search_with_categories(search, sample_posts):
    results = search.search(sample_posts, '', categories=['technology'])
    assert ids(results) == ['p1', 'p4']

    results = search.search(sample_posts, 'coding', categories=['Technology', 'Sports'])
    assert ids(results) == ['p4', 'p1']


def test_search_with_limit(search, sample_posts):
    assert len(search.search(sample_posts, '', limit=2)) == 2
    assert len(search.search(sample_posts, '', limit=0)) == len(sample_posts)


def test_search_by_user(search, sample_posts):
    assert ids(search.search_by_user(sample_posts, '@HoopsFan')) == ['p2']
    assert search.search_by_user(sample_posts, 'nobody') == []
    assert search.search_by_user(sample_posts, '') == []


def test_default_engine():
    assert isinstance(semantic_search, PostSearch)
    assert semantic_search.search_posts([], 'anything') == []
