import logging
import re
from typing import Any, Dict, Iterable, Optional

from post_search.config.search_config import ScoringWeights, get_search_config
from .post_fields import (
    AUTHOR_NAME, AUTHOR_USERNAME, CONTENT, get_text, get_topic_names,
)

logger = logging.getLogger(__name__)

TOPICS = 'topics'


class RelevanceScorer:
    """Scores text fields of a post against a set of search patterns"""

    def __init__(self, weights: Optional[ScoringWeights] = None):
        self.weights = weights or get_search_config().scoring_weights()

    def score_text(self, text: str, patterns: Iterable[str]) -> float:
        """
        Score relevance of text against search patterns.

        Each pattern earns a phrase bonus when it occurs verbatim, larger for
        specific (long) patterns. Each word of the pattern then earns a
        whole-word bonus, or a smaller partial bonus when it only occurs
        inside a longer word.
        """
        if not text:
            return 0.0

        weights = self.weights
        lower_text = text.lower()
        score = 0.0

        for pattern in patterns:
            if not pattern:
                continue

            # Exact phrase match (highest score)
            if pattern in lower_text:
                if len(pattern) > weights.specific_pattern_length:
                    score += weights.specific_phrase_bonus
                else:
                    score += weights.phrase_bonus

            # Word boundary matches
            for word in pattern.split():
                if len(word) <= weights.min_word_length:
                    continue
                if re.search(r'\b' + re.escape(word) + r'\b', lower_text):
                    score += weights.whole_word_bonus
                elif word in lower_text:
                    score += weights.partial_word_bonus

        return score

    def explain(self, post: Any, patterns: Iterable[str]) -> Dict[str, float]:
        """Weighted score per field; the values add up to score_post()"""
        patterns = list(patterns)
        weights = self.weights

        topics_score = sum(
            self.score_text(name, patterns) * weights.topics_weight
            for name in get_topic_names(post)
        )

        return {
            CONTENT: self.score_text(get_text(post, CONTENT), patterns) * weights.content_weight,
            AUTHOR_NAME: self.score_text(get_text(post, AUTHOR_NAME), patterns) * weights.author_name_weight,
            AUTHOR_USERNAME: self.score_text(get_text(post, AUTHOR_USERNAME), patterns) * weights.author_username_weight,
            TOPICS: topics_score,
        }

    def score_post(self, post: Any, patterns: Iterable[str]) -> float:
        """Total relevance of a post across all of its fields"""
        return sum(self.explain(post, patterns).values())
