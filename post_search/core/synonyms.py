"""
Synonym expansion for search keywords.

Expansion is symmetric and one hop deep: a keyword pulls in its own
synonyms, and every concept that lists the keyword as a synonym
contributes its key and all of its sibling terms. Synonyms of synonyms
are not followed.
"""

import logging
from typing import Dict, Iterable, List, Mapping, Sequence

from post_search.config.constants import SYNONYM_MAP

logger = logging.getLogger(__name__)


class SynonymExpander:
    """Expands keywords using a read-only concept -> synonyms table"""

    def __init__(self, synonym_map: Mapping[str, Sequence[str]] = SYNONYM_MAP):
        self._synonyms: Dict[str, tuple] = {
            key: tuple(values) for key, values in synonym_map.items()
        }
        self._reverse = self._build_reverse_index(self._synonyms)
        logger.debug(f"SynonymExpander ready with {len(self._synonyms)} concepts, "
                     f"{len(self._reverse)} reverse entries")

    @staticmethod
    def _build_reverse_index(synonyms: Dict[str, tuple]) -> Dict[str, tuple]:
        """Map each synonym to the keys that list it plus those keys' synonyms"""
        reverse: Dict[str, dict] = {}
        for key, values in synonyms.items():
            for value in values:
                # dict keeps first-seen order without repeats
                related = reverse.setdefault(value, {})
                related.setdefault(key)
                for sibling in values:
                    related.setdefault(sibling)
        return {term: tuple(related) for term, related in reverse.items()}

    def synonyms_for(self, keyword: str) -> tuple:
        """Direct synonyms when the keyword is itself a concept key"""
        return self._synonyms.get(keyword, ())

    def related_to(self, keyword: str) -> tuple:
        """Concept keys listing the keyword, followed by their sibling terms"""
        return self._reverse.get(keyword, ())

    def expand(self, keywords: Iterable[str]) -> List[str]:
        """
        Expand keywords with their synonyms.

        Returns a duplicate-free list: the keywords first, then the terms
        they pulled in, in lookup order.
        """
        keywords = list(keywords)
        expanded = dict.fromkeys(keywords)

        for keyword in keywords:
            for synonym in self.synonyms_for(keyword):
                expanded.setdefault(synonym)
            for term in self.related_to(keyword):
                expanded.setdefault(term)

        return list(expanded)


# Default expander over the built-in table
default_expander = SynonymExpander()
