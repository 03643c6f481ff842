"""Ranks gazetteer entries against free-text queries.

Local resolution runs before any network search: the gateway only asks the
upstream provider when nothing here matches.
"""

from __future__ import annotations

import logging
from typing import NamedTuple

from airscope.core.gazetteer import Gazetteer, GazetteerEntry, LocationCategory
from airscope.shared.constants import SearchLimits

logger = logging.getLogger(__name__)

SCORE_EXACT = 100
SCORE_PREFIX = 90
SCORE_ALIAS = 80
SCORE_NAME_CONTAINS = 70
SCORE_CITY_CONTAINS = 60
SCORE_STATE_CONTAINS = 50
CITY_BONUS = 10


class ScoredEntry(NamedTuple):
    """A gazetteer entry with its relevance score for one query."""

    entry: GazetteerEntry
    score: int


def score_entry(entry: GazetteerEntry, term: str) -> int:
    """Score one entry against a lower-cased, trimmed search term.

    Rules are checked from the highest score down and the first match wins.
    City entries get a bonus only when some rule matched.
    """
    name = entry.name.lower()
    if name == term:
        score = SCORE_EXACT
    elif name.startswith(term):
        score = SCORE_PREFIX
    elif any(term in alias.lower() for alias in entry.aliases):
        score = SCORE_ALIAS
    elif term in name:
        score = SCORE_NAME_CONTAINS
    elif term in entry.parent_city.lower():
        score = SCORE_CITY_CONTAINS
    elif term in entry.state.lower():
        score = SCORE_STATE_CONTAINS
    else:
        return 0

    if entry.category is LocationCategory.CITY:
        score += CITY_BONUS
    return score


class LocationResolver:
    """Search over a gazetteer.

    Args:
        gazetteer: Table to search; defaults to the built-in gazetteer.
    """

    def __init__(self, gazetteer: Gazetteer | None = None) -> None:
        self.gazetteer = gazetteer or Gazetteer()

    def search(
        self,
        query: str | None,
        limit: int = SearchLimits.DEFAULT_LIMIT,
    ) -> list[ScoredEntry]:
        """Rank entries for a query.

        Args:
            query: Free text; fewer than two characters yields no results
            limit: Maximum number of results

        Returns:
            Entries ordered by descending score. Equal scores keep table
            order.
        """
        if not query or len(query.strip()) < SearchLimits.MIN_QUERY_LENGTH or limit <= 0:
            return []

        term = query.strip().lower()
        scored: list[ScoredEntry] = []
        for entry in self.gazetteer:
            score = score_entry(entry, term)
            if score > 0:
                scored.append(ScoredEntry(entry, score))
        # sorted() is stable, so ties stay in table order
        ranked = sorted(scored, key=lambda item: -item.score)[:limit]
        logger.debug("Local search for %r matched %d entries", query, len(scored))
        return ranked

    def popular_cities(self) -> tuple[GazetteerEntry, ...]:
        """Major-city entries offered for empty or placeholder queries."""
        return self.gazetteer.popular_cities()

    def popular_city_matches(self, query: str) -> list[GazetteerEntry]:
        """Popular cities whose name, parent city or state contains the query."""
        term = query.strip().lower()
        if not term:
            return []
        return [
            entry
            for entry in self.popular_cities()
            if term in entry.name.lower()
            or term in entry.parent_city.lower()
            or term in entry.state.lower()
        ]

    def instant_suggestions(self, query: str | None = None) -> list[GazetteerEntry]:
        """Suggestions that never touch the network.

        A blank query returns the first few popular cities; anything else is
        a regular local search.
        """
        if not query or not query.strip():
            return list(self.popular_cities()[: SearchLimits.INSTANT_POPULAR_LIMIT])
        return [item.entry for item in self.search(query, SearchLimits.INSTANT_LIMIT)]
