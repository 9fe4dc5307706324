"""Search selection state.

The selection is replaced wholesale on every search submission; it is never
edited in place. Two states are distinguishable from the outside:

- Idle: empty selection, default view
- Highlighted: one or more matched nodes
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING

from portfoliograph.navigation.search import is_reset_query, match

if TYPE_CHECKING:
    from portfoliograph.graph.core import VisualNode


@dataclass(frozen=True)
class SelectionState:
    """Ids of the nodes matched by the most recent search."""

    node_ids: frozenset[int] = field(default_factory=frozenset)

    @property
    def is_empty(self) -> bool:
        return not self.node_ids

    def __contains__(self, node_id: object) -> bool:
        return node_id in self.node_ids

    def __len__(self) -> int:
        return len(self.node_ids)


EMPTY_SELECTION = SelectionState()


class SearchStatus(Enum):
    """How a search submission resolved."""

    RESET = "reset"
    NO_MATCHES = "no_matches"
    SINGLE_MATCH = "single_match"
    MULTIPLE_MATCHES = "multiple_matches"


@dataclass(frozen=True)
class SearchOutcome:
    """Result of one search submission.

    Attributes:
        query: The query as submitted
        selection: The new selection (replaces the previous one)
        status: Which of the four search outcomes occurred
        message: User-visible status text
    """

    query: str
    selection: SelectionState
    status: SearchStatus
    message: str


MESSAGES: dict[SearchStatus, str] = {
    SearchStatus.RESET: "Showing the whole portfolio.",
    SearchStatus.NO_MATCHES: 'No nodes match "{query}".',
    SearchStatus.SINGLE_MATCH: '1 node matches "{query}".',
    SearchStatus.MULTIPLE_MATCHES: '{count} nodes match "{query}".',
}


def _message(query: str, status: SearchStatus, count: int) -> str:
    return MESSAGES[status].format(query=query.strip(), count=count)


def submit_query(query: str, nodes: Iterable[VisualNode]) -> SearchOutcome:
    """Resolve a search submission into a new selection and status.

    Deterministic: submitting the same query against the same nodes always
    yields an equal outcome.
    """
    if is_reset_query(query):
        return SearchOutcome(query, EMPTY_SELECTION, SearchStatus.RESET, _message(query, SearchStatus.RESET, 0))

    matched = match(query, nodes)
    if not matched:
        status = SearchStatus.NO_MATCHES
    elif len(matched) == 1:
        status = SearchStatus.SINGLE_MATCH
    else:
        status = SearchStatus.MULTIPLE_MATCHES
    return SearchOutcome(query, SelectionState(matched), status, _message(query, status, len(matched)))
