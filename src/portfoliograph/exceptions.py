"""Exceptions raised while loading and building portfolio graphs.

All three are terminal for an interactive session: nothing is retried and no
partial graph is drawn.
"""

from __future__ import annotations


class PortfolioError(Exception):
    """Base class for portfolio loading and building errors."""

    message: str


class LoadFailure(PortfolioError):
    """Portfolio document could not be retrieved.

    Raised for non-success HTTP responses, transport errors, and unreadable
    files.

    Attributes:
        location: Path or URL that was requested
        status: HTTP status code, if a response was received
        reason: Underlying error description, if any
        message: Human-readable error message
    """

    def __init__(
        self,
        location: str,
        *,
        status: int | None = None,
        reason: str | None = None,
        message: str | None = None,
    ) -> None:
        self.location = location
        self.status = status
        self.reason = reason
        self.message = message or self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.status is not None:
            return f"Got HTTP {self.status} when trying to retrieve {self.location}"
        msg = f"Could not retrieve {self.location}"
        if self.reason:
            msg += f": {self.reason}"
        return msg


class ParseFailure(PortfolioError):
    """Portfolio document is not valid JSON or does not match the schema.

    Attributes:
        reason: What is wrong with the document
        path: Location of the offending element, e.g. ``edges[3].reg_contacts``
        message: Human-readable error message
    """

    def __init__(self, reason: str, *, path: str | None = None) -> None:
        self.reason = reason
        self.path = path
        self.message = self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        if self.path:
            return f"Invalid portfolio document at {self.path}: {self.reason}"
        return f"Invalid portfolio document: {self.reason}"


class MalformedPortfolio(PortfolioError):
    """An edge references a node id that is not in the portfolio.

    Attributes:
        edge_index: Position of the offending edge in ``portfolio.edges``
        missing_ids: Endpoint ids with no matching node
        message: Human-readable error message
    """

    def __init__(self, edge_index: int, missing_ids: list[int]) -> None:
        self.edge_index = edge_index
        self.missing_ids = missing_ids
        self.message = self._default_message()
        super().__init__(self.message)

    def _default_message(self) -> str:
        ids_str = ", ".join(str(i) for i in self.missing_ids)
        noun = "id" if len(self.missing_ids) == 1 else "ids"
        return f"Edge {self.edge_index} references unknown node {noun}: {ids_str}"
