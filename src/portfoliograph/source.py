"""Load portfolio documents from disk or over HTTP."""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any

import httpx

from portfoliograph.exceptions import LoadFailure, ParseFailure
from portfoliograph.portfolio import Portfolio, parse_portfolio

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 30.0


def is_url(location: str) -> bool:
    return location.startswith(("http://", "https://"))


def _fetch_text(location: str, client: httpx.Client | None, timeout: float) -> str:
    try:
        if client is not None:
            response = client.get(location, follow_redirects=True)
        else:
            with httpx.Client(timeout=timeout) as owned:
                response = owned.get(location, follow_redirects=True)
    except httpx.HTTPError as e:
        raise LoadFailure(location, reason=str(e)) from e

    if not response.is_success:
        raise LoadFailure(location, status=response.status_code)
    return response.text


def _read_text(location: str) -> str:
    try:
        return Path(location).read_text(encoding="utf-8")
    except OSError as e:
        raise LoadFailure(location, reason=e.strerror or str(e)) from e


def read_portfolio_document(
    location: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Any:
    """Retrieve and JSON-decode a portfolio document.

    Args:
        location: Filesystem path or ``http(s)://`` URL
        client: Optional httpx client to reuse (URLs only)
        timeout: Request timeout in seconds when no client is given

    Raises:
        LoadFailure: Non-success HTTP status, transport error, or unreadable file
        ParseFailure: Body is not valid JSON
    """
    logger.debug("Loading portfolio from %s", location)
    try:
        text = _fetch_text(location, client, timeout) if is_url(location) else _read_text(location)
    except LoadFailure as e:
        logger.warning("%s", e.message)
        raise

    try:
        return json.loads(text)
    except json.JSONDecodeError as e:
        raise ParseFailure(f"not valid JSON ({e.msg} at line {e.lineno}, column {e.colno})") from e


def load_portfolio(
    location: str,
    *,
    client: httpx.Client | None = None,
    timeout: float = DEFAULT_TIMEOUT,
) -> Portfolio:
    """Retrieve, decode and parse a portfolio document.

    No retries are attempted; every failure is final.

    Example:
        >>> portfolio = load_portfolio("portfolio.json")  # doctest: +SKIP
        >>> portfolio.title  # doctest: +SKIP
        "Jane Doe's portfolio"
    """
    document = read_portfolio_document(location, client=client, timeout=timeout)
    return parse_portfolio(document)
