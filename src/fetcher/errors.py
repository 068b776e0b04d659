"""Exceptions raised by the Pokémon fetchers."""

from __future__ import annotations

from typing import Optional


class FetcherError(Exception):
    """Base class for every fetcher failure."""


class PokemonFetchError(FetcherError, IOError):
    """The backend request could not be completed.

    Covers network failures, timeouts, non-success HTTP statuses and a
    backend answering that the Pokémon does not exist.
    """

    def __init__(self, message: str, status_code: Optional[int] = None) -> None:
        super().__init__(message)
        self.status_code = status_code


class MalformedResponseError(FetcherError, ValueError):
    """The raw response could not be parsed into a summary."""
