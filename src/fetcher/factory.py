"""Backend registry: look up a PokemonFetcher class by name."""

from __future__ import annotations

from typing import Optional

import requests

from src.fetcher.base import FetchConfig, PokemonFetcher
from src.fetcher.graphql import GraphQLPokemonFetcher
from src.fetcher.rest import RestPokemonFetcher

BACKENDS: dict[str, type[PokemonFetcher]] = {
    "rest": RestPokemonFetcher,
    "graphql": GraphQLPokemonFetcher,
}


def get_fetcher(
    backend: str = "rest",
    config: Optional[FetchConfig] = None,
    session: Optional[requests.Session] = None,
) -> PokemonFetcher:
    """Instantiate the fetcher registered under *backend*."""
    try:
        fetcher_cls = BACKENDS[backend]
    except KeyError as exc:
        choices = ", ".join(sorted(BACKENDS))
        raise ValueError(f"Unknown backend '{backend}' (choose from: {choices})") from exc
    return fetcher_cls(config=config, session=session)
