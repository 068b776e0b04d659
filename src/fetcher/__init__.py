"""Pokémon fetchers exported for convenience."""

from .base import FetchConfig, PokemonFetcher
from .errors import FetcherError, MalformedResponseError, PokemonFetchError
from .factory import BACKENDS, get_fetcher
from .graphql import GraphQLPokemonFetcher
from .rest import RestPokemonFetcher

__all__ = [
    "BACKENDS",
    "FetchConfig",
    "FetcherError",
    "GraphQLPokemonFetcher",
    "MalformedResponseError",
    "PokemonFetchError",
    "PokemonFetcher",
    "RestPokemonFetcher",
    "get_fetcher",
]
