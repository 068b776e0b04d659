"""
PokeAPI GraphQL backend.

POSTs a single query to https://beta.pokeapi.co/graphql/v1beta selecting
only the fields the summary needs (id, name, HP base stat).

GraphQL answers HTTP 200 even when nothing matched, so ``fetch_raw`` also
inspects the body: a top-level ``errors`` array or an empty result list is
reported as a PokemonFetchError, the same as a REST 404.
"""

from __future__ import annotations

from typing import Any

from configs.constants import Constants
from src.fetcher.base import PokemonFetcher, normalize_name
from src.fetcher.errors import MalformedResponseError, PokemonFetchError
from src.fetcher.summary import format_summary, load_payload

RESULT_KEY = "pokemon_v2_pokemon"
STATS_KEY = "pokemon_v2_pokemonstats"


def _first_pokemon(payload: dict[str, Any]) -> Any:
    data = payload.get("data")
    if not isinstance(data, dict):
        raise MalformedResponseError("GraphQL response has no 'data' object")
    rows = data.get(RESULT_KEY)
    if not isinstance(rows, list) or not rows:
        raise MalformedResponseError(f"GraphQL response has no '{RESULT_KEY}' rows")
    return rows[0]


class GraphQLPokemonFetcher(PokemonFetcher):
    """PokemonFetcher backed by the PokeAPI GraphQL endpoint."""

    default_endpoint = Constants.POKEAPI_GRAPHQL_URL

    def fetch_raw(self, name: str) -> str:
        slug = normalize_name(name)
        body = {
            "query": Constants.GRAPHQL_POKEMON_QUERY,
            "variables": {"name": slug},
        }
        resp = self._request("POST", self.endpoint, json=body)
        raw = resp.text

        try:
            payload = load_payload(raw)
        except MalformedResponseError:
            # Let summarize_from_raw report the parse failure
            return raw

        errors = payload.get("errors")
        if isinstance(errors, list) and errors:
            messages = "; ".join(
                str(err.get("message", err)) if isinstance(err, dict) else str(err)
                for err in errors
            )
            self.logger.error(f"GraphQL errors for '{slug}': {messages}")
            raise PokemonFetchError(f"GraphQL query for '{slug}' failed: {messages}")
        if errors:
            self.logger.error(f"GraphQL errors for '{slug}': {errors!r}")
            raise PokemonFetchError(f"GraphQL query for '{slug}' failed: {errors!r}")

        data = payload.get("data")
        if isinstance(data, dict) and data.get(RESULT_KEY) == []:
            self.logger.debug(f"No Pokémon named '{slug}'")
            raise PokemonFetchError(f"No Pokémon named '{slug}' at {self.endpoint}")

        return raw

    def summarize_from_raw(self, raw_response: str) -> str:
        pokemon = _first_pokemon(load_payload(raw_response))
        if not isinstance(pokemon, dict):
            raise MalformedResponseError("GraphQL Pokémon row is not an object")

        stats = pokemon.get(STATS_KEY)
        if not isinstance(stats, list) or not stats or not isinstance(stats[0], dict):
            raise MalformedResponseError(f"GraphQL response has no HP entry in '{STATS_KEY}'")

        return format_summary(pokemon.get("name"), pokemon.get("id"), stats[0].get("base_stat"))
