"""
PokeAPI REST backend.

Fetches ``GET /pokemon/{name}`` from https://pokeapi.co/api/v2 and reads
the name, national dex id and HP base stat out of the JSON body.
"""

from __future__ import annotations

from typing import Any, Optional

from requests.utils import quote

from configs.constants import Constants
from src.fetcher.base import PokemonFetcher, normalize_name
from src.fetcher.errors import MalformedResponseError
from src.fetcher.summary import format_summary, load_payload


def _hp_base_stat(stats: Any) -> Optional[int]:
    """Pick the HP ``base_stat`` out of PokeAPI's ``stats`` list."""
    if not isinstance(stats, list):
        return None
    for entry in stats:
        if not isinstance(entry, dict):
            continue
        stat = entry.get("stat")
        if isinstance(stat, dict) and stat.get("name") == Constants.HP_STAT_NAME:
            return entry.get("base_stat")
    return None


class RestPokemonFetcher(PokemonFetcher):
    """
    PokemonFetcher backed by the PokeAPI v2 REST API.

    Parameters
    ----------
    config : FetchConfig
        Shared fetcher configuration.  ``config.endpoint`` overrides the
        API root (useful for a self-hosted PokeAPI mirror).
    """

    default_endpoint = Constants.POKEAPI_BASE_URL

    def fetch_raw(self, name: str) -> str:
        url = f"{self.endpoint}/pokemon/{quote(normalize_name(name), safe='')}"
        return self._request("GET", url).text

    def summarize_from_raw(self, raw_response: str) -> str:
        data = load_payload(raw_response)

        hp = _hp_base_stat(data.get("stats"))
        if hp is None:
            raise MalformedResponseError("REST response has no HP entry in 'stats'")

        return format_summary(data.get("name"), data.get("id"), hp)
