"""
Abstract base fetcher for rotom-fetch.

Every backend (REST, GraphQL …) inherits from PokemonFetcher and gets the
following for free:

  - A requests.Session with a descriptive User-Agent
  - A _request() helper that applies the timeout and turns any requests
    failure into a PokemonFetchError
  - summarize_pokemon() and fetch_and_print(), built on top of the two
    abstract operations fetch_raw() and summarize_from_raw()

Backends only decide *where* the raw payload comes from and *how* it is read.
Nothing is retried or cached: one call, one request.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Optional

import requests

from configs.constants import Constants
from src.fetcher.errors import PokemonFetchError

# ---------------------------------------------------------------------------
# Configuration dataclass
# ---------------------------------------------------------------------------


@dataclass
class FetchConfig:
    """
    Configuration shared by every PokemonFetcher subclass.

    Parameters
    ----------
    endpoint : str | None
        Backend URL.  ``None`` selects the backend's default endpoint.
    timeout : float
        Per-request timeout in seconds.
    user_agent : str
        Value of the ``User-Agent`` header sent with every request.
    """

    endpoint: Optional[str] = None
    timeout: float = Constants.REQUEST_TIMEOUT
    user_agent: str = Constants.USER_AGENT

    def __post_init__(self) -> None:
        # Accept plain strings so callers can write FetchConfig(timeout="10")
        self.timeout = float(self.timeout)
        if self.endpoint:
            self.endpoint = self.endpoint.rstrip("/")


def normalize_name(name: str) -> str:
    """PokeAPI slugs are lower-case: ``" Pikachu "`` → ``"pikachu"``."""
    slug = name.strip().lower()
    if not slug:
        # an empty slug would hit the paginated list endpoint
        raise PokemonFetchError("Pokémon name must not be empty")
    return slug


# ---------------------------------------------------------------------------
# Abstract base fetcher
# ---------------------------------------------------------------------------


class PokemonFetcher(ABC):
    """
    Abstract contract for fetching and summarizing a single Pokémon.

    Subclass and implement :py:meth:`fetch_raw` and
    :py:meth:`summarize_from_raw`.

    Example
    -------
    ::

        class MyFetcher(PokemonFetcher):
            default_endpoint = "https://example.com/api"

            def fetch_raw(self, name: str) -> str:
                return self._request("GET", f"{self.endpoint}/{name}").text

            def summarize_from_raw(self, raw_response: str) -> str:
                data = load_payload(raw_response)
                return format_summary(data["name"], data["id"], data["hp"])
    """

    default_endpoint: str = ""

    def __init__(
        self,
        config: Optional[FetchConfig] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.config = config or FetchConfig()
        self._owns_session = session is None
        self._session = session if session is not None else self._build_session()
        self.logger = logging.getLogger(self.__class__.__name__)

    # ------------------------------------------------------------------
    # Session setup
    # ------------------------------------------------------------------

    def _build_session(self) -> requests.Session:
        """Build a requests.Session with a descriptive User-Agent."""
        session = requests.Session()
        session.headers["User-Agent"] = self.config.user_agent
        return session

    @property
    def endpoint(self) -> str:
        return self.config.endpoint or self.default_endpoint

    def close(self) -> None:
        """Close the HTTP session if this fetcher created it."""
        if self._owns_session:
            self._session.close()

    def __enter__(self) -> "PokemonFetcher":
        return self

    def __exit__(self, *exc_info: Any) -> None:
        self.close()

    # ------------------------------------------------------------------
    # HTTP helpers
    # ------------------------------------------------------------------

    def _request(self, method: str, url: str, **kwargs: Any) -> requests.Response:
        """
        Send one HTTP request and return the successful response.

        Raises
        ------
        PokemonFetchError
            On connection errors, timeouts and any 4xx/5xx status.  The
            original ``requests`` exception is chained as ``__cause__``.
        """
        self.logger.debug(f"{method} {url}")
        try:
            resp = self._session.request(method, url, timeout=self.config.timeout, **kwargs)
            resp.raise_for_status()
        except requests.HTTPError as exc:
            code = exc.response.status_code if exc.response is not None else None
            if code == 404:
                self.logger.debug(f"404: {url}")
            else:
                self.logger.error(f"HTTP {code} fetching {url}: {exc}")
            raise PokemonFetchError(f"HTTP {code} from {url}", status_code=code) from exc
        except requests.RequestException as exc:
            self.logger.error(f"Request failed for {url}: {exc}")
            raise PokemonFetchError(f"Request to {url} failed: {exc}") from exc
        return resp

    # ------------------------------------------------------------------
    # Abstract contract
    # ------------------------------------------------------------------

    @abstractmethod
    def fetch_raw(self, name: str) -> str:
        """
        Fetch the raw backend response for the Pokémon called *name*.

        Raises
        ------
        PokemonFetchError
            If the request cannot be completed.
        """
        ...

    @abstractmethod
    def summarize_from_raw(self, raw_response: str) -> str:
        """
        Parse *raw_response* into ``"<Name> (#<id>) has <hp> HP."``.

        Raises
        ------
        MalformedResponseError
            If the payload is not the shape this backend returns.
        """
        ...

    # ------------------------------------------------------------------
    # Derived operations
    # ------------------------------------------------------------------

    def summarize_pokemon(self, name: str) -> str:
        """Fetch and summarize *name* in one call."""
        return self.summarize_from_raw(self.fetch_raw(name))

    def fetch_and_print(self, name: str) -> None:
        """Print the result of :py:meth:`summarize_pokemon` to stdout."""
        print(self.summarize_pokemon(name))
