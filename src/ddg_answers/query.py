"""
Instant Answer Query

Immutable builder for DuckDuckGo Instant Answer requests, plus the single
request/decode round trip.

Example:
    query = Query("Rust", "my_app").no_html()
    answer = query.execute()
    print(answer.heading, answer.type)
"""

import logging
from dataclasses import dataclass, replace
from typing import Optional
from urllib.parse import quote

import httpx

from ddg_answers.decoder import decode_answer
from ddg_answers.errors import JsonSyntaxError, TransportError, UrlConstructionError
from ddg_answers.models.answer import AnswerResponse
from ddg_answers.utils.config import DEFAULT_TIMEOUT, get_ddg_settings
from ddg_answers.utils.observability import timed

logger = logging.getLogger(__name__)

DEFAULT_ENDPOINT = "https://api.duckduckgo.com/"


def _encode(value: str) -> str:
    # Query-component escaping: everything outside the unreserved set,
    # non-ASCII as UTF-8 bytes.
    return quote(value, safe="")


@dataclass(frozen=True)
class Query:
    """
    A search for one Instant Answer.

    ``query`` and ``app_name`` are sent as given; the service decides what is
    valid. Flag methods return a new Query and can only turn a flag on.
    """
    query: str
    app_name: str
    no_html_flag: bool = False
    skip_disambig_flag: bool = False
    endpoint: str = DEFAULT_ENDPOINT

    @classmethod
    def from_config(cls, query: str, config: Optional[dict] = None) -> "Query":
        """Build a query using the ``ddg:`` section of the YAML config."""
        settings = get_ddg_settings(config)
        built = cls(
            query=query,
            app_name=settings["app_name"],
            endpoint=settings["endpoint"] or DEFAULT_ENDPOINT,
        )
        if settings["no_html"]:
            built = built.no_html()
        if settings["skip_disambig"]:
            built = built.skip_disambiguation()
        return built

    def no_html(self) -> "Query":
        """Ask the service to strip HTML (italics, bold, etc.) from text fields."""
        return replace(self, no_html_flag=True)

    def skip_disambiguation(self) -> "Query":
        """Ask the service to skip Disambiguation answers."""
        return replace(self, skip_disambig_flag=True)

    def to_url(self) -> str:
        """Serialize to the request URL.

        Raises:
            UrlConstructionError: the endpoint already carries a query or
                fragment, the text cannot be encoded, or the result is not an
                absolute http(s) URL.
        """
        if "?" in self.endpoint or "#" in self.endpoint:
            raise UrlConstructionError(
                f"Endpoint must not contain a query or fragment: {self.endpoint!r}"
            )
        try:
            q, t = _encode(self.query), _encode(self.app_name)
        except UnicodeEncodeError as e:
            raise UrlConstructionError(f"Cannot encode query parameters: {e}") from e

        url = f"{self.endpoint}?q={q}&t={t}&format=json&no_redirect=1"
        if self.no_html_flag:
            url += "&no_html=1"
        if self.skip_disambig_flag:
            url += "&skip_disambig=1"

        try:
            parsed = httpx.URL(url)
        except httpx.InvalidURL as e:
            raise UrlConstructionError(f"Invalid request URL {url!r}: {e}") from e
        if parsed.scheme not in ("http", "https") or not parsed.host:
            raise UrlConstructionError(f"Request URL is not absolute http(s): {url!r}")
        return url

    @timed
    def execute(
        self,
        client: Optional[httpx.Client] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> AnswerResponse:
        """
        Send the request and decode the answer.

        One attempt is made. A client passed in is left open; one created
        here is closed.

        Raises:
            UrlConstructionError, TransportError, JsonSyntaxError,
            SchemaDecodeError
        """
        url = self.to_url()
        logger.debug(f"GET {url}")

        owns_client = client is None
        if owns_client:
            client = httpx.Client(timeout=timeout)
        try:
            response = client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e
        finally:
            if owns_client:
                client.close()

        return decode_answer(self._read_json(response))

    @timed
    async def aexecute(
        self,
        client: Optional[httpx.AsyncClient] = None,
        timeout: float = DEFAULT_TIMEOUT,
    ) -> AnswerResponse:
        """Async variant of :meth:`execute`."""
        url = self.to_url()
        logger.debug(f"GET {url}")

        owns_client = client is None
        if owns_client:
            client = httpx.AsyncClient(timeout=timeout)
        try:
            response = await client.get(url)
            response.raise_for_status()
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {self.endpoint} failed: {e}") from e
        finally:
            if owns_client:
                await client.aclose()

        return decode_answer(self._read_json(response))

    @staticmethod
    def _read_json(response: httpx.Response):
        try:
            return response.json()
        except ValueError as e:
            raise JsonSyntaxError(f"Invalid JSON in response body: {e}") from e
