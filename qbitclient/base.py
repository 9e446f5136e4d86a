# qbitclient/base.py
import json
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Mapping, Sequence

import httpx

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:8080"
API_PATH = "/api/v2/"

# Reserved value meaning "every torrent" wherever a hash list is accepted
ALL = "all"


class APINames(str, Enum):
    auth = "auth"
    app = "app"
    log = "log"
    sync = "sync"
    transfer = "transfer"
    torrents = "torrents"
    rss = "rss"
    search = "search"


class APIError(Exception):
    """Raised when qBittorrent answers with a non-2xx status.

    `code` is the HTTP status, `message` the raw response text (possibly empty).
    Network failures are not wrapped; they surface as the underlying
    httpx.TransportError subclasses.
    """

    def __init__(self, code: int, message: str):
        super().__init__(message)
        self.code = code
        self.message = message

    def __repr__(self) -> str:
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r})"


class AuthenticationError(APIError):
    """Login was answered but no session was established (bad credentials, banned IP...)."""


@dataclass(frozen=True)
class Parsed:
    value: Any


@dataclass(frozen=True)
class Raw:
    text: str


@dataclass(frozen=True)
class Envelope:
    """One completed response: status, headers, raw text and its best-effort parse."""

    status_code: int
    headers: httpx.Headers
    text: str
    body: Parsed | Raw

    @property
    def value(self) -> Any:
        if isinstance(self.body, Parsed):
            return self.body.value
        return self.body.text


def parse_body(text: str) -> Parsed | Raw:
    """JSON if it parses, raw text otherwise (version strings, "Ok.", empty bodies)."""
    try:
        return Parsed(json.loads(text))
    except ValueError:
        return Raw(text)


def form_value(value: Any) -> str:
    """Renders a scalar the way the WebUI expects it in a form or query string."""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def flatten_query(query: Mapping[str, Any] | None) -> list[tuple[str, str]]:
    """
    Flattens a query mapping into ordered key/value pairs.

    None values are dropped and list values repeat their key once per element
    (key=a&key=b), never comma-joined.
    """
    params = []
    for key, value in (query or {}).items():
        if value is None:
            continue
        if isinstance(value, (list, tuple)):
            params.extend((key, form_value(item)) for item in value)
        else:
            params.append((key, form_value(value)))
    return params


def join(values: Sequence[Any], separator: str = "|") -> str:
    return separator.join(form_value(v) for v in values)


def hashes_or_all(hashes: str | Sequence[str]) -> str:
    """Passes the "all" sentinel through verbatim, pipe-joins anything else."""
    if isinstance(hashes, str):
        return hashes
    return join(hashes, "|")


def normalize_url(url: str) -> str:
    return f"{url.strip().rstrip('/')}{API_PATH}"


class BaseClient:
    """
    Dispatcher shared by every endpoint group.

    Holds the normalized API root and the session cookie. Each call performs
    exactly one request; there are no retries and, unless `timeout` is given,
    no timeout either.
    """

    def __init__(
        self,
        url: str = DEFAULT_URL,
        *,
        timeout: float | None = None,
        http_client: httpx.AsyncClient | None = None,
    ):
        self.url = normalize_url(url)
        root = httpx.URL(self.url)
        # netloc keeps IPv6 brackets and any explicit port
        self.origin = f"{root.scheme}://{root.netloc.decode('ascii')}"
        self.timeout = timeout
        self.auth_cookie: str | None = None
        self._http_client = http_client
        self._owns_http_client = False

    @property
    def display_name(self) -> str:
        return "qBittorrent"

    async def __aenter__(self):
        if self._http_client is None:
            self._http_client = httpx.AsyncClient(timeout=self.timeout)
            self._owns_http_client = True
        return self

    async def __aexit__(self, *exc_info: Any) -> None:
        await self.aclose()

    async def aclose(self) -> None:
        """Closes the shared httpx client, but only if this binding created it."""
        if self._owns_http_client and self._http_client is not None:
            await self._http_client.aclose()
            self._http_client = None
            self._owns_http_client = False

    def build_url(self, api_name: APINames | str, method_name: str) -> str:
        api_name = APINames(api_name).value
        return f"{self.url}{api_name}/{method_name.strip('/')}"

    def _headers(self, auth_cookie: str | None) -> dict:
        # qBittorrent rejects requests whose Referer/Origin don't match its own host
        headers = {"Referer": self.origin}
        if isinstance(auth_cookie, str) and auth_cookie.strip():
            headers["Cookie"] = auth_cookie
        return headers

    async def call_method(
        self,
        api_name: APINames | str,
        method_name: str,
        *,
        method: str = "GET",
        query: Mapping[str, Any] | None = None,
        data: Mapping[str, Any] | None = None,
        files: list | None = None,
    ) -> Envelope:
        """
        Sends one request to `<url>/<api_name>/<method_name>` and returns its Envelope.

        Args:
            api_name: One of APINames
            method_name: Action name inside the namespace
            method: "GET" or "POST"
            query: Flattened into the query string (lists repeat their key)
            data: Form fields, sent url-encoded or alongside `files` as multipart
            files: httpx-style multipart parts

        Raises:
            APIError: The server answered with a non-2xx status
            httpx.TransportError: The request never completed
        """
        url = self.build_url(api_name, method_name)
        # Snapshot so a concurrent login/logout can't change the cookie mid-request
        headers = self._headers(self.auth_cookie)
        params = flatten_query(query) or None
        form = {key: form_value(value) for key, value in (data or {}).items() if value is not None} or None

        logger.debug("%s %s", method, url)
        if self._http_client is not None:
            request = self._http_client.build_request(
                method, url, params=params, data=form, files=files, headers=headers
            )
            if "Cookie" not in headers:
                # A caller-supplied client may still hold a SID in its jar
                request.headers.pop("Cookie", None)
            response = await self._http_client.send(request)
            if self._owns_http_client:
                # The session lives in auth_cookie only, never in httpx's jar
                self._http_client.cookies.clear()
        else:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.request(
                    method, url, params=params, data=form, files=files, headers=headers
                )

        text = response.text
        logger.debug("%s %s -> %s", method, url, response.status_code)
        if not response.is_success:
            raise APIError(response.status_code, text)

        return Envelope(
            status_code=response.status_code,
            headers=response.headers,
            text=text,
            body=parse_body(text),
        )
