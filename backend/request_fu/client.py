"""Narrow client over requests: one object per call, blocking."""

import logging
from typing import Optional

import requests

from request_fu.config import DEFAULT_TIMEOUT
from request_fu.errors import TransportError
from request_fu.models import PostField

logger = logging.getLogger(__name__)

FORM_CONTENT_TYPE = "application/x-www-form-urlencoded"


class Client:
    """Holds the URL, headers and outcome of a single HTTP call.

    Usage:
        client = new_client("http://example.com/search")
        client.set_headers({"Accept": "text/html"})
        client.http_post(PostField(name="q", content="derek"))
        client.response_code, client.body
    """

    def __init__(self, url: str, timeout: Optional[float] = DEFAULT_TIMEOUT, auth: Optional[tuple[str, str]] = None):
        self.url = url
        self.timeout = timeout
        self.auth = auth
        self.headers: dict[str, str] = {}
        self._response: Optional[requests.Response] = None

    def set_headers(self, headers: Optional[dict[str, str]]) -> None:
        if headers:
            self.headers.update(headers)

    def http_get(self) -> None:
        self._perform("get")

    def http_delete(self) -> None:
        self._perform("delete")

    def http_post(self, *fields: PostField) -> None:
        self._perform("post", data=[f.as_tuple() for f in fields])

    def http_put(self, *fields: PostField) -> None:
        # Raw "k=v&k=v" body, no escaping
        if fields and not any(k.lower() == "content-type" for k in self.headers):
            self.headers["Content-Type"] = FORM_CONTENT_TYPE
        self._perform("put", data="&".join(str(f) for f in fields))

    def _perform(self, method: str, **kwargs) -> None:
        logger.debug("%s %s", method.upper(), self.url)
        try:
            self._response = getattr(requests, method)(
                self.url,
                headers=self.headers,
                timeout=self.timeout,
                auth=self.auth,
                **kwargs,
            )
        except requests.RequestException as e:
            logger.debug("%s %s failed: %s", method.upper(), self.url, e)
            raise TransportError(f"{method.upper()} {self.url} failed: {e}", url=self.url, cause=e) from e
        logger.debug("%s %s -> %s", method.upper(), self.url, self._response.status_code)

    @property
    def response(self) -> requests.Response:
        if self._response is None:
            raise RuntimeError("No request performed yet. Call http_get/http_post/http_put first.")
        return self._response

    @property
    def response_code(self) -> int:
        return self.response.status_code

    @property
    def body(self) -> str:
        return self.response.text or ""

    @property
    def response_headers(self) -> dict[str, str]:
        return dict(self.response.headers)


def new_client(url: str, timeout: Optional[float] = DEFAULT_TIMEOUT, auth: Optional[tuple[str, str]] = None) -> Client:
    return Client(url, timeout=timeout, auth=auth)
