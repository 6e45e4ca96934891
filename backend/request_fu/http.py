"""GET/POST/PUT/DELETE helpers returning classified responses."""

from typing import Optional, Union

from request_fu import client as http_client
from request_fu.config import DEFAULT_TIMEOUT, global_headers
from request_fu.models import Target, TargetLike, coerce_target
from request_fu.response import Response, classify
from request_fu.url import Params, build_fields, build_url


def _make_request(
    method: str,
    target: TargetLike,
    params: Optional[Params],
    headers: Optional[dict[str, str]],
    timeout: Optional[float],
) -> Response:
    """Build URL and body for the verb, run it, classify the result."""
    target = coerce_target(target)
    auth = target.auth if isinstance(target, Target) else None

    if method in ("get", "delete"):
        url = build_url(target, params)
        fields = []
    else:
        url = build_url(target)
        fields = build_fields(params)

    client = http_client.new_client(url, timeout=DEFAULT_TIMEOUT if timeout is None else timeout, auth=auth)
    client.set_headers(global_headers())
    client.set_headers(headers)
    getattr(client, f"http_{method}")(*fields)
    return classify(client.response_code, client.body, client.response_headers)


def get(
    target: TargetLike,
    params: Union[Params, str, None] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Response:
    return _make_request("get", target, params, headers, timeout)


def post(
    target: TargetLike,
    params: Optional[Params] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Response:
    return _make_request("post", target, params, headers, timeout)


def put(
    target: TargetLike,
    params: Optional[Params] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Response:
    return _make_request("put", target, params, headers, timeout)


def delete(
    target: TargetLike,
    params: Union[Params, str, None] = None,
    headers: Optional[dict[str, str]] = None,
    timeout: Optional[float] = None,
) -> Response:
    return _make_request("delete", target, params, headers, timeout)
