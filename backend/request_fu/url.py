"""URL, query string and body field construction.

Values are never percent-escaped: "MSU vs UNC" goes out as-is and escaping
(if any) is left to the HTTP library.
"""

from typing import Any, Mapping, Optional, Union

from request_fu.models import PostField, Target, TargetLike, coerce_target

Params = Mapping[str, Any]


def stringify(value: Any) -> str:
    """Coerce a parameter value to its wire form. Lists are comma-joined."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (list, tuple)):
        return ",".join(stringify(v) for v in value)
    return str(value)


def build_query_string(params: Optional[Params]) -> str:
    """Build "k=v&k=v" from a mapping. Empty or None gives ""."""
    if not params:
        return ""
    return "&".join(f"{key}={stringify(value)}" for key, value in params.items())


def build_url(target: TargetLike, query: Union[str, Params, None] = None) -> str:
    """Build an absolute URL from a string or target descriptor.

    Args:
        target: URL string (returned unchanged) or {host, port, path, ...}
        query: Literal string appended as-is, or a mapping encoded with
            build_query_string and appended after "?"

    Returns:
        URL string

    Raises:
        InvalidTarget: descriptor is missing a host or is the wrong type
    """
    target = coerce_target(target)
    if isinstance(target, Target):
        url = f"{target.protocol}://{target.host}"
        if target.port is not None:
            url += f":{target.port}"
        if target.path:
            url += target.path
    else:
        url = target

    if isinstance(query, str):
        url += query
    elif query:
        url += "?" + build_query_string(query)
    return url


def build_fields(params: Optional[Params]) -> list[PostField]:
    """One PostField per key, values stringified like query params."""
    if not params:
        return []
    return [PostField(name=str(key), content=stringify(value)) for key, value in params.items()]
