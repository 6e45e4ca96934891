"""request_fu: friendlier GET/POST/PUT on top of requests."""

from request_fu.config import VERSION as __version__
from request_fu.config import (
    clear_global_headers,
    global_headers,
    set_global_header,
)
from request_fu.errors import InvalidTarget, RequestFuError, TransportError
from request_fu.http import delete, get, post, put
from request_fu.models import PostField, Target
from request_fu.response import Response, ResponseKind, classify
from request_fu.url import build_fields, build_query_string, build_url

__all__ = [
    # Verbs
    "get",
    "post",
    "put",
    "delete",
    # URL & query
    "build_url",
    "build_query_string",
    "build_fields",
    # Responses
    "classify",
    "Response",
    "ResponseKind",
    # Models
    "Target",
    "PostField",
    # Errors
    "RequestFuError",
    "InvalidTarget",
    "TransportError",
    # Config
    "global_headers",
    "set_global_header",
    "clear_global_headers",
    "__version__",
]
