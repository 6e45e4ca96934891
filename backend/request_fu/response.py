"""Response wrapper tagged by HTTP status code."""

from enum import Enum
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class ResponseKind(str, Enum):
    CONTINUE = "continue"
    SWITCHING_PROTOCOLS = "switching_protocols"
    OK = "ok"
    CREATED = "created"
    ACCEPTED = "accepted"
    NON_AUTHORITATIVE = "non_authoritative"
    NO_CONTENT = "no_content"
    RESET_CONTENT = "reset_content"
    PARTIAL_CONTENT = "partial_content"
    MULTIPLE_CHOICES = "multiple_choices"
    MOVED_PERMANENTLY = "moved_permanently"
    FOUND = "found"
    SEE_OTHER = "see_other"
    NOT_MODIFIED = "not_modified"
    USE_PROXY = "use_proxy"
    TEMPORARY_REDIRECT = "temporary_redirect"
    BAD_REQUEST = "bad_request"
    UNAUTHORIZED = "unauthorized"
    PAYMENT_REQUIRED = "payment_required"
    FORBIDDEN = "forbidden"
    NOT_FOUND = "not_found"
    METHOD_NOT_ALLOWED = "method_not_allowed"
    NOT_ACCEPTABLE = "not_acceptable"
    PROXY_AUTH_REQUIRED = "proxy_auth_required"
    REQUEST_TIMEOUT = "request_timeout"
    CONFLICT = "conflict"
    GONE = "gone"
    LENGTH_REQUIRED = "length_required"
    PRECONDITION_FAILED = "precondition_failed"
    REQUEST_ENTITY_TOO_LARGE = "request_entity_too_large"
    REQUEST_URI_TOO_LONG = "request_uri_too_long"
    UNSUPPORTED_MEDIA_TYPE = "unsupported_media_type"
    UNSATISFIABLE_REQUEST = "unsatisfiable_request"
    EXPECTATION_FAILED = "expectation_failed"
    SERVER_ERROR = "server_error"
    NOT_IMPLEMENTED = "not_implemented"
    BAD_GATEWAY = "bad_gateway"
    SERVICE_UNAVAILABLE = "service_unavailable"
    GATEWAY_TIMEOUT = "gateway_timeout"
    VERSION_NOT_SUPPORTED = "version_not_supported"
    # Any status not listed above
    GENERIC = "generic"


STATUS_KINDS: dict[int, ResponseKind] = {
    100: ResponseKind.CONTINUE,
    101: ResponseKind.SWITCHING_PROTOCOLS,
    200: ResponseKind.OK,
    201: ResponseKind.CREATED,
    202: ResponseKind.ACCEPTED,
    203: ResponseKind.NON_AUTHORITATIVE,
    204: ResponseKind.NO_CONTENT,
    205: ResponseKind.RESET_CONTENT,
    206: ResponseKind.PARTIAL_CONTENT,
    300: ResponseKind.MULTIPLE_CHOICES,
    301: ResponseKind.MOVED_PERMANENTLY,
    302: ResponseKind.FOUND,
    303: ResponseKind.SEE_OTHER,
    304: ResponseKind.NOT_MODIFIED,
    305: ResponseKind.USE_PROXY,
    307: ResponseKind.TEMPORARY_REDIRECT,
    400: ResponseKind.BAD_REQUEST,
    401: ResponseKind.UNAUTHORIZED,
    402: ResponseKind.PAYMENT_REQUIRED,
    403: ResponseKind.FORBIDDEN,
    404: ResponseKind.NOT_FOUND,
    405: ResponseKind.METHOD_NOT_ALLOWED,
    406: ResponseKind.NOT_ACCEPTABLE,
    407: ResponseKind.PROXY_AUTH_REQUIRED,
    408: ResponseKind.REQUEST_TIMEOUT,
    409: ResponseKind.CONFLICT,
    410: ResponseKind.GONE,
    411: ResponseKind.LENGTH_REQUIRED,
    412: ResponseKind.PRECONDITION_FAILED,
    413: ResponseKind.REQUEST_ENTITY_TOO_LARGE,
    414: ResponseKind.REQUEST_URI_TOO_LONG,
    415: ResponseKind.UNSUPPORTED_MEDIA_TYPE,
    416: ResponseKind.UNSATISFIABLE_REQUEST,
    417: ResponseKind.EXPECTATION_FAILED,
    500: ResponseKind.SERVER_ERROR,
    501: ResponseKind.NOT_IMPLEMENTED,
    502: ResponseKind.BAD_GATEWAY,
    503: ResponseKind.SERVICE_UNAVAILABLE,
    504: ResponseKind.GATEWAY_TIMEOUT,
    505: ResponseKind.VERSION_NOT_SUPPORTED,
}


class Response(BaseModel):
    """Completed HTTP call. Immutable; 4xx/5xx are responses, not errors."""

    model_config = ConfigDict(frozen=True)

    kind: ResponseKind
    status: int
    body: str = ""
    headers: dict[str, str] = Field(default_factory=dict)

    @property
    def is_success(self) -> bool:
        return 200 <= self.status < 300

    @property
    def is_redirect(self) -> bool:
        return 300 <= self.status < 400

    @property
    def is_client_fail(self) -> bool:
        return 400 <= self.status < 500

    @property
    def is_server_fail(self) -> bool:
        return 500 <= self.status < 600

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        wanted = name.lower()
        for key, value in self.headers.items():
            if key.lower() == wanted:
                return value
        return None

    @property
    def content_type(self) -> Optional[str]:
        return self.header("Content-Type")

    @property
    def content_length(self) -> Optional[int]:
        value = self.header("Content-Length")
        if value is None or not value.strip().isdigit():
            return None
        return int(value)

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "status": self.status,
            "body": self.body,
            "headers": dict(self.headers),
        }


def classify(status_code: int, body: str = "", headers: Optional[dict[str, str]] = None) -> Response:
    """Wrap a status and body in a Response. Total: unknown codes are GENERIC."""
    kind = STATUS_KINDS.get(status_code, ResponseKind.GENERIC)
    return Response(kind=kind, status=status_code, body=body or "", headers=dict(headers or {}))
