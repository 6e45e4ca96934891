"""Pydantic models for request targets and body fields."""

from typing import Any, Mapping, Optional, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from request_fu.config import DEFAULT_PROTOCOL
from request_fu.errors import InvalidTarget


# --- Target ---


class Target(BaseModel):
    """Structured alternative to a raw URL string."""

    model_config = ConfigDict(frozen=True)

    host: str
    port: Optional[int] = Field(default=None, ge=1, le=65535)
    path: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
    protocol: str = DEFAULT_PROTOCOL

    @field_validator("host")
    @classmethod
    def host_not_blank(cls, v: str) -> str:
        if not v or not v.strip():
            raise ValueError("host must not be blank")
        return v

    @property
    def auth(self) -> Optional[tuple[str, str]]:
        """Basic-auth pair, or None when no username is set."""
        if self.username is None:
            return None
        return (self.username, self.password or "")


TargetLike = Union[str, Target, Mapping[str, Any]]


def coerce_target(target: TargetLike) -> Union[str, Target]:
    """Validate a target: strings and Targets pass through, mappings become Targets."""
    if isinstance(target, (str, Target)):
        return target
    if isinstance(target, Mapping):
        try:
            return Target.model_validate(dict(target))
        except ValidationError as e:
            raise InvalidTarget(f"Invalid target {dict(target)!r}: {e.errors()[0]['msg']}", target=target) from e
    raise InvalidTarget(f"Unsupported target type: {type(target).__name__}", target=target)


# --- Body fields ---


class PostField(BaseModel):
    """A single name/content pair sent in a POST or PUT body."""

    model_config = ConfigDict(frozen=True)

    name: str
    content: str

    def as_tuple(self) -> tuple[str, str]:
        return (self.name, self.content)

    def __str__(self) -> str:
        return f"{self.name}={self.content}"
