from collections.abc import Sequence
from typing import Annotated, Any, Literal

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, Field, TypeAdapter

from .matchers import is_matcher

# RFC 7230 token characters
_TCHARS = frozenset("!#$%&'*+-.^_`|~0123456789abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ")


def validate_header_name(v: str) -> str:
    if not v:
        raise ValueError("Header name cannot be empty")
    if not set(v) <= _TCHARS:
        raise ValueError(f"Invalid header name: '{v}'")
    return v


def validate_string_expectation(v: Any) -> Any:
    if v is None or isinstance(v, str) or is_matcher(v) or callable(v):
        return v
    raise ValueError(f"Expected a string, None or a matcher, got {type(v).__name__}")


def normalize_values_expectation(v: Any) -> Any:
    if is_matcher(v) or callable(v):
        return v
    if isinstance(v, str):
        return (v,)
    if isinstance(v, Sequence):
        return tuple(v)
    raise ValueError(f"Expected a sequence of strings or a matcher, got {type(v).__name__}")


def validate_values_expectation(v: Any) -> Any:
    if isinstance(v, tuple) and not all(isinstance(item, str) for item in v):
        raise ValueError("Expected header values must be strings")
    return v


HeaderName = Annotated[str, AfterValidator(validate_header_name)]
StringExpectation = Annotated[Any, AfterValidator(validate_string_expectation)]
ValuesExpectation = Annotated[Any, BeforeValidator(normalize_values_expectation), AfterValidator(validate_values_expectation)]


class Assertion(BaseModel):
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True, extra="forbid")


class HeaderAssertionBase(Assertion):
    name: HeaderName = Field(description="Response header name, case-insensitive.", examples=["Last-Modified", "X-Rate-Limiting"])


class StringEquals(HeaderAssertionBase):
    kind: Literal["string"] = "string"
    expected: StringExpectation = Field(description="Expected first value, None for an absent header, or a matcher.")


class MultiValueEquals(HeaderAssertionBase):
    kind: Literal["string_values"] = "string_values"
    expected: ValuesExpectation = Field(
        default=(),
        description="Expected values in order, or a matcher over the value list. Empty means the header must be absent.",
    )


class DateEquals(HeaderAssertionBase):
    kind: Literal["date"] = "date"
    expected: int = Field(description="Expected time in epoch milliseconds, compared at second precision.")


class LongEquals(HeaderAssertionBase):
    kind: Literal["long"] = "long"
    expected: int = Field(description="Expected integer value.")


class Exists(HeaderAssertionBase):
    kind: Literal["exists"] = "exists"


class DoesNotExist(HeaderAssertionBase):
    kind: Literal["does_not_exist"] = "does_not_exist"


class StatusEquals(Assertion):
    kind: Literal["status"] = "status"
    expected: int = Field(ge=100, le=599, description="Expected HTTP status code.")


HeaderAssertion = Annotated[
    StringEquals | MultiValueEquals | DateEquals | LongEquals | Exists | DoesNotExist | StatusEquals,
    Field(discriminator="kind"),
]

_assertions_adapter = TypeAdapter(list[HeaderAssertion])


def parse_assertions(data: Any) -> list[Assertion]:
    """Validate a list of plain assertion dicts, such as ``{"kind": "exists", "name": "ETag"}``."""
    return _assertions_adapter.validate_python(data)
