"""Base model and shared validators.

Response models mirror the server's JSON. Field names are snake_case in
Python and camelCase on the wire; both spellings are accepted when
building a model.

Example:
    >>> from seymour.models.base import SeymourModel
    >>> class Sample(SeymourModel):
    ...     html_url: str
    >>> Sample.model_validate({"htmlUrl": "https://x.com"}).html_url
    'https://x.com'
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SeymourModel(BaseModel):
    """Base model with standard configuration.

    Unknown fields are kept; servers add their own.
    """

    model_config = ConfigDict(
        alias_generator=to_camel,
        populate_by_name=True,
        extra="allow",
    )


def parse_int(value: Any) -> Any:
    """Parse a decimal string timestamp to ``int``; other values pass through.

    Example:
        >>> parse_int("1700000000123456")
        1700000000123456
        >>> parse_int(None) is None
        True
    """
    if isinstance(value, str):
        return int(value, 10)
    return value
