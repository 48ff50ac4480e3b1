"""
Turns a raw POST body into an Order.

Decoding never raises for bad input. It returns either the Order or one of two
error variants, and the user-facing text is derived from the variant rather
than by inspecting a rendered validation message.
"""

import logging
from dataclasses import dataclass
from typing import Union

from pydantic import ValidationError

from .models import Order

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class MissingField:
    """A required Order field is absent from the body."""
    name: str

    @property
    def message(self) -> str:
        return sanitize_missing_field_message(f"missing field `{self.name}`")


@dataclass(frozen=True)
class OtherParseError:
    """Malformed JSON, a non-object body, or a field of the wrong type."""
    text: str

    @property
    def message(self) -> str:
        return self.text


DecodeError = Union[MissingField, OtherParseError]


def sanitize_missing_field_message(message: str) -> str:
    """
    Make a "missing field" message readable.

    Lowercases it, drops backticks, turns underscores into spaces and cuts
    everything from the separator before the first "at" onwards, e.g.
    "missing field `shipping_zip` at line 1 column 9" -> "missing field shipping zip".
    Any other message is returned untouched.
    """
    if "missing field" not in message:
        return message
    cleaned = message.lower().replace("`", "").replace("_", " ")
    index = cleaned.find("at")
    if index != -1:
        cleaned = cleaned[:max(index - 1, 0)]
    return cleaned


def _describe(error: dict) -> str:
    location = ".".join(str(part) for part in error.get("loc", ()))
    if location:
        return f"{location}: {error['msg']}"
    return error["msg"]


def decode_order(body: bytes) -> Union[Order, DecodeError]:
    """Parse the body as an Order, returning a DecodeError on failure."""
    try:
        return Order.model_validate_json(body)
    except ValidationError as exc:
        errors = exc.errors()

    # A wrong-typed field is reported before any missing one.
    for error in errors:
        if error["type"] != "missing":
            result = OtherParseError(_describe(error))
            break
    else:
        result = MissingField(str(errors[0]["loc"][0]))

    logger.info("Rejected order body: %s", result.message)
    return result
