"""Exceptions raised by the ProPublica Congress client."""

import json
from typing import Any

_ACRONYMS = {"id": "ID", "api": "API"}


class CongressAPIError(Exception):
    """Base class for errors raised by this package."""


class InvalidArgumentError(CongressAPIError, ValueError):
    """A caller-supplied value failed validation before any request was made."""

    def __init__(self, parameter: str, value: Any):
        self.parameter = parameter
        self.value = value
        super().__init__(f"Received invalid {describe(parameter)}: {_dump(value)}")


class InvalidResponseError(CongressAPIError):
    """The API answered with a body that is not a usable results envelope."""

    def __init__(self, payload: Any, message: str = "Invalid response structure"):
        self.payload = payload
        self.message = message
        super().__init__(f"{message}: {_dump(payload)}")


def describe(parameter: str) -> str:
    """Turn a parameter name into the phrase used in error messages.

    ``member_id`` becomes ``member ID`` and ``recent_bill_type`` becomes
    ``recent bill type``.
    """
    words = [_ACRONYMS.get(word, word) for word in parameter.split("_")]
    return " ".join(words)


def _dump(value: Any) -> str:
    try:
        return json.dumps(value, ensure_ascii=False)
    except (TypeError, ValueError):
        return repr(value)
