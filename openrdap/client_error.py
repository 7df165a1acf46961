"""Errors raised by the RDAP client."""

from __future__ import annotations

import enum


class ClientErrorType(enum.IntEnum):
    """The kind of failure a ClientError reports."""

    INPUT_ERROR = 1
    BOOTSTRAP_NOT_SUPPORTED = 2
    BOOTSTRAP_NO_MATCH = 3
    WRONG_RESPONSE_TYPE = 4
    NO_WORKING_SERVERS = 5
    OBJECT_DOES_NOT_EXIST = 6
    RDAP_SERVER_ERROR = 7


class ClientError(Exception):
    """An RDAP client failure of a given ``error_type``."""

    def __init__(self, error_type: ClientErrorType, text: str) -> None:
        super().__init__(text)
        self.error_type = error_type
        self.text = text

    def __str__(self) -> str:
        return self.text


def is_client_error(error_type: ClientErrorType, error: BaseException | None) -> bool:
    """Return True if ``error`` is a ClientError of ``error_type``."""
    return isinstance(error, ClientError) and error.error_type == error_type