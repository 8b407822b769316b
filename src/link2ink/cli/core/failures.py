"""Mapping of generation errors to CLI failures and retry on key rejection."""

from __future__ import annotations

from typing import Awaitable, Callable, TypeVar

from ...credentials import CredentialManager, CredentialState
from ...errors import (
    CredentialInvalidError,
    CredentialMissingError,
    InvalidSourceError,
    SynthesisError,
    UnverifiableContentError,
)
from .types import Failure, Result, Success

T = TypeVar("T")


def failure_from_error(error: Exception) -> Failure:
    """Classify an exception into a Failure the display layer understands.

    Unclassified errors keep their message verbatim.
    """
    if isinstance(error, UnverifiableContentError):
        return Failure(str(error), {"source": error.source}, kind=error.reason.value)
    if isinstance(error, InvalidSourceError):
        return Failure(str(error), kind="invalid_source")
    if isinstance(error, SynthesisError):
        return Failure(str(error), kind="synthesis")
    if isinstance(error, CredentialInvalidError):
        return Failure(str(error), kind="credential_invalid")
    if isinstance(error, CredentialMissingError):
        return Failure(str(error), kind="credential_missing")
    return Failure(str(error))


async def run_with_credential_retry(
    credentials: CredentialManager,
    call: Callable[[], Awaitable[T]],
) -> Result[T]:
    """Run a generation call, re-resolving the key once if it is rejected.

    After a rejection the manager skips the rejected key, so resolving again
    falls through to the interactive prompt.
    """
    try:
        return Success(await call())
    except CredentialInvalidError as e:
        if await credentials.resolve() != CredentialState.HAS_CREDENTIAL:
            return failure_from_error(e)
    except Exception as e:
        return failure_from_error(e)

    try:
        return Success(await call())
    except Exception as e:
        return failure_from_error(e)
