"""Division policy for interpolation.

DIVISION_RAISE (default) rejects duplicate x-coordinates before dividing.
DIVISION_IEEE lets float divisions by zero produce inf/nan instead; exact
scalars still raise.

Callers pass ``policy=`` to the interpolation functions, or set a default
for the current thread or task with ``division_policy()``. The default is
held in a ContextVar, so a new thread starts from DIVISION_RAISE (or from
the POLYNOMIAL_DIVISION_POLICY environment variable, read once at import).
"""

import logging
import os
from contextlib import contextmanager
from contextvars import ContextVar

from polynomial.errors import InvalidArgumentError

logger = logging.getLogger(__name__)

DIVISION_RAISE = 'raise'
DIVISION_IEEE = 'ieee'
DIVISION_POLICIES = (DIVISION_RAISE, DIVISION_IEEE)

ENV_VAR = 'POLYNOMIAL_DIVISION_POLICY'


def validate(policy: str) -> str:
    if policy not in DIVISION_POLICIES:
        raise InvalidArgumentError(
            f"unknown division policy {policy!r}, "
            f"expected one of {DIVISION_POLICIES}")
    return policy


_division_policy: ContextVar[str] = ContextVar(
    'division_policy', default=validate(os.environ.get(ENV_VAR, DIVISION_RAISE)))


def get_division_policy() -> str:
    return _division_policy.get()


def resolve(policy: str | None) -> str:
    """An explicit policy wins; None falls back to the context default."""
    if policy is None:
        return _division_policy.get()
    return validate(policy)


def set_division_policy(policy: str):
    """Set the default for the current context. Returns the previous one."""
    previous = _division_policy.get()
    _division_policy.set(validate(policy))
    logger.debug("division policy %s -> %s", previous, policy)
    return previous


@contextmanager
def division_policy(policy: str):
    """Temporarily switch the default policy of the current thread or task."""
    token = _division_policy.set(validate(policy))
    logger.debug("division policy -> %s", policy)
    try:
        yield policy
    finally:
        _division_policy.reset(token)
