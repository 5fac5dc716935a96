"""
Directive resolution for embedded tags.

``ENV(key)`` is replaced with the environment variable ``key`` (falling back
to the tag's default), ``REF(label)`` with the identifier registered for the
record ``label``.
"""

import os
from typing import Mapping, Optional

from fixseed.models import Directive
from fixseed.utils.errors import (
    MissingEnvironmentVariableError,
    UnresolvedReferenceError,
    UnsupportedDirectiveError,
)


def resolve_env(key: str, default: Optional[str] = None, env: Optional[Mapping[str, str]] = None) -> str:
    """
    Retrieve the environment variable ``key``.

    A set variable always wins over the default.

    Raises:
        MissingEnvironmentVariableError: variable unset and no default given
    """
    environ = os.environ if env is None else env
    value = environ.get(key)
    if value is not None:
        return value
    if default is not None:
        return default
    raise MissingEnvironmentVariableError(key)


def resolve_ref(key: str, registry: Mapping[str, str]) -> str:
    """
    Retrieve the identifier registered under the record label ``key``.

    Raises:
        UnresolvedReferenceError: no record has been registered under ``key``
    """
    try:
        return registry[key]
    except KeyError:
        raise UnresolvedReferenceError(key) from None


def resolve(
    directive: str,
    key: str,
    default: Optional[str],
    registry: Mapping[str, str],
    env: Optional[Mapping[str, str]] = None,
) -> str:
    """
    Produce the replacement text for one tag.

    Args:
        directive: Directive name as written in the tag
        key: Environment variable name or record label
        default: Fallback value, honoured by ENV only
        registry: Label to identifier mapping, read only
        env: Environment mapping (defaults to ``os.environ``)

    Returns:
        Replacement text

    Raises:
        UnsupportedDirectiveError: directive is neither ENV nor REF
        MissingEnvironmentVariableError: see :func:`resolve_env`
        UnresolvedReferenceError: see :func:`resolve_ref`
    """
    if directive == Directive.ENV.value:
        return resolve_env(key, default, env)
    if directive == Directive.REF.value:
        return resolve_ref(key, registry)
    raise UnsupportedDirectiveError(directive)
