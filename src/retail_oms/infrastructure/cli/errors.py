"""Translation of domain errors into CLI failures."""

from __future__ import annotations

from collections.abc import Iterator
from contextlib import contextmanager

import click

from retail_oms.domain.exceptions import DomainException, EntityNotFoundError


class ResourceNotFound(click.ClickException):
    """A referenced user, product or order does not exist."""

    exit_code = 3


@contextmanager
def domain_errors() -> Iterator[None]:
    """Report a missing entity as "not found" and any other rule violation
    as a plain failure."""
    try:
        yield
    except EntityNotFoundError as exc:
        raise ResourceNotFound(str(exc)) from exc
    except DomainException as exc:
        raise click.ClickException(str(exc)) from exc
