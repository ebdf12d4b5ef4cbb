"""Per-invocation state carried on the click context object."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from autopos.domain.exceptions import DomainException
from autopos.domain.model.session import Session, ensure_allowed
from autopos.infrastructure import bootstrap


@dataclass(frozen=True)
class AppContext:
    data_dir: Path
    session: Session

    def require(self, section: str) -> None:
        """Stop the command unless the session's role may use ``section``."""
        try:
            ensure_allowed(self.session, section)
        except DomainException as exc:
            raise click.ClickException(str(exc))

    # Repositories bound to this invocation's data directory

    def products(self):
        return bootstrap.product_repository(self.data_dir)

    def transactions(self):
        return bootstrap.transaction_repository(self.data_dir)

    def shifts(self):
        return bootstrap.shift_repository(self.data_dir)

    def movements(self):
        return bootstrap.movement_repository(self.data_dir)


pass_app = click.make_pass_decorator(AppContext)
