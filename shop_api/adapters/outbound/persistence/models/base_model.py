# shop_api/adapters/outbound/persistence/models/base_model.py

from sqlalchemy import event
from sqlalchemy.orm import declarative_base

from shop_api.shared.middleware.logging_middleware import PlaintextPasswordGuard

Base = declarative_base()


def guard_password_column(mapper, connection, target):
    """Listener de flush: só modelos com coluna password são verificados."""
    if "password" in mapper.columns:
        PlaintextPasswordGuard.enforce(target)


# Mesmo listener para insert e update, propagado às subclasses de Base
for _event_name in ("before_insert", "before_update"):
    event.listen(Base, _event_name, guard_password_column, propagate=True)
