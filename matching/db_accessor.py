from typing import Any, Mapping, Optional, Type
from django.db import IntegrityError, transaction
from django.db.models import Model

from matching.exceptions import Conflict


class DB_Accessor:
    """Generic data accessor wrapping the lookups shared by the matching repos."""

    def __init__(self, model: Type[Model]) -> None:
        self.model = model

    def find(self, **lookup: Any) -> Optional[Model]:
        """Return the first object matching lookup, or None."""
        return self.model.objects.filter(**lookup).first()

    def exists(self, **lookup: Any) -> bool:
        return self.model.objects.filter(**lookup).exists()

    def insert_unique(self, key: Mapping[str, Any], message: str, **data: Any) -> Model:
        """Insert a row whose `key` must be unique, raising Conflict when it is taken.

        The insert runs in its own savepoint so a unique violation leaves an
        enclosing transaction usable. An IntegrityError is only reported as a
        Conflict when a row with the same key is actually visible afterwards.
        """
        if self.exists(**key):
            raise Conflict(message)
        try:
            with transaction.atomic():
                return self.model.objects.create(**key, **data)
        except IntegrityError:
            if self.exists(**key):
                raise Conflict(message)
            raise

    def delete(self, **lookup: Any) -> int:
        """Delete objects matching lookup; return count deleted."""
        count, _ = self.model.objects.filter(**lookup).delete()
        return count
