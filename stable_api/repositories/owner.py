from sqlalchemy.exc import IntegrityError

from stable_api.db.models.owner import Owner as OwnerModel
from stable_api.domain.records import OwnerRecord
from stable_api.errors import DomainError, DuplicateResourceError
from stable_api.repositories.base import SqlAlchemyRepository


class OwnerRepository(SqlAlchemyRepository[OwnerRecord]):
    model = OwnerModel
    entity_name = "Owner"

    def _to_record(self, row: OwnerModel) -> OwnerRecord:
        return OwnerRecord(id=row.id, name=row.name, email=row.email)

    def _translate_integrity_error(self, exc: IntegrityError) -> DomainError | None:
        # The unique index on owners.email is the backstop for concurrent writers
        # that both passed the service-level pre-check.
        message = str(exc.orig).lower()
        if "unique" in message or "duplicate" in message:
            return DuplicateResourceError("Email is already registered")
        return None
