import logging

from stable_api.domain.records import OwnerRecord
from stable_api.domain.text import require_text
from stable_api.errors import DuplicateResourceError, NotFoundError
from stable_api.repositories.base import Repository

logger = logging.getLogger(__name__)


class OwnerService:
    """Owner business rules: email uniqueness and existence checks."""

    def __init__(self, owners: Repository[OwnerRecord]):
        self.owners = owners

    def _ensure_email_available(self, email: str, owner_id: int | None = None) -> None:
        existing = self.owners.find_unique(email=email)
        if existing is not None and existing.id != owner_id:
            raise DuplicateResourceError(f"Email {email} is already registered")

    def create(self, name: str, email: str) -> OwnerRecord:
        """
        Create an owner.

        - Requires a non-empty name
        - Enforces email uniqueness (pre-check; the storage unique index is the backstop)

        Raises:
            DomainValidationError: If the name is empty
            DuplicateResourceError: If another owner already uses the email
        """
        require_text("Owner", "name", name)
        self._ensure_email_available(email)
        owner = self.owners.insert(name=name, email=email)
        logger.info("Created owner %s", owner.id)
        return owner

    def find_all(self) -> list[OwnerRecord]:
        return self.owners.find_many()

    def find_one(self, owner_id: int) -> OwnerRecord:
        """
        Get an owner by ID.

        Raises:
            NotFoundError: If the owner doesn't exist
        """
        owner = self.owners.find_unique(id=owner_id)
        if owner is None:
            raise NotFoundError(f"Owner with ID {owner_id} not found")
        return owner

    def update(
        self,
        owner_id: int,
        name: str | None = None,
        email: str | None = None,
    ) -> OwnerRecord:
        """
        Update an owner. Only provided fields are written.

        - Validates owner exists
        - Enforces email uniqueness against every other owner; keeping the
          current email is not a conflict

        Raises:
            NotFoundError: If the owner doesn't exist
            DuplicateResourceError: If the email is taken by another owner
            DomainValidationError: If the new name is empty
        """
        self.find_one(owner_id)

        if email is not None:
            self._ensure_email_available(email, owner_id=owner_id)

        changes = {}
        if name is not None:
            changes["name"] = require_text("Owner", "name", name)
        if email is not None:
            changes["email"] = email

        owner = self.owners.update(owner_id, **changes)
        logger.info("Updated owner %s (%s)", owner_id, ", ".join(sorted(changes)) or "no changes")
        return owner

    def remove(self, owner_id: int) -> None:
        """
        Delete an owner.

        The horses referencing the owner are removed by the ON DELETE CASCADE
        foreign key, in the same statement as the owner row.

        Raises:
            NotFoundError: If the owner doesn't exist
        """
        self.find_one(owner_id)
        self.owners.delete(owner_id)
        logger.info("Deleted owner %s", owner_id)
