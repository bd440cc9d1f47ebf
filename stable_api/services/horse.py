import logging

from stable_api.domain.horse import (
    HealthStatus,
    parse_health_status,
    validate_age,
)
from stable_api.domain.records import HorseRecord
from stable_api.domain.text import require_text
from stable_api.errors import NotFoundError
from stable_api.repositories.base import Repository
from stable_api.services.owner import OwnerService

logger = logging.getLogger(__name__)


class HorseService:
    """Horse business rules: owner existence, age range, health status and filtering."""

    def __init__(self, horses: Repository[HorseRecord], owner_service: OwnerService):
        self.horses = horses
        self.owner_service = owner_service

    def create(
        self,
        name: str,
        age: int,
        breed: str,
        health_status: HealthStatus | str,
        owner_id: int,
    ) -> HorseRecord:
        """
        Create a horse.

        The owner lookup runs first, so an unknown owner is reported as
        NotFoundError even when other fields are invalid too.

        Raises:
            NotFoundError: If the owner doesn't exist
            DomainValidationError: If age is outside [1, 30], the health status
                is unknown, or name/breed are empty
        """
        self.owner_service.find_one(owner_id)

        horse = self.horses.insert(
            name=require_text("Horse", "name", name),
            age=validate_age(age),
            breed=require_text("Horse", "breed", breed),
            health_status=parse_health_status(health_status).value,
            owner_id=owner_id,
        )
        logger.info("Created horse %s for owner %s", horse.id, owner_id)
        return horse

    def find_all(
        self,
        age: int | None = None,
        breed: str | None = None,
        health_status: HealthStatus | str | None = None,
    ) -> list[HorseRecord]:
        """
        List horses matching every given filter exactly (AND).

        Filters left as None impose no constraint. No match is an empty list.
        """
        criteria = {}
        if age is not None:
            criteria["age"] = age
        if breed is not None:
            criteria["breed"] = breed
        if health_status is not None:
            criteria["health_status"] = parse_health_status(health_status).value
        return self.horses.find_many(**criteria)

    def find_one(self, horse_id: int) -> HorseRecord:
        horse = self.horses.find_unique(id=horse_id)
        if horse is None:
            raise NotFoundError(f"Horse with ID {horse_id} not found")
        return horse

    def update(
        self,
        horse_id: int,
        name: str | None = None,
        age: int | None = None,
        breed: str | None = None,
        health_status: HealthStatus | str | None = None,
        owner_id: int | None = None,
    ) -> HorseRecord:
        """
        Update a horse. Only provided fields are written.

        Raises:
            NotFoundError: If the horse or the new owner doesn't exist
            DomainValidationError: If a provided field breaks a horse rule
        """
        self.find_one(horse_id)

        if owner_id is not None:
            self.owner_service.find_one(owner_id)

        changes = {}
        if name is not None:
            changes["name"] = require_text("Horse", "name", name)
        if age is not None:
            changes["age"] = validate_age(age)
        if breed is not None:
            changes["breed"] = require_text("Horse", "breed", breed)
        if health_status is not None:
            changes["health_status"] = parse_health_status(health_status).value
        if owner_id is not None:
            changes["owner_id"] = owner_id

        horse = self.horses.update(horse_id, **changes)
        logger.info("Updated horse %s (%s)", horse_id, ", ".join(sorted(changes)) or "no changes")
        return horse

    def update_health(self, horse_id: int, health_status: HealthStatus | str) -> HorseRecord:
        """Overwrite only the health status of a horse."""
        self.find_one(horse_id)
        status = parse_health_status(health_status)
        horse = self.horses.update(horse_id, health_status=status.value)
        logger.info("Horse %s health status set to %s", horse_id, status.value)
        return horse

    def remove(self, horse_id: int) -> None:
        self.find_one(horse_id)
        self.horses.delete(horse_id)
        logger.info("Deleted horse %s", horse_id)
