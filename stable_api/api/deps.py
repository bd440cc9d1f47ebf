import logging
from typing import Callable

from fastapi import Depends, Request, Response
from fastapi.exceptions import RequestValidationError
from fastapi.routing import APIRoute
from fastapi.security import APIKeyHeader
from sqlalchemy.orm import Session

from stable_api.db import SessionLocal
from stable_api.domain.authorization import (
    Operation,
    Role,
    decide,
    parse_claimed_role,
    required_roles_for,
)
from stable_api.errors import ForbiddenError
from stable_api.repositories.horse import HorseRepository
from stable_api.repositories.owner import OwnerRepository
from stable_api.services.horse import HorseService
from stable_api.services.owner import OwnerService

logger = logging.getLogger(__name__)

ROLE_HEADER = "x-user-role"

role_header = APIKeyHeader(
    name=ROLE_HEADER,
    scheme_name="role",
    description="User role for authorization. Possible values: admin, vet",
    auto_error=False,
)


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


def get_claimed_role(token: str | None = Depends(role_header)) -> Role | None:
    """Role asserted by the caller. The header is not verified in any way."""
    return parse_claimed_role(token)


def ensure_allowed(operation: Operation, claimed_role: Role | None) -> Role:
    """Apply the role policy declared for ``operation`` or raise ForbiddenError."""
    if not decide(required_roles_for(operation), claimed_role):
        logger.warning(
            "Denied %s for role %s",
            operation.value,
            claimed_role.value if claimed_role else "<none>",
        )
        raise ForbiddenError("Not enough permissions")
    return claimed_role


def require_operation(operation: Operation):
    """
    Create a dependency that applies the role policy declared for ``operation``.

    Example:
        Depends(require_operation(Operation.HORSE_UPDATE_HEALTH))
    """

    def role_checker(claimed_role: Role | None = Depends(get_claimed_role)) -> Role:
        return ensure_allowed(operation, claimed_role)

    role_checker.operation = operation
    return role_checker


class GuardedRoute(APIRoute):
    """Route that keeps the role check ahead of request validation.

    FastAPI decodes the JSON body before resolving dependencies, so a
    malformed body would otherwise answer 422 to a caller who is not allowed
    to use the endpoint at all.
    """

    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.operation = next(
            (
                dependency.call.operation
                for dependency in self.dependant.dependencies
                if hasattr(dependency.call, "operation")
            ),
            None,
        )

    def get_route_handler(self) -> Callable:
        original_route_handler = super().get_route_handler()
        route = self

        async def guarded_route_handler(request: Request) -> Response:
            try:
                return await original_route_handler(request)
            except RequestValidationError:
                if route.operation is not None:
                    ensure_allowed(
                        route.operation, parse_claimed_role(request.headers.get(ROLE_HEADER))
                    )
                raise

        return guarded_route_handler


def get_owner_service(db: Session = Depends(get_db)) -> OwnerService:
    return OwnerService(OwnerRepository(db))


def get_horse_service(db: Session = Depends(get_db)) -> HorseService:
    return HorseService(HorseRepository(db), OwnerService(OwnerRepository(db)))
