from fastapi import APIRouter, Depends, Query, status

from stable_api.api.deps import GuardedRoute, get_horse_service, require_operation
from stable_api.domain.authorization import Operation, Role
from stable_api.domain.horse import MAX_AGE, MIN_AGE, HealthStatus
from stable_api.schemas.horse import Horse, HorseCreate, HorseHealthUpdate, HorseUpdate
from stable_api.services.horse import HorseService

router = APIRouter(prefix="/horses", tags=["horses"], route_class=GuardedRoute)


@router.post("", response_model=Horse, status_code=status.HTTP_201_CREATED)
def create_horse(
    horse_data: HorseCreate,
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_CREATE)),
):
    """
    Create a new horse. Only admins can create horses.

    The owner must exist; an unknown owner is reported as 404 even if other
    fields are invalid.
    """
    horse = service.create(
        name=horse_data.name,
        age=horse_data.age,
        breed=horse_data.breed,
        health_status=horse_data.health_status,
        owner_id=horse_data.owner,
    )
    return Horse.model_validate(horse)


@router.get("", response_model=list[Horse])
def get_all_horses(
    age: int | None = Query(None, ge=MIN_AGE, le=MAX_AGE, description="Exact age"),
    breed: str | None = Query(None, description="Exact breed"),
    health_status: HealthStatus | None = Query(None, alias="healthStatus"),
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_LIST)),
):
    """
    Get all horses with optional filters. Admins and vets can list horses.

    Filters combine with AND and match exactly.
    """
    horses = service.find_all(age=age, breed=breed, health_status=health_status)
    return [Horse.model_validate(horse) for horse in horses]


@router.get("/{horse_id}", response_model=Horse)
def get_horse_by_id(
    horse_id: int,
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_READ)),
):
    """Get a horse by ID. Admins and vets can see horses."""
    return Horse.model_validate(service.find_one(horse_id))


@router.put("/{horse_id}", response_model=Horse)
def update_horse_by_id(
    horse_id: int,
    horse_data: HorseUpdate,
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_UPDATE)),
):
    """
    Update a horse. Only admins can update horses.

    Fields left out of the body keep their current value.
    """
    horse = service.update(
        horse_id,
        name=horse_data.name,
        age=horse_data.age,
        breed=horse_data.breed,
        health_status=horse_data.health_status,
        owner_id=horse_data.owner,
    )
    return Horse.model_validate(horse)


@router.patch("/{horse_id}/health", response_model=Horse)
def update_horse_health(
    horse_id: int,
    health_data: HorseHealthUpdate,
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_UPDATE_HEALTH)),
):
    """Update only the health status of a horse. Admins and vets can do this."""
    horse = service.update_health(horse_id, health_data.health_status)
    return Horse.model_validate(horse)


@router.delete("/{horse_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_horse_by_id(
    horse_id: int,
    service: HorseService = Depends(get_horse_service),
    current_role: Role = Depends(require_operation(Operation.HORSE_DELETE)),
):
    """Delete a horse by ID. Only admins can delete horses."""
    service.remove(horse_id)
