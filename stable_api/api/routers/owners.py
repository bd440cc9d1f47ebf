from fastapi import APIRouter, Depends, status

from stable_api.api.deps import GuardedRoute, get_owner_service, require_operation
from stable_api.domain.authorization import Operation, Role
from stable_api.schemas.owner import Owner, OwnerCreate, OwnerUpdate
from stable_api.services.owner import OwnerService

router = APIRouter(prefix="/owners", tags=["owners"], route_class=GuardedRoute)


@router.post("", response_model=Owner, status_code=status.HTTP_201_CREATED)
def create_owner(
    owner_data: OwnerCreate,
    service: OwnerService = Depends(get_owner_service),
    current_role: Role = Depends(require_operation(Operation.OWNER_CREATE)),
):
    """
    Create a new owner. Only admins can create owners.

    The email must not be registered to another owner.
    """
    owner = service.create(name=owner_data.name, email=owner_data.email)
    return Owner.model_validate(owner)


@router.get("", response_model=list[Owner])
def get_all_owners(
    service: OwnerService = Depends(get_owner_service),
    current_role: Role = Depends(require_operation(Operation.OWNER_LIST)),
):
    """Get all owners. Admins and vets can list owners."""
    return [Owner.model_validate(owner) for owner in service.find_all()]


@router.get("/{owner_id}", response_model=Owner)
def get_owner_by_id(
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
    current_role: Role = Depends(require_operation(Operation.OWNER_READ)),
):
    """Get an owner by ID. Admins and vets can see owners."""
    return Owner.model_validate(service.find_one(owner_id))


@router.put("/{owner_id}", response_model=Owner)
def update_owner_by_id(
    owner_id: int,
    owner_data: OwnerUpdate,
    service: OwnerService = Depends(get_owner_service),
    current_role: Role = Depends(require_operation(Operation.OWNER_UPDATE)),
):
    """
    Update an owner. Only admins can update owners.

    Fields left out of the body keep their current value.
    """
    owner = service.update(owner_id, name=owner_data.name, email=owner_data.email)
    return Owner.model_validate(owner)


@router.delete("/{owner_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_owner_by_id(
    owner_id: int,
    service: OwnerService = Depends(get_owner_service),
    current_role: Role = Depends(require_operation(Operation.OWNER_DELETE)),
):
    """
    Delete an owner by ID. Only admins can delete owners.

    All horses belonging to the owner are deleted with it.
    """
    service.remove(owner_id)
