import pytest

from fakes import InMemoryStore
from stable_api.domain.records import OwnerRecord
from stable_api.errors import DomainValidationError, DuplicateResourceError, NotFoundError
from stable_api.services.horse import HorseService
from stable_api.services.owner import OwnerService


@pytest.fixture
def store() -> InMemoryStore:
    return InMemoryStore()


@pytest.fixture
def owners(store: InMemoryStore) -> OwnerService:
    return OwnerService(store.owners)


@pytest.fixture
def horses(store: InMemoryStore, owners: OwnerService) -> HorseService:
    return HorseService(store.horses, owners)


def test_create_returns_owner_with_assigned_id(owners: OwnerService):
    owner = owners.create(name="Jane Roe", email="jane@example.com")

    assert owner == OwnerRecord(id=owner.id, name="Jane Roe", email="jane@example.com")
    assert owners.find_one(owner.id) == owner


def test_create_duplicate_email_conflicts(owners: OwnerService):
    owners.create(name="Jane Roe", email="jane@example.com")

    with pytest.raises(DuplicateResourceError, match="already registered"):
        owners.create(name="Someone Else", email="jane@example.com")

    assert len(owners.find_all()) == 1


def test_find_one_missing_owner(owners: OwnerService):
    with pytest.raises(NotFoundError, match="Owner with ID 42 not found"):
        owners.find_one(42)


def test_find_all_returns_every_owner(owners: OwnerService):
    assert owners.find_all() == []
    first = owners.create(name="A", email="a@example.com")
    second = owners.create(name="B", email="b@example.com")

    assert owners.find_all() == [first, second]


def test_update_changes_only_given_fields(owners: OwnerService):
    owner = owners.create(name="Jane Roe", email="jane@example.com")

    updated = owners.update(owner.id, name="Jane Smith")

    assert updated.name == "Jane Smith"
    assert updated.email == "jane@example.com"


def test_update_keeping_own_email_is_not_a_conflict(owners: OwnerService):
    owner = owners.create(name="Jane Roe", email="jane@example.com")

    updated = owners.update(owner.id, name="Jane R.", email="jane@example.com")

    assert updated.email == "jane@example.com"


def test_update_email_taken_by_another_owner(owners: OwnerService):
    owners.create(name="A", email="a@example.com")
    second = owners.create(name="B", email="b@example.com")

    with pytest.raises(DuplicateResourceError):
        owners.update(second.id, email="a@example.com")

    assert owners.find_one(second.id).email == "b@example.com"


def test_update_missing_owner(owners: OwnerService):
    with pytest.raises(NotFoundError):
        owners.update(7, name="Nobody")


def test_remove_cascades_to_that_owners_horses_only(
    owners: OwnerService, horses: HorseService
):
    doomed = owners.create(name="A", email="a@example.com")
    kept = owners.create(name="B", email="b@example.com")
    horses.create("One", 3, "Arabian", "HEALTHY", doomed.id)
    horses.create("Two", 4, "Mustang", "INJURED", doomed.id)
    survivor = horses.create("Three", 5, "Arabian", "HEALTHY", kept.id)

    owners.remove(doomed.id)

    with pytest.raises(NotFoundError):
        owners.find_one(doomed.id)
    assert horses.find_all() == [survivor]


def test_remove_missing_owner(owners: OwnerService):
    with pytest.raises(NotFoundError):
        owners.remove(1)


@pytest.mark.parametrize("name", ["", "   "])
def test_create_rejects_empty_name(owners: OwnerService, name: str):
    with pytest.raises(DomainValidationError, match="Owner name must not be empty"):
        owners.create(name=name, email="blank@example.com")

    assert owners.find_all() == []


@pytest.mark.parametrize("name", ["", "   "])
def test_update_rejects_empty_name(owners: OwnerService, name: str):
    owner = owners.create(name="Jane Roe", email="jane@example.com")

    with pytest.raises(DomainValidationError):
        owners.update(owner.id, name=name)

    assert owners.find_one(owner.id).name == "Jane Roe"
