"""In-memory stand-ins for the persistence layer.

``InMemoryStore`` plays the role of the database: owner emails are unique and
deleting an owner cascades to its horses, like the real schema.
"""

from dataclasses import replace

from stable_api.domain.records import HorseRecord, OwnerRecord
from stable_api.errors import DuplicateResourceError, NotFoundError


class InMemoryRepository:
    def __init__(self, record_type, entity_name, unique=(), on_delete=None):
        self.record_type = record_type
        self.entity_name = entity_name
        self.unique = unique
        self.on_delete = on_delete
        self.rows = {}
        self._next_id = 1

    def _check_unique(self, values, exclude_id=None):
        for field in self.unique:
            if field not in values:
                continue
            for row in self.rows.values():
                if row.id != exclude_id and getattr(row, field) == values[field]:
                    raise DuplicateResourceError(f"{field} already exists")

    def _matches(self, row, criteria):
        return all(getattr(row, key) == value for key, value in criteria.items())

    def insert(self, **values):
        self._check_unique(values)
        record = self.record_type(id=self._next_id, **values)
        self.rows[record.id] = record
        self._next_id += 1
        return record

    def find_unique(self, **key):
        for row in self.rows.values():
            if self._matches(row, key):
                return row
        return None

    def find_many(self, **criteria):
        return [row for _, row in sorted(self.rows.items()) if self._matches(row, criteria)]

    def update(self, record_id, **changes):
        if record_id not in self.rows:
            raise NotFoundError(f"{self.entity_name} with ID {record_id} not found")
        self._check_unique(changes, exclude_id=record_id)
        self.rows[record_id] = replace(self.rows[record_id], **changes)
        return self.rows[record_id]

    def delete(self, record_id):
        if record_id not in self.rows:
            raise NotFoundError(f"{self.entity_name} with ID {record_id} not found")
        del self.rows[record_id]
        if self.on_delete is not None:
            self.on_delete(record_id)


class InMemoryStore:
    def __init__(self):
        self.owners = InMemoryRepository(
            OwnerRecord, "Owner", unique=("email",), on_delete=self._cascade_owner
        )
        self.horses = InMemoryRepository(HorseRecord, "Horse")

    def _cascade_owner(self, owner_id):
        for horse in self.horses.find_many(owner_id=owner_id):
            del self.horses.rows[horse.id]
