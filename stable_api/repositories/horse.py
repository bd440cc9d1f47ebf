from stable_api.db.models.horse import Horse as HorseModel
from stable_api.domain.records import HorseRecord
from stable_api.repositories.base import SqlAlchemyRepository


class HorseRepository(SqlAlchemyRepository[HorseRecord]):
    model = HorseModel
    entity_name = "Horse"

    def _to_record(self, row: HorseModel) -> HorseRecord:
        return HorseRecord(
            id=row.id,
            name=row.name,
            age=row.age,
            breed=row.breed,
            health_status=row.health_status,
            owner_id=row.owner_id,
        )
