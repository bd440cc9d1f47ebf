from sqlalchemy import CheckConstraint, Column, ForeignKey, Integer, String

from stable_api.db.base import Base
from stable_api.domain.horse import MAX_AGE, MIN_AGE, HealthStatus

_HEALTH_VALUES = ", ".join(f"'{status.value}'" for status in HealthStatus)


class Horse(Base):
    __tablename__ = "horses"
    __table_args__ = (
        CheckConstraint(f"age >= {MIN_AGE} AND age <= {MAX_AGE}", name="ck_horses_age_range"),
        CheckConstraint(f"health_status IN ({_HEALTH_VALUES})", name="ck_horses_health_status"),
    )

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    age = Column(Integer, nullable=False)
    breed = Column(String(255), nullable=False, index=True)
    health_status = Column(String(20), nullable=False)
    # No ORM relationship: deleting an owner relies on the database cascade.
    owner_id = Column(
        Integer,
        ForeignKey("owners.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
