from pydantic import AliasChoices, BaseModel, ConfigDict, Field, StrictInt

from stable_api.domain.horse import MAX_AGE, MIN_AGE, HealthStatus

# Age range and health status are checked by HorseService, after the owner
# lookup, so they are only typed here.
_HEALTH_STATUS_SCHEMA = {"enum": [status.value for status in HealthStatus]}
_AGE_DESCRIPTION = f"Horse age ({MIN_AGE}-{MAX_AGE} years)"


class Horse(BaseModel):
    model_config = ConfigDict(from_attributes=True, populate_by_name=True)

    id: int
    name: str
    age: int
    breed: str
    health_status: HealthStatus = Field(
        validation_alias=AliasChoices("healthStatus", "health_status"),
        serialization_alias="healthStatus",
    )
    owner_id: int = Field(
        validation_alias=AliasChoices("owner", "owner_id"),
        serialization_alias="owner",
    )


class HorseCreate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str = Field(..., min_length=1, max_length=255, examples=["Spirit"])
    age: StrictInt = Field(..., description=_AGE_DESCRIPTION, examples=[5])
    breed: str = Field(..., min_length=1, max_length=255, examples=["Arabian"])
    health_status: str = Field(
        ...,
        alias="healthStatus",
        examples=[HealthStatus.HEALTHY.value],
        json_schema_extra=_HEALTH_STATUS_SCHEMA,
    )
    owner: int = Field(..., description="ID of the owner", examples=[1])


class HorseUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    name: str | None = Field(None, min_length=1, max_length=255)
    age: StrictInt | None = Field(None, description=_AGE_DESCRIPTION)
    breed: str | None = Field(None, min_length=1, max_length=255)
    health_status: str | None = Field(
        None, alias="healthStatus", json_schema_extra=_HEALTH_STATUS_SCHEMA
    )
    owner: int | None = Field(None, description="ID of the new owner")


class HorseHealthUpdate(BaseModel):
    model_config = ConfigDict(extra="forbid", populate_by_name=True)

    health_status: str = Field(
        ...,
        alias="healthStatus",
        examples=[HealthStatus.RECOVERING.value],
        json_schema_extra=_HEALTH_STATUS_SCHEMA,
    )
