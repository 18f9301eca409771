import json
from datetime import UTC, datetime
from typing import Annotated, Any, Self

from pydantic import BaseModel, ConfigDict, ValidationError, field_validator, model_validator
from pydantic import Field as PydanticField
from sqlmodel import Field, SQLModel

# Zero value of a timestamp on the wire: 0001-01-01T00:00:00Z
ZERO_TIME = datetime(1, 1, 1, tzinfo=UTC)

# Columns owned by the storage layer; never taken from a request body
SERVER_MANAGED_FIELDS = frozenset({"id", "created_at", "updated_at", "deleted_at"})

# Integer columns are signed 64-bit; larger values are a decode error
INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1
Int64 = Annotated[int, PydanticField(ge=INT64_MIN, le=INT64_MAX)]


def utcnow() -> datetime:
    return datetime.now(UTC)


class Entity(BaseModel):
    """Base record shared by every catalog entity.

    Carries the numeric identity, the creation/update timestamps and the
    soft-delete marker. A default-constructed entity is the zero-value record
    returned when a lookup matches nothing: ``ID`` 0, zero timestamps and
    empty business fields.

    Fields are exposed on the wire under their PascalCase aliases. Incoming
    keys are matched case-insensitively, so ``name``, ``NAME`` and ``Name``
    all populate ``Name``.
    """

    model_config = ConfigDict(populate_by_name=True, from_attributes=True)

    id: Int64 = PydanticField(default=0, alias="ID", description="Surrogate primary key")
    created_at: datetime = PydanticField(default=ZERO_TIME, alias="CreatedAt")
    updated_at: datetime = PydanticField(default=ZERO_TIME, alias="UpdatedAt")
    deleted_at: datetime | None = PydanticField(default=None, alias="DeletedAt")

    @field_validator("created_at", "updated_at", "deleted_at")
    @classmethod
    def _assume_utc(cls, value: datetime | None) -> datetime | None:
        # SQLite hands back naive datetimes
        if value is not None and value.tzinfo is None:
            return value.replace(tzinfo=UTC)
        return value

    @model_validator(mode="before")
    @classmethod
    def _match_keys_case_insensitively(cls, data: Any) -> Any:
        if not isinstance(data, dict):
            return data
        return cls._normalize_keys(data)

    @classmethod
    def _normalize_keys(cls, data: dict) -> dict:
        aliases = {}
        for name, field in cls.model_fields.items():
            aliases[(field.alias or name).lower()] = field.alias or name

        normalized = {}
        for key, value in data.items():
            if not isinstance(key, str) or key in cls.model_fields:
                normalized[key] = value
                continue
            normalized[aliases.get(key.lower(), key)] = value
        return normalized

    @classmethod
    def decode(cls, body: bytes) -> Self:
        """Decode a request body without ever failing.

        Malformed JSON and non-object bodies decode to the zero-value record,
        unknown keys are ignored, keys whose values do not decode to the
        field's type are dropped, and server-managed fields are discarded.
        """
        try:
            data = json.loads(body) if body else {}
        except (UnicodeDecodeError, json.JSONDecodeError):
            data = {}
        if not isinstance(data, dict):
            data = {}

        data = cls._normalize_keys(data)
        managed = {
            cls.model_fields[name].alias or name for name in SERVER_MANAGED_FIELDS
        } | SERVER_MANAGED_FIELDS
        data = {key: value for key, value in data.items() if key not in managed}

        while True:
            try:
                return cls.model_validate(data)
            except ValidationError as exc:
                rejected = {err["loc"][0] for err in exc.errors() if err["loc"]}
                if not rejected & data.keys():
                    return cls()
                data = {key: value for key, value in data.items() if key not in rejected}


class EntityTable(SQLModel, table=False):
    """Base table with auto-incrementing integer identity and soft-delete marker."""

    id: int | None = Field(
        default=None,
        primary_key=True,
        description="Unique identifier for the row",
    )

    created_at: datetime = Field(default_factory=utcnow, nullable=False)
    updated_at: datetime = Field(
        default_factory=utcnow,
        nullable=False,
        sa_column_kwargs={"onupdate": utcnow},
    )
    deleted_at: datetime | None = Field(default=None, index=True)
