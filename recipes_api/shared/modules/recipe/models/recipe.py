from datetime import datetime, timezone
from typing import List

from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field, TypeAdapter, field_validator


def new_recipe_id() -> str:
    return str(ObjectId())


def published_now() -> datetime:
    """
    Current UTC time truncated to milliseconds.
    BSON datetimes only carry millisecond precision, so this is the value
    the store will hand back on the next read.
    """
    now = datetime.now(timezone.utc)
    return now.replace(microsecond=(now.microsecond // 1000) * 1000)


class RecipePayload(BaseModel):
    """
    Writable fields of a recipe, as accepted from a request body.
    Unknown keys (including id and published_at) are ignored.
    """
    model_config = ConfigDict(extra="ignore")

    name: str
    tags: List[str] = Field(default_factory=list)
    ingredients: List[str] = Field(default_factory=list)
    instructions: List[str] = Field(default_factory=list)


class Recipe(RecipePayload):
    """
    A stored recipe. The id and published_at are assigned once at creation
    and never change afterwards.
    """
    id: str = Field(default_factory=new_recipe_id)
    published_at: datetime = Field(default_factory=published_now)

    @field_validator("published_at")
    @classmethod
    def assume_utc(cls, value: datetime) -> datetime:
        # pymongo hands back naive UTC datetimes unless the client is tz_aware
        if value.tzinfo is None:
            return value.replace(tzinfo=timezone.utc)
        return value

    @classmethod
    def from_payload(cls, payload: RecipePayload) -> "Recipe":
        return cls(**payload.model_dump())


# Serializer for the whole-collection cache blob
RecipeList = TypeAdapter(List[Recipe])
