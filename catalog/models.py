"""Entity schemas - Pydantic models for products, reviews and users.

Input models (``*In`` / ``ProductUpdate`` / ``ReviewFilter``) describe what a
caller may send and carry every constraint. Stored models mirror rows as the
store returns them. ``created_at`` is never accepted from callers; repositories
stamp it on insert.
"""
from datetime import UTC, datetime
from typing import Optional

from pydantic import BaseModel, EmailStr, Field, field_validator


def created_now() -> str:
    """Timestamp written into ``created_at`` on insert."""
    return datetime.now(UTC).isoformat()


def _reject_bool(v):
    # bool is an int subclass, pydantic would store True as 1
    if isinstance(v, bool):
        raise ValueError("must be a valid number")
    return v


# ==================== INPUT SCHEMAS ====================


class ProductIn(BaseModel):
    """Product as submitted for creation."""
    name: str = Field(min_length=1)
    description: str = Field(min_length=1)
    price: float = Field(ge=0, allow_inf_nan=False)
    stock: int = Field(ge=0)

    class Config:
        extra = "ignore"

    @field_validator("price", "stock", mode="before")
    @classmethod
    def reject_bool(cls, v):
        return _reject_bool(v)


class ProductUpdate(BaseModel):
    """Partial product update. Unset fields are left untouched; null is rejected."""
    name: str = Field(default=None, min_length=1)
    description: str = Field(default=None, min_length=1)
    price: float = Field(default=None, ge=0, allow_inf_nan=False)
    stock: int = Field(default=None, ge=0)

    class Config:
        extra = "ignore"

    @field_validator("price", "stock", mode="before")
    @classmethod
    def reject_bool(cls, v):
        return _reject_bool(v)


class ReviewIn(BaseModel):
    """Review as submitted. ``name`` is the reviewed product's name."""
    name: str = Field(min_length=1)
    email: EmailStr
    rating: int = Field(ge=1, le=5)
    comment: str = Field(min_length=1)

    class Config:
        extra = "ignore"

    @field_validator("rating", mode="before")
    @classmethod
    def reject_bool(cls, v):
        return _reject_bool(v)


class ReviewFilter(BaseModel):
    """Criteria accepted by review lookups. Unknown keys are an error."""
    name: str = Field(default=None, min_length=1)
    email: str = Field(default=None, min_length=1)
    rating: int = Field(default=None, ge=1, le=5)

    class Config:
        extra = "forbid"

    @field_validator("rating", mode="before")
    @classmethod
    def reject_bool(cls, v):
        return _reject_bool(v)


class UserIn(BaseModel):
    """User as produced by a GitHub login."""
    github_id: str = Field(min_length=1, json_schema_extra={"unique": True})
    username: str = Field(min_length=1)
    email: EmailStr = Field(json_schema_extra={"unique": True})
    avatar_url: Optional[str] = None
    access_token: Optional[str] = None

    class Config:
        extra = "ignore"

    @field_validator("github_id", mode="before")
    @classmethod
    def coerce_github_id(cls, v):
        # GitHub reports numeric ids
        if isinstance(v, int) and not isinstance(v, bool):
            return str(v)
        return v


# ==================== STORED MODELS ====================


class Product(BaseModel):
    """Product model."""
    id: str
    name: str
    description: str
    price: float
    stock: int

    class Config:
        extra = "ignore"  # Ignore unknown columns from DB


class Review(BaseModel):
    """Review model."""
    id: str
    name: str
    email: str
    rating: int
    comment: str
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"


class User(BaseModel):
    """User model. The OAuth access token never leaves the process when serialized."""
    id: str
    github_id: str
    username: str
    email: str
    avatar_url: Optional[str] = None
    access_token: Optional[str] = Field(default=None, exclude=True)
    created_at: Optional[datetime] = None

    class Config:
        extra = "ignore"


def unique_fields(model: type[BaseModel]) -> list[str]:
    """Names of fields that declare a uniqueness intent."""
    fields = []
    for name, info in model.model_fields.items():
        extra = info.json_schema_extra
        if isinstance(extra, dict) and extra.get("unique"):
            fields.append(name)
    return fields
