from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class User(BaseModel):
    """Petstore user record, serialized with the OpenAPI camelCase names."""

    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(default=None, description="64-bit user identifier")
    username: Optional[str] = Field(default=None, description="Lookup key; unique across the store")
    first_name: Optional[str] = Field(default=None, alias="firstName")
    last_name: Optional[str] = Field(default=None, alias="lastName")
    email: Optional[str] = None
    # Stored and returned as-is (no masking on read).
    password: Optional[str] = None
    phone: Optional[str] = None
    user_status: Optional[int] = Field(default=None, alias="userStatus", description="User Status")

    def to_json(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)


class Health(BaseModel):
    ok: bool
    service: str
    version: str
    users: int
