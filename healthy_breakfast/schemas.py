"""Shared pydantic schemas."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MenuItem(BaseModel):
    """A single dish on the breakfast menu."""

    model_config = ConfigDict(frozen=True)

    id: int = Field(description="Identifier unique within the store")
    name: str = Field(min_length=1, description="Name shown to diners")
    price: int = Field(ge=0, description="Price in whole rupees")
