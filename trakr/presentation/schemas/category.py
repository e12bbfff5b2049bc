"""Category Pydantic schemas."""

from pydantic import BaseModel, ConfigDict, Field


class CategorySchema(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str = Field(..., examples=["food"])
    name: str = Field(..., examples=["Food & Dining"])
    color: str = Field(..., examples=["#38B2AC"])
    type: str = Field(..., description="income or expense", examples=["expense"])
