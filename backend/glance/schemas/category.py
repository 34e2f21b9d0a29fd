from pydantic import BaseModel, ConfigDict, Field


class CategoryBase(BaseModel):
    """Base category fields."""
    name: str = Field(min_length=1, max_length=255)
    color: str = "bg-gray-500"
    icon: str = "more-horizontal"


class CategoryCreate(CategoryBase):
    """Fields for creating or replacing a category."""
    pass


class Category(CategoryBase):
    """A stored category."""
    id: str

    model_config = ConfigDict(frozen=True)
