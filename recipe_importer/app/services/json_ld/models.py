"""Pydantic models for JSON-LD recipe import."""

from enum import Enum
from typing import List, Optional, Union

from pydantic import BaseModel, ConfigDict, Field


class IngredientConfidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class DraftIngredient(BaseModel):
    """An ingredient row in the shape the recipe storage API expects."""

    quantity: str = ""
    measurement: str = ""
    name: str


class ParsedIngredient(BaseModel):
    """One free-text ingredient line split into quantity, unit and name."""

    quantity: str = ""
    measurement: str = ""
    name: str
    confidence: IngredientConfidence

    model_config = ConfigDict(frozen=True)

    def to_draft(self) -> DraftIngredient:
        return DraftIngredient(quantity=self.quantity, measurement=self.measurement, name=self.name)


class InstructionStep(BaseModel):
    step: str


class InstructionGroup(BaseModel):
    """Marks the start of a named section of steps."""

    group: str


InstructionEntry = Union[InstructionGroup, InstructionStep]


class RecipeYield(BaseModel):
    quantity: Optional[str] = None
    unit_name: Optional[str] = None


class RecipeDraft(BaseModel):
    """Recipe fields populated from structured data, prior to persistence."""

    recipe_name: Optional[str] = None
    description: str = ""
    url: Optional[str] = None
    author: Optional[str] = None
    prep_time: Optional[int] = None
    cook_time: Optional[int] = None
    recipe_yield: Optional[str] = None
    recipe_yield_name: Optional[str] = None
    cuisine: Optional[str] = None
    image: Optional[str] = None
    thumbnail: Optional[str] = None
    date_published: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    ingredients: List[DraftIngredient] = Field(default_factory=list)
    instructions: List[InstructionEntry] = Field(default_factory=list)


class MappingResult(BaseModel):
    """Result of mapping one JSON-LD Recipe object to a draft."""

    draft: RecipeDraft
    warnings: List[str] = Field(default_factory=list)
    low_confidence_indices: List[int] = Field(default_factory=list)


class ImportResult(BaseModel):
    """Outcome of importing a recipe from an HTML page."""

    success: bool
    mapping: Optional[MappingResult] = None
    error_code: Optional[str] = None
    error_message: Optional[str] = None
