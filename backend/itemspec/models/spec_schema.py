"""
Item specification payload models.

Every estimate leaving the inference engine is an ItemSpecification.
The models are frozen so results can be shared between request handlers
without copying.
"""
from enum import Enum
from typing import Optional
from pydantic import BaseModel, Field


class Confidence(str, Enum):
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class FeelBucket(str, Enum):
    """Qualitative heaviness picked by the user instead of typing a weight."""
    VERY_LIGHT = "very_light"
    LIGHT = "light"
    MEDIUM = "medium"
    HEAVY = "heavy"
    VERY_HEAVY = "very_heavy"


class Dimensions(BaseModel):
    length: float = Field(..., description="Longest side in cm")
    width: float = Field(..., description="cm")
    height: float = Field(..., description="cm")

    model_config = {"frozen": True}


class ItemSpecification(BaseModel):
    """
    Estimated physical specification of a listed item.
    weight is rounded to 0.1 kg, dimensions to whole centimetres.
    """
    weight: float = Field(..., description="Estimated weight in kg")
    dimensions: Dimensions
    category: str = Field(..., description="e.g. marine, electronics, food")
    source: str = Field(..., description="Rule that produced the estimate, e.g. 'Matched: anchor (15kg)'")
    confidence: Confidence = Confidence.MEDIUM

    model_config = {
        "frozen": True,
        "json_schema_extra": {
            "example": {
                "weight": 20.0,
                "dimensions": {"length": 75, "width": 50, "height": 50},
                "category": "marine",
                "source": "Battery 200Ah (estimated)",
                "confidence": "medium",
            }
        },
    }


class ExtractedAttributes(BaseModel):
    """Numeric attributes found in listing text. None = not mentioned."""
    amp_hours: Optional[int] = None
    diameter_inches: Optional[int] = None
    wattage: Optional[int] = None
    gallons: Optional[int] = None
    feet: Optional[int] = None
    gph: Optional[int] = None
    amperage: Optional[int] = None
    cubic_feet: Optional[int] = None
    person_capacity: Optional[int] = None
    pounds: Optional[int] = None

    model_config = {"frozen": True}

    def is_empty(self) -> bool:
        return all(value is None for value in self.model_dump().values())


class WeightValidation(BaseModel):
    valid: bool
    warning: Optional[str] = None

    model_config = {"frozen": True}


class CategoryDefault(BaseModel):
    """Plausible weight band for a broad listing category (kg)."""
    category: str
    min: float
    max: float
    typical: float

    model_config = {"frozen": True}


class DensityBand(BaseModel):
    """Plausible density range for a feel bucket (kg/L)."""
    min: float
    max: float
    typical: float

    model_config = {"frozen": True}


class ReferenceItem(BaseModel):
    """A familiar object shown next to the weight field for comparison."""
    name: str
    weight: float
    dimensions: str
    category: Optional[str] = None

    model_config = {"frozen": True}


class ItemTemplate(BaseModel):
    """Quick-pick listing template for a common boat item."""
    id: str
    title: str
    description: str
    category: str
    keywords: tuple[str, ...] = ()

    model_config = {"frozen": True}
