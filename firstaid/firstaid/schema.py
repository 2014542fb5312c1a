from __future__ import annotations

from typing import Any, List, Literal, Optional

from pydantic import BaseModel, Field, field_validator, model_validator


MatchPhase = Literal["exact", "scored", "default"]
Urgency = Literal["normal", "recommended", "critical"]

URGENCY_RANK = {"normal": 0, "recommended": 1, "critical": 2}


def normalize_key(key: str) -> str:
    return key.strip().lower()


class KnowledgeEntry(BaseModel):
    keys: List[str]
    guidance: str

    @field_validator("keys")
    @classmethod
    def validate_keys(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("keys must be non-empty")
        for key in v:
            if not key or key != normalize_key(key):
                raise ValueError(f"key must be lowercase and trimmed: {key!r}")
        return v

    @field_validator("guidance")
    @classmethod
    def validate_guidance(cls, v: str) -> str:
        if not v.strip():
            raise ValueError("guidance must be non-empty")
        return v

    model_config = {"extra": "forbid", "frozen": True}


class MatchResult(BaseModel):
    key: Optional[str] = None
    payload: Any
    phase: MatchPhase
    score: int = 0

    @property
    def matched(self) -> bool:
        return self.phase != "default"

    model_config = {"extra": "forbid", "frozen": True}


class PersonalizationContext(BaseModel):
    full_name: str = ""
    age: str = ""
    sex: str = ""
    blood_group: str = ""
    conditions: List[str] = Field(default_factory=list)
    allergies: str = ""
    medications: str = ""
    emergency_contact: str = ""
    emergency_phone: str = ""

    @model_validator(mode="before")
    @classmethod
    def split_conditions(cls, data: Any) -> Any:
        # Stored records keep conditions as one free-text field.
        if isinstance(data, dict) and isinstance(data.get("conditions"), str):
            data = dict(data)
            raw = data["conditions"]
            data["conditions"] = [c.strip() for c in raw.replace(";", ",").split(",") if c.strip()]
        return data

    @field_validator("full_name", "age", "sex", "blood_group", "allergies", "medications", "emergency_contact", "emergency_phone", mode="before")
    @classmethod
    def none_to_blank(cls, v: Any) -> str:
        if v is None:
            return ""
        return str(v).strip()

    model_config = {"extra": "ignore", "frozen": True}


class SupplyRecommendation(BaseModel):
    id: str
    name: str
    description: str
    price: float = Field(ge=0)
    category: str
    urgency: Urgency

    model_config = {"extra": "forbid", "frozen": True}


class SupplyRule(BaseModel):
    """One supply category, matched on the caller's hint or on guidance text."""

    category: str
    hint_keys: List[str] = Field(default_factory=list)
    guidance_keys: List[str] = Field(default_factory=list)
    items: List[SupplyRecommendation]

    @field_validator("hint_keys", "guidance_keys")
    @classmethod
    def validate_keys(cls, v: List[str]) -> List[str]:
        for key in v:
            if not key or key != normalize_key(key):
                raise ValueError(f"key must be lowercase and trimmed: {key!r}")
        return v

    @model_validator(mode="after")
    def validate_has_keys(self) -> "SupplyRule":
        if not (self.hint_keys or self.guidance_keys):
            raise ValueError(f"{self.category}: rule needs at least one key")
        return self

    model_config = {"extra": "forbid", "frozen": True}


class FollowUpQuestionSet(BaseModel):
    category: str
    questions: List[str]

    @field_validator("questions")
    @classmethod
    def validate_nonempty(cls, v: List[str]) -> List[str]:
        if not v:
            raise ValueError("questions must be non-empty")
        return v

    model_config = {"extra": "forbid", "frozen": True}


class GuidanceResult(BaseModel):
    output: str
    guidance: str
    key: Optional[str] = None
    phase: MatchPhase = "default"
    prefix: str = ""
    personalized: bool = False
    disclosed: List[str] = Field(default_factory=list)
    failed: bool = False

    model_config = {"extra": "forbid"}
