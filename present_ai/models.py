from enum import Enum
from typing import Annotated, Any, Literal, Optional, Tuple, Union

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator

from .config import DEFAULT_CURRENCY, OTHERS


NOT_SPECIFIED = "Not specified"
PRICE_NOT_SPECIFIED = "Price not specified"


class GiftIdea(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    name: str = Field(..., min_length=1, description="Short gift name")
    appropriateness: str = Field(NOT_SPECIFIED, description="Why the gift is appropriate")
    relation: str = Field(NOT_SPECIFIED, description="How it relates to the recipient")
    price_range: str = Field(PRICE_NOT_SPECIFIED, alias="priceRange", description="Price range within budget")

    @field_validator("name", "appropriateness", "relation", "price_range", mode="before")
    @classmethod
    def _scalar_to_text(cls, v: Any) -> Any:
        # Models sometimes answer with numbers, e.g. "priceRange": 40
        if isinstance(v, (int, float)) and not isinstance(v, bool):
            return str(v)
        if isinstance(v, str):
            return v.strip()
        return v

    @field_validator("appropriateness", "relation", "price_range", mode="before")
    @classmethod
    def _null_to_placeholder(cls, v: Any, info: ValidationInfo) -> Any:
        # "priceRange": null when the model doesn't know
        if v is None:
            return cls.model_fields[info.field_name].default
        return v

    @property
    def key(self) -> str:
        return self.name.lower()


class Preset(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["preset"] = "preset"
    value: str = ""

    def resolve(self) -> str:
        return self.value


class Custom(BaseModel):
    model_config = ConfigDict(frozen=True)

    kind: Literal["custom"] = "custom"
    text: str = ""

    def resolve(self) -> str:
        return self.text


Choice = Annotated[Union[Preset, Custom], Field(discriminator="kind")]


def choice_from_widget(selected: Optional[str], custom_text: Optional[str] = "") -> Union[Preset, Custom]:
    """Turns a select box value plus its free-text companion into a Choice."""
    if selected == OTHERS:
        return Custom(text=custom_text or "")
    return Preset(value=selected or "")


class FormState(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = Field("", description="Recipient's name")
    age: str = Field("", description="Age, unvalidated numeric text")
    gender: str = ""
    relationship: Choice = Field(default_factory=Preset)
    hobbies: str = Field("", description="Hobbies, e.g. 'painting, football'")
    personality: Choice = Field(default_factory=Preset)
    budget: str = Field("", description="Budget amount, unvalidated numeric text")
    currency: str = DEFAULT_CURRENCY
    occasion: Choice = Field(default_factory=Preset)

    @property
    def budget_text(self) -> str:
        return f"{self.budget} {self.currency}"


class Session(BaseModel):
    model_config = ConfigDict(frozen=True)

    ideas: Tuple[GiftIdea, ...] = ()
    request_count: int = 0

    @property
    def seen_names(self) -> set:
        return {idea.key for idea in self.ideas}


class View(str, Enum):
    FORM = "form"
    RESULTS = "results"


class AppState(BaseModel):
    model_config = ConfigDict(frozen=True)

    form: FormState = Field(default_factory=FormState)
    session: Session = Field(default_factory=Session)
    view: View = View.FORM
    loading: bool = False
    error: Optional[str] = None
