"""
Personality profile models.

A profile is created once by the profile synthesizer and never updated.
Top-level fields use the storage (snake_case) names; nested records keep
the camelCase keys the client and the LLM output use.
"""

from datetime import datetime
from typing import Union

from pydantic import BaseModel, ConfigDict, Field

from cinematic_mirror.models.chat import ChatMessage


class PersonalityAngle(BaseModel):
    """One facet of the personality reading."""

    label: str = ""
    essence: str = ""


class VisualAdvice(BaseModel):
    """Camera/lighting/motion triple."""

    camera: str = ""
    lighting: str = ""
    motion: str = ""


class PaletteColor(BaseModel):
    """A named swatch in a styling palette."""

    model_config = ConfigDict(populate_by_name=True)

    hex: str = ""
    name: str = ""
    en_name: str = Field("", alias="enName")


class CharacterMatch(BaseModel):
    """A movie character matched to the subject."""

    model_config = ConfigDict(populate_by_name=True)

    name: str
    movie: str
    match_rate: Union[int, float] = Field(..., alias="matchRate", ge=0, le=100)
    description: str = ""
    image: str = ""


class StyleVariant(BaseModel):
    """A styling proposal."""

    model_config = ConfigDict(populate_by_name=True)

    title: str
    subtitle: str = ""
    image: str = ""
    palette: list[PaletteColor] = Field(default_factory=list)
    materials: list[str] = Field(default_factory=list)
    tailoring: list[str] = Field(default_factory=list)
    script_snippet: str = Field("", alias="scriptSnippet")
    director_note: str = Field("", alias="directorNote")


class PersonalityProfile(BaseModel):
    """Durable output of a completed interview."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    id: str
    user_id: str
    title: str
    subtitle: str
    analysis: str = ""
    narrative: str = ""
    angles: list[PersonalityAngle] = Field(default_factory=list)
    visual_advice: VisualAdvice = Field(default_factory=VisualAdvice)
    matches: list[CharacterMatch] = Field(default_factory=list)
    styling_variants: list[StyleVariant] = Field(default_factory=list)
    interview_history: list[ChatMessage] = Field(default_factory=list)
    created_at: datetime
