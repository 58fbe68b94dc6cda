"""
Static movie character catalog models.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field

from cinematic_mirror.models.enums import Gender
from cinematic_mirror.models.profile import PaletteColor, StyleVariant


class StylingOption(BaseModel):
    """One pre-authored outfit for a catalog character."""

    model_config = ConfigDict(populate_by_name=True, frozen=True)

    title: str
    subtitle: str = ""
    image: str = ""
    palette: list[PaletteColor] = Field(default_factory=list)
    materials: list[str] = Field(default_factory=list)
    tailoring: list[str] = Field(default_factory=list)
    script_snippet: str = Field("", alias="scriptSnippet")
    director_note: str = Field("", alias="directorNote")

    def to_variant(self) -> StyleVariant:
        """Copy this option verbatim into a profile styling variant."""
        return StyleVariant(
            title=self.title,
            subtitle=self.subtitle,
            image=self.image,
            palette=list(self.palette),
            materials=list(self.materials),
            tailoring=list(self.tailoring),
            script_snippet=self.script_snippet,
            director_note=self.director_note,
        )


class CatalogCharacter(BaseModel):
    """A pre-authored movie character."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    movie: str
    gender: Optional[Gender] = None
    traits: list[str] = Field(default_factory=list)
    stylings: list[StylingOption] = Field(default_factory=list)

    @property
    def first_styling(self) -> Optional[StylingOption]:
        return self.stylings[0] if self.stylings else None

    def summary(self) -> dict:
        """Prompt context only: no styling detail."""
        return {
            "id": self.id,
            "name": self.name,
            "movie": self.movie,
            "traits": list(self.traits),
        }
