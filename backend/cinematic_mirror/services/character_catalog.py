"""
Static movie character catalog.

Loaded once from the packaged `data/characters.json` and treated as a
read-only reference table: trait tags are prompt context for the LLM,
stylings are the canonical imagery attached to resolved matches.
"""

from __future__ import annotations

import json
from functools import lru_cache
from importlib import resources
from typing import Iterable, Optional

from cinematic_mirror.models.character import CatalogCharacter
from cinematic_mirror.models.enums import Gender

_DATA_PACKAGE = "cinematic_mirror.data"
_DATA_FILE = "characters.json"


class CharacterCatalog:
    """Immutable, ordered collection of catalog characters."""

    def __init__(self, characters: Iterable[CatalogCharacter]):
        self._characters: tuple[CatalogCharacter, ...] = tuple(characters)

    def __len__(self) -> int:
        return len(self._characters)

    def __iter__(self):
        return iter(self._characters)

    @property
    def characters(self) -> tuple[CatalogCharacter, ...]:
        return self._characters

    def find(self, character_id: Optional[str] = None, name: Optional[str] = None) -> Optional[CatalogCharacter]:
        """First character whose id equals `character_id` or whose name equals `name`."""
        for character in self._characters:
            if character_id and character.id == character_id:
                return character
            if name and character.name == name:
                return character
        return None

    def find_by_name(self, name: str) -> Optional[CatalogCharacter]:
        return self.find(name=name)

    def for_gender(self, gender: Optional[Gender]) -> "CharacterCatalog":
        """Sub-catalog of one gender; the whole catalog when none match."""
        if gender is None:
            return self
        subset = [c for c in self._characters if c.gender == gender]
        if not subset:
            return self
        return CharacterCatalog(subset)

    def summaries(self) -> list[dict]:
        return [character.summary() for character in self._characters]

    def summaries_json(self) -> str:
        """Prompt-ready JSON listing of id/name/movie/traits."""
        return json.dumps(self.summaries(), ensure_ascii=False, indent=2)


def load_catalog_data(raw: str) -> CharacterCatalog:
    """Build a catalog from a JSON array of character records."""
    records = json.loads(raw)
    return CharacterCatalog(CatalogCharacter.model_validate(record) for record in records)


@lru_cache()
def get_character_catalog() -> CharacterCatalog:
    """Process-wide catalog, loaded on first use."""
    raw = resources.files(_DATA_PACKAGE).joinpath(_DATA_FILE).read_text(encoding="utf-8")
    return load_catalog_data(raw)
