"""Character schemas for API requests and responses.

Also the canonical field set of a character sheet: the race, class and
background enumerations and the ability score group.
"""

from datetime import datetime
from enum import Enum
from typing import Annotated, Any

from pydantic import BaseModel, ConfigDict, Field, ValidationInfo, field_validator
from pydantic_core import PydanticCustomError

RACES: tuple[str, ...] = (
    "Human",
    "Elf",
    "Dwarf",
    "Halfling",
    "Dragonborn",
    "Gnome",
    "Half-Elf",
    "Half-Orc",
    "Tiefling",
)

CLASSES: tuple[str, ...] = (
    "Fighter",
    "Wizard",
    "Cleric",
    "Rogue",
    "Ranger",
    "Paladin",
    "Barbarian",
    "Bard",
    "Druid",
    "Monk",
    "Sorcerer",
    "Warlock",
)

BACKGROUNDS: tuple[str, ...] = (
    "Acolyte",
    "Criminal",
    "Folk Hero",
    "Noble",
    "Sage",
    "Soldier",
    "Charlatan",
    "Entertainer",
    "Guild Artisan",
    "Hermit",
    "Outlander",
    "Sailor",
)

ABILITY_NAMES: tuple[str, ...] = (
    "strength",
    "dexterity",
    "constitution",
    "intelligence",
    "wisdom",
    "charisma",
)

MIN_ABILITY_SCORE = 1
MAX_ABILITY_SCORE = 20
DEFAULT_ABILITY_SCORE = 10

MIN_LEVEL = 1
MAX_LEVEL = 20
DEFAULT_LEVEL = 1

COMBAT_FIELDS: tuple[str, ...] = ("max_hp", "current_hp", "armor_class")


class Race(str, Enum):
    """Playable races."""

    HUMAN = "Human"
    ELF = "Elf"
    DWARF = "Dwarf"
    HALFLING = "Halfling"
    DRAGONBORN = "Dragonborn"
    GNOME = "Gnome"
    HALF_ELF = "Half-Elf"
    HALF_ORC = "Half-Orc"
    TIEFLING = "Tiefling"


class CharacterClass(str, Enum):
    """Playable classes."""

    FIGHTER = "Fighter"
    WIZARD = "Wizard"
    CLERIC = "Cleric"
    ROGUE = "Rogue"
    RANGER = "Ranger"
    PALADIN = "Paladin"
    BARBARIAN = "Barbarian"
    BARD = "Bard"
    DRUID = "Druid"
    MONK = "Monk"
    SORCERER = "Sorcerer"
    WARLOCK = "Warlock"


class Background(str, Enum):
    """Character origin backgrounds."""

    ACOLYTE = "Acolyte"
    CRIMINAL = "Criminal"
    FOLK_HERO = "Folk Hero"
    NOBLE = "Noble"
    SAGE = "Sage"
    SOLDIER = "Soldier"
    CHARLATAN = "Charlatan"
    ENTERTAINER = "Entertainer"
    GUILD_ARTISAN = "Guild Artisan"
    HERMIT = "Hermit"
    OUTLANDER = "Outlander"
    SAILOR = "Sailor"


AbilityScore = Annotated[int, Field(ge=MIN_ABILITY_SCORE, le=MAX_ABILITY_SCORE)]


class AbilityScores(BaseModel):
    """The six ability scores of a character."""

    model_config = ConfigDict(frozen=True)

    strength: AbilityScore = DEFAULT_ABILITY_SCORE
    dexterity: AbilityScore = DEFAULT_ABILITY_SCORE
    constitution: AbilityScore = DEFAULT_ABILITY_SCORE
    intelligence: AbilityScore = DEFAULT_ABILITY_SCORE
    wisdom: AbilityScore = DEFAULT_ABILITY_SCORE
    charisma: AbilityScore = DEFAULT_ABILITY_SCORE

    def as_dict(self) -> dict[str, int]:
        """Return ability name -> score in canonical order."""
        return {name: getattr(self, name) for name in ABILITY_NAMES}


# Attribute names that can never be null or blank
REQUIRED_ATTRIBUTES: tuple[str, ...] = (
    "name",
    "race",
    "character_class",
    "background",
    "level",
    *ABILITY_NAMES,
)

INTEGER_ATTRIBUTES: tuple[str, ...] = ("level", *ABILITY_NAMES, *COMBAT_FIELDS)


class CharacterPayload(BaseModel):
    """Shared rules of the create and update request bodies.

    Keys are wire names only (``class``, never ``character_class``) and
    unknown keys are rejected. Integer fields take whole numbers; booleans
    and numeric strings are refused, integral floats such as ``3.0`` pass.
    """

    model_config = ConfigDict(extra="forbid", use_enum_values=True)

    @field_validator("*", mode="before")
    @classmethod
    def check_raw_value(cls, value: Any, info: ValidationInfo) -> Any:
        field = info.field_name
        if value is None:
            if field in REQUIRED_ATTRIBUTES:
                raise PydanticCustomError("required", "Field is required")
            return value
        if field == "name" and isinstance(value, str) and not value.strip():
            raise PydanticCustomError("required", "Field is required")
        if field in INTEGER_ATTRIBUTES and isinstance(value, (bool, str)):
            raise PydanticCustomError("whole_number", "Input should be a whole number")
        return value


class CharacterCreate(CharacterPayload):
    """Validated body of POST /api/characters.

    The JSON key for the class field is ``class``. Every descriptive field,
    the level and all six abilities must be present.
    """

    name: str
    race: Race
    character_class: CharacterClass = Field(alias="class")
    background: Background
    level: int = Field(ge=MIN_LEVEL, le=MAX_LEVEL)

    strength: AbilityScore
    dexterity: AbilityScore
    constitution: AbilityScore
    intelligence: AbilityScore
    wisdom: AbilityScore
    charisma: AbilityScore

    max_hp: int | None = None
    current_hp: int | None = None
    armor_class: int | None = None
    notes: str | None = None

    @property
    def abilities(self) -> AbilityScores:
        return AbilityScores(**{name: getattr(self, name) for name in ABILITY_NAMES})


class CharacterUpdate(CharacterPayload):
    """Validated body of PUT /api/characters/{id}.

    Only fields present in the request are applied.
    """

    name: str | None = None
    race: Race | None = None
    character_class: CharacterClass | None = Field(default=None, alias="class")
    background: Background | None = None
    level: int | None = Field(default=None, ge=MIN_LEVEL, le=MAX_LEVEL)

    strength: AbilityScore | None = None
    dexterity: AbilityScore | None = None
    constitution: AbilityScore | None = None
    intelligence: AbilityScore | None = None
    wisdom: AbilityScore | None = None
    charisma: AbilityScore | None = None

    max_hp: int | None = None
    current_hp: int | None = None
    armor_class: int | None = None
    notes: str | None = None

    def changes(self) -> dict:
        """Return the supplied fields keyed by attribute name."""
        return self.model_dump(exclude_unset=True)


class CharacterResponse(BaseModel):
    """Full character record."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    user_id: str
    name: str
    race: str
    character_class: str = Field(alias="class")
    level: int
    background: str

    strength: int
    dexterity: int
    constitution: int
    intelligence: int
    wisdom: int
    charisma: int

    max_hp: int | None
    current_hp: int | None
    armor_class: int | None
    notes: str | None

    created_at: datetime
    updated_at: datetime


class CharacterSummary(BaseModel):
    """Dashboard entry for a character."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    race: str
    character_class: str = Field(alias="class")
    level: int
    background: str
    updated_at: datetime


class CharactersListResponse(BaseModel):
    """Response model for GET /api/characters endpoint."""

    characters: list[CharacterSummary]
    total: int


class AbilityView(BaseModel):
    """One ability score as shown on the character sheet."""

    name: str
    score: int
    modifier: int
    display_modifier: str


class CharacterSheetResponse(BaseModel):
    """Response model for GET /api/characters/{id}/sheet endpoint."""

    character: CharacterResponse
    abilities: list[AbilityView]
    notes_lines: list[str]
