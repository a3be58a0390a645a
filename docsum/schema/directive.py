"""Length directive: the resolved instruction that governs summary verbosity."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class LengthKind(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"
    CHARACTER_TARGET = "character_target"
    DEFAULT = "default"


class LengthDirective(BaseModel):
    """
    Tagged variant: Short | Medium | Long | CharacterTarget(n) | Default.
    `target_chars` is set only for CHARACTER_TARGET. `instruction` is the text sent to the model.
    """

    model_config = ConfigDict(frozen=True)

    kind: LengthKind
    instruction: str
    target_chars: int | None = Field(default=None, ge=1)
