"""
Data models for the number formatter.
All models use Pydantic for validation and serialization.
"""

from typing import Dict, Iterator, List, Optional, Tuple
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field, field_validator


class FormatVariant(str, Enum):
    """Named rendering of a phone number. Declaration order is display order."""
    INTERNATIONAL = "international"
    NATIONAL = "national"
    E164 = "e164"
    INTERNATIONAL_WITH_DOTS = "internationalWithDots"


VARIANT_ORDER: Tuple[FormatVariant, ...] = tuple(FormatVariant)


class Direction(str, Enum):
    """Navigation direction through the format list."""
    NEXT = "next"
    PREVIOUS = "previous"


class CopySource(str, Enum):
    """Copy requests that are not tied to an explicit row."""
    KEYBOARD_SHORTCUT = "keyboard-shortcut"


class FormattedNumber(BaseModel):
    """One rendering of a phone number."""
    model_config = ConfigDict(frozen=True)

    variant: FormatVariant
    value: str


class FormatSet(BaseModel):
    """
    Ordered renderings of a single input.

    Either empty (the input is not a valid US number) or exactly the four
    variants in FormatVariant order, each with a non-empty value.
    """
    model_config = ConfigDict(frozen=True)

    entries: Tuple[FormattedNumber, ...] = ()

    @field_validator('entries')
    @classmethod
    def check_complete(cls, entries: Tuple[FormattedNumber, ...]) -> Tuple[FormattedNumber, ...]:
        if not entries:
            return entries

        variants = tuple(entry.variant for entry in entries)
        if variants != VARIANT_ORDER:
            raise ValueError(
                f"Format set must hold {[v.value for v in VARIANT_ORDER]} in order, "
                f"got {[v.value for v in variants]}"
            )

        empty = [entry.variant.value for entry in entries if not entry.value]
        if empty:
            raise ValueError(f"Empty rendering for: {', '.join(empty)}")

        return entries

    @classmethod
    def empty(cls) -> "FormatSet":
        return cls()

    @classmethod
    def from_values(cls, values: Dict[FormatVariant, str]) -> "FormatSet":
        """Build a set from a variant -> value mapping, in display order."""
        return cls(entries=tuple(
            FormattedNumber(variant=variant, value=values[variant])
            for variant in VARIANT_ORDER
        ))

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[FormattedNumber]:
        return iter(self.entries)

    def keys(self) -> List[str]:
        return [entry.variant.value for entry in self.entries]

    def values(self) -> List[str]:
        return [entry.value for entry in self.entries]

    def items(self) -> List[Tuple[str, str]]:
        return [(entry.variant.value, entry.value) for entry in self.entries]

    def get(self, variant: FormatVariant) -> Optional[str]:
        for entry in self.entries:
            if entry.variant == variant:
                return entry.value
        return None

    def value_at(self, index: int) -> Optional[str]:
        """Value at a display position, or None when out of range."""
        if 0 <= index < len(self.entries):
            return self.entries[index].value
        return None

    def as_dict(self) -> Dict[str, str]:
        return dict(self.items())


class ControllerState(BaseModel):
    """Snapshot of the interaction state after a transition."""
    model_config = ConfigDict(frozen=True)

    raw_input: str = ""
    formats: FormatSet = Field(default_factory=FormatSet)
    cursor: Optional[int] = None
    feedback_message: Optional[str] = None

    @property
    def selected_value(self) -> Optional[str]:
        if self.cursor is None:
            return None
        return self.formats.value_at(self.cursor)


class AppConfig(BaseModel):
    """Configuration for the formatter application."""

    # Feedback
    feedback_message: str = "Number has copied!"
    feedback_duration_ms: int = Field(default=1000, ge=0)
    suppress_stale_feedback: bool = False

    # UI
    title: str = "USA Number Formatter"
    mouse_enabled: bool = True

    # Debug
    debug_mode: bool = False
    debug_log_file: str = "./debug/debug.log"
