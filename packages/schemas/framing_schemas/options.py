"""Form option registry - the enumerations shared by forms and email templates.

The values live in ``data/form_options.json`` so the wizard, the API and the
email renderer all read the same label/value pairs.
"""

from functools import lru_cache
from importlib import resources
from typing import Literal

from pydantic import BaseModel, Field

OptionGroup = Literal[
    "styles",
    "matting",
    "protection",
    "budget",
    "timeline",
    "services",
    "contact_methods",
    "statuses",
]

# Service selections that need an address on file
ZIP_REQUIRED_SERVICES = frozenset({"delivery", "installation"})


class Option(BaseModel):
    """A single selectable value and its display label."""

    value: str
    label: str


class FormOptions(BaseModel):
    """Versioned registry of every form enumeration."""

    version: int = Field(ge=1)
    categories: list[str]
    styles: list[Option]
    matting: list[Option]
    protection: list[Option]
    budget: list[Option]
    timeline: list[Option]
    services: list[Option]
    contact_methods: list[Option]
    statuses: list[Option]

    def values(self, group: OptionGroup) -> list[str]:
        """Allowed values for an option group."""
        return [option.value for option in getattr(self, group)]

    def label_for(self, group: OptionGroup, value: str | None) -> str:
        """
        Resolve a stored value to its human-readable label.

        Unknown values are returned unchanged so older records still render.
        Empty values resolve to an empty string.
        """
        if not value:
            return ""
        for option in getattr(self, group):
            if option.value == value:
                return option.label
        return value

    def labels_for(self, group: OptionGroup, values: list[str]) -> list[str]:
        """Resolve a list of values, skipping empties."""
        return [self.label_for(group, value) for value in values if value]


@lru_cache(maxsize=1)
def get_form_options() -> FormOptions:
    """Load and validate the bundled registry (cached for the process)."""
    raw = (
        resources.files("framing_schemas")
        .joinpath("data/form_options.json")
        .read_text(encoding="utf-8")
    )
    return FormOptions.model_validate_json(raw)
