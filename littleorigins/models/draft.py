"""Saved draft model."""

from __future__ import annotations

from datetime import datetime

from pydantic import BaseModel, ConfigDict

from littleorigins.models.book import (
    DEFAULT_CHILD_AGE,
    BookConfiguration,
    ChildAge,
    ConceptionType,
    FamilyStructure,
)


class SavedDraft(BaseModel):
    """A named snapshot of a book configuration, owned by one user."""

    model_config = ConfigDict(frozen=True)

    id: int | None = None
    user_id: str
    title: str
    conception_type: str
    family_structure: str
    child_name: str | None = None
    child_age: str | None = None
    used_donor_egg: bool = False
    used_donor_sperm: bool = False
    used_donor_embryo: bool = False
    used_surrogate: bool = False
    created_at: datetime | None = None
    updated_at: datetime | None = None

    def to_configuration(self) -> BookConfiguration:
        """Rebuild the configuration this draft was saved from.

        Values that no longer parse fall back to the configuration defaults.
        """
        defaults = BookConfiguration()
        age = DEFAULT_CHILD_AGE
        if self.child_age:
            try:
                age = ChildAge(self.child_age)
            except ValueError:
                age = DEFAULT_CHILD_AGE
        return BookConfiguration(
            child_name=self.child_name or "",
            child_age=age,
            family_structure=FamilyStructure.parse(self.family_structure)
            or defaults.family_structure,
            conception_type=ConceptionType.parse(self.conception_type)
            or defaults.conception_type,
            used_donor_egg=self.used_donor_egg,
            used_donor_sperm=self.used_donor_sperm,
            used_donor_embryo=self.used_donor_embryo,
            used_surrogate=self.used_surrogate,
        )
