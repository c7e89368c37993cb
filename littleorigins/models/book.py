"""Book configuration and generated page models."""

from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict


class FamilyStructure(StrEnum):
    HETERO_COUPLE = "hetero-couple"
    SINGLE_MOM = "single-mom"
    SINGLE_DAD = "single-dad"
    TWO_MOMS = "two-moms"
    TWO_DADS = "two-dads"

    @classmethod
    def parse(cls, value: str) -> FamilyStructure | None:
        """Return the matching member, or None for an unrecognized value."""
        try:
            return cls(value)
        except ValueError:
            return None


class ConceptionType(StrEnum):
    IVF = "ivf"
    IUI = "iui"
    DONOR_EGG = "donor-egg"
    DONOR_SPERM = "donor-sperm"
    DONOR_EMBRYO = "donor-embryo"

    @classmethod
    def parse(cls, value: str) -> ConceptionType | None:
        """Return the matching member, or None for an unrecognized value."""
        try:
            return cls(value)
        except ValueError:
            return None


class ChildAge(StrEnum):
    TODDLER = "2-4"
    PRESCHOOL = "3-5"
    YOUNG_CHILD = "5-7"
    OLDER_CHILD = "8-10"


DEFAULT_CHILD_AGE = ChildAge.PRESCHOOL
DEFAULT_EMOJI = "📚"


class BookConfiguration(BaseModel):
    """The user's in-progress choices for a personalized book."""

    model_config = ConfigDict(frozen=True)

    child_name: str = ""
    child_age: ChildAge = DEFAULT_CHILD_AGE
    family_structure: FamilyStructure = FamilyStructure.HETERO_COUPLE
    conception_type: ConceptionType = ConceptionType.IVF

    # Donor and surrogacy flags, independent of conception_type
    used_donor_egg: bool = False
    used_donor_sperm: bool = False
    used_donor_embryo: bool = False
    used_surrogate: bool = False


class Page(BaseModel):
    """One page of a generated preview."""

    model_config = ConfigDict(frozen=True)

    title: str
    content: str
    color: str
    emoji: str = DEFAULT_EMOJI


class BookOption(BaseModel):
    model_config = ConfigDict(frozen=True)

    value: str
    label: str


_FAMILY_LABELS = {
    FamilyStructure.HETERO_COUPLE: "Mom and Dad",
    FamilyStructure.SINGLE_MOM: "Single Mom",
    FamilyStructure.SINGLE_DAD: "Single Dad",
    FamilyStructure.TWO_MOMS: "Two Moms",
    FamilyStructure.TWO_DADS: "Two Dads",
}

_CONCEPTION_LABELS = {
    ConceptionType.IVF: "IVF (In Vitro Fertilization)",
    ConceptionType.IUI: "IUI (Intrauterine Insemination)",
    ConceptionType.DONOR_EGG: "Donor Egg",
    ConceptionType.DONOR_SPERM: "Donor Sperm",
    ConceptionType.DONOR_EMBRYO: "Donor Embryo",
}

_AGE_LABELS = {
    ChildAge.TODDLER: "Toddler (2-4 years)",
    ChildAge.PRESCHOOL: "Preschool (3-5 years)",
    ChildAge.YOUNG_CHILD: "Young Child (5-7 years)",
    ChildAge.OLDER_CHILD: "Older Child (8-10 years)",
}


def book_options() -> dict[str, list[BookOption]]:
    """Every selectable value with a display label, for the customization wizard."""
    return {
        "family_structure": [BookOption(value=k.value, label=v) for k, v in _FAMILY_LABELS.items()],
        "conception_type": [
            BookOption(value=k.value, label=v) for k, v in _CONCEPTION_LABELS.items()
        ],
        "child_age": [BookOption(value=k.value, label=v) for k, v in _AGE_LABELS.items()],
    }
