"""Page sequence generator for book previews.

Turns a book configuration into the fixed four-page preview: introduction,
family, conception, closing. Pure and total: unrecognized family structure or
conception values take the fallback arm of each dispatch table instead of
failing.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, NamedTuple

from littleorigins.models.book import ConceptionType, FamilyStructure, Page

if TYPE_CHECKING:
    from littleorigins.models.book import BookConfiguration


class _Variant(NamedTuple):
    template: str
    emoji: str


LAB_EMOJI = "🔬"
TWO_PARENT_EMOJI = "👨‍👩‍👧"

# {subject} is the child's name, or "You" at the start of a sentence
_TWO_PARENTS = _Variant(
    "{subject} have a loving mom and dad who wanted to start a family together.",
    TWO_PARENT_EMOJI,
)

_FAMILY_VARIANTS: dict[FamilyStructure, _Variant] = {
    FamilyStructure.HETERO_COUPLE: _TWO_PARENTS,
    FamilyStructure.SINGLE_MOM: _Variant(
        "{subject} have a loving mom who wanted a child more than anything in the world.",
        "👩‍👧",
    ),
    FamilyStructure.SINGLE_DAD: _Variant(
        "{subject} have a loving dad who wanted a child more than anything in the world.",
        "👨‍👧",
    ),
    FamilyStructure.TWO_MOMS: _Variant(
        "{subject} have two loving moms who wanted to start a family together.",
        "👩‍👩‍👧",
    ),
    FamilyStructure.TWO_DADS: _Variant(
        "{subject} have two loving dads who wanted to start a family together.",
        "👨‍👨‍👧",
    ),
}

_LAB_COMBINATION = _Variant(
    "The doctors combined a tiny egg and seed in a special lab. "
    "Then they carefully placed you in mom's womb to grow.",
    LAB_EMOJI,
)

# The IUI copy refers to "mom's body" for every family structure.
_CONCEPTION_VARIANTS: dict[ConceptionType, _Variant] = {
    ConceptionType.IVF: _LAB_COMBINATION,
    ConceptionType.IUI: _Variant(
        "The doctors helped us by placing a tiny seed in mom's body. "
        "This special seed helped create you!",
        LAB_EMOJI,
    ),
    ConceptionType.DONOR_EGG: _Variant(
        "A kind woman shared a tiny egg cell to help us make you. "
        "This special gift was a crucial part of your beginning.",
        "🥚",
    ),
    ConceptionType.DONOR_SPERM: _Variant(
        "A kind donor shared a tiny seed to help us make you. "
        "This special gift was exactly what we needed to start our family.",
        "🌱",
    ),
    ConceptionType.DONOR_EMBRYO: _Variant(
        "A generous family shared a tiny embryo with us. This special gift grew into you!",
        "✨",
    ),
}


def book_title(child_name: str) -> str:
    """Title shared by the introduction page, cart items and checkout."""
    return f"{child_name}'s Special Story" if child_name else "Your Special Story"


def _family_variant(family_structure: str) -> _Variant:
    parsed = FamilyStructure.parse(family_structure)
    if parsed is None:
        return _TWO_PARENTS
    return _FAMILY_VARIANTS[parsed]


def _conception_variant(conception_type: str) -> _Variant:
    parsed = ConceptionType.parse(conception_type)
    if parsed is None:
        return _LAB_COMBINATION
    return _CONCEPTION_VARIANTS[parsed]


def generate_pages(
    child_name: str,
    child_age: str,
    family_structure: str,
    conception_type: str,
) -> list[Page]:
    """Build the four preview pages for a configuration.

    ``child_age`` is accepted for the age-appropriate wording the product
    describes, but no page varies by it yet.
    """
    you = child_name or "you"
    family = _family_variant(family_structure)
    conception = _conception_variant(conception_type)

    return [
        Page(
            title=book_title(child_name),
            content=f"This is a story about how {you} came to be part of our wonderful family.",
            color="bg-soft-blue",
        ),
        Page(
            title="Our Family",
            content=family.template.format(subject=child_name or "You"),
            color="bg-gentle-pink",
            emoji=family.emoji,
        ),
        Page(
            title="A Special Beginning",
            content=conception.template,
            color="bg-calm-yellow",
            emoji=conception.emoji,
        ),
        Page(
            title="Growing With Love",
            content=(
                f"And that's how our family's journey with {you} began. "
                "Every family is created differently, but all families are made with love."
            ),
            color="bg-soft-purple",
            emoji="💕",
        ),
    ]


def generate_for(config: BookConfiguration) -> list[Page]:
    return generate_pages(
        config.child_name,
        config.child_age.value,
        config.family_structure.value,
        config.conception_type.value,
    )
