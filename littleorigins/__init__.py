"""Little Origins storefront service: personalized book previews, carts, drafts and checkout."""

__version__ = "0.1.0"
