"""Master data API endpoints"""

from . import brands, item_models, items, sites

__all__ = ["brands", "item_models", "items", "sites"]
