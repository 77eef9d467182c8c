"""Quote persistence."""

from .models import Quote, QuoteCollection
from .service import QuoteStore

__all__ = ["Quote", "QuoteCollection", "QuoteStore"]
