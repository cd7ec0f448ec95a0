"""Feature bullets derived from free-text product descriptions."""
from typing import List, Optional


def derive_features(description: Optional[str]) -> List[str]:
    """Split a description into sentence-like fragments.

    Splits on ``.``, trims each piece and drops empty ones. ``"Fast. Small."``
    gives ``["Fast", "Small"]``.
    """
    if not description:
        return []
    return [part.strip() for part in description.split(".") if part.strip()]
