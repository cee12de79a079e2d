"""Pet types offered by the clinic, in display order."""
from typing import List, Tuple

PET_TYPES: Tuple[str, ...] = ("cat", "dog", "lizard", "snake", "bird", "hamster")


def get_pet_types() -> List[str]:
    """Return a fresh list of the pet types for populating a selection control."""
    return list(PET_TYPES)
