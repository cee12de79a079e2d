"""
Sample Data
===========

A handful of owners and pets so a fresh in-memory instance has something to show.
"""
import logging
from dataclasses import replace
from datetime import date

from petclinic.domain.models.owner import Owner
from petclinic.domain.models.pet import Pet
from petclinic.domain.repositories.owner_repository import OwnerRepository
from petclinic.domain.repositories.pet_repository import PetRepository

logger = logging.getLogger(__name__)

SAMPLE_OWNERS = [
    Owner(id="1", first_name="George", last_name="Franklin",
          address="110 W. Liberty St.", city="Madison", telephone="6085551023"),
    Owner(id="2", first_name="Betty", last_name="Davis",
          address="638 Cardinal Ave.", city="Sun Prairie", telephone="6085551749"),
    Owner(id="3", first_name="Eduardo", last_name="Rodriquez",
          address="2693 Commerce St.", city="McFarland", telephone="6085558763"),
    Owner(id="4", first_name="Harold", last_name="Davis",
          address="563 Friendly St.", city="Windsor", telephone="6085553198"),
]

# (owner id, name, type, birth date)
SAMPLE_PETS = [
    ("1", "Leo", "cat", date(2010, 9, 7)),
    ("2", "Basil", "hamster", date(2012, 8, 6)),
    ("3", "Rosy", "dog", date(2011, 4, 17)),
    ("3", "Jewel", "dog", date(2010, 3, 7)),
    ("4", "Iggy", "lizard", date(2010, 11, 30)),
]


def seed_sample_data(owner_repository: OwnerRepository, pet_repository: PetRepository) -> None:
    """Insert the sample owners and pets."""
    for owner in SAMPLE_OWNERS:
        owner_repository.save(replace(owner))

    for owner_id, name, pet_type, birth_date in SAMPLE_PETS:
        pet_repository.save(Pet(name=name, type=pet_type, birth_date=birth_date, owner_id=owner_id))

    logger.info(f"Seeded {len(SAMPLE_OWNERS)} owners and {len(SAMPLE_PETS)} pets")
