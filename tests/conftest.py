import os
from datetime import date

import pytest

# Settings are read once per process; pin the backend before the app is imported
os.environ["REPOSITORY_BACKEND"] = "memory"
os.environ["SEED_SAMPLE_DATA"] = "false"

from fastapi.testclient import TestClient

from petclinic.application.services.owner_service import OwnerService
from petclinic.application.services.pet_service import PetService
from petclinic.di.base_container import BaseContainer
from petclinic.di.container import set_container
from petclinic.domain.models.owner import Owner
from petclinic.domain.models.pet import Pet
from petclinic.domain.repositories.owner_repository import OwnerRepository
from petclinic.domain.repositories.pet_repository import PetRepository
from petclinic.infrastructure.db.memory_repositories import InMemoryOwnerRepository, InMemoryPetRepository
from petclinic.main import create_application


@pytest.fixture()
def owner_repository():
    repository = InMemoryOwnerRepository()
    repository.save(Owner(id="1", first_name="George", last_name="Franklin",
                          address="110 W. Liberty St.", city="Madison", telephone="6085551023"))
    repository.save(Owner(id="2", first_name="Betty", last_name="Davis",
                          address="638 Cardinal Ave.", city="Sun Prairie", telephone="6085551749"))
    return repository


@pytest.fixture()
def pet_repository():
    return InMemoryPetRepository()


@pytest.fixture()
def rex(pet_repository):
    """George's dog Rex."""
    return pet_repository.save(Pet(name="Rex", type="dog", birth_date=date(2015, 3, 1), owner_id="1"))


@pytest.fixture()
def pet_service(pet_repository, owner_repository):
    return PetService(pet_repository=pet_repository, owner_repository=owner_repository)


@pytest.fixture()
def container(pet_repository, owner_repository, pet_service):
    container = BaseContainer()
    container.register_singleton(OwnerRepository, owner_repository)
    container.register_singleton(PetRepository, pet_repository)
    container.register_singleton(PetService, pet_service)
    container.register_singleton(
        OwnerService,
        OwnerService(owner_repository=owner_repository, pet_repository=pet_repository),
    )
    set_container(container)
    yield container
    set_container(None)


@pytest.fixture()
def client(container):
    """A test client that does not follow redirects."""
    return TestClient(create_application(), follow_redirects=False)
