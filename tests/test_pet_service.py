import pytest

from petclinic.application.dto.pet_dto import PetFormData
from petclinic.domain.exceptions import EntityNotFoundError, OwnerNotFoundError, PetNotFoundError


def _form(name="Whiskers", type="cat", birth_date="2018-05-20"):
    return PetFormData(name=name, type=type, birth_date=birth_date)


def _codes(result):
    return [(error.field, error.code) for error in result.errors.errors]


def test_find_owner(pet_service):
    owner = pet_service.find_owner("1")
    assert owner.full_name == "George Franklin"


def test_find_owner_missing_raises(pet_service):
    with pytest.raises(OwnerNotFoundError) as exc_info:
        pet_service.find_owner("404")
    assert isinstance(exc_info.value, EntityNotFoundError)
    assert exc_info.value.owner_id == "404"


def test_init_creation_form_builds_unsaved_pet_for_owner(pet_service, pet_repository):
    owner = pet_service.find_owner("1")
    result = pet_service.init_creation_form(owner)

    assert result.is_new
    assert result.pet.owner_id == "1"
    assert result.form == PetFormData()
    assert not result.errors.has_errors()
    assert pet_repository.count() == 0


def test_create_pet_persists_and_links_owner(pet_service, pet_repository):
    owner = pet_service.find_owner("1")
    result = pet_service.process_creation_form(owner, _form())

    assert result.success
    assert result.pet.id is not None
    stored = pet_repository.find_by_id(result.pet.id)
    assert stored.name == "Whiskers"
    assert stored.owner_id == "1"
    assert [pet.name for pet in pet_repository.find_by_owner_id("1")] == ["Whiskers"]


@pytest.mark.parametrize("name", ["rex", "REX", "Rex", "rEx"])
def test_create_pet_rejects_duplicate_name_any_case(pet_service, pet_repository, rex, name):
    owner = pet_service.find_owner("1")
    result = pet_service.process_creation_form(owner, _form(name=name, type="dog"))

    assert not result.success
    assert _codes(result) == [("name", "duplicate")]
    assert result.errors.get_field_errors("name")[0].message == "already exists"
    assert result.pet.owner_id == "1"
    assert pet_repository.count() == 1


def test_duplicate_names_are_allowed_across_owners(pet_service, pet_repository, rex):
    owner = pet_service.find_owner("2")
    result = pet_service.process_creation_form(owner, _form(name="Rex", type="dog"))

    assert result.success
    assert pet_repository.count() == 2


def test_empty_name_fails_before_duplicate_check(pet_service, pet_repository, monkeypatch):
    owner = pet_service.find_owner("1")
    monkeypatch.setattr(
        pet_repository,
        "find_by_owner_id",
        lambda owner_id: pytest.fail("uniqueness check should not run for an empty name"),
    )

    result = pet_service.process_creation_form(owner, _form(name="   "))

    assert not result.success
    assert _codes(result) == [("name", "required")]


def test_rejected_form_keeps_submitted_values(pet_service):
    owner = pet_service.find_owner("1")
    form = _form(name="Tom", birth_date="not-a-date")
    result = pet_service.process_creation_form(owner, form)

    assert not result.success
    assert result.form is form
    assert result.is_new


def test_init_update_form_loads_pet(pet_service, rex):
    owner = pet_service.find_owner("1")
    result = pet_service.init_update_form(owner, rex.id)

    assert not result.is_new
    assert result.pet.id == rex.id
    assert result.form == PetFormData(name="Rex", type="dog", birth_date="2015-03-01")


def test_init_update_form_missing_pet_raises(pet_service):
    owner = pet_service.find_owner("1")
    with pytest.raises(PetNotFoundError):
        pet_service.init_update_form(owner, "does-not-exist")


def test_update_pet_changing_only_type_keeps_name(pet_service, pet_repository, rex):
    owner = pet_service.find_owner("1")
    result = pet_service.process_update_form(
        owner, rex.id, _form(name="Rex", type="lizard", birth_date="2015-03-01")
    )

    assert result.success
    stored = pet_repository.find_by_id(rex.id)
    assert stored.type == "lizard"
    assert stored.name == "Rex"
    assert stored.created_at == rex.created_at
    assert pet_repository.count() == 1


def test_update_pet_with_errors_is_not_saved(pet_service, pet_repository, rex):
    owner = pet_service.find_owner("1")
    result = pet_service.process_update_form(owner, rex.id, _form(name="", type="dog"))

    assert not result.success
    assert _codes(result) == [("name", "required")]
    assert result.pet.id == rex.id
    assert pet_repository.find_by_id(rex.id).name == "Rex"


def test_update_unknown_pet_raises_and_saves_nothing(pet_service, pet_repository, rex):
    owner = pet_service.find_owner("1")
    with pytest.raises(PetNotFoundError) as exc_info:
        pet_service.process_update_form(owner, "made-up-id", _form(name="REX", type="dog"))

    assert exc_info.value.pet_id == "made-up-id"
    assert pet_repository.count() == 1
    assert [pet.name for pet in pet_repository.find_by_owner_id("1")] == ["Rex"]


def test_update_pet_of_another_owner_raises(pet_service, pet_repository, rex):
    owner = pet_service.find_owner("2")
    with pytest.raises(PetNotFoundError):
        pet_service.process_update_form(owner, rex.id, _form(name="Rex", type="dog"))

    assert pet_repository.find_by_id(rex.id).owner_id == "1"
    assert pet_repository.find_by_owner_id("2") == []


def test_init_update_form_pet_of_another_owner_raises(pet_service, rex):
    owner = pet_service.find_owner("2")
    with pytest.raises(PetNotFoundError):
        pet_service.init_update_form(owner, rex.id)
