from petclinic.domain.constants.pet_types import PET_TYPES


def _form(**overrides):
    data = {"name": "Whiskers", "type": "cat", "birth_date": "2018-05-20"}
    data.update(overrides)
    return data


def test_init_creation_form(client):
    response = client.get("/owners/1/pets/new")

    assert response.status_code == 200
    assert 'action="/owners/1/pets/new"' in response.text
    assert "George Franklin" in response.text
    for pet_type in PET_TYPES:
        assert f'<option value="{pet_type}"' in response.text


def test_pet_types_render_in_order(client):
    text = client.get("/owners/1/pets/new").text
    positions = [text.index(f'<option value="{pet_type}"') for pet_type in PET_TYPES]
    assert positions == sorted(positions)


def test_init_creation_form_unknown_owner_is_not_found(client):
    response = client.get("/owners/404/pets/new")

    assert response.status_code == 404
    assert "Owner &#39;404&#39; not found" in response.text or "Owner '404' not found" in response.text


def test_process_creation_form_success(client, pet_repository):
    response = client.post("/owners/1/pets/new", data=_form())

    assert response.status_code == 303
    assert response.headers["location"] == "/owners/1"
    pets = pet_repository.find_by_owner_id("1")
    assert [pet.name for pet in pets] == ["Whiskers"]


def test_process_creation_form_duplicate_name(client, pet_repository, rex):
    response = client.post("/owners/1/pets/new", data=_form(name="rex", type="dog"))

    assert response.status_code == 200
    assert "already exists" in response.text
    assert 'value="rex"' in response.text
    assert pet_repository.count() == 1


def test_process_creation_form_has_errors(client, pet_repository):
    response = client.post("/owners/1/pets/new", data=_form(name="", birth_date="2015/02/12"))

    assert response.status_code == 200
    assert 'data-field="name">is required' in response.text
    assert 'data-field="birth_date">invalid date' in response.text
    assert 'value="2015/02/12"' in response.text
    assert pet_repository.count() == 0


def test_process_creation_form_unknown_owner_is_not_found(client, pet_repository):
    response = client.post("/owners/404/pets/new", data=_form())

    assert response.status_code == 404
    assert pet_repository.count() == 0


def test_init_update_form(client, rex):
    response = client.get(f"/owners/1/pets/{rex.id}/edit")

    assert response.status_code == 200
    assert f'action="/owners/1/pets/{rex.id}/edit"' in response.text
    assert 'value="Rex"' in response.text
    assert 'value="2015-03-01"' in response.text
    assert '<option value="dog" selected>' in response.text


def test_init_update_form_unknown_pet_is_not_found(client):
    response = client.get("/owners/1/pets/does-not-exist/edit")

    assert response.status_code == 404
    assert "not found" in response.text


def test_process_update_form_success(client, pet_repository, rex):
    response = client.post(
        f"/owners/1/pets/{rex.id}/edit",
        data=_form(name="Rex", type="bird", birth_date="2015-03-01"),
    )

    assert response.status_code == 303
    assert response.headers["location"] == "/owners/1"
    stored = pet_repository.find_by_id(rex.id)
    assert stored.type == "bird"
    assert stored.name == "Rex"
    assert pet_repository.count() == 1


def test_process_update_form_has_errors(client, pet_repository, rex):
    response = client.post(
        f"/owners/1/pets/{rex.id}/edit",
        data=_form(name="Rex", type="dog", birth_date=""),
    )

    assert response.status_code == 200
    assert 'data-field="birth_date">is required' in response.text
    assert f'action="/owners/1/pets/{rex.id}/edit"' in response.text
    assert pet_repository.find_by_id(rex.id).birth_date.isoformat() == "2015-03-01"


def test_ids_in_form_body_are_ignored(client, pet_repository, rex):
    response = client.post("/owners/1/pets/new", data=_form(id=rex.id, name="Max"))

    assert response.status_code == 303
    assert pet_repository.count() == 2
    assert pet_repository.find_by_id(rex.id).name == "Rex"


def test_process_update_form_unknown_pet_is_not_found(client, pet_repository, rex):
    response = client.post(
        "/owners/1/pets/made-up-id/edit",
        data=_form(name="REX", type="dog"),
    )

    assert response.status_code == 404
    assert pet_repository.count() == 1
    assert pet_repository.find_by_id("made-up-id") is None
    assert [pet.name for pet in pet_repository.find_by_owner_id("1")] == ["Rex"]


def test_edit_pet_under_another_owner_is_not_found(client, pet_repository, rex):
    assert client.get(f"/owners/2/pets/{rex.id}/edit").status_code == 404

    response = client.post(f"/owners/2/pets/{rex.id}/edit", data=_form(name="Rex", type="dog"))

    assert response.status_code == 404
    assert pet_repository.find_by_id(rex.id).owner_id == "1"
