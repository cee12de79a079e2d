"""
Pet Controller
==============

Server-rendered form endpoints for adding and editing an owner's pets.
All routes are relative to /owners/{owner_id}.
"""
import logging

from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import HTMLResponse, RedirectResponse, Response

from petclinic.api.templating import VIEWS_PETS_CREATE_OR_UPDATE_FORM, get_templates
from petclinic.api.v1.dependencies import get_owner, get_pet_service
from petclinic.application.dto.pet_dto import PetFormData, PetFormResult
from petclinic.application.services.pet_service import PetService
from petclinic.domain.models.owner import Owner

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pets"])


def _render_form(request: Request, service: PetService, result: PetFormResult) -> HTMLResponse:
    return get_templates().TemplateResponse(
        request,
        VIEWS_PETS_CREATE_OR_UPDATE_FORM,
        {
            "owner": result.owner,
            "pet": result.pet,
            "form": result.form,
            "errors": result.errors.messages_by_field(),
            "types": service.get_pet_types(),
            "is_new": result.is_new,
        },
    )


def _redirect_to_owner(owner: Owner) -> RedirectResponse:
    return RedirectResponse(url=f"/owners/{owner.id}", status_code=status.HTTP_303_SEE_OTHER)


@router.get(
    "/pets/new",
    response_class=HTMLResponse,
    summary="New pet form",
)
async def init_creation_form(
    request: Request,
    owner: Owner = Depends(get_owner),
    service: PetService = Depends(get_pet_service),
) -> HTMLResponse:
    """Render the form for adding a pet to the owner."""
    return _render_form(request, service, service.init_creation_form(owner))


@router.post(
    "/pets/new",
    response_class=HTMLResponse,
    summary="Add a pet",
    description="""
    Add a pet to the owner.

    Redirects to the owner page when the pet was saved, otherwise the form
    is redisplayed with the submitted values and field errors. Pet names
    must be unique per owner (case-insensitive).
    """
)
async def process_creation_form(
    request: Request,
    owner: Owner = Depends(get_owner),
    service: PetService = Depends(get_pet_service),
) -> Response:
    form = PetFormData.from_form(await request.form())
    result = service.process_creation_form(owner, form)
    if not result.success:
        return _render_form(request, service, result)
    return _redirect_to_owner(owner)


@router.get(
    "/pets/{pet_id}/edit",
    response_class=HTMLResponse,
    summary="Edit pet form",
)
async def init_update_form(
    pet_id: str,
    request: Request,
    owner: Owner = Depends(get_owner),
    service: PetService = Depends(get_pet_service),
) -> HTMLResponse:
    """Render the edit form for an existing pet."""
    return _render_form(request, service, service.init_update_form(owner, pet_id))


@router.post(
    "/pets/{pet_id}/edit",
    response_class=HTMLResponse,
    summary="Update a pet",
)
async def process_update_form(
    pet_id: str,
    request: Request,
    owner: Owner = Depends(get_owner),
    service: PetService = Depends(get_pet_service),
) -> Response:
    """Save the edited pet, or redisplay the form with field errors."""
    form = PetFormData.from_form(await request.form())
    result = service.process_update_form(owner, pet_id, form)
    if not result.success:
        return _render_form(request, service, result)
    return _redirect_to_owner(owner)
