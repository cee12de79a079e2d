"""
Owner Controller
================

Owner detail page, the landing page after a pet is saved.
"""
from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from petclinic.api.templating import VIEWS_OWNER_DETAILS, get_templates
from petclinic.api.v1.dependencies import get_owner_service
from petclinic.application.services.owner_service import OwnerService

router = APIRouter(tags=["owners"])


@router.get(
    "/{owner_id}",
    response_class=HTMLResponse,
    summary="Owner details",
    description="Show an owner together with their pets.",
)
async def show_owner(
    owner_id: str,
    request: Request,
    service: OwnerService = Depends(get_owner_service),
) -> HTMLResponse:
    owner = service.get_owner_details(owner_id)
    return get_templates().TemplateResponse(request, VIEWS_OWNER_DETAILS, {"owner": owner})
