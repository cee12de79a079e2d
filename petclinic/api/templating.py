"""
Jinja2 template environment shared by the controllers.
"""
from typing import Optional

from fastapi.templating import Jinja2Templates

from petclinic.core.config import get_settings

VIEWS_PETS_CREATE_OR_UPDATE_FORM = "pets/createOrUpdatePetForm.html"
VIEWS_OWNER_DETAILS = "owners/ownerDetails.html"
VIEWS_ERROR = "error.html"

_templates: Optional[Jinja2Templates] = None


def get_templates() -> Jinja2Templates:
    global _templates
    if _templates is None:
        _templates = Jinja2Templates(directory=get_settings().templates_directory)
    return _templates
