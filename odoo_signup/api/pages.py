"""
Landing page
"""

from pathlib import Path

from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse
from fastapi.templating import Jinja2Templates

from odoo_signup.schemas.countries import COUNTRIES, DEFAULT_COUNTRY_CODE

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"

INDUSTRIES = [
    "Retail",
    "Restaurant",
    "Manufacturing",
    "Services",
    "Distribution",
    "Construction",
    "Healthcare",
    "Education",
    "Other",
]
COMPANY_SIZES = ["1-10", "11-50", "51-200", "201-500", "500+"]

router = APIRouter()
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))


@router.get("/", response_class=HTMLResponse, include_in_schema=False)
async def index(request: Request):
    """Signup form rendered with the deployment domain"""
    settings = request.app.state.settings
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "domain": settings.DOMAIN,
            "company": settings.ODOO_COMPANY,
            "countries": COUNTRIES,
            "default_country": DEFAULT_COUNTRY_CODE,
            "industries": INDUSTRIES,
            "company_sizes": COMPANY_SIZES,
        },
    )
