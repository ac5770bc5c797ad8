"""Translation catalogue routes."""

from dishka.integrations.fastapi import DishkaRoute, FromDishka
from fastapi import APIRouter

from blog.application.usecase.translation import (
    AVAILABLE_DOMAINS,
    AVAILABLE_LOCALES,
    GetTranslationsRequest,
    GetTranslationsResponse,
    GetTranslationsUseCase,
)

router = APIRouter(
    prefix="/translations", tags=["translations"], route_class=DishkaRoute
)


@router.get("/locales")
async def list_locales() -> dict[str, list[dict[str, str]]]:
    """List the locales catalogues exist for."""
    return {"locales": AVAILABLE_LOCALES}


@router.get("/domains")
async def list_domains() -> dict[str, list[dict[str, str]]]:
    """List the translation domains."""
    return {"domains": AVAILABLE_DOMAINS}


@router.get("/{locale}", response_model=GetTranslationsResponse)
async def get_translations(
    locale: str,
    get_translations_use_case: FromDishka[GetTranslationsUseCase],
    domain: str = "messages",
) -> GetTranslationsResponse:
    """Get one flattened catalogue.

    Example:
        GET /translations/tr?domain=validators

        Response:
        {"locale": "tr", "domain": "validators", "translations": {"post.title.too_short": "..."}}
    """
    return await get_translations_use_case.execute(
        GetTranslationsRequest(locale=locale, domain=domain)
    )
