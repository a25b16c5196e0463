from fastapi import APIRouter
from fastapi.responses import RedirectResponse

from identicons import identicon_route

prefix_router = APIRouter()

prefix_router.include_router(identicon_route)


@prefix_router.get(
    path="/",
    summary="Redirect to API documentation",
    description="Redirects to the interactive API documentation.",
    include_in_schema=False,
)
async def root() -> RedirectResponse:
    """
    Redirect to the API documentation.

    :return: RedirectResponse to the API documentation.
    """
    return RedirectResponse(url="/docs")
