from http import HTTPStatus

from fastapi import APIRouter, HTTPException, Response
from fastapi.responses import RedirectResponse
from returns.io import IOFailure, IOSuccess
from returns.result import Failure, Success

from constants import IMAGE_MEDIA_TYPE, IdenticonEndpoint, RoutePrefix
from exceptions import IdenticonGenerationError
from pipelines import create_identicon, generate
from settings import SettingsDep

from .schemas import StoredIdenticon

identicon_route = APIRouter(prefix=f"/{RoutePrefix.IDENTICON}", tags=[RoutePrefix.IDENTICON])


@identicon_route.get(
    path=IdenticonEndpoint.ROOT,
    summary="Redirect to identicon documentation",
    description="""Redirects to the identicon section in the API documentation.""",
    include_in_schema=False,
)
async def identicon_root() -> RedirectResponse:
    """
    Redirect to the identicon section in Swagger docs.

    :return: RedirectResponse to the identicon documentation section.
    """
    return RedirectResponse(url=f"/docs#operations-tag-{RoutePrefix.IDENTICON}")


@identicon_route.get(
    path=IdenticonEndpoint.IMAGE,
    summary="Render the identicon of a string.",
    description="""
    Render the 250x250 identicon of the given text as a PNG image.

    The same text always yields the same image.
    """,
    response_class=Response,
    response_description="PNG image (image/png).",
    responses={HTTPStatus.OK: {"content": {IMAGE_MEDIA_TYPE: {}}}},
)
async def get_identicon(text: str) -> Response:
    """
    Render the identicon of `text`.

    :param text: The identicon input.
    :return: Response with the PNG bytes.
    :raises HTTPException: 500 if the pipeline breaks one of its invariants.
    """
    try:
        data = generate(text)
    except IdenticonGenerationError as error:
        raise HTTPException(HTTPStatus.INTERNAL_SERVER_ERROR, error.message) from error
    return Response(content=data, media_type=IMAGE_MEDIA_TYPE)


@identicon_route.post(
    path=IdenticonEndpoint.IMAGE,
    summary="Render and store the identicon of a string.",
    description="""
    Render the identicon of the given text and write it as `<text>.png` to the configured
    output directory.
    """,
    response_description="Location of the stored identicon.",
    responses={HTTPStatus.INTERNAL_SERVER_ERROR: {"description": "Identicon could not be stored"}},
)
def store_identicon(text: str, settings: SettingsDep) -> StoredIdenticon:
    """
    Render the identicon of `text` and store it in the output directory.

    :param text: The identicon input, also used as file name.
    :param settings: Application settings dependency.
    :return: The location of the stored identicon.
    :raises HTTPException: 500 if the identicon could not be rendered or stored.
    """
    match create_identicon(text, settings.output_dir):
        case IOSuccess(Success(path)):
            return StoredIdenticon(path=path, filename=path.name)
        case IOFailure(Failure(error)):
            raise HTTPException(HTTPStatus.INTERNAL_SERVER_ERROR, str(error))
