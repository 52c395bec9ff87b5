from typing import Annotated

from fastapi import APIRouter, Header, HTTPException
from fastapi.responses import StreamingResponse
from kink import di

from play.program.media import ServedResource
from play.program.streaming import ByteRange, parse_range_header
from play.program.exceptions import RangeNotSatisfiableException
from play.program.utils.logging import logger

router = APIRouter(
    responses={404: {"description": "Not found"}},
    tags=["audio"],
)


def _stream(resource: ServedResource, byte_range: ByteRange | None = None):
    """Wrap the resource reader so a failing disk read is logged before the response is cut."""
    try:
        yield from resource.iter_bytes(byte_range)
    except OSError as e:
        logger.error(f"Error while streaming {resource.name}: {e}")
        raise


@router.get("/audio", operation_id="audio")
def stream_audio(
    range_header: Annotated[str | None, Header(alias="range")] = None,
) -> StreamingResponse:
    """
    Stream the served file, honouring a single `bytes=<start>-[<end>]` range.

    Returns:
        A 200 response with the whole file, or a 206 response with the requested range.

    Raises:
        HTTPException: 416 if the range starts beyond the end of the file.
    """
    resource = di[ServedResource]
    file_size = resource.size

    try:
        byte_range = parse_range_header(range_header, file_size)
    except RangeNotSatisfiableException as e:
        logger.log("STREAM", str(e))
        raise HTTPException(
            status_code=416,
            detail="Requested Range Not Satisfiable",
            headers={"Content-Range": f"bytes */{file_size}", "Accept-Ranges": "bytes"},
        )

    if byte_range is None:
        return StreamingResponse(
            _stream(resource),
            media_type=resource.mime_type,
            headers={"Content-Length": str(file_size), "Accept-Ranges": "bytes"},
        )

    logger.log("STREAM", f"Serving {byte_range.content_range(file_size)}")

    return StreamingResponse(
        _stream(resource, byte_range),
        status_code=206,
        media_type=resource.mime_type,
        headers={
            "Content-Range": byte_range.content_range(file_size),
            "Content-Length": str(byte_range.length),
            "Accept-Ranges": "bytes",
        },
    )
