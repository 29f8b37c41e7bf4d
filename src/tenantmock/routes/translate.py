"""Translation endpoints: identifiers in, random replacements out.

Both paths share one handler. The path carries no meaning of its own, and
neither does the method: the routes are plain Starlette routes so that any
method, HEAD and OPTIONS included, reaches the handler.
"""

from __future__ import annotations

import json
import logging

from fastapi import APIRouter, Request, Response
from pydantic import StrictStr, TypeAdapter, ValidationError

from tenantmock.deps import get_config, get_translator
from tenantmock.errors import (
    BodyCloseError,
    BodyReadError,
    DecodeError,
    EncodeError,
    PayloadTooLargeError,
)

logger = logging.getLogger("tenantmock")

router = APIRouter(tags=["translate"])

TRANSLATION_PATHS = ("/internal/orgIds", "/internal/ebsNumbers")

_identifiers_adapter = TypeAdapter(list[StrictStr])


async def read_body(request: Request, max_body_bytes: int = 0) -> bytes:
    """Consume the request stream, then close it.

    A close failure wins over a read failure.
    """
    stream = request.stream()
    chunks: list[bytes] = []
    size = 0
    too_large = False
    read_error: Exception | None = None

    try:
        async for chunk in stream:
            chunks.append(chunk)
            size += len(chunk)
            if max_body_bytes and size > max_body_bytes:
                too_large = True
                break
    except Exception as exc:
        read_error = exc

    try:
        await stream.aclose()
    except Exception as exc:
        raise BodyCloseError(f"Could not close the request's body: {exc}") from exc

    if read_error is not None:
        raise BodyReadError(f"Error reading the request's body: {read_error}") from read_error
    if too_large:
        raise PayloadTooLargeError(f"Request body exceeds {max_body_bytes} bytes")
    return b"".join(chunks)


def _replace_lone_surrogates(value: str) -> str:
    return value.encode("utf-16-le", "surrogatepass").decode("utf-16-le", "replace")


def decode_identifiers(body: bytes, max_identifiers: int = 0) -> list[str]:
    """Parse the body as a JSON array of strings.

    Invalid UTF-8 and unpaired surrogate escapes become U+FFFD rather than
    failing the request.
    """
    try:
        payload = json.loads(body.decode("utf-8", "replace"))
        identifiers = _identifiers_adapter.validate_python(payload)
    except (ValueError, ValidationError) as exc:
        raise DecodeError(f"Error decoding the request's body: {exc}") from exc
    if max_identifiers and len(identifiers) > max_identifiers:
        raise PayloadTooLargeError(
            f"Request has {len(identifiers)} identifiers, limit is {max_identifiers}"
        )
    return [_replace_lone_surrogates(identifier) for identifier in identifiers]


def encode_mapping(mapping: dict[str, str]) -> bytes:
    try:
        return json.dumps(mapping, ensure_ascii=False, separators=(",", ":")).encode("utf-8")
    except (TypeError, ValueError) as exc:
        raise EncodeError(f"Could not encode response to JSON: {exc}") from exc


async def translate(request: Request) -> Response:
    config = get_config(request)
    translator = get_translator(request)

    body = await read_body(request, config.max_body_bytes)
    identifiers = decode_identifiers(body, config.max_identifiers)
    content = encode_mapping(translator.translate(identifiers))
    response = Response(content=content, media_type="application/json")
    logger.info(
        'Translation performed and response sent to "%s"',
        _remote_addr(request),
    )
    return response


def _remote_addr(request: Request) -> str:
    if request.client is None:
        return "unknown"
    return f"{request.client.host}:{request.client.port}"


for _path in TRANSLATION_PATHS:
    router.add_route(
        _path,
        translate,
        methods=None,
        name=f"translate{_path.rsplit('/', 1)[-1]}",
        include_in_schema=False,
    )
