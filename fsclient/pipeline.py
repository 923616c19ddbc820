"""
Request preparation and the response decoding pipeline.

Both clients share these functions; only the transport call differs.
Decoding never raises for API-level failures: every outcome is packed
into an ``HttpResponse``.
"""

import json
import logging
from typing import Any, Optional

from .codecs import is_json_media_type, parse_json
from .endpoints import FsRequest, RawKind
from .exceptions import (
    EMPTY_RESPONSE_MESSAGE,
    DecodingError,
    HttpStatusError,
    ResponseError,
)
from .logging_setup import sanitize_headers
from .models import HttpResponse, RawResponse, UserAgent, WireRequest
from .oauth import Signer

_LOG_BODY_LIMIT = 5000


def _format_body(body: Optional[bytes]) -> str:
    if not body:
        return "<empty>"
    try:
        text = body.decode("utf-8")
    except UnicodeDecodeError:
        return f"<binary data: {len(body)} bytes>"
    if len(text) > _LOG_BODY_LIMIT:
        return text[:_LOG_BODY_LIMIT] + "... (truncated)"
    return text


def prepare_request(
    descriptor: FsRequest,
    user_agent: UserAgent,
    signer: Signer,
    base_url: Optional[str],
    logger: logging.Logger,
) -> WireRequest:
    """
    Render ``descriptor`` and sign it when it is an authenticated one.

    Args:
        descriptor: Request descriptor
        user_agent: Client user agent
        signer: Client authentication mode
        base_url: Optional base URL for relative paths
        logger: Logging collaborator

    Returns:
        Wire request ready for the transport
    """
    request = descriptor.render(user_agent, base_url)
    if descriptor.authenticated:
        request = signer.sign(request)

    logger.info(
        "Request: %s [%s]",
        request.method,
        request.url,
        extra={"event": "request-sent", "method": request.method, "url": request.url},
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Request headers - %s", sanitize_headers(request.headers))
        logger.debug("Request body - %s", _format_body(request.body))
    return request


def _error_message(payload: Any) -> Optional[str]:
    if not isinstance(payload, dict):
        return None
    error = payload.get("error")
    if isinstance(error, str):
        return error
    if isinstance(error, dict) and isinstance(error.get("message"), str):
        return error["message"]
    message = payload.get("message")
    if isinstance(message, str):
        return message
    return None


def status_error(raw: RawResponse) -> HttpStatusError:
    """Build the error for a non-2xx response, keeping whatever body it had"""
    text = raw.decode(errors="replace")
    json_declared = is_json_media_type(raw.content_type)

    if not text:
        message = EMPTY_RESPONSE_MESSAGE if json_declared else ""
        return HttpStatusError(raw.status, message)

    if json_declared:
        try:
            payload = parse_json(text)
        except ValueError:
            return HttpStatusError(raw.status, text, body=text)
        message = _error_message(payload)
        if message is None:
            message = json.dumps(payload, separators=(",", ":"))
        return HttpStatusError(raw.status, message, body=payload)

    return HttpStatusError(raw.status, text, body=text)


def decode_entity(descriptor: FsRequest, raw: RawResponse, logger: logging.Logger) -> Any:
    """
    Decode a 2xx response into the descriptor's entity.

    Raises:
        ResponseError: On empty or undecodable payloads
    """
    if descriptor.no_content:
        return None

    try:
        text = raw.text
    except UnicodeDecodeError as e:
        raise DecodingError(e, body=raw.body) from e

    if descriptor.raw_kind is RawKind.JSON:
        if not text:
            raise ResponseError.empty()
        if not is_json_media_type(raw.content_type):
            logger.warning(
                "Expected a json response but Content-Type was [%s], decoding anyway",
                raw.content_type,
            )
        try:
            payload = parse_json(text)
        except ValueError as e:
            raise DecodingError(e, body=text) from e
        logger.debug("Json response - %s", _format_body(raw.body))
    else:
        if is_json_media_type(raw.content_type):
            logger.warning("Expected a plain text response but Content-Type was [%s]", raw.content_type)
        payload = text
        logger.debug("PlainText response - [%s]", _format_body(raw.body))

    try:
        return descriptor.decoder(payload)
    except Exception as e:
        raise DecodingError(e, body=payload) from e


def decode_response(
    descriptor: FsRequest, raw: RawResponse, logger: logging.Logger
) -> HttpResponse:
    """
    Run the decoding pipeline over a raw response.

    Status check, emptiness check, content-type dispatch and typed decode,
    in that order. Any failure ends up in ``HttpResponse.error``.
    """
    logger.info(
        "Response status: [%d]",
        raw.status,
        extra={"event": "response-received", "status": raw.status},
    )
    if logger.isEnabledFor(logging.DEBUG):
        logger.debug("Response headers - %s", sanitize_headers(raw.headers))

    if not raw.is_success:
        error = status_error(raw)
        logger.warning("Request failed with status [%d]: %s", raw.status, error.message)
        return HttpResponse(status=raw.status, headers=raw.headers, error=error)

    try:
        entity = decode_entity(descriptor, raw, logger)
    except ResponseError as error:
        logger.error(
            "There was a problem with the request",
            exc_info=error.cause or error,
            extra={"event": "decode-error", "status": error.status},
        )
        return HttpResponse(status=raw.status, headers=raw.headers, error=error)

    logger.debug("Response entity - %r", entity)
    return HttpResponse(status=raw.status, headers=raw.headers, entity=entity)
