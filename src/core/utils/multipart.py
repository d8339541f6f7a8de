"""multipart/form-data parsing for Lambda request bodies.

API Gateway hands the body over as a single buffer, so the werkzeug form
parser is driven directly instead of going through a WSGI request.
"""

import io
from dataclasses import dataclass

from aws_lambda_powertools import Logger
from werkzeug.datastructures import FileStorage
from werkzeug.formparser import FormDataParser
from werkzeug.http import parse_options_header

from core.models.errors import ValidationError

logger = Logger(UTC=True)

MULTIPART_FORM_DATA = "multipart/form-data"


@dataclass(frozen=True)
class UploadedFile:
    """A file part pulled out of a multipart body."""

    file_name: str | None
    content_type: str | None
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)


@dataclass(frozen=True)
class MultipartForm:
    """Text fields and file parts of a parsed form."""

    fields: dict[str, str]
    files: dict[str, UploadedFile]


def _read_file(storage: FileStorage) -> UploadedFile:
    data = storage.read()
    return UploadedFile(
        file_name=storage.filename or None,
        content_type=storage.mimetype or None,
        data=data,
    )


def parse_multipart(body: bytes, content_type: str | None) -> MultipartForm:
    """Parse a multipart/form-data body.

    Only the first value of a repeated field or file part is kept.

    Args:
        body: Raw request body
        content_type: Value of the request's Content-Type header

    Returns:
        The parsed form

    Raises:
        ValidationError: If the request is not multipart or cannot be parsed
    """
    mimetype, options = parse_options_header(content_type or "")

    if mimetype != MULTIPART_FORM_DATA:
        raise ValidationError(
            message="Invalid request body",
            details="Expected multipart/form-data",
            context={"content_type": content_type},
        )

    if not options.get("boundary"):
        raise ValidationError(
            message="Invalid request body",
            details="multipart/form-data boundary is missing",
        )

    parser = FormDataParser(silent=False)

    try:
        _, form, files = parser.parse(
            io.BytesIO(body),
            mimetype,
            len(body),
            options,
        )
    except ValueError as exc:
        logger.warning("Failed to parse multipart body", extra={"error": str(exc)})
        raise ValidationError(
            message="Invalid request body",
            details="Malformed multipart/form-data payload",
        ) from exc

    logger.debug(
        "Parsed multipart body",
        extra={"fields": list(form.keys()), "files": list(files.keys())},
    )

    return MultipartForm(
        fields={name: form.get(name, "") for name in form.keys()},
        files={name: _read_file(files[name]) for name in files.keys()},
    )
