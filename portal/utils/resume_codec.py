"""
Resume Codec - base64 transport for resume files.

Resumes travel inside JSON as base64 text and are stored that way. Browsers
read files with FileReader.readAsDataURL, so uploads may arrive as
"data:<mime>;base64,<payload>"; only the payload is kept.

Downloads are framed as the decoded bytes plus headers; the serverless
handler turns binary bodies back into base64 for the platform.
"""

import base64
import binascii
import logging
import re
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple
from urllib.parse import quote

from portal.schemas.schemas import ResumeFile

logger = logging.getLogger(__name__)

DEFAULT_MIME_TYPE = "application/octet-stream"
DATA_URL_SCHEME = "data:"

# CR/LF and friends would split the header
CONTROL_CHARS = re.compile(r"[\x00-\x1f\x7f]")


class ResumeEncodingError(ValueError):
    """Resume content is not valid base64."""


@dataclass
class ResumeFrame:
    body: bytes
    headers: Dict[str, str] = field(default_factory=dict)

    @property
    def content_type(self) -> str:
        return self.headers["Content-Type"]


def is_data_url(text: str) -> bool:
    return text[:len(DATA_URL_SCHEME)].lower() == DATA_URL_SCHEME and "," in text


def strip_data_url_prefix(text: str) -> str:
    """Drop a data URL prefix, keeping everything after the first comma."""
    if is_data_url(text):
        return text.split(",", 1)[1]
    return text


def mime_from_data_url(text: str) -> Optional[str]:
    """MIME type declared by a data URL prefix, if any."""
    if not is_data_url(text):
        return None
    header = text.split(",", 1)[0][len(DATA_URL_SCHEME):]
    mime = header.split(";", 1)[0].strip()
    return mime or None


def encode_resume(raw: bytes) -> str:
    return base64.b64encode(raw).decode("ascii")


def decode_resume(text: str) -> bytes:
    try:
        return base64.b64decode(text, validate=True)
    except (binascii.Error, ValueError) as e:
        raise ResumeEncodingError("resumeFileContent is not valid base64") from e


def normalize_upload(content: str, file_type: Optional[str] = None) -> Tuple[str, Optional[str]]:
    """
    Prepare uploaded resume content for storage.

    Args:
        content: base64 text, optionally with a data URL prefix
        file_type: MIME type sent by the client

    Returns:
        Tuple of (base64_text, mime_type)

    Raises:
        ResumeEncodingError if the payload does not decode
    """
    mime_type = file_type or mime_from_data_url(content)
    payload = "".join(strip_data_url_prefix(content).split())
    decode_resume(payload)
    return payload, mime_type


def content_disposition(file_name: str) -> str:
    """
    attachment header value; non-ASCII names get an RFC 5987 filename* too.
    Control characters are dropped from the name.
    """
    file_name = CONTROL_CHARS.sub("", file_name)
    escaped = file_name.replace("\\", "\\\\").replace('"', '\\"')
    try:
        escaped.encode("ascii")
    except UnicodeEncodeError:
        fallback = escaped.encode("ascii", "replace").decode("ascii")
        return f'attachment; filename="{fallback}"; filename*=UTF-8\'\'{quote(file_name)}'
    return f'attachment; filename="{escaped}"'


def build_resume_frame(resume: Optional[ResumeFile]) -> Optional[ResumeFrame]:
    """
    Frame a stored resume for download. None means "no resume".

    Stored content that no longer decodes is treated as missing.
    """
    if resume is None or not resume.file_name or not resume.content:
        return None

    try:
        raw = decode_resume(resume.content)
    except ResumeEncodingError:
        logger.warning("Stored resume %r is not valid base64, serving as missing", resume.file_name)
        return None

    return ResumeFrame(
        body=raw,
        headers={
            "Content-Type": resume.mime_type or DEFAULT_MIME_TYPE,
            "Content-Disposition": content_disposition(resume.file_name),
        },
    )
