import pytest

from portal.schemas.schemas import ResumeFile
from portal.utils.resume_codec import (
    DEFAULT_MIME_TYPE,
    ResumeEncodingError,
    build_resume_frame,
    content_disposition,
    decode_resume,
    encode_resume,
    mime_from_data_url,
    normalize_upload,
    strip_data_url_prefix,
)


def test_encode_decode_is_lossless():
    raw = bytes(range(256)) + b"%PDF-1.4\n\x00\xff"
    assert decode_resume(encode_resume(raw)) == raw


def test_data_url_prefix_is_stripped_once():
    assert strip_data_url_prefix("data:application/pdf;base64,JVBERi0=") == "JVBERi0="
    assert strip_data_url_prefix("JVBERi0=") == "JVBERi0="
    # only the first comma splits
    assert strip_data_url_prefix("data:text/plain;base64,a,b") == "a,b"


def test_mime_from_data_url():
    assert mime_from_data_url("data:application/pdf;base64,JVBERi0=") == "application/pdf"
    assert mime_from_data_url("data:;base64,JVBERi0=") is None
    assert mime_from_data_url("JVBERi0=") is None


def test_normalize_upload_prefers_client_type():
    content, mime = normalize_upload("data:application/pdf;base64,JVBERi0=", "application/x-custom")
    assert content == "JVBERi0="
    assert mime == "application/x-custom"

    content, mime = normalize_upload("data:application/pdf;base64,JVBERi0=")
    assert mime == "application/pdf"

    content, mime = normalize_upload("aGVs\nbG8=")
    assert content == "aGVsbG8="
    assert mime is None


def test_normalize_upload_rejects_invalid_base64():
    with pytest.raises(ResumeEncodingError):
        normalize_upload("not base64 at all!")


def test_frame_headers():
    frame = build_resume_frame(ResumeFile(file_name="cv.pdf", content="JVBERi0=", mime_type="application/pdf"))

    assert frame.body == b"%PDF-"
    assert frame.headers["Content-Type"] == "application/pdf"
    assert frame.headers["Content-Disposition"] == 'attachment; filename="cv.pdf"'


def test_frame_defaults_to_octet_stream_without_guessing():
    frame = build_resume_frame(ResumeFile(file_name="cv.pdf", content="JVBERi0="))
    assert frame.content_type == DEFAULT_MIME_TYPE


def test_frame_without_content_is_none():
    assert build_resume_frame(ResumeFile(file_name="cv.pdf", content="")) is None
    assert build_resume_frame(None) is None


def test_content_disposition_non_ascii_name():
    value = content_disposition("résumé.pdf")
    value.encode("latin-1")
    assert value.startswith('attachment; filename="r?sum?.pdf"')
    assert "filename*=UTF-8''r%C3%A9sum%C3%A9.pdf" in value


def test_frame_with_undecodable_content_is_none():
    # legacy records written before uploads were validated
    assert build_resume_frame(ResumeFile(file_name="cv.pdf", content="not base64!!")) is None


def test_content_disposition_drops_control_characters():
    value = content_disposition("cv.pdf\r\nSet-Cookie: x=1")

    assert value == 'attachment; filename="cv.pdfSet-Cookie: x=1"'
    assert "\r" not in value and "\n" not in value


def test_content_disposition_drops_control_characters_from_non_ascii_name():
    value = content_disposition("résumé\x00\x7f.pdf\n")

    assert value == "attachment; filename=\"r?sum?.pdf\"; filename*=UTF-8''r%C3%A9sum%C3%A9.pdf"
