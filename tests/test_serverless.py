"""The serverless handler drives the same app from Netlify/Lambda style events."""

import base64
import json

from portal.serverless import handler, rewrite_path

PDF_BYTES = b"%PDF-1.4\n\x00\x01\xfe\xff"
PDF_B64 = base64.b64encode(PDF_BYTES).decode("ascii")


def _event(method, path, body=None, **extra):
    event = {
        "httpMethod": method,
        "path": path,
        "headers": {"content-type": "application/json"},
        "queryStringParameters": {},
        "body": json.dumps(body) if body is not None else None,
        "isBase64Encoded": False,
    }
    event.update(extra)
    return event


def test_rewrite_path():
    assert rewrite_path("/.netlify/functions/applications/3", "/.netlify/functions", "/api") == "/api/applications/3"
    assert rewrite_path("/api/about-us", "/.netlify/functions", "/api") == "/api/about-us"


def test_create_and_list_through_function_path(app):
    created = handler(
        _event("POST", "/.netlify/functions/applications", {"name": "Ada Lovelace", "department": "Engineering"}),
        app=app,
    )

    assert created["statusCode"] == 201
    assert created["isBase64Encoded"] is False
    assert json.loads(created["body"])["id"] == 1
    assert created["headers"]["access-control-allow-origin"] == "*"

    listed = handler(_event("GET", "/.netlify/functions/applications"), app=app)
    assert [a["name"] for a in json.loads(listed["body"])] == ["Ada Lovelace"]


def test_resume_download_is_base64_framed(app):
    handler(
        _event("POST", "/.netlify/functions/applications", {
            "name": "Ada Lovelace",
            "department": "Engineering",
            "resumeFileName": "ada.pdf",
            "resumeFileContent": PDF_B64,
            "resumeFileType": "application/pdf",
        }),
        app=app,
    )

    resp = handler(_event("GET", "/.netlify/functions/applications/1/resume"), app=app)

    assert resp["statusCode"] == 200
    assert resp["isBase64Encoded"] is True
    assert resp["body"] == PDF_B64
    assert resp["headers"]["content-type"] == "application/pdf"
    assert resp["headers"]["content-disposition"] == 'attachment; filename="ada.pdf"'


def test_base64_encoded_request_body(app):
    raw = json.dumps({"content": "Hello"}).encode("utf-8")
    event = _event("POST", "/.netlify/functions/about-us")
    event.update(body=base64.b64encode(raw).decode("ascii"), isBase64Encoded=True)

    resp = handler(event, app=app)

    assert resp["statusCode"] == 200
    assert json.loads(resp["body"])["content"] == "Hello"


def test_preflight_and_misses(app):
    preflight = handler(_event("OPTIONS", "/.netlify/functions/applications"), app=app)
    assert preflight["statusCode"] == 204
    assert preflight["body"] == ""

    missing = handler(_event("GET", "/.netlify/functions/applications/999"), app=app)
    assert missing["statusCode"] == 404

    bad = handler(_event("POST", "/.netlify/functions/applications", {}), app=app)
    assert bad["statusCode"] == 400
    assert "Missing required fields" in json.loads(bad["body"])["error"]


def test_resume_file_name_control_characters_stay_out_of_headers(app):
    handler(
        _event("POST", "/.netlify/functions/applications", {
            "name": "Ada Lovelace",
            "department": "Engineering",
            "resumeFileName": "cv.pdf\r\nSet-Cookie: x=1",
            "resumeFileContent": PDF_B64,
        }),
        app=app,
    )

    resp = handler(_event("GET", "/.netlify/functions/applications/1/resume"), app=app)

    assert resp["statusCode"] == 200
    assert resp["headers"]["content-disposition"] == 'attachment; filename="cv.pdfSet-Cookie: x=1"'
    assert "set-cookie" not in resp["headers"]
