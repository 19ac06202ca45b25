"""Tests for attachment uploads and downloads."""

import io

import pytest

from jiracloud import APIError


def test_add_to_issue_is_multipart(client, fake_jira):
    fake_jira.respond(200, [{"id": "10000", "filename": "report.csv", "size": 11}])

    attachments, _ = client.attachments.add_to_issue("TEST-1", {"report.csv": b"a,b\n1,2\n"})

    sent = fake_jira.last
    assert sent.method == "POST"
    assert sent.url.endswith("/rest/api/3/issue/TEST-1/attachments")
    assert sent.headers["Content-Type"].startswith("multipart/form-data; boundary=")
    assert sent.headers["X-Atlassian-Token"] == "no-check"
    assert b'filename="report.csv"' in sent.body
    assert b"a,b\n1,2\n" in sent.body
    assert attachments[0].filename == "report.csv"


def test_add_several_files(client, fake_jira):
    fake_jira.respond(200, [{"filename": "a.txt"}, {"filename": "b.bin"}])

    attachments, _ = client.attachments.add_to_issue(
        "TEST-1", {"a.txt": io.BytesIO(b"alpha"), "b.bin": b"\x00\x01"}
    )

    assert [a.filename for a in attachments] == ["a.txt", "b.bin"]
    assert fake_jira.last.body.count(b'name="file"') == 2


def test_add_from_bytes(client, fake_jira):
    fake_jira.respond(200, [{"filename": "empty.txt"}])
    client.attachments.add_to_issue_from_bytes("TEST-1", "empty.txt", b"")
    assert fake_jira.last.headers["X-Atlassian-Token"] == "no-check"
    assert b'filename="empty.txt"' in fake_jira.last.body


def test_upload_rejected(client, fake_jira):
    fake_jira.respond(413, {"errorMessages": ["File too large"]})
    with pytest.raises(APIError, match="File too large"):
        client.attachments.add_to_issue("TEST-1", {"big.iso": b"0" * 10})


def test_download_streams_raw_body(client, fake_jira):
    fake_jira.respond(200, b"\x89PNG\r\n", {"Content-Type": "image/png"})

    body, response = client.attachments.download("10000")

    assert body.read() == b"\x89PNG\r\n"
    assert response.headers["Content-Type"] == "image/png"
    assert fake_jira.last_path() == "/rest/api/3/attachment/content/10000"


def test_thumbnail_query(client, fake_jira):
    fake_jira.respond(200, b"thumb")
    body, _ = client.attachments.get_thumbnail("10000", width=64, fallback_to_default=True)
    assert body.read() == b"thumb"
    assert fake_jira.last_query() == {"width": ["64"], "fallbackToDefault": ["true"]}


def test_download_missing(client, fake_jira):
    fake_jira.respond(404, {"errorMessages": ["Attachment not found"]})
    with pytest.raises(APIError) as excinfo:
        client.attachments.download("404")
    assert excinfo.value.status_code == 404


def test_settings_and_expand(client, fake_jira):
    fake_jira.respond(200, {"enabled": True, "uploadLimit": 10485760})
    fake_jira.respond(200, {"id": "1", "entries": [{"entryIndex": 0, "name": "a.txt", "size": 1024}]})

    settings, _ = client.attachments.get_settings()
    expanded, _ = client.attachments.expand("1")

    assert settings.upload_limit == 10485760
    assert expanded.entries[0].name == "a.txt"
    assert fake_jira.last_path() == "/rest/api/3/attachment/1/expand/human"
