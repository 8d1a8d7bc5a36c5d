"""Tests for the Pinata IPFS client."""

from unittest.mock import MagicMock

import pytest
import requests

from campus_portal.config.external_services import PinataConfig
from campus_portal.services import PinataClient, PinataResponse


@pytest.fixture
def config():
    return PinataConfig(jwt="test-jwt", gateway_url="https://gateway.example/ipfs/")


def make_session(payload=None, error=None):
    response = MagicMock()
    response.json.return_value = payload
    if error:
        response.raise_for_status.side_effect = error
    session = MagicMock()
    session.post.return_value = response
    return session


def test_upload_file_returns_gateway_url(config):
    session = make_session({"IpfsHash": "QmCertificate"})
    client = PinataClient(config, session=session)

    result = client.upload_file("cert-001.pdf", b"%PDF", "application/pdf")

    assert result == PinataResponse(success=True, pinata_url="https://gateway.example/ipfs/QmCertificate")
    url = session.post.call_args.args[0]
    kwargs = session.post.call_args.kwargs
    assert url == "https://api.pinata.cloud/pinning/pinFileToIPFS"
    assert kwargs['headers'] == {"Authorization": "Bearer test-jwt"}
    assert kwargs['files'] == {"file": ("cert-001.pdf", b"%PDF", "application/pdf")}


def test_upload_json_wraps_content(config):
    session = make_session({"IpfsHash": "QmMeta"})
    client = PinataClient(config, session=session)

    result = client.upload_json({"student": "Priya Raman"}, name="cert-001")

    assert result.success
    assert session.post.call_args.kwargs['json'] == {
        "pinataContent": {"student": "Priya Raman"},
        "pinataMetadata": {"name": "cert-001"},
    }


def test_http_error_is_reported(config):
    session = make_session(error=requests.HTTPError("401 Unauthorized"))
    client = PinataClient(config, session=session)

    result = client.upload_json({})

    assert result.success is False
    assert result.pinata_url == ""
    assert "401" in result.message


def test_missing_hash_is_reported(config):
    client = PinataClient(config, session=make_session({"error": "nope"}))

    result = client.upload_file("cert.pdf", b"")

    assert result.success is False
    assert "IpfsHash" in result.message


def test_missing_credentials_skip_request(monkeypatch):
    monkeypatch.delenv('PINATA_JWT', raising=False)
    session = make_session({"IpfsHash": "Qm"})
    client = PinataClient(PinataConfig(), session=session)

    result = client.upload_json({})

    assert result.success is False
    assert "PINATA_JWT" in result.message
    session.post.assert_not_called()
