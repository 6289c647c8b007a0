# -*- coding: utf-8 -*-
"""
Tests for the API client and the HTTP submission gateway.

HTTP is isolated by patching requests.request.
"""

from unittest.mock import patch

import pytest
import requests

from models.submission import CompositeSubmission
from services.api_client import ApiConfig, PropertyHubApiClient
from services.exceptions import ApiException, GatewayError, NetworkException
from services.submission_gateway import HttpSubmissionGateway

BASE_URL = "http://api.test"


@pytest.fixture
def client():
    return PropertyHubApiClient(ApiConfig(base_url=BASE_URL + "/", token="secret", timeout=5, verify_ssl=True))


@pytest.fixture
def submission():
    return CompositeSubmission(
        sections={
            "personal": {"firstName": "Anna", "email": "anna@example.com"},
            "lease": {"rentAmount": 950.0},
        },
        context={"propertyId": 7},
    )


class TestApiClient:
    """Test request building and error translation."""

    def test_post_sends_json_with_bearer_token(self, client, make_response):
        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 42})) as request:
            result = client.create_tenant_onboarding({"a": 1})

        assert result == {"id": 42}
        kwargs = request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == f"{BASE_URL}/api/tenants/onboarding"
        assert kwargs["json"] == {"a": 1}
        assert kwargs["headers"]["Authorization"] == "Bearer secret"
        assert kwargs["timeout"] == 5

    def test_update_uses_put_with_record_id(self, client, make_response):
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 9})) as request:
            client.update_tenant_onboarding(9, {"a": 1})

        kwargs = request.call_args.kwargs
        assert kwargs["method"] == "PUT"
        assert kwargs["url"] == f"{BASE_URL}/api/tenants/9/onboarding"

    def test_no_token_no_authorization_header(self, make_response):
        client = PropertyHubApiClient(ApiConfig(base_url=BASE_URL, token=None, timeout=5, verify_ssl=True))
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 1})) as request:
            client.submit_landlord_onboarding({})

        assert "Authorization" not in request.call_args.kwargs["headers"]
        assert request.call_args.kwargs["url"] == f"{BASE_URL}/api/onboarding"

    def test_access_token_can_be_replaced(self, client, make_response):
        client.set_access_token("session-token")
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 1})) as request:
            client.submit_landlord_onboarding({})

        assert request.call_args.kwargs["headers"]["Authorization"] == "Bearer session-token"

    def test_http_error_raises_api_exception(self, client, make_response):
        with patch("services.api_client.requests.request",
                   return_value=make_response(500, {"message": "DB unavailable"})):
            with pytest.raises(ApiException) as excinfo:
                client.post("/api/onboarding", {})

        assert excinfo.value.status_code == 500
        assert excinfo.value.response_data == {"message": "DB unavailable"}

    def test_connection_error_raises_network_exception(self, client):
        with patch("services.api_client.requests.request",
                   side_effect=requests.exceptions.ConnectionError("refused")):
            with pytest.raises(NetworkException):
                client.post("/api/onboarding", {})

    def test_upload_document_sends_multipart(self, client, make_response, tmp_path):
        passport = tmp_path / "passport.pdf"
        passport.write_bytes(b"%PDF-1.4")

        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 3})) as request:
            result = client.upload_tenant_document(str(passport), "id_proof", tenant_id=42, property_id=7)

        assert result == {"id": 3}
        kwargs = request.call_args.kwargs
        assert kwargs["method"] == "POST"
        assert kwargs["url"] == f"{BASE_URL}/api/tenant-documents/upload"
        assert kwargs["json"] is None
        assert kwargs["data"] == {"documentType": "id_proof", "tenantId": "42", "propertyId": "7"}
        name, _, mime_type = kwargs["files"]["file"]
        assert (name, mime_type) == ("passport.pdf", "application/pdf")
        assert "Content-Type" not in kwargs["headers"]
        assert kwargs["headers"]["Authorization"] == "Bearer secret"

    def test_upload_missing_file(self, client, tmp_path):
        with patch("services.api_client.requests.request") as request:
            with pytest.raises(ValueError):
                client.upload_tenant_document(str(tmp_path / "missing.pdf"), "id_proof")

        request.assert_not_called()


class TestHttpSubmissionGateway:
    """Test gateway payloads, method choice and error messages."""

    def test_nested_payload_posted(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding, client.update_tenant_onboarding)
        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"id": 42, "status": "pending"})) as request:
            response = gateway.submit(submission)

        assert response["id"] == 42
        assert request.call_args.kwargs["json"] == {
            "personal": {"firstName": "Anna", "email": "anna@example.com"},
            "lease": {"rentAmount": 950.0},
            "propertyId": 7,
        }

    def test_record_id_switches_to_update(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(
            client.create_tenant_onboarding, client.update_tenant_onboarding, record_id=15
        )
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 15})) as request:
            gateway.submit(submission)

        assert request.call_args.kwargs["method"] == "PUT"
        assert request.call_args.kwargs["url"].endswith("/api/tenants/15/onboarding")

    def test_flat_payload(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(client.submit_landlord_onboarding, flatten=True)
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"id": 3})) as request:
            gateway.submit(submission)

        assert request.call_args.kwargs["json"] == {
            "firstName": "Anna",
            "email": "anna@example.com",
            "rentAmount": 950.0,
            "propertyId": 7,
        }

    def test_alternative_identifier_normalized(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding)
        with patch("services.api_client.requests.request",
                   return_value=make_response(201, {"tenantId": 77})):
            response = gateway.submit(submission)

        assert response["id"] == 77

    def test_success_without_identifier_is_an_error(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding)
        with patch("services.api_client.requests.request",
                   return_value=make_response(200, {"ok": True})):
            with pytest.raises(GatewayError) as excinfo:
                gateway.submit(submission)

        assert excinfo.value.message == "The server did not confirm the submission. Please try again."

    @pytest.mark.parametrize("body, expected", [
        ({"message": "DB unavailable"}, "DB unavailable"),
        ({"error": "Tenant already exists"}, "Tenant already exists"),
        ({"title": "Conflict"}, "Conflict"),
        ({"message": "", "error": "Fallback"}, "Fallback"),
        (None, "Submission failed. Please try again."),
        (["not", "an", "object"], "Submission failed. Please try again."),
    ])
    def test_error_message_from_body(self, client, submission, make_response, body, expected):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding)
        with patch("services.api_client.requests.request",
                   return_value=make_response(500, body)):
            with pytest.raises(GatewayError) as excinfo:
                gateway.submit(submission)

        assert excinfo.value.message == expected
        assert excinfo.value.status_code == 500

    def test_unauthorized_without_body(self, client, submission, make_response):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding)
        with patch("services.api_client.requests.request",
                   return_value=make_response(401)):
            with pytest.raises(GatewayError) as excinfo:
                gateway.submit(submission)

        assert excinfo.value.message == "Unauthorized. Please login again."

    @pytest.mark.parametrize("error, expected", [
        (requests.exceptions.ConnectionError("refused"),
         "Connection error. Please check your internet connection."),
        (requests.exceptions.Timeout("Read timed out"), "Connection timeout. Please try again."),
    ])
    def test_network_failures(self, client, submission, error, expected):
        gateway = HttpSubmissionGateway(client.create_tenant_onboarding)
        with patch("services.api_client.requests.request", side_effect=error):
            with pytest.raises(GatewayError) as excinfo:
                gateway.submit(submission)

        assert excinfo.value.message == expected
        assert isinstance(excinfo.value.original_error, NetworkException)
