# -*- coding: utf-8 -*-
"""
PropertyHub API Client
======================

Thin client for the PropertyHub REST backend, used by the onboarding wizards
to persist completed submissions.
"""

import json
import mimetypes
import os
from dataclasses import dataclass
from typing import Any, Dict, Optional

import requests
import urllib3

from services.exceptions import ApiException, NetworkException
from utils.logger import get_logger

logger = get_logger(__name__)

# Longest response body written to the log
_MAX_LOGGED_BODY = 1000


@dataclass
class ApiConfig:
    """
    Connection settings for the API.

    Reads from .env file via Config when values are not provided.

    Example .env:
        API_BASE_URL=http://192.168.1.20:5000
        API_TOKEN=eyJhbGciOi...
    """
    base_url: str = None  # Will be loaded from Config
    token: Optional[str] = None
    timeout: int = None
    verify_ssl: bool = None

    def __post_init__(self):
        """Load from Config if not provided."""
        from app.config import Config

        if self.base_url is None:
            self.base_url = Config.API_BASE_URL
        if self.token is None:
            self.token = Config.API_TOKEN
        if self.timeout is None:
            self.timeout = Config.API_TIMEOUT
        if self.verify_ssl is None:
            self.verify_ssl = Config.API_VERIFY_SSL


class PropertyHubApiClient:
    """
    API client for the PropertyHub backend.

    Usage:
        client = PropertyHubApiClient(ApiConfig(base_url="http://localhost:5000"))
        tenant = client.create_tenant_onboarding({"personal": {...}})
    """

    def __init__(self, config: Optional[ApiConfig] = None):
        self.config = config or ApiConfig()
        self.base_url = self.config.base_url.rstrip('/')
        self.access_token: Optional[str] = self.config.token

        if not self.config.verify_ssl:
            # Self-signed certificates in development
            urllib3.disable_warnings(urllib3.exceptions.InsecureRequestWarning)

    # ==================== Authentication ====================

    def set_access_token(self, token: Optional[str]):
        """
        Set the bearer token from an authenticated session.

        Args:
            token: Access token, or None to send anonymous requests
        """
        self.access_token = token
        logger.debug("Access token updated externally")

    def _headers(self, multipart: bool = False) -> Dict[str, str]:
        headers = {"Accept": "application/json"}
        if not multipart:
            # requests sets the multipart boundary itself
            headers["Content-Type"] = "application/json"
        if self.access_token:
            headers["Authorization"] = f"Bearer {self.access_token}"
        return headers

    # ==================== Transport ====================

    def _request(
        self,
        method: str,
        endpoint: str,
        json_data: Optional[Dict] = None,
        params: Optional[Dict] = None,
        files: Optional[Dict] = None,
        form_data: Optional[Dict] = None
    ) -> Any:
        """
        Execute an HTTP request with error handling.

        Args:
            method: HTTP method (GET, POST, PUT, DELETE)
            endpoint: API endpoint (e.g., "/api/onboarding")
            json_data: JSON payload
            params: Query parameters
            files: Multipart file parts ({"file": (name, handle, mime_type)})
            form_data: Multipart form fields sent with `files`

        Returns:
            Response JSON data (None for empty bodies)

        Raises:
            ApiException: non-2xx response
            NetworkException: connection failure or timeout
        """
        url = f"{self.base_url}{endpoint}"

        logger.info(f"[API REQ] {method} {endpoint}")
        if params:
            logger.debug(f"[API REQ] Params: {params}")
        if json_data is not None:
            logger.debug(f"[API REQ] Body: {json.dumps(json_data, ensure_ascii=False, default=str)}")
        if files:
            logger.debug(f"[API REQ] Files: {list(files)} Form: {form_data}")

        try:
            response = requests.request(
                method=method,
                url=url,
                json=json_data,
                params=params,
                files=files,
                data=form_data,
                headers=self._headers(multipart=bool(files)),
                timeout=self.config.timeout,
                verify=self.config.verify_ssl
            )
            response.raise_for_status()

            result = None
            if response.text:
                result = response.json()

            logger.info(f"[API RES] {response.status_code} {endpoint}")
            if result:
                res_str = json.dumps(result, ensure_ascii=False, default=str)
                if len(res_str) > _MAX_LOGGED_BODY:
                    res_str = f"{res_str[:_MAX_LOGGED_BODY]}..."
                logger.debug(f"[API RES] Body: {res_str}")

            return result

        except requests.exceptions.HTTPError as e:
            status_code = e.response.status_code if e.response is not None else 0
            response_data = {}
            try:
                response_data = e.response.json() if e.response is not None else {}
            except ValueError:
                pass
            if not isinstance(response_data, dict):
                response_data = {"errors": response_data}
            logger.error(f"[API ERR] {status_code} {method} {endpoint} | Response: {response_data}")
            raise ApiException(
                message=str(e),
                status_code=status_code,
                response_data=response_data
            )
        except ValueError as e:
            # 2xx with a body that is not JSON
            logger.error(f"Invalid JSON in response: {endpoint} - {e}")
            raise ApiException(message=f"Invalid response body: {e}")
        except (requests.exceptions.ConnectionError, requests.exceptions.Timeout) as e:
            logger.error(f"Network error: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )
        except requests.exceptions.RequestException as e:
            logger.error(f"Request failed: {endpoint} - {e}")
            raise NetworkException(
                message=str(e),
                original_error=e
            )

    def post(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        return self._request("POST", endpoint, json_data=payload)

    def put(self, endpoint: str, payload: Dict[str, Any]) -> Any:
        return self._request("PUT", endpoint, json_data=payload)

    # ==================== Onboarding ====================

    def create_tenant_onboarding(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Create a tenant from a completed onboarding wizard.

        POST /api/tenants/onboarding
        """
        from app.config import Config
        return self.post(Config.TENANT_ONBOARDING_ENDPOINT, payload)

    def update_tenant_onboarding(self, tenant_id, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Update an existing tenant's onboarding data.

        PUT /api/tenants/{id}/onboarding
        """
        from app.config import Config
        endpoint = Config.TENANT_ONBOARDING_UPDATE_ENDPOINT.format(record_id=tenant_id)
        return self.put(endpoint, payload)

    def submit_landlord_onboarding(self, payload: Dict[str, Any]) -> Dict[str, Any]:
        """
        Store the landlord account setup.

        POST /api/onboarding
        """
        from app.config import Config
        return self.post(Config.LANDLORD_ONBOARDING_ENDPOINT, payload)

    # ==================== Documents ====================

    def upload_tenant_document(
        self,
        file_path: str,
        document_type: str,
        tenant_id=None,
        property_id=None
    ) -> Dict[str, Any]:
        """
        Upload a tenant verification document via multipart/form-data.

        POST /api/tenant-documents/upload

        Raises:
            ValueError: if the file does not exist
        """
        from app.config import Config

        if not file_path or not os.path.isfile(file_path):
            raise ValueError(f"File not found: {file_path}")

        file_name = os.path.basename(file_path)
        mime_type = mimetypes.guess_type(file_path)[0] or "application/octet-stream"

        form_data = {"documentType": document_type}
        if tenant_id:
            form_data["tenantId"] = str(tenant_id)
        if property_id:
            form_data["propertyId"] = str(property_id)

        logger.info(f"Uploading {document_type}: {file_name} ({mime_type})")
        with open(file_path, "rb") as handle:
            result = self._request(
                "POST",
                Config.TENANT_DOCUMENT_UPLOAD_ENDPOINT,
                files={"file": (file_name, handle, mime_type)},
                form_data=form_data
            )
        return result or {}


_api_client: Optional[PropertyHubApiClient] = None


def get_api_client() -> PropertyHubApiClient:
    """Shared client configured from Config (created on first use)."""
    global _api_client
    if _api_client is None:
        _api_client = PropertyHubApiClient(ApiConfig())
        logger.info(f"API client ready for {_api_client.base_url}")
    return _api_client
