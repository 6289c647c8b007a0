# -*- coding: utf-8 -*-
"""
Submission gateway - persists a completed wizard through the REST API.

The wizard controller only knows `SubmissionGateway.submit()`; it neither
retries nor caches. Every call issues exactly one request.
"""

from abc import ABC, abstractmethod
from typing import Any, Callable, Dict, Optional

from models.submission import CompositeSubmission
from services.error_mapper import map_exception
from services.exceptions import ApiException, GatewayError, NetworkException
from services.translation_manager import tr
from utils.logger import get_logger

logger = get_logger(__name__)

CreateCall = Callable[[Dict[str, Any]], Any]
UpdateCall = Callable[[Any, Dict[str, Any]], Any]

# Identifier fields accepted in a success response, in lookup order
ID_FIELDS = ("id", "tenantId", "userId", "recordId")


class SubmissionGateway(ABC):
    """External collaborator that stores a CompositeSubmission."""

    @abstractmethod
    def submit(self, submission: CompositeSubmission) -> Dict[str, Any]:
        """
        Persist the submission.

        Returns:
            Response data containing at least an "id" field

        Raises:
            GatewayError: with a user-facing message
        """


class HttpSubmissionGateway(SubmissionGateway):
    """
    Gateway backed by PropertyHubApiClient calls.

    POSTs through `create` for new records; when `record_id` is set and an
    `update` call is available, PUTs to the existing record instead.
    """

    def __init__(self, create: CreateCall, update: Optional[UpdateCall] = None,
                 record_id: Any = None, flatten: bool = False):
        self.create = create
        self.update = update
        self.record_id = record_id
        self.flatten = flatten

    def submit(self, submission: CompositeSubmission) -> Dict[str, Any]:
        payload = submission.to_payload(flatten=self.flatten)

        try:
            if self.record_id is not None and self.update is not None:
                logger.info(f"Updating record {self.record_id} with {len(submission.sections)} sections")
                response = self.update(self.record_id, payload)
            else:
                logger.info(f"Creating record from {len(submission.sections)} sections")
                response = self.create(payload)
        except (ApiException, NetworkException) as e:
            message = map_exception(e)
            logger.error(f"Submission failed: {e}")
            raise GatewayError(
                message,
                status_code=getattr(e, "status_code", None),
                original_error=e
            )

        return self._normalize_response(response)

    def _normalize_response(self, response: Any) -> Dict[str, Any]:
        """Ensure the success response carries an identifier under "id"."""
        if not isinstance(response, dict):
            logger.error(f"Submission response is not an object: {response!r}")
            raise GatewayError(tr("error.submission.no_identifier"))

        for key in ID_FIELDS:
            if response.get(key) is not None:
                normalized = dict(response)
                normalized["id"] = response[key]
                logger.info(f"Submission stored with id {normalized['id']}")
                return normalized

        logger.error(f"Submission response has no identifier: {response}")
        raise GatewayError(tr("error.submission.no_identifier"))
