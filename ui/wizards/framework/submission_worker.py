# -*- coding: utf-8 -*-
"""
Submission worker - runs the gateway call off the UI thread.
"""

from typing import Any, Dict, Optional, Tuple

from PyQt5.QtCore import QThread, pyqtSignal

from models.submission import CompositeSubmission
from services.error_mapper import map_exception
from services.exceptions import GatewayError
from services.submission_gateway import SubmissionGateway
from utils.logger import get_logger

logger = get_logger(__name__)


def perform_submission(gateway: SubmissionGateway,
                       submission: CompositeSubmission) -> Tuple[Optional[Dict[str, Any]], Optional[str]]:
    """
    Call the gateway once.

    Returns:
        (response, None) on success or (None, user-facing message) on failure
    """
    try:
        return gateway.submit(submission), None
    except GatewayError as e:
        return None, e.message
    except Exception as e:
        logger.error(f"Unexpected error during submission: {e}", exc_info=True)
        return None, map_exception(e)


class SubmissionWorker(QThread):
    """Background worker that sends one CompositeSubmission."""

    succeeded = pyqtSignal(dict)
    failed = pyqtSignal(str)

    def __init__(self, gateway: SubmissionGateway, submission: CompositeSubmission, parent=None):
        super().__init__(parent)
        self.gateway = gateway
        self.submission = submission

    def run(self):
        logger.debug(f"Submission worker started for sections {self.submission.step_keys}")
        response, error = perform_submission(self.gateway, self.submission)
        if error is None:
            self.succeeded.emit(response)
        else:
            self.failed.emit(error)
