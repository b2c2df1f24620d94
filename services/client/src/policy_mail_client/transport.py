"""HTTP transport for the dispatcher endpoint."""

import json
import logging
from typing import Any

import requests

from policy_mail_client.config import ClientConfig
from policy_mail_client.exceptions import ApiCallError
from policy_mail_client.models import DocumentUpload

logger = logging.getLogger(__name__)


class DispatcherTransport:
    """Posts actions to the dispatcher and returns the decoded envelope."""

    def __init__(self, config: ClientConfig, session: requests.Session | None = None):
        self._config = config
        self._session = session or requests.Session()

    def post_json(self, action: str, payload: dict[str, Any]) -> Any:
        """Sends {action, payload} as a JSON body."""
        response = self._session.post(
            self._config.endpoint_url,
            json={"action": action, "payload": payload},
            timeout=self._config.timeout_seconds,
        )
        return self._decode(action, response)

    def post_with_file(
        self, action: str, payload: dict[str, Any], document: DocumentUpload
    ) -> Any:
        """Sends action, JSON-encoded payload and the document as multipart."""
        response = self._session.post(
            self._config.endpoint_url,
            data={"action": action, "payload": json.dumps(payload)},
            files={"file": (document.filename, document.content, document.content_type)},
            timeout=self._config.timeout_seconds,
        )
        return self._decode(action, response)

    def _decode(self, action: str, response: requests.Response) -> Any:
        if not response.ok:
            logger.error(
                "API error",
                extra={"action": action, "status_code": response.status_code},
            )
            raise ApiCallError(action, response.status_code, response.text)
        return response.json()

    def close(self) -> None:
        self._session.close()
