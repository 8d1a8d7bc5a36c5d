"""Client for pinning certificate files and metadata to IPFS via Pinata."""

import logging
from dataclasses import dataclass
from typing import Any, Optional

import requests

from ..config.external_services import PinataConfig

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class PinataResponse:
    """Outcome of an upload."""
    success: bool
    pinata_url: str
    message: Optional[str] = None


class PinataClient:
    """
    Uploads files and JSON documents to Pinata.

    Failures never raise: they are logged and returned as an unsuccessful
    PinataResponse carrying the error message. There is no retry.
    """

    def __init__(self, config: Optional[PinataConfig] = None, session: Optional[requests.Session] = None):
        self.config = config or PinataConfig()
        self.session = session or requests.Session()

    @property
    def _headers(self):
        return {"Authorization": f"Bearer {self.config.jwt}"}

    def upload_file(self, file_name: str, content: bytes, content_type: str = "application/octet-stream") -> PinataResponse:
        """
        Pin a file (e.g. a rendered certificate PDF).
        
        Args:
            file_name: Name recorded for the file
            content: File bytes
            content_type: MIME type of the file
        
        Returns:
            PinataResponse: success with the gateway URL, or failure with a message
        """
        logger.info(f"Uploading file to IPFS: {file_name}")
        return self._upload(
            "/pinning/pinFileToIPFS",
            files={"file": (file_name, content, content_type)},
        )

    def upload_json(self, json_data: Any, name: Optional[str] = None) -> PinataResponse:
        """
        Pin a JSON document (e.g. certificate metadata).
        
        Returns:
            PinataResponse: success with the gateway URL, or failure with a message
        """
        payload = {"pinataContent": json_data}
        if name:
            payload["pinataMetadata"] = {"name": name}
        logger.info(f"Uploading JSON to IPFS{f': {name}' if name else ''}")
        return self._upload("/pinning/pinJSONToIPFS", json=payload)

    def _upload(self, path: str, **kwargs: Any) -> PinataResponse:
        try:
            self.config.validate()
            response = self.session.post(
                f"{self.config.base_url.rstrip('/')}{path}",
                headers=self._headers,
                timeout=self.config.timeout,
                **kwargs
            )
            response.raise_for_status()

            data = response.json()
            cid = data.get("IpfsHash") if isinstance(data, dict) else None
            if not cid:
                raise ValueError("Pinata response did not include an IpfsHash")

            return PinataResponse(
                success=True,
                pinata_url=f"{self.config.gateway_url.rstrip('/')}/{cid}",
            )
        except (requests.RequestException, ValueError) as e:
            logger.error(f"Error uploading to IPFS: {e}")
            return PinataResponse(success=False, pinata_url="", message=str(e))
