"""Pinata (IPFS pinning) service configuration."""

import os
from dataclasses import dataclass


@dataclass
class PinataConfig:
    """Pinata configuration settings."""

    # API configuration
    base_url: str = "https://api.pinata.cloud"
    gateway_url: str = ""
    timeout: int = 30

    # Authentication
    jwt: str = ""

    def __post_init__(self):
        """Load credentials and gateway from environment if not provided."""
        if not self.jwt:
            self.jwt = os.environ.get('PINATA_JWT', '')
        if not self.gateway_url:
            self.gateway_url = os.environ.get(
                'PINATA_GATEWAY_URL', 'https://gateway.pinata.cloud/ipfs'
            )

    def validate(self) -> bool:
        """Validate the configuration."""
        if not self.jwt:
            raise ValueError("PINATA_JWT environment variable is required")
        return True

