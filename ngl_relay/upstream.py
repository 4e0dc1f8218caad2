"""HTTP client for the NGL submission endpoint"""
import logging
from dataclasses import dataclass
from typing import Dict, Optional

import httpx

from .config import RelaySettings
from .device import generate_device_id
from .errors import TransportError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class UpstreamReply:
    """Status and raw body text of an NGL response"""
    status_code: int
    text: str

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


class NGLClient:
    """Client for posting a single question to an NGL profile"""

    def __init__(
        self,
        settings: RelaySettings,
        transport: Optional[httpx.AsyncBaseTransport] = None
    ):
        """
        Initialize NGL client

        Args:
            settings: Relay settings carrying base URL, user agent and timeout
            transport: Optional httpx transport, used to stub NGL in tests
        """
        self.settings = settings
        self.transport = transport

    def build_headers(self, username: str) -> Dict[str, str]:
        """Browser-like headers NGL expects on a profile submission"""
        return {
            "Content-Type": "application/x-www-form-urlencoded",
            "User-Agent": self.settings.user_agent,
            "Accept": "*/*",
            "Origin": self.settings.base_url,
            "Referer": f"{self.settings.base_url}/{username}",
        }

    def build_form(self, username: str, question: str) -> Dict[str, str]:
        """Form fields for one submission"""
        return {
            "username": username,
            "question": question,
            "deviceId": generate_device_id(),
            "gameSlug": "",
            "referrer": "",
        }

    async def submit(self, username: str, question: str) -> UpstreamReply:
        """
        Post one question to NGL

        Args:
            username: Target NGL handle
            question: Message text, sent unmodified

        Returns:
            Upstream status and body text, whatever the status

        Raises:
            TransportError: If the request fails or the body cannot be read
        """
        try:
            async with httpx.AsyncClient(
                timeout=self.settings.timeout,
                follow_redirects=True,
                transport=self.transport
            ) as client:
                response = await client.post(
                    self.settings.submit_url,
                    data=self.build_form(username, question),
                    headers=self.build_headers(username)
                )
                text = response.text
        except httpx.HTTPError as e:
            raise TransportError(str(e)) from e

        logger.debug(f"NGL responded {response.status_code} for {username}")
        return UpstreamReply(status_code=response.status_code, text=text)
