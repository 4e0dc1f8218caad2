"""Relay pipeline: validate, resolve the target, submit, map the reply"""
import logging
from typing import Optional

from .config import RelaySettings, get_settings
from .errors import RelayValidationError, UpstreamError
from .messages import MessageCatalog
from .results import RelayFailure, RelayResult, RelaySuccess
from .target import extract_username
from .upstream import NGLClient

logger = logging.getLogger(__name__)


class RelayHandler:
    """Forwards one message to one NGL profile per call"""

    def __init__(
        self,
        settings: Optional[RelaySettings] = None,
        client: Optional[NGLClient] = None,
        catalog: Optional[MessageCatalog] = None
    ):
        self.settings = settings or get_settings()
        self.client = client or NGLClient(self.settings)
        self.catalog = catalog or MessageCatalog(
            locale=self.settings.locale,
            messages_file=self.settings.messages_file
        )

    async def handle(self, url: Optional[str], message: Optional[str]) -> RelayResult:
        """
        Relay a message and describe the outcome

        Args:
            url: NGL profile link or bare handle
            message: Question text to deliver

        Returns:
            RelaySuccess or RelayFailure; never raises
        """
        try:
            username = self._resolve_target(url, message)
            logger.info(f"Relaying message to NGL user {username}")

            reply = await self.client.submit(username, message)
            if not reply.ok:
                raise UpstreamError(reply.status_code, reply.text)

            return RelaySuccess(
                message=self.catalog.get("sent"),
                username=username,
                data=reply.text
            )
        except RelayValidationError as e:
            return RelayFailure(
                message=self.catalog.get(e.message_key),
                http_status=e.status_code
            )
        except UpstreamError as e:
            logger.warning(f"NGL rejected submission with HTTP {e.status_code}")
            return RelayFailure(
                message=self.catalog.get("upstream_failed"),
                details=e.body,
                http_status=e.status_code
            )
        except Exception as e:
            logger.error(f"Relay failed: {e}", exc_info=True)
            return RelayFailure(
                message=self.catalog.get("server_error"),
                error=str(e),
                http_status=500
            )

    def _resolve_target(self, url: Optional[str], message: Optional[str]) -> str:
        """Check required parameters and derive the target handle"""
        if not url or not message:
            raise RelayValidationError("required")

        username = extract_username(url)
        if not username:
            raise RelayValidationError("invalid_url")
        return username
