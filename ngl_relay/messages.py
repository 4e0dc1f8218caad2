"""Localized response messages, optionally overridden from YAML"""
import copy
import logging
from pathlib import Path
from typing import Dict, Optional

import yaml

logger = logging.getLogger(__name__)

DEFAULT_LOCALE = "id"

DEFAULT_MESSAGES: Dict[str, Dict[str, str]] = {
    "id": {
        "required": "URL dan message harus diisi!",
        "invalid_url": "URL NGL tidak valid!",
        "sent": "Pesan berhasil dikirim!",
        "upstream_failed": "Gagal mengirim pesan ke NGL",
        "server_error": "Terjadi kesalahan server",
    },
    "en": {
        "required": "Both url and message are required!",
        "invalid_url": "Invalid NGL URL!",
        "sent": "Message sent successfully!",
        "upstream_failed": "Failed to send message to NGL",
        "server_error": "Internal server error",
    },
}


class MessageCatalog:
    """Look up user-facing messages by key for one locale"""

    def __init__(self, locale: str = DEFAULT_LOCALE, messages_file: Optional[str] = None):
        """
        Initialize the catalog

        Args:
            locale: Locale to render messages in
            messages_file: Optional YAML file merged over the bundled messages
        """
        self.locale = locale
        self.messages = copy.deepcopy(DEFAULT_MESSAGES)

        if messages_file:
            self._load_file(Path(messages_file))

        if self.locale not in self.messages:
            logger.warning(f"Unknown locale {self.locale!r}, falling back to {DEFAULT_LOCALE!r}")

    def _load_file(self, path: Path):
        """Merge messages from a YAML file"""
        if not path.exists():
            logger.warning(f"Messages file not found: {path}")
            return

        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except Exception as e:
            logger.error(f"Error loading messages from {path}: {e}")
            return

        overrides = data.get('messages', {})
        if not isinstance(overrides, dict):
            logger.error(f"Ignoring {path}: 'messages' must be a mapping")
            return

        for locale, entries in overrides.items():
            if isinstance(entries, dict):
                self.messages.setdefault(locale, {}).update(
                    {key: str(text) for key, text in entries.items()}
                )
        logger.info(f"Loaded message overrides for {len(overrides)} locale(s) from {path}")

    def get(self, key: str) -> str:
        """Get a message, falling back to the default locale per key"""
        entries = self.messages.get(self.locale, {})
        if key in entries:
            return entries[key]
        return self.messages[DEFAULT_LOCALE][key]
