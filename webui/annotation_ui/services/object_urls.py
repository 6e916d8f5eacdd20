"""
In-memory object URLs
Author: Cascade (AI assistant)

Holds uploaded blobs behind short-lived `/blobs/<token>` URLs. Each URL is
bound to a display slot; allocating a new URL for a slot revokes the one it
replaces, and URLs can be revoked explicitly when the image is discarded.
"""

import logging
import threading
import uuid
from dataclasses import dataclass
from typing import Dict, Optional

from ..errors import ObjectUrlNotFoundError

logger = logging.getLogger(__name__)

URL_PREFIX = "/blobs/"


@dataclass(frozen=True)
class Blob:
    data: bytes
    media_type: str
    slot: Optional[str] = None


class ObjectUrlStore:

    def __init__(self, prefix: str = URL_PREFIX):
        self.prefix = prefix
        self._blobs: Dict[str, Blob] = {}
        self._slots: Dict[str, str] = {}
        self._lock = threading.Lock()

    def __len__(self) -> int:
        with self._lock:
            return len(self._blobs)

    def create(self, data: bytes, media_type: str, slot: Optional[str] = None) -> str:
        """Store `data` and return its URL. Replaces (and revokes) the slot's previous URL."""
        token = uuid.uuid4().hex
        replaced = None
        with self._lock:
            self._blobs[token] = Blob(data=data, media_type=media_type, slot=slot)
            if slot is not None:
                replaced = self._slots.get(slot)
                self._slots[slot] = token
                if replaced is not None:
                    self._blobs.pop(replaced, None)
        if replaced is not None:
            logger.debug("Revoked object URL %s (replaced in slot %s)", replaced, slot)
        logger.debug("Allocated object URL %s (%d bytes, %s)", token, len(data), media_type)
        return self.prefix + token

    def resolve(self, token: str) -> Blob:
        with self._lock:
            blob = self._blobs.get(self._token(token))
        if blob is None:
            raise ObjectUrlNotFoundError(token)
        return blob

    def revoke(self, token: str) -> None:
        token = self._token(token)
        with self._lock:
            blob = self._blobs.pop(token, None)
            if blob is None:
                raise ObjectUrlNotFoundError(token)
            if blob.slot is not None and self._slots.get(blob.slot) == token:
                del self._slots[blob.slot]
        logger.debug("Revoked object URL %s", token)

    def _token(self, url_or_token: str) -> str:
        if url_or_token.startswith(self.prefix):
            return url_or_token[len(self.prefix):]
        return url_or_token
