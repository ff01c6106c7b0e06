"""Utility functions for the editor: content fingerprints"""

import hashlib

from .editor.base import ContentFingerprint
from .errors import require_text


def calculate_content_hash(text: str) -> str:
    """
    Calculate MD5 fingerprint of text content

    Used to detect edits made outside the editor: the stored hash is compared
    with the hash of the current content.

    Args:
        text: Document text (encoded as UTF-8 before hashing)

    Returns:
        Upper-case hexadecimal hash string (32 characters)

    Raises:
        InvalidArgumentError: text is None

    Examples:
        >>> calculate_content_hash("")
        'D41D8CD98F00B204E9800998ECF8427E'

        >>> len(calculate_content_hash("مرحبا"))
        32
    """
    require_text(text)
    return hashlib.md5(text.encode("utf-8")).hexdigest().upper()


class MD5Fingerprint(ContentFingerprint):
    """ContentFingerprint backed by calculate_content_hash()"""

    digest_size = 32

    def fingerprint(self, text: str) -> str:
        return calculate_content_hash(text)
