"""Encrypted item file support.

Item files are JSON payloads sealed with Fernet (AES-128-CBC with an
HMAC-SHA256 tag). The key lives in a key file next to the database.
"""

import logging
import os
from pathlib import Path
from typing import Optional

from cryptography.fernet import Fernet, InvalidToken

from stockpile.domain.errors import DecodeError

logger = logging.getLogger(__name__)


def default_key_path() -> Path:
    """Return the key path from STOCKPILE_KEY_PATH or ~/.stockpile/item.key."""
    env_path = os.environ.get("STOCKPILE_KEY_PATH")
    if env_path:
        return Path(env_path)
    return Path.home() / ".stockpile" / "item.key"


def load_or_create_key(key_path: Optional[Path] = None) -> bytes:
    """Read the item file key, generating and storing a new one if absent.

    Args:
        key_path: Key file location (defaults to default_key_path())

    Returns:
        URL-safe base64 Fernet key
    """
    path = Path(key_path) if key_path is not None else default_key_path()
    if path.exists():
        return path.read_bytes().strip()

    path.parent.mkdir(parents=True, exist_ok=True)
    key = Fernet.generate_key()
    path.write_bytes(key)
    try:
        path.chmod(0o600)
    except OSError:
        logger.warning("Could not restrict permissions on %s", path)
    logger.info("Generated new item file key at %s", path)
    return key


class ItemFileCipher:
    """Encrypts and decrypts item file payloads."""

    def __init__(self, key: bytes):
        """Initialize cipher.

        Args:
            key: Fernet key

        Raises:
            ValueError: If the key is not a valid Fernet key
        """
        self._fernet = Fernet(key)

    def encrypt(self, payload: bytes) -> bytes:
        """Encrypt a plaintext payload."""
        return self._fernet.encrypt(payload)

    def decrypt(self, token: bytes) -> bytes:
        """Decrypt an item file.

        Raises:
            DecodeError: If the file was not produced with this key or is corrupt
        """
        try:
            return self._fernet.decrypt(token)
        except InvalidToken as e:
            raise DecodeError("Item file could not be decrypted") from e

    def read_file(self, path: Path) -> bytes:
        """Read and decrypt an item file."""
        return self.decrypt(Path(path).read_bytes())

    def write_file(self, path: Path, payload: bytes) -> None:
        """Encrypt a payload and write it to path."""
        Path(path).write_bytes(self.encrypt(payload))
