import base64
import hashlib

from cryptography.fernet import Fernet, InvalidToken

from app.core import config


def _fernet() -> Fernet:
    if not config.ENCRYPTION_KEY:
        raise RuntimeError("ENCRYPTION_KEY is not defined in environment variables")
    # Fernet wants 32 url-safe base64 bytes; any passphrase is stretched to that
    digest = hashlib.sha256(config.ENCRYPTION_KEY.encode()).digest()
    return Fernet(base64.urlsafe_b64encode(digest))


def encrypt_text(text: str) -> str:
    """
    Encrypts text with the configured ENCRYPTION_KEY.

    Args:
        text (str): Plaintext to encrypt.

    Returns:
        str: Fernet token, or an empty string for empty input.
    """
    if not text:
        return ""
    return _fernet().encrypt(text.encode()).decode()


def decrypt_text(token: str) -> str:
    """
    Decrypts a token produced by `encrypt_text`.

    Raises:
        ValueError: If the token was not produced with the current key.
    """
    if not token:
        return ""
    try:
        return _fernet().decrypt(token.encode()).decode()
    except InvalidToken as e:
        raise ValueError("Unable to decrypt content with the configured key") from e
