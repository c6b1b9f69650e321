"""
Security utilities.

Provides:
- load_verify_key(public_key_hex) -> VerifyKey
- verify_signature(raw_body, signature, timestamp, verify_key) -> bool
- verify_interaction_request(request, verify_key) -> bool   # used by /interactions

Notes
-----
Discord interaction signing:
- Headers: X-Signature-Ed25519 (hex signature), X-Signature-Timestamp
- Payload: timestamp bytes + raw request body
- Key: the application's Ed25519 public key (hex, from the developer portal)

The check must run on the exact bytes received, before any JSON parsing.
"""

from __future__ import annotations

from typing import Optional

from flask import Request
from nacl.exceptions import BadSignatureError, CryptoError
from nacl.signing import VerifyKey

SIGNATURE_HEADER = "X-Signature-Ed25519"
TIMESTAMP_HEADER = "X-Signature-Timestamp"


def load_verify_key(public_key_hex: str) -> VerifyKey:
    """
    Decode the configured public key once at startup.
    """
    try:
        return VerifyKey(bytes.fromhex(public_key_hex or ""))
    except (ValueError, TypeError, CryptoError) as exc:
        raise RuntimeError("DISCORD_PUBLIC_KEY is not a valid hex Ed25519 key") from exc


def verify_signature(
    raw_body: bytes,
    signature: Optional[str],
    timestamp: Optional[str],
    verify_key: VerifyKey,
) -> bool:
    """
    Verify a detached Ed25519 signature over timestamp + body.

    Returns False if:
      - signature or timestamp is missing,
      - timestamp is not a plain unix-seconds digit string,
      - signature is not hex,
      - the signature does not match.
    """
    if not signature or not timestamp:
        return False
    if not timestamp.isdigit():
        return False

    try:
        sig = bytes.fromhex(signature)
    except ValueError:
        return False

    try:
        verify_key.verify(timestamp.encode("utf-8") + (raw_body or b""), sig)
    except (BadSignatureError, ValueError, TypeError):
        return False
    return True


def verify_interaction_request(request: Request, verify_key: VerifyKey) -> bool:
    # Raw body; cache=True so Flask can still parse JSON afterwards
    body = request.get_data(cache=True) or b""
    return verify_signature(
        body,
        request.headers.get(SIGNATURE_HEADER),
        request.headers.get(TIMESTAMP_HEADER),
        verify_key,
    )
