"""PKCE (Proof Key for Code Exchange) challenge derivation."""

import base64
import hashlib


def generate_code_challenge(code_verifier: str) -> str:
    """Derive the S256 code challenge for a verifier (RFC 7636 section 4.2)."""
    digest = hashlib.sha256(code_verifier.encode("utf-8")).digest()
    return base64.urlsafe_b64encode(digest).rstrip(b"=").decode("ascii")
