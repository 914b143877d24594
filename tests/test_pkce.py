"""Tests for PKCE code challenge generation."""

import re

from hypothesis import given, settings
from hypothesis import strategies as st

from social_oauth.auth.pkce import generate_code_challenge

BASE64URL = re.compile(r"^[A-Za-z0-9_-]+$")

# RFC 7636 unreserved characters
verifiers = st.text(
    alphabet="ABCDEFGHIJKLMNOPQRSTUVWXYZabcdefghijklmnopqrstuvwxyz0123456789-._~",
    min_size=43,
    max_size=128,
)


class TestGenerateCodeChallenge:
    """Tests for S256 code challenge derivation."""

    def test_rfc7636_appendix_b_vector(self):
        """Test the example from RFC 7636 Appendix B."""
        verifier = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"

        assert generate_code_challenge(verifier) == "E9Melhoa2OwvFrEMTJguCHaoeK1t8URWbuGJSstw-cM"

    def test_challenge_is_43_characters(self):
        """A SHA-256 digest encodes to 43 base64url characters without padding."""
        assert len(generate_code_challenge("test-verifier")) == 43

    def test_non_ascii_verifier_is_hashed_as_utf8(self):
        """Test that non-ASCII verifiers are encoded as UTF-8 before hashing."""
        challenge = generate_code_challenge("vérifier-ünïcode")

        assert BASE64URL.match(challenge)
        assert challenge != generate_code_challenge("verifier-unicode")

    @settings(max_examples=200)
    @given(verifier=st.text())
    def test_challenge_is_unpadded_base64url(self, verifier: str):
        """For any verifier, the challenge uses only the base64url alphabet."""
        challenge = generate_code_challenge(verifier)

        assert "=" not in challenge
        assert BASE64URL.match(challenge)

    @settings(max_examples=100)
    @given(verifier=st.text())
    def test_challenge_is_deterministic(self, verifier: str):
        """The same verifier always yields the same challenge."""
        assert generate_code_challenge(verifier) == generate_code_challenge(verifier)


class TestCodeChallengeBinding:
    """Tests that a challenge binds to exactly one verifier."""

    @settings(max_examples=50)
    @given(verifier=verifiers, other=verifiers)
    def test_different_verifiers_give_different_challenges(self, verifier: str, other: str):
        if verifier == other:
            return

        assert generate_code_challenge(verifier) != generate_code_challenge(other)

    def test_challenge_is_not_the_plain_verifier(self):
        """S256 never sends the verifier itself."""
        verifier = "dBjftJeZ4CVP-mB92K27uhbUJU1p1r_wW1gFWFOEjXk"

        assert generate_code_challenge(verifier) != verifier
