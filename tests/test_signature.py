"""Tests for raw signature normalization."""

import pytest
from eth_account import Account
from eth_account.messages import encode_defunct

from nft_swap_sdk.errors import MalformedSignatureError, UndeterminedLayoutError
from nft_swap_sdk.orders import ECSignature, SignatureType, parse_raw_signature, normalize

from conftest import TEST_PRIVATE_KEY

# First byte of R and last byte of S are not valid V values
R = bytes([0x11]) + bytes(range(2, 33))
S = bytes(range(33, 64)) + bytes([0x22])
R_HEX = "0x" + R.hex()
S_HEX = "0x" + S.hex()


class TestLayoutDetection:
    """Tests for R,S,V vs V,R,S detection."""

    def test_rsv_layout(self):
        """Test R,S,V with v=28 as in the documented example."""
        sig = parse_raw_signature(R + S + bytes([0x1C]))

        assert sig == ECSignature(v=28, r=R_HEX, s=S_HEX)

    def test_vrs_layout(self):
        """Test V,R,S with v=0 is read from the first byte."""
        sig = parse_raw_signature(bytes([0x00]) + R + S)

        assert sig == ECSignature(v=27, r=R_HEX, s=S_HEX)

    def test_both_ends_valid_prefers_rsv(self):
        """Test that R,S,V wins when first and last byte are both recovery ids."""
        raw = bytes([0x01]) + R[1:] + S + bytes([0x1B])

        sig = parse_raw_signature(raw)

        assert sig.v == 27
        assert sig.r == "0x" + raw[0:32].hex()
        assert sig.s == "0x" + raw[32:64].hex()

    def test_undetermined_layout(self):
        """Test that neither end holding a V value raises."""
        raw = R + S + bytes([0x22])

        with pytest.raises(UndeterminedLayoutError) as exc_info:
            parse_raw_signature(raw)

        assert exc_info.value.raw_signature == "0x" + raw.hex()

    def test_already_canonical_is_unchanged(self):
        """Test that a canonical R,S,V signature round-trips untouched."""
        for v in (27, 28):
            sig = parse_raw_signature(R + S + bytes([v]))
            assert sig.to_bytes() == R + S + bytes([v])
            assert parse_raw_signature(sig.to_bytes()) == sig


class TestVNormalization:
    """Tests for v normalization to 27/28."""

    @pytest.mark.parametrize("raw_v, expected", [(0, 27), (1, 28), (27, 27), (28, 28)])
    def test_v_law_rsv(self, raw_v, expected):
        """Test v normalization in the R,S,V layout."""
        assert parse_raw_signature(R + S + bytes([raw_v])).v == expected

    @pytest.mark.parametrize("raw_v, expected", [(0, 27), (1, 28), (27, 27), (28, 28)])
    def test_v_law_vrs(self, raw_v, expected):
        """Test v normalization in the V,R,S layout."""
        assert parse_raw_signature(bytes([raw_v]) + R + S).v == expected


class TestInputFormats:
    """Tests for signature input validation."""

    @pytest.mark.parametrize("length", [0, 64, 66, 130])
    def test_wrong_length(self, length):
        """Test that anything but 65 bytes is rejected."""
        with pytest.raises(MalformedSignatureError) as exc_info:
            parse_raw_signature(b"\x1b" * length)

        assert exc_info.value.length == length

    def test_hex_string_with_prefix(self):
        """Test 0x-prefixed hex input."""
        sig = parse_raw_signature("0x" + (R + S).hex() + "1b")

        assert sig.v == 27
        assert sig.r == R_HEX

    def test_hex_string_without_prefix(self):
        """Test bare hex input."""
        sig = parse_raw_signature("00" + (R + S).hex())

        assert sig == ECSignature(v=27, r=R_HEX, s=S_HEX)

    def test_invalid_hex(self):
        """Test that non-hex strings are rejected as malformed."""
        with pytest.raises(MalformedSignatureError, match="not valid hex"):
            parse_raw_signature("0x" + "zz" * 65)

    @pytest.mark.parametrize("raw", [65, None, 1.5, ["00"] * 65])
    def test_non_signature_input(self, raw):
        """Test that inputs which are neither bytes nor hex are rejected."""
        with pytest.raises(MalformedSignatureError, match="bytes or a hex string"):
            parse_raw_signature(raw)

    def test_errors_are_value_errors(self):
        """Test that callers can catch plain ValueError."""
        with pytest.raises(ValueError):
            parse_raw_signature(b"\x00" * 64)

    def test_normalize_alias(self):
        """Test that normalize is the same operation."""
        assert normalize is parse_raw_signature


class TestRealSignatures:
    """Tests against signatures produced by eth_account."""

    def test_eth_account_signature(self):
        """Test parsing an eth_account signature recovers its r, s and v."""
        signed = Account.sign_message(encode_defunct(text="hello"), TEST_PRIVATE_KEY)

        sig = parse_raw_signature(bytes(signed.signature))

        assert sig.v == signed.v
        assert int(sig.r, 16) == signed.r
        assert int(sig.s, 16) == signed.s

    def test_vrs_packed_eth_account_signature(self):
        """Test a provider that packs V first with a 0/1 recovery id."""
        # Skip signatures whose last S byte happens to look like a V value
        raw = next(
            sig
            for sig in (
                bytes(Account.sign_message(encode_defunct(text=f"hello {i}"), TEST_PRIVATE_KEY).signature)
                for i in range(100)
            )
            if sig[63] not in (0, 1, 27, 28)
        )
        vrs = bytes([raw[64] - 27]) + raw[:64]

        assert parse_raw_signature(vrs).to_bytes() == raw

    def test_signature_struct(self):
        """Test conversion to the exchange signature struct."""
        struct = ECSignature(v=28, r=R_HEX, s=S_HEX).to_signature_struct()

        assert struct.signature_type == SignatureType.EIP712 == 2
        assert struct.to_message() == {"signatureType": 2, "v": 28, "r": R_HEX, "s": S_HEX}
