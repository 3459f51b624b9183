"""Raw signature parsing.

Wallets and RPC providers disagree on how a 65-byte ECDSA signature is
packed. Some return R,S,V and others V,R,S, and V may be 0/1 or 27/28.
This module turns any of those into a canonical ``ECSignature``.
"""

import logging
from typing import Union

from eth_utils import decode_hex, encode_hex

from ..errors import MalformedSignatureError, UndeterminedLayoutError
from .types import ECSignature

logger = logging.getLogger(__name__)

SIGNATURE_LENGTH = 65

# Some providers encode V as 0,1 instead of 27,28
VALID_V_VALUES = frozenset({0, 1, 27, 28})


def _to_signature_bytes(raw_signature: Union[bytes, bytearray, str]) -> bytes:
    if isinstance(raw_signature, str):
        try:
            return decode_hex(raw_signature)
        except ValueError as e:
            raise MalformedSignatureError(
                None, f"Signature is not valid hex: {raw_signature!r}"
            ) from e
    if isinstance(raw_signature, (bytes, bytearray)):
        return bytes(raw_signature)
    raise MalformedSignatureError(
        None, f"Signature must be bytes or a hex string, got {type(raw_signature).__name__}"
    )


def _normalize_v(v: int) -> int:
    return v if v >= 27 else v + 27


def parse_raw_signature(raw_signature: Union[bytes, bytearray, str]) -> ECSignature:
    """Parse a raw 65-byte signature into its canonical ``{v, r, s}`` form.

    The last byte is tried first as V (R,S,V layout). Only if it is not a
    recovery id is the first byte tried (V,R,S layout). When both bytes are
    valid recovery ids the R,S,V layout wins.

    Args:
        raw_signature: Signature bytes, or hex string with or without 0x prefix

    Returns:
        ECSignature with v in {27, 28}

    Raises:
        MalformedSignatureError: If the signature is not exactly 65 bytes
        UndeterminedLayoutError: If neither end holds a valid V value
    """
    sig = _to_signature_bytes(raw_signature)
    if len(sig) != SIGNATURE_LENGTH:
        raise MalformedSignatureError(len(sig))

    v = sig[-1]
    if v in VALID_V_VALUES:
        logger.debug(f"Parsed signature as R,S,V (v={v})")
        return ECSignature(
            v=_normalize_v(v),
            r=encode_hex(sig[0:32]),
            s=encode_hex(sig[32:64]),
        )

    v = sig[0]
    if v not in VALID_V_VALUES:
        raise UndeterminedLayoutError(encode_hex(sig))

    logger.debug(f"Parsed signature as V,R,S (v={v})")
    return ECSignature(
        v=_normalize_v(v),
        r=encode_hex(sig[1:33]),
        s=encode_hex(sig[33:65]),
    )


normalize = parse_raw_signature
