#  Copyright (c) 2025 Tom Villani, Ph.D.
#
# src/present2pdf/utils/encoding.py
"""Character encoding detection for presentation sources.

Sources are expected to be UTF-8. Anything that does not decode as UTF-8 is
handed to chardet, with latin-1 as the final fallback.
"""

from __future__ import annotations

import logging

logger = logging.getLogger(__name__)


def detect_encoding(
    data: bytes,
    sample_size: int = 8192,
    confidence_threshold: float = 0.7,
) -> str | None:
    """Detect character encoding of binary data using chardet.

    Parameters
    ----------
    data : bytes
        Binary data to analyze
    sample_size : int, default 8192
        Number of bytes to sample for detection (uses first N bytes)
    confidence_threshold : float, default 0.7
        Minimum confidence level (0.0-1.0) required to trust detection

    Returns
    -------
    str | None
        Detected encoding name, or None if detection fails or the confidence
        is below the threshold

    """
    import chardet

    result = chardet.detect(data[:sample_size])
    if not result or not result.get("encoding"):
        logger.debug("chardet: No encoding detected")
        return None

    encoding = result["encoding"]
    confidence = result.get("confidence") or 0.0
    logger.debug(f"chardet detected encoding: {encoding} (confidence: {confidence:.2f})")

    if confidence >= confidence_threshold:
        return encoding
    logger.debug(f"chardet confidence {confidence:.2f} below threshold {confidence_threshold}")
    return None


def read_text_with_encoding_detection(data: bytes) -> str:
    """Decode presentation source bytes.

    Tries UTF-8 (with or without a byte order mark), then the encoding chardet
    detects, then latin-1, which accepts any byte sequence.

    Parameters
    ----------
    data : bytes
        Binary data to decode

    Returns
    -------
    str
        Decoded text content

    """
    try:
        return data.decode("utf-8-sig")
    except UnicodeDecodeError as e:
        logger.debug(f"Source is not UTF-8: {e}")

    detected = detect_encoding(data)
    if detected:
        try:
            text = data.decode(detected)
            logger.debug(f"Successfully decoded with chardet-detected encoding: {detected}")
            return text
        except (UnicodeDecodeError, LookupError) as e:
            logger.debug(f"Failed to decode with chardet-detected encoding {detected}: {e}")

    return data.decode("latin-1")
