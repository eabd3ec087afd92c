"""Payload Compression: gzip, raw DEFLATE and brotli encoders.

Invariants:
    - encode_payload always finishes the compressor (flush/finish) before returning
    - DEFLATE output is raw (no zlib header) at the best compression level
    - ContentEncoding values are the exact Content-Encoding header tokens

Design Decisions:
    - Compress the whole envelope in memory: envelopes are a few hundred bytes,
      so a finished body with Content-Length beats a chunked stream
"""

import zlib
from enum import Enum

import brotli


class ContentEncoding(str, Enum):
    GZIP = "gzip"
    DEFLATE = "deflate"
    BROTLI = "br"


def encode_payload(data: bytes, encoding: ContentEncoding) -> bytes:
    if encoding is ContentEncoding.BROTLI:
        compressor = brotli.Compressor()
        return compressor.process(data) + compressor.finish()
    if encoding is ContentEncoding.GZIP:
        compressor = zlib.compressobj(
            zlib.Z_DEFAULT_COMPRESSION, zlib.DEFLATED, 16 + zlib.MAX_WBITS,
        )
    else:
        compressor = zlib.compressobj(
            zlib.Z_BEST_COMPRESSION, zlib.DEFLATED, -zlib.MAX_WBITS,
        )
    return compressor.compress(data) + compressor.flush()
