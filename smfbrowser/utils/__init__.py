"""Utility functions for SMFBrowser."""

from smfbrowser.utils.varlen import encode_varlen, decode_varlen

__all__ = [
    "encode_varlen",
    "decode_varlen",
]
