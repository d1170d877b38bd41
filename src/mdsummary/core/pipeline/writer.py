from __future__ import annotations

"""
Document Persistence.

Writes the finished SUMMARY document to its destination file or stream.
The document is encoded in full before any destination is touched, so an
encoding failure never leaves a truncated file behind.
"""

from typing import BinaryIO

from mdsummary.infra.fs import ensure_parent_dir

# Undecodable file names come back from os.scandir as surrogate escapes;
# this turns them back into the original bytes so links still resolve.
_ENCODING = "utf-8"
_ERRORS = "surrogateescape"


def encode_document(text: str) -> bytes:
    """
    Encode the document for output.

    Raises:
        UnicodeEncodeError: If text holds surrogates that are not escapes.
    """
    return text.encode(_ENCODING, _ERRORS)


def write_document(file_path: str, text: str) -> None:
    """
    Create or overwrite file_path with the encoded text.

    Raises:
        UnicodeEncodeError: If the text cannot be encoded (file untouched).
        OSError: If the directory cannot be created or the file written.
    """
    payload = encode_document(text)
    ensure_parent_dir(file_path)
    with open(file_path, "wb") as f:
        f.write(payload)


def write_to_stream(stream: BinaryIO, text: str) -> None:
    """Write the encoded text to a binary stream such as sys.stdout.buffer."""
    stream.write(encode_document(text))
    stream.flush()
