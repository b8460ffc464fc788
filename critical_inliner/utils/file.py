"""File utility for Critical Inliner."""

import os
import logging
from typing import Optional
import aiofiles
import chardet
from .common import ensure_directory
from .error import FileOperationError

logger = logging.getLogger(__name__)

def detect_encoding(raw_data: bytes) -> str:
    """Detect the encoding of raw file content.

    Args:
        raw_data: File content

    Returns:
        Detected encoding, utf-8 when detection fails
    """
    result = chardet.detect(raw_data)
    return result.get('encoding') or 'utf-8'

async def read_text_file(file_path: str, max_size: Optional[int] = None) -> str:
    """Read a text file, detecting its encoding.

    Args:
        file_path: Path to the file
        max_size: Optional size limit in bytes

    Returns:
        File content

    Raises:
        FileOperationError: If the file is too large or cannot be read
    """
    try:
        if max_size is not None and os.path.getsize(file_path) > max_size:
            raise FileOperationError(
                f"File too large (max {max_size / 1024 / 1024:.1f}MB): {file_path}"
            )
        async with aiofiles.open(file_path, 'rb') as f:
            raw_data = await f.read()
        return raw_data.decode(detect_encoding(raw_data), errors='replace')
    except FileOperationError:
        raise
    except (OSError, LookupError) as e:
        raise FileOperationError(f"Failed to read file {file_path}: {e}")

async def write_text_file(file_path: str, content: str, encoding: str = 'utf-8') -> None:
    """Write content to a file, creating its directory if needed.

    Raises:
        FileOperationError: If the file cannot be written
    """
    try:
        ensure_directory(os.path.dirname(file_path))
        async with aiofiles.open(file_path, 'w', encoding=encoding) as f:
            await f.write(content)
    except OSError as e:
        raise FileOperationError(f"Failed to write file {file_path}: {e}")

# Exported functions
__all__ = ['detect_encoding', 'read_text_file', 'write_text_file']
