"""
File utilities for the assessment service.
Handles upload locations and temporary file naming for audio files.
"""

import os
import tempfile
import uuid
from pathlib import Path

UPLOAD_DIR = Path(os.getenv("UPLOAD_DIR", os.path.join(tempfile.gettempdir(), "read_scoring_uploads")))


def get_temp_filepath(prefix: str = 'temp', extension: str = 'tmp') -> str:
    """
    Generate temporary file path with unique identifier.

    Args:
        prefix: Prefix for temp file (default: temp)
        extension: File extension (default: tmp)

    Returns:
        Absolute path: {UPLOAD_DIR}/{prefix}_{uuid}.{ext}

    Example:
        >>> get_temp_filepath('upload', 'wav')
        '/tmp/read_scoring_uploads/upload_a3b4c5d6.wav'
    """
    os.makedirs(UPLOAD_DIR, exist_ok=True)
    unique_id = str(uuid.uuid4())[:8]
    filename = f"{prefix}_{unique_id}.{extension}"
    return str(UPLOAD_DIR / filename)


def remove_quietly(path: str) -> None:
    """Delete a temp file if it is still there."""
    try:
        if os.path.exists(path):
            os.remove(path)
    except OSError:
        pass
