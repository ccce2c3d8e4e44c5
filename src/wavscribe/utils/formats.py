"""
WAV header reading and formatting helpers
"""

import logging
from pathlib import Path
from typing import BinaryIO, Tuple, Union

from ..providers.base.exceptions import WavHeaderError

logger = logging.getLogger(__name__)

# Sample rate is at byte 24-27 of a canonical WAV header
SAMPLE_RATE_OFFSET = 24
SAMPLE_RATE_SIZE = 4


def read_sample_rate(source: BinaryIO) -> int:
    """
    Read the sample rate field from a WAV header

    The value is trusted as-is; no RIFF/WAVE structure is checked. The
    stream position is left after the field.

    Args:
        source: Readable, seekable binary stream

    Returns:
        Sample rate in Hz as an unsigned 32-bit integer

    Raises:
        WavHeaderError: If the stream is not seekable or is shorter than 28 bytes
    """
    try:
        source.seek(SAMPLE_RATE_OFFSET)
        sample_rate_bytes = source.read(SAMPLE_RATE_SIZE)
    except OSError as e:
        raise WavHeaderError(f"Failed to seek to sample rate: {e}") from e

    if len(sample_rate_bytes) != SAMPLE_RATE_SIZE:
        raise WavHeaderError(
            f"Failed to read sample rate bytes: expected {SAMPLE_RATE_SIZE}, "
            f"got {len(sample_rate_bytes)}"
        )

    sample_rate = int.from_bytes(sample_rate_bytes, byteorder="little", signed=False)
    logger.debug(f"Detected sample rate: {sample_rate} Hz")
    return sample_rate


def get_sample_rate_from_wav(file_path: Union[str, Path]) -> int:
    """
    Extract sample rate from WAV file header

    Args:
        file_path: Path to WAV file

    Returns:
        Sample rate in Hz
    """
    with open(file_path, "rb") as f:
        return read_sample_rate(f)


def read_audio_content(file_path: Union[str, Path]) -> bytes:
    """Read the whole audio file, header included"""
    return Path(file_path).read_bytes()


def is_riff_wave(header: bytes) -> bool:
    """Check the RIFF/WAVE magic of the first 12 header bytes"""
    return len(header) >= 12 and header[:4] == b"RIFF" and header[8:12] == b"WAVE"


def load_wav(file_path: Union[str, Path], validate: bool = False) -> Tuple[int, bytes]:
    """
    Read the sample rate and full content of a WAV file

    Args:
        file_path: Path to WAV file
        validate: Reject files without a RIFF/WAVE magic

    Returns:
        (sample_rate, content) tuple

    Raises:
        WavHeaderError: If the header is too short or fails validation
        OSError: If the file cannot be opened or read
    """
    with open(file_path, "rb") as f:
        sample_rate = read_sample_rate(f)

        f.seek(0)
        content = f.read()

    if validate and not is_riff_wave(content[:12]):
        raise WavHeaderError(f"Not a RIFF/WAVE file: {file_path}")

    logger.debug(f"Loaded {len(content)} bytes from {file_path}")
    return sample_rate, content


def format_duration(seconds: float) -> str:
    """
    Format duration in seconds to human-readable string

    Args:
        seconds: Duration in seconds

    Returns:
        Formatted duration string
    """
    if seconds < 60:
        return f"{seconds:.1f}s"
    elif seconds < 3600:
        minutes = int(seconds // 60)
        remaining_seconds = seconds % 60
        return f"{minutes}m {remaining_seconds:.1f}s"
    else:
        hours = int(seconds // 3600)
        remaining_minutes = int((seconds % 3600) // 60)
        remaining_seconds = seconds % 60
        return f"{hours}h {remaining_minutes}m {remaining_seconds:.1f}s"
