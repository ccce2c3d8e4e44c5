"""
wavscribe - transcribe WAV files with Google Cloud Speech-to-Text
"""

from .core.transcriber import Transcriber, TranscriptionOutcome
from .core.config import TranscriberConfig
from .core.request import RecognitionRequest
from .providers.base import (
    STTProvider, RecognitionOperation, TranscriptionResult, ResultGroup,
    TranscriptAlternative, WordTiming, WavscribeError, ProviderError
)
from .utils.formats import read_sample_rate, get_sample_rate_from_wav, load_wav

# Version
__version__ = "0.1.0"

# Main exports
__all__ = [
    "Transcriber",
    "TranscriptionOutcome",
    "TranscriberConfig",
    "RecognitionRequest",
    "STTProvider",
    "RecognitionOperation",
    "TranscriptionResult",
    "ResultGroup",
    "TranscriptAlternative",
    "WordTiming",
    "WavscribeError",
    "ProviderError",
    "read_sample_rate",
    "get_sample_rate_from_wav",
    "load_wav",
]


def transcribe_file(file_path: str, **config) -> TranscriptionOutcome:
    """
    Convenience function to transcribe one file with default settings

    Args:
        file_path: Path to the WAV file
        **config: TranscriberConfig values (credentials_path, language_code, ...)

    Returns:
        TranscriptionOutcome with sample rate, results and elapsed time
    """
    import asyncio

    async def _run() -> TranscriptionOutcome:
        transcriber = Transcriber(config)
        try:
            return await transcriber.transcribe(file_path)
        finally:
            await transcriber.close()

    return asyncio.run(_run())
