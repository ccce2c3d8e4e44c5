"""
Base provider interfaces for wavscribe
"""

from .stt_provider import (
    STTProvider, RecognitionOperation, TranscriptionResult, ResultGroup,
    TranscriptAlternative, WordTiming
)
from .exceptions import (
    WavscribeError, WavHeaderError, AudioFileError, ProviderError,
    ConfigurationError, AuthenticationError, QuotaExceededError,
    UnsupportedFormatError, OperationTimeoutError
)

__all__ = [
    "STTProvider",
    "RecognitionOperation",
    "TranscriptionResult",
    "ResultGroup",
    "TranscriptAlternative",
    "WordTiming",
    "WavscribeError",
    "WavHeaderError",
    "AudioFileError",
    "ProviderError",
    "ConfigurationError",
    "AuthenticationError",
    "QuotaExceededError",
    "UnsupportedFormatError",
    "OperationTimeoutError",
]
