"""
Base Speech-to-Text Provider Interface
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

from ...core.request import RecognitionRequest


@dataclass
class WordTiming:
    """Word-level timing information for transcription"""
    word: str
    start_time: float
    end_time: float
    confidence: Optional[float] = None


@dataclass
class TranscriptAlternative:
    """One candidate transcript for a segment of audio"""
    transcript: str
    confidence: float = 0.0
    words: List[WordTiming] = field(default_factory=list)


@dataclass
class ResultGroup:
    """A segment of audio with its alternatives, in service order"""
    alternatives: List[TranscriptAlternative] = field(default_factory=list)
    language_code: Optional[str] = None
    result_end_time: Optional[float] = None


@dataclass
class TranscriptionResult:
    """Result from speech-to-text transcription"""
    results: List[ResultGroup] = field(default_factory=list)
    duration: float = 0.0
    metadata: Optional[Dict[str, Any]] = None

    def alternatives(self) -> Iterator[TranscriptAlternative]:
        """Yield every alternative of every result group, in service order"""
        for group in self.results:
            yield from group.alternatives

    @property
    def text(self) -> str:
        """Best transcript: first alternative of each result group"""
        return " ".join(
            group.alternatives[0].transcript
            for group in self.results
            if group.alternatives
        )


class RecognitionOperation(ABC):
    """Handle on a recognition running on the service side"""

    @abstractmethod
    def done(self) -> bool:
        """Whether the operation reached a terminal state"""
        pass

    @abstractmethod
    async def wait(self, timeout: Optional[float] = None) -> TranscriptionResult:
        """
        Block until the operation resolves

        Args:
            timeout: Seconds to wait; None waits until the service resolves

        Returns:
            TranscriptionResult on success
        """
        pass


class STTProvider(ABC):
    """
    Abstract base class for Speech-to-Text providers

    A recognition is two steps: start_recognition() submits the request and
    returns an operation handle, and the handle's wait() yields the result.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """Provider name (e.g., 'google')"""
        pass

    @property
    @abstractmethod
    def supported_languages(self) -> List[str]:
        """List of supported language codes"""
        pass

    @abstractmethod
    def build_request(
        self,
        audio_data: bytes,
        sample_rate: int,
        language: Optional[str] = None,
    ) -> RecognitionRequest:
        """Combine audio and provider configuration into a request"""
        pass

    @abstractmethod
    def start_recognition(self, request: RecognitionRequest) -> RecognitionOperation:
        """Submit a request and return a handle to wait on"""
        pass

    async def transcribe_audio(
        self,
        audio_data: bytes,
        sample_rate: int,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> TranscriptionResult:
        """
        Transcribe raw audio data

        Args:
            audio_data: Raw audio bytes, sent inline
            sample_rate: Sample rate in Hz
            language: Language code (provider default when None)
            timeout: Seconds to wait for the result; None waits indefinitely

        Returns:
            TranscriptionResult with every result group returned by the service
        """
        request = self.build_request(audio_data, sample_rate, language)
        operation = self.start_recognition(request)
        return await operation.wait(timeout)

    @abstractmethod
    async def transcribe_file(
        self,
        file_path: str,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> TranscriptionResult:
        """
        Transcribe an audio file

        Args:
            file_path: Path to audio file
            language: Language code (provider default when None)
            timeout: Seconds to wait for the result; None waits indefinitely

        Returns:
            TranscriptionResult with transcribed text and metadata
        """
        pass

    async def close(self) -> None:
        """Release provider resources"""
        pass
