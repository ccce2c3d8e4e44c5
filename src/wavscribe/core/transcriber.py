"""
Transcriber - the file-to-transcript pipeline

Runs each step in order: read header, read content, build request,
recognize, wait. Any step failing raises a WavscribeError that the caller
handles; nothing here terminates the process.
"""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Dict, Any, Optional, Tuple, Union

from ..providers.base import STTProvider, TranscriptionResult
from ..providers.base.exceptions import AudioFileError, ProviderError
from ..utils.formats import load_wav
from .config import TranscriberConfig
from .request import RecognitionRequest

logger = logging.getLogger(__name__)


@dataclass
class TranscriptionOutcome:
    """Everything the command line reports about one run"""
    path: str
    sample_rate: int
    result: TranscriptionResult
    elapsed: float


class Transcriber:
    """
    Transcribe one WAV file with a speech provider

    The provider is created on first use so credential problems surface
    from transcribe(), alongside every other failure.
    """

    def __init__(
        self,
        config: Optional[Union[Dict[str, Any], TranscriberConfig]] = None,
        provider: Optional[STTProvider] = None,
    ):
        """
        Initialize Transcriber

        Args:
            config: Configuration dictionary or TranscriberConfig instance
            provider: Provider instance (created from config when None)
        """
        if isinstance(config, TranscriberConfig):
            self.config = config
        else:
            self.config = TranscriberConfig(config or {})

        self._provider: Optional[STTProvider] = provider

    def _create_provider(self) -> STTProvider:
        """Create the Google Cloud provider"""
        try:
            from ..providers.stt.google import GoogleSTTProvider
        except ImportError as e:
            raise ProviderError(f"Google Cloud STT provider not available: {e}", "google") from e

        return GoogleSTTProvider(config=self.config)

    def _get_provider(self) -> STTProvider:
        if self._provider is None:
            self._provider = self._create_provider()
        return self._provider

    def load(self, file_path: Union[str, Path]) -> Tuple[int, bytes]:
        """
        Read sample rate and content from a WAV file

        Raises:
            AudioFileError: If the file cannot be opened or read
            WavHeaderError: If the header is too short or fails validation
        """
        try:
            return load_wav(file_path, validate=self.config.validate_header)
        except OSError as e:
            raise AudioFileError(f"Failed to open WAV file: {e}", path=str(file_path)) from e

    def build_request(self, sample_rate: int, content: bytes) -> RecognitionRequest:
        """Build a recognition request with the configured language"""
        return self._get_provider().build_request(content, sample_rate, self.config.language_code)

    async def recognize(self, request: RecognitionRequest) -> TranscriptionResult:
        """Submit a request and wait for the long-running operation"""
        operation = self._get_provider().start_recognition(request)
        return await operation.wait(self.config.timeout)

    async def transcribe(self, file_path: Union[str, Path]) -> TranscriptionOutcome:
        """
        Transcribe a WAV file

        Args:
            file_path: Path to the WAV file

        Returns:
            TranscriptionOutcome with the sample rate, results and elapsed time
        """
        start_time = datetime.now()

        sample_rate, content = self.load(file_path)
        logger.info(f"Read {len(content)} bytes at {sample_rate} Hz from {file_path}")

        request = self.build_request(sample_rate, content)
        result = await self.recognize(request)

        return TranscriptionOutcome(
            path=str(file_path),
            sample_rate=sample_rate,
            result=result,
            elapsed=(datetime.now() - start_time).total_seconds(),
        )

    async def close(self) -> None:
        """Release the provider, if one was created"""
        if self._provider is not None:
            await self._provider.close()
