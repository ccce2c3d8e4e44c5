"""
Google Cloud Speech-to-Text Provider

Implements STT using Google Cloud Speech-to-Text v1 long-running
recognition with:
- Inline LINEAR16 audio content
- Confidence scores for every alternative
- Optional word-level timestamps
- Service-account credentials from an explicit file path
"""

import asyncio
import concurrent.futures
import logging
import os
from datetime import datetime
from typing import Any, List, Optional

import google.auth.exceptions
from google.api_core import exceptions as google_exceptions
from google.cloud import speech_v1
from pydantic import ValidationError

from ...core.config import TranscriberConfig
from ...core.request import RecognitionRequest
from ...utils.formats import load_wav
from ..base import (
    STTProvider, RecognitionOperation, TranscriptionResult, ResultGroup,
    TranscriptAlternative, WordTiming
)
from ..base.exceptions import (
    ProviderError, ConfigurationError, AuthenticationError,
    QuotaExceededError, OperationTimeoutError
)

logger = logging.getLogger(__name__)

PROVIDER_NAME = "google"
POLL_INTERVAL = 1.0


def _seconds(value: Any) -> Optional[float]:
    """Convert a proto Duration (exposed as timedelta) to seconds"""
    if value is None:
        return None
    if hasattr(value, "total_seconds"):
        return value.total_seconds()
    return float(value)


def map_google_error(error: Exception, action: str) -> ProviderError:
    """Translate a Google API error into the wavscribe hierarchy"""
    code = getattr(error, "code", None)
    code = str(code) if code is not None else None
    message = f"{action}: {error}"

    if isinstance(error, (google_exceptions.Unauthenticated, google_exceptions.PermissionDenied)):
        return AuthenticationError(message, PROVIDER_NAME, code)
    if isinstance(error, google_exceptions.ResourceExhausted):
        return QuotaExceededError(message, PROVIDER_NAME, code)
    return ProviderError(message, PROVIDER_NAME, code)


def convert_response(response: Any) -> List[ResultGroup]:
    """Convert a LongRunningRecognizeResponse into result groups, in service order"""
    groups = []
    for result in response.results:
        alternatives = []
        for alternative in result.alternatives:
            words = [
                WordTiming(
                    word=word_info.word,
                    start_time=_seconds(word_info.start_time) or 0.0,
                    end_time=_seconds(word_info.end_time) or 0.0,
                    confidence=getattr(word_info, "confidence", None),
                )
                for word_info in getattr(alternative, "words", None) or []
            ]
            alternatives.append(TranscriptAlternative(
                transcript=alternative.transcript,
                confidence=alternative.confidence,
                words=words,
            ))

        groups.append(ResultGroup(
            alternatives=alternatives,
            language_code=getattr(result, "language_code", None) or None,
            result_end_time=_seconds(getattr(result, "result_end_time", None)),
        ))
    return groups


class GoogleRecognitionOperation(RecognitionOperation):
    """
    Long-running recognition started on Google Cloud Speech

    The service-side work is already running when this object exists;
    wait() polls it from the event loop until it resolves or fails, so
    cancelling the waiting task stops the wait.
    """

    poll_interval = POLL_INTERVAL

    def __init__(self, operation: Any, request: RecognitionRequest):
        self._operation = operation
        self.request = request
        self.started_at = datetime.now()

    @property
    def name(self) -> Optional[str]:
        """Server-side operation name, when the service reports one"""
        inner = getattr(self._operation, "operation", None)
        return getattr(inner, "name", None)

    def done(self) -> bool:
        return self._operation.done()

    def _timeout_error(self, timeout: Optional[float]) -> OperationTimeoutError:
        return OperationTimeoutError(
            f"Recognition did not complete within {timeout} seconds",
            PROVIDER_NAME,
            timeout=timeout,
        )

    async def wait(self, timeout: Optional[float] = None) -> TranscriptionResult:
        """
        Wait for the operation to reach a terminal state

        Raises:
            OperationTimeoutError: If the timeout expires first
            ProviderError: If the operation reports failure
        """
        logger.debug(f"Waiting for recognition operation {self.name or '<unnamed>'}")
        loop = asyncio.get_running_loop()
        deadline = None if timeout is None else loop.time() + timeout

        try:
            while not self._operation.done():
                if deadline is None:
                    delay = self.poll_interval
                else:
                    remaining = deadline - loop.time()
                    if remaining <= 0:
                        raise self._timeout_error(timeout)
                    delay = min(self.poll_interval, remaining)
                await asyncio.sleep(delay)

            # Already resolved, so this returns without blocking
            response = self._operation.result(timeout=timeout)
        except concurrent.futures.TimeoutError as e:
            raise self._timeout_error(timeout) from e
        except google_exceptions.GoogleAPIError as e:
            raise map_google_error(e, "Failed to get long-running result") from e

        duration = (datetime.now() - self.started_at).total_seconds()
        groups = convert_response(response)
        logger.info(f"Recognition finished with {len(groups)} result group(s) in {duration:.2f}s")

        return TranscriptionResult(
            results=groups,
            duration=duration,
            metadata={
                "operation": self.name,
                "sample_rate_hertz": self.request.sample_rate_hertz,
                "language_code": self.request.language_code,
            },
        )


class GoogleSTTProvider(STTProvider):
    """
    Google Cloud Speech-to-Text Provider

    Sends the whole file inline as one long-running recognition request.
    """

    LANGUAGE_CODES = [
        "en-US", "en-GB", "es-ES", "fr-FR", "de-DE", "it-IT", "pt-BR",
        "ru-RU", "ja-JP", "ko-KR", "zh-CN", "hi-IN", "nl-NL", "pl-PL",
    ]

    def __init__(
        self,
        config: Optional[TranscriberConfig] = None,
        client: Optional[Any] = None,
    ):
        """
        Initialize Google Cloud Speech-to-Text Provider

        Args:
            config: Credential path, language code and recognition options
            client: Pre-built SpeechClient (skips credential loading)
        """
        self.config = config or TranscriberConfig()
        if client is None:
            client = self._create_client(self.config.credentials_path)
        self.client = client

        logger.info(f"Initialized Google Cloud STT for language {self.config.language_code}")

    @property
    def name(self) -> str:
        return PROVIDER_NAME

    @property
    def supported_languages(self) -> List[str]:
        """Commonly used language codes; the service accepts many more"""
        return list(self.LANGUAGE_CODES)

    @staticmethod
    def _create_client(credentials_path: str) -> Any:
        """Create a SpeechClient from a service-account file"""
        if not os.path.isfile(credentials_path):
            raise ConfigurationError(
                f"Failed to create client: credentials file not found: {credentials_path}",
                PROVIDER_NAME,
            )
        try:
            return speech_v1.SpeechClient.from_service_account_file(credentials_path)
        except (OSError, ValueError, google.auth.exceptions.GoogleAuthError) as e:
            raise ConfigurationError(
                f"Failed to create client from {credentials_path}: {e}",
                PROVIDER_NAME,
            ) from e

    def _build_recognition_config(self, request: RecognitionRequest) -> speech_v1.RecognitionConfig:
        """Build Google Speech recognition config"""
        try:
            return speech_v1.RecognitionConfig(
                encoding=speech_v1.RecognitionConfig.AudioEncoding[request.encoding],
                sample_rate_hertz=request.sample_rate_hertz,
                language_code=request.language_code,
                enable_word_time_offsets=request.enable_word_time_offsets,
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ProviderError(f"Invalid recognition config: {e}", PROVIDER_NAME) from e

    def build_request(
        self,
        audio_data: bytes,
        sample_rate: int,
        language: Optional[str] = None,
    ) -> RecognitionRequest:
        """Combine audio and configuration into a recognition request"""
        try:
            return RecognitionRequest(
                encoding=self.config.encoding,
                sample_rate_hertz=sample_rate,
                language_code=language or self.config.language_code,
                content=audio_data,
                enable_word_time_offsets=self.config.enable_word_time_offsets,
            )
        except ValidationError as e:
            raise ProviderError(f"Invalid recognition request: {e}", PROVIDER_NAME) from e

    def start_recognition(self, request: RecognitionRequest) -> GoogleRecognitionOperation:
        """
        Submit a long-running recognition request

        Args:
            request: Recognition request with inline audio content

        Returns:
            GoogleRecognitionOperation to wait on

        Raises:
            ProviderError: If the service rejects the request
        """
        config = self._build_recognition_config(request)
        audio = speech_v1.RecognitionAudio(content=request.content)

        logger.info(
            f"Starting long-running recognition: {request.size_bytes} bytes, "
            f"{request.sample_rate_hertz} Hz, {request.language_code}"
        )
        try:
            operation = self.client.long_running_recognize(config=config, audio=audio)
        except google_exceptions.GoogleAPIError as e:
            raise map_google_error(e, "Failed to start long-running recognition") from e

        return GoogleRecognitionOperation(operation, request)

    async def transcribe_file(
        self,
        file_path: str,
        language: Optional[str] = None,
        timeout: Optional[float] = None,
    ) -> TranscriptionResult:
        """Transcribe a WAV file, taking the sample rate from its header"""
        sample_rate, content = load_wav(file_path, validate=self.config.validate_header)
        return await self.transcribe_audio(
            content, sample_rate, language, timeout if timeout is not None else self.config.timeout
        )

    async def close(self) -> None:
        """Close the client connection"""
        transport = getattr(self.client, "transport", None)
        if transport is not None and hasattr(transport, "close"):
            transport.close()
            logger.debug("Closed Google Cloud Speech transport")
