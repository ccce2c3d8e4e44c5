"""
Unit tests for the Transcriber pipeline
"""

import pytest
from pathlib import Path
from unittest.mock import AsyncMock
import sys

# Add src to path
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wavscribe import Transcriber, TranscriberConfig
from wavscribe.providers.base.exceptions import (
    AudioFileError, WavHeaderError, ConfigurationError, ProviderError
)
from wavscribe.providers.stt.google import GoogleSTTProvider


@pytest.fixture
def transcriber(test_config, mock_speech_client):
    provider = GoogleSTTProvider(test_config, client=mock_speech_client)
    return Transcriber(test_config, provider=provider)


class TestTranscriber:
    """Test cases for the file-to-transcript pipeline"""

    def test_accepts_dict_config(self):
        transcriber = Transcriber({"language_code": "pt-BR"})
        assert isinstance(transcriber.config, TranscriberConfig)
        assert transcriber.config.language_code == "pt-BR"

    @pytest.mark.asyncio
    async def test_transcribe(self, transcriber, temp_audio_file):
        outcome = await transcriber.transcribe(temp_audio_file)

        assert outcome.path == str(temp_audio_file)
        assert outcome.sample_rate == 16000
        assert outcome.result.text == "hello world"
        assert outcome.elapsed >= 0.0

    def test_load_missing_file(self, transcriber, tmp_path):
        missing = tmp_path / "missing.wav"

        with pytest.raises(AudioFileError) as exc_info:
            transcriber.load(missing)

        assert exc_info.value.path == str(missing)
        assert isinstance(exc_info.value.__cause__, FileNotFoundError)

    @pytest.mark.asyncio
    async def test_short_file_stops_before_service_call(self, transcriber, mock_speech_client, tmp_path):
        short = tmp_path / "short.wav"
        short.write_bytes(b"RIFF\x00\x00")

        with pytest.raises(WavHeaderError):
            await transcriber.transcribe(short)

        mock_speech_client.long_running_recognize.assert_not_called()

    @pytest.mark.asyncio
    async def test_header_validation_enabled(self, mock_speech_client, tmp_path):
        config = TranscriberConfig({"credentials_path": "unused.json", "validate_header": True})
        transcriber = Transcriber(config, provider=GoogleSTTProvider(config, client=mock_speech_client))
        garbage = tmp_path / "garbage.wav"
        garbage.write_bytes(b"\x00" * 64)

        with pytest.raises(WavHeaderError, match="RIFF/WAVE"):
            await transcriber.transcribe(garbage)

    @pytest.mark.asyncio
    async def test_provider_created_lazily_from_config(self, temp_audio_file, tmp_path):
        """Test that credential failures surface from transcribe()"""
        transcriber = Transcriber({"credentials_path": str(tmp_path / "nope.json")})

        with pytest.raises(ConfigurationError):
            await transcriber.transcribe(temp_audio_file)

    @pytest.mark.asyncio
    async def test_service_error_propagates(self, transcriber, mock_operation, temp_audio_file):
        from google.api_core import exceptions as google_exceptions
        mock_operation.result.side_effect = google_exceptions.DeadlineExceeded("slow backend")

        with pytest.raises(ProviderError):
            await transcriber.transcribe(temp_audio_file)

    @pytest.mark.asyncio
    async def test_configured_timeout_reaches_operation(self, mock_speech_client, mock_operation, temp_audio_file):
        config = TranscriberConfig({"credentials_path": "unused.json", "timeout": 9})
        transcriber = Transcriber(config, provider=GoogleSTTProvider(config, client=mock_speech_client))

        await transcriber.transcribe(temp_audio_file)

        mock_operation.result.assert_called_once_with(timeout=9.0)

    @pytest.mark.asyncio
    async def test_close_releases_provider(self, test_config):
        provider = AsyncMock()
        transcriber = Transcriber(test_config, provider=provider)

        await transcriber.close()

        provider.close.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_close_without_provider(self, test_config):
        await Transcriber(test_config).close()


class TestConvenienceFunction:
    """Test cases for wavscribe.transcribe_file"""

    def test_transcribe_file(self, mocker, mock_speech_client, temp_audio_file):
        import wavscribe

        mocker.patch.object(
            Transcriber, "_create_provider",
            lambda self: GoogleSTTProvider(self.config, client=mock_speech_client),
        )

        outcome = wavscribe.transcribe_file(str(temp_audio_file), language_code="en-GB")

        assert outcome.sample_rate == 16000
        assert outcome.result.text == "hello world"
        config = mock_speech_client.long_running_recognize.call_args.kwargs["config"]
        assert config.language_code == "en-GB"
        mock_speech_client.transport.close.assert_called_once()
