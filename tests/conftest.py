"""
Pytest configuration for wavscribe tests

Provides WAV builders, a fake Google Speech client and test configuration.
"""

import pytest
from datetime import timedelta
from pathlib import Path
from types import SimpleNamespace
from unittest.mock import MagicMock
import sys

# Add src to path for all tests
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from wavscribe import TranscriberConfig


def build_wav_bytes(sample_rate: int = 16000, data: bytes = b"\x01\x02" * 500) -> bytes:
    """Build a canonical 44-byte PCM WAV header followed by data"""
    return (
        b'RIFF'
        + (36 + len(data)).to_bytes(4, byteorder='little')
        + b'WAVE'
        + b'fmt '
        + (16).to_bytes(4, byteorder='little')
        + (1).to_bytes(2, byteorder='little')   # PCM
        + (1).to_bytes(2, byteorder='little')   # Mono
        + sample_rate.to_bytes(4, byteorder='little')
        + ((sample_rate * 2) & 0xFFFFFFFF).to_bytes(4, byteorder='little')  # Byte rate
        + (2).to_bytes(2, byteorder='little')   # Block align
        + (16).to_bytes(2, byteorder='little')  # 16-bit
        + b'data'
        + len(data).to_bytes(4, byteorder='little')
        + data
    )


def fake_alternative(transcript, confidence, words=()):
    return SimpleNamespace(
        transcript=transcript,
        confidence=confidence,
        words=[
            SimpleNamespace(
                word=word,
                start_time=timedelta(seconds=start),
                end_time=timedelta(seconds=end),
                confidence=0.9,
            )
            for word, start, end in words
        ],
    )


def fake_response(*groups):
    """Build a LongRunningRecognizeResponse look-alike

    Each group is a list of fake_alternative() values.
    """
    return SimpleNamespace(results=[
        SimpleNamespace(
            alternatives=list(alternatives),
            language_code="en-us",
            result_end_time=timedelta(seconds=1.5),
        )
        for alternatives in groups
    ])


@pytest.fixture(autouse=True)
def clean_environment(monkeypatch):
    """Keep developer credentials and settings out of the tests"""
    for name in (
        "WAVSCRIBE_CREDENTIALS",
        "GOOGLE_APPLICATION_CREDENTIALS",
        "WAVSCRIBE_LANGUAGE",
        "WAVSCRIBE_TIMEOUT",
        "WAVSCRIBE_WORD_TIMES",
        "WAVSCRIBE_VALIDATE_HEADER",
    ):
        monkeypatch.delenv(name, raising=False)


@pytest.fixture
def test_config():
    """Provide a test configuration with a fake credentials path"""
    return TranscriberConfig({"credentials_path": "test-credentials.json"})


@pytest.fixture
def wav_bytes():
    """Factory for in-memory WAV content"""
    return build_wav_bytes


@pytest.fixture
def temp_audio_file(tmp_path):
    """Create a 16 kHz WAV file with a short PCM payload"""
    file_path = tmp_path / "sample.wav"
    file_path.write_bytes(build_wav_bytes(16000))
    return file_path


@pytest.fixture
def hello_response():
    """One result group with one alternative: "hello world" at 0.95"""
    return fake_response([
        fake_alternative("hello world", 0.95, words=[("hello", 0.0, 0.4), ("world", 0.5, 1.0)]),
    ])


@pytest.fixture
def mock_operation(hello_response):
    """Long-running operation that resolves to hello_response"""
    operation = MagicMock()
    operation.result.return_value = hello_response
    operation.done.return_value = True
    operation.operation.name = "operations/1234"
    return operation


@pytest.fixture
def mock_speech_client(mock_operation):
    """SpeechClient stand-in returning mock_operation"""
    client = MagicMock()
    client.long_running_recognize.return_value = mock_operation
    return client


def pytest_configure(config):
    """Configure pytest with custom markers"""
    config.addinivalue_line(
        "markers", "integration: marks tests as integration tests (may require credentials)"
    )
