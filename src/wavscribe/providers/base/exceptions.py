"""
Exceptions for wavscribe

Every failure in the pipeline is raised as a WavscribeError subclass and
handled once, at the command line entry point.
"""

from typing import Optional


class WavscribeError(Exception):
    """Base exception for all wavscribe errors"""

    def __str__(self):
        return self.args[0] if self.args else ""


class WavHeaderError(WavscribeError):
    """WAV header could not be read or failed validation"""


class AudioFileError(WavscribeError):
    """Audio file could not be opened or read"""

    def __init__(self, message: str, path: Optional[str] = None):
        super().__init__(message)
        self.path = path


class ProviderError(WavscribeError):
    """Base exception for all provider errors"""

    def __init__(self, message: str, provider: str = "unknown", code: Optional[str] = None, **kwargs):
        super().__init__(message)
        self.provider = provider
        self.code = code
        # Set any additional attributes from kwargs
        for key, value in kwargs.items():
            setattr(self, key, value)


class ConfigurationError(ProviderError):
    """Provider configuration or client construction error"""
    pass


class AuthenticationError(ProviderError):
    """Invalid credentials or authentication failure"""
    pass


class QuotaExceededError(ProviderError):
    """Usage quota exceeded"""
    pass


class UnsupportedFormatError(ProviderError):
    """Audio encoding not supported by provider"""
    pass


class OperationTimeoutError(ProviderError):
    """Long-running operation did not finish within the configured timeout"""

    def __init__(self, message: str, provider: str = "unknown", timeout: Optional[float] = None):
        super().__init__(message, provider)
        self.timeout = timeout
