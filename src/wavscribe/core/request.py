"""
Recognition request value
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

MAX_SAMPLE_RATE = 0xFFFFFFFF


class RecognitionRequest(BaseModel):
    """Everything sent to the recognition service for one file"""

    model_config = ConfigDict(frozen=True)

    encoding: Literal["LINEAR16"] = "LINEAR16"
    sample_rate_hertz: int = Field(ge=0, le=MAX_SAMPLE_RATE)
    language_code: str = Field(default="en-US", min_length=1)
    content: bytes = Field(repr=False)
    enable_word_time_offsets: bool = False

    @property
    def size_bytes(self) -> int:
        return len(self.content)
