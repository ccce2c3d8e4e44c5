"""
Command line interface for wavscribe

    wavscribe recording.wav

Prints the audio file path, the sample rate read from its header, every
transcript alternative with its confidence, and the elapsed time.
"""

import argparse
import asyncio
import logging
import sys
from datetime import datetime
from typing import List, Optional

from .core.config import TranscriberConfig
from .core.transcriber import Transcriber
from .providers.base import TranscriptionResult
from .providers.base.exceptions import WavscribeError
from .utils.formats import format_duration

logger = logging.getLogger(__name__)

NO_ARGUMENT_MESSAGE = "No argument provided."


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wavscribe",
        description="Transcribe a LINEAR16 WAV file with Google Cloud Speech-to-Text",
    )
    parser.add_argument("audio_file", nargs="?", help="Path to the WAV file")
    parser.add_argument("--language", help="Language code (default: en-US)")
    parser.add_argument("--credentials", help="Service account JSON file (default: chatkey.json)")
    parser.add_argument(
        "--timeout", type=float,
        help="Seconds to wait for the recognition (default: wait indefinitely)",
    )
    parser.add_argument("--word-times", action="store_true", default=None, help="Print word timestamps")
    parser.add_argument(
        "--validate-header", action="store_true", default=None,
        help="Reject files without a RIFF/WAVE header",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging on stderr")
    return parser


def setup_logging(verbose: bool = False) -> None:
    """Send log records to stderr so stdout only carries the report"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        stream=sys.stderr,
    )


def print_result(result: TranscriptionResult, word_times: bool = False) -> None:
    for alternative in result.alternatives():
        print(f'"{alternative.transcript}" (confidence={alternative.confidence:.2f})')
        if word_times:
            for word in alternative.words:
                print(f"    {word.word} [{word.start_time:.2f}s - {word.end_time:.2f}s]")


async def run(audio_file: str, config: TranscriberConfig) -> None:
    """Transcribe one file and print the report"""
    transcriber = Transcriber(config)
    try:
        print("Audio file: ", audio_file)

        sample_rate, content = transcriber.load(audio_file)
        print("Sample Rate (Hz):", sample_rate)

        request = transcriber.build_request(sample_rate, content)
        result = await transcriber.recognize(request)

        print()
        print_result(result, word_times=config.enable_word_time_offsets)
    finally:
        await transcriber.close()


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point; returns the process exit status"""
    start = datetime.now()
    args = build_parser().parse_args(argv)

    if not args.audio_file:
        print(NO_ARGUMENT_MESSAGE)
        return 0

    setup_logging(args.verbose)

    try:
        config = TranscriberConfig({
            "credentials_path": args.credentials,
            "language_code": args.language,
            "timeout": args.timeout,
            "enable_word_time_offsets": args.word_times,
            "validate_header": args.validate_header,
        })
        asyncio.run(run(args.audio_file, config))
    except (WavscribeError, OSError) as e:
        logger.error(f"{type(e).__name__}: {e}")
        return 1

    print()
    print("Time duration : ", format_duration((datetime.now() - start).total_seconds()))
    return 0
