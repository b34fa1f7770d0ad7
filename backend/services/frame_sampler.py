"""Frame sampling: evenly spaced JPEG stills from a video, sized for a vision model."""

from __future__ import annotations

import asyncio
import base64
import io
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import BinaryIO, Union

import av
from av import VideoFrame
from av.error import FFmpegError
from PIL import Image

from models.frames import SampledFrame, SampleSet
from services.errors import EncodeError, LoadError, SeekError

logger = logging.getLogger(__name__)

VideoSource = Union[str, Path, BinaryIO]

MAX_FRAMES = 12
TARGET_WIDTH = 512
JPEG_QUALITY = 70
WINDOW_START = 0.05
WINDOW_END = 0.95
SEEK_EPSILON = 0.05
DEFAULT_ASPECT = 9 / 16        # height / width when the source gives no dimensions

LOAD_ERROR_MESSAGE = "Unable to load video for sampling."
DURATION_ERROR_MESSAGE = "Cannot sample frames: unknown duration."
SEEK_ERROR_MESSAGE = "Seek failed while sampling frames."
ENCODE_ERROR_MESSAGE = (
    "Frame extraction blocked. Upload a local file or use a link that allows cross-origin access."
)


@dataclass(frozen=True)
class SamplerPreset:
    count: int
    max_total_chars: int        # aggregate base64 length before truncation kicks in
    keep_on_overflow: int
    max_frames: int = MAX_FRAMES


VERDICT_PRESET = SamplerPreset(count=10, max_total_chars=1_500_000, keep_on_overflow=6, max_frames=10)
POINTERS_PRESET = SamplerPreset(count=10, max_total_chars=1_800_000, keep_on_overflow=8)
PRESETS: dict[str, SamplerPreset] = {
    "verdict": VERDICT_PRESET,
    "pointers": POINTERS_PRESET,
}


def sample_timestamps(duration: float, count: int) -> list[float]:
    """Evenly spaced times inside [5%, 95%] of the duration; count clamped to 1..12."""
    if not duration or duration <= 0:
        raise LoadError(DURATION_ERROR_MESSAGE)
    n = min(max(int(count), 1), MAX_FRAMES)
    start = duration * WINDOW_START
    end = duration * WINDOW_END
    step = (end - start) / (n - 1) if n > 1 else 0.0
    return [start + i * step for i in range(n)]


def cap_payload(frames: list[SampledFrame], max_total_chars: int, keep: int) -> list[SampledFrame]:
    """Keep the earliest `keep` frames when the set is too large to send."""
    total = sum(len(f.jpg_base64) for f in frames)
    if total > max_total_chars and len(frames) > keep:
        logger.info(
            "[frame_sampler] Payload %d chars over cap %d; keeping first %d of %d frames",
            total,
            max_total_chars,
            keep,
            len(frames),
        )
        return frames[:keep]
    return frames


def output_size(width: int | None, height: int | None, target_width: int = TARGET_WIDTH) -> tuple[int, int]:
    ratio = height / width if width and height else DEFAULT_ASPECT
    return target_width, max(1, round(target_width * ratio))


class FrameSampler:
    """
    Seeks one shared container to each timestamp in turn and encodes what it finds.

    Seeks are strictly sequential: a single demuxer cannot be positioned at two
    timestamps at once. Call sample() from a worker thread (sample_async does
    this) since decoding blocks.
    """

    def __init__(
        self,
        *,
        target_width: int = TARGET_WIDTH,
        quality: int = JPEG_QUALITY,
        max_total_chars: int = POINTERS_PRESET.max_total_chars,
        keep_on_overflow: int = POINTERS_PRESET.keep_on_overflow,
        max_frames: int = MAX_FRAMES,
    ) -> None:
        self._target_width = target_width
        self._quality = quality
        self._max_total_chars = max_total_chars
        self._keep_on_overflow = keep_on_overflow
        self._max_frames = max_frames

    @classmethod
    def from_preset(cls, preset: SamplerPreset, **kwargs: int) -> FrameSampler:
        return cls(
            max_total_chars=preset.max_total_chars,
            keep_on_overflow=preset.keep_on_overflow,
            max_frames=preset.max_frames,
            **kwargs,
        )

    def sample(self, source: VideoSource, count: int = 10) -> SampleSet:
        container = self._open(source)
        try:
            stream = self._video_stream(container)
            duration = self._duration(container, stream)
            times = sample_timestamps(duration, count)
            width, height = output_size(
                stream.codec_context.width, stream.codec_context.height, self._target_width
            )
            logger.info(
                "[frame_sampler] duration=%.2fs frames=%d size=%dx%d",
                duration,
                len(times),
                width,
                height,
            )

            frames: list[SampledFrame] = []
            for t in times:
                seek_to = min(max(t, 0.0), max(duration - SEEK_EPSILON, 0.0))
                frame = self._frame_at(container, stream, seek_to)
                frames.append(SampledFrame(t=t, jpg_base64=self._encode(frame, width, height)))
        finally:
            container.close()

        frames = cap_payload(frames, self._max_total_chars, self._keep_on_overflow)
        return SampleSet(duration_sec=duration, frames=frames[: self._max_frames])

    async def sample_async(self, source: VideoSource, count: int = 10) -> SampleSet:
        return await asyncio.to_thread(self.sample, source, count)

    def _open(self, source: VideoSource) -> av.container.InputContainer:
        target = str(source) if isinstance(source, Path) else source
        try:
            return av.open(target, mode="r")
        except (FFmpegError, OSError, ValueError) as exc:
            logger.warning("[frame_sampler] open failed: %s", exc)
            raise LoadError(LOAD_ERROR_MESSAGE) from exc

    def _video_stream(self, container: av.container.InputContainer) -> av.video.stream.VideoStream:
        if not container.streams.video:
            raise LoadError(LOAD_ERROR_MESSAGE)
        return container.streams.video[0]

    def _duration(self, container: av.container.InputContainer, stream: av.video.stream.VideoStream) -> float:
        if stream.duration is not None and stream.time_base is not None:
            return float(stream.duration * stream.time_base)
        if container.duration is not None:
            return container.duration / av.time_base
        raise LoadError(DURATION_ERROR_MESSAGE)

    def _frame_at(
        self,
        container: av.container.InputContainer,
        stream: av.video.stream.VideoStream,
        t: float,
    ) -> VideoFrame:
        time_base = stream.time_base
        start = float(stream.start_time * time_base) if stream.start_time is not None else 0.0
        target = start + t
        last: VideoFrame | None = None
        try:
            container.seek(int(target / time_base), stream=stream, backward=True, any_frame=False)
            for frame in container.decode(stream):
                last = frame
                if frame.time is not None and frame.time >= target - 1e-3:
                    return frame
        except (FFmpegError, OSError, ValueError) as exc:
            logger.warning("[frame_sampler] seek to %.3fs failed: %s", t, exc)
            raise SeekError(SEEK_ERROR_MESSAGE) from exc
        if last is None:
            raise SeekError(SEEK_ERROR_MESSAGE)
        # Target lies past the final decodable frame.
        return last

    def _encode(self, frame: VideoFrame, width: int, height: int) -> str:
        try:
            image: Image.Image = frame.reformat(width=width, height=height, format="rgb24").to_image()
            buffer = io.BytesIO()
            image.convert("RGB").save(buffer, format="JPEG", quality=self._quality)
        except (FFmpegError, OSError, ValueError) as exc:
            logger.warning("[frame_sampler] encode failed: %s", exc)
            raise EncodeError(ENCODE_ERROR_MESSAGE) from exc
        return base64.b64encode(buffer.getvalue()).decode("ascii")
