from __future__ import annotations

from fractions import Fraction
from pathlib import Path
from typing import Iterator

import av
import pytest

from app.config import Settings, get_settings
from app.main import app


@pytest.fixture
def anyio_backend() -> str:
    return "asyncio"


@pytest.fixture(autouse=True)
def mock_mode_settings() -> Iterator[None]:
    """Never reach a real model from tests, whatever the environment holds."""
    app.dependency_overrides[get_settings] = lambda: Settings(openai_api_key=None)
    yield
    app.dependency_overrides.clear()


def _write_test_video(path: Path, *, seconds: int = 3, fps: int = 24, width: int = 160, height: int = 90) -> Path:
    """Encode a small MPEG-4 clip whose brightness ramps frame by frame."""
    container = av.open(str(path), mode="w")
    stream = container.add_stream("mpeg4", rate=fps)
    stream.width = width
    stream.height = height
    stream.pix_fmt = "yuv420p"
    total = seconds * fps
    for i in range(total):
        frame = av.VideoFrame(width, height, "rgb24")
        shade = int(255 * i / max(total - 1, 1))
        frame.planes[0].update(bytes([shade]) * frame.planes[0].buffer_size)
        frame = frame.reformat(format="yuv420p")
        frame.pts = i
        frame.time_base = Fraction(1, fps)
        for packet in stream.encode(frame):
            container.mux(packet)
    for packet in stream.encode():
        container.mux(packet)
    container.close()
    return path


@pytest.fixture
def test_video(tmp_path: Path) -> Path:
    return _write_test_video(tmp_path / "clip.mp4")


@pytest.fixture
def portrait_video(tmp_path: Path) -> Path:
    return _write_test_video(tmp_path / "portrait.mp4", seconds=2, width=90, height=160)
