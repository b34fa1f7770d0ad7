import pytest
from pydantic import ValidationError

from models import (
    PointersRequest,
    SampledFrame,
    SampleSet,
    SampleSetResponse,
    VerdictRequest,
    VerdictResponse,
)
from services.fallbacks import mock_verdict, mock_vision


def test_verdict_request_accepts_camel_case_wire_names() -> None:
    request = VerdictRequest.model_validate(
        {"platform": "reels", "durationSec": 12.5, "frames": ["0123456789"]}
    )
    assert request.duration_sec == 12.5
    assert request.goal is None
    assert request.filename is None


def test_verdict_request_duration_must_be_positive() -> None:
    with pytest.raises(ValidationError):
        VerdictRequest.model_validate({"platform": "reels", "durationSec": -1, "frames": ["0123456789"]})


def test_pointers_request_has_frames() -> None:
    base = {"platform": "tiktok", "vibe": "DARK", "brief": "Moody", "durationSec": 9}
    assert PointersRequest.model_validate(base).has_frames is False
    assert PointersRequest.model_validate({**base, "frames": []}).has_frames is False
    with_frames = PointersRequest.model_validate({**base, "frames": [{"t": 0.4, "jpgBase64": "0123456789"}]})
    assert with_frames.has_frames is True
    assert with_frames.frames[0].jpg_base64 == "0123456789"


def test_pointers_request_frame_payload_minimum_length() -> None:
    with pytest.raises(ValidationError):
        PointersRequest.model_validate(
            {
                "platform": "tiktok",
                "vibe": "DARK",
                "brief": "Moody",
                "durationSec": 9,
                "frames": [{"t": 0.4, "jpgBase64": "tiny"}],
            }
        )


def test_sample_set_serializes_to_wire_shape() -> None:
    sample_set = SampleSet(
        duration_sec=8.0,
        frames=[SampledFrame(t=0.4, jpg_base64="abcd"), SampledFrame(t=7.6, jpg_base64="efghij")],
    )
    assert sample_set.total_chars == 10

    body = SampleSetResponse.from_sample_set(sample_set).model_dump(by_alias=True)
    assert body == {
        "durationSec": 8.0,
        "frames": [{"t": 0.4, "jpgBase64": "abcd"}, {"t": 7.6, "jpgBase64": "efghij"}],
    }


def test_sampled_frame_is_immutable() -> None:
    frame = SampledFrame(t=1.0, jpg_base64="abcd")
    with pytest.raises(AttributeError):
        frame.t = 2.0  # type: ignore[misc]


def test_verdict_response_omits_fallback_on_success() -> None:
    response = VerdictResponse(verdict=mock_verdict(), vision=mock_vision())
    dumped = response.model_dump(by_alias=True, exclude_none=True)
    assert "fallback" not in dumped
    assert dumped["verdict"]["editorsCall"].startswith("Hit hard")


@pytest.mark.parametrize("duration", [float("inf"), float("nan")])
def test_verdict_request_rejects_non_finite_duration(duration: float) -> None:
    with pytest.raises(ValidationError):
        VerdictRequest.model_validate({"platform": "reels", "durationSec": duration, "frames": ["0123456789"]})
