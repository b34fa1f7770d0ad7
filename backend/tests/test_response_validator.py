"""Hand-crafted good and bad model outputs against the three response schemas."""

import copy
import json
from typing import Any

import pytest
from pydantic import ValidationError

from models.pointers import PointersResponse
from models.verdict import Verdict, VisionObservation
from services.errors import OutputValidationError, ValidationKind
from services.fallbacks import MOCK_POINTERS, MOCK_VERDICT, MOCK_VISION
from services.response_validator import Err, Ok, try_validate, validate


def _mutated(base: dict[str, Any], path: list[Any], value: Any = None, *, delete: bool = False) -> str:
    data = copy.deepcopy(base)
    target = data
    for key in path[:-1]:
        target = target[key]
    if delete:
        del target[path[-1]]
    else:
        target[path[-1]] = value
    return json.dumps(data)


def _assert_schema_error(raw: str, schema: type) -> None:
    with pytest.raises(OutputValidationError) as excinfo:
        validate(raw, schema)
    assert excinfo.value.kind is ValidationKind.SCHEMA


def test_exact_shapes_validate() -> None:
    verdict = validate(json.dumps(MOCK_VERDICT), Verdict)
    assert verdict.confidence == 92
    assert verdict.best_hook.timestamp_sec == 7

    vision = validate(json.dumps(MOCK_VISION), VisionObservation)
    assert vision.vibe == "CINEMATIC"
    assert len(vision.notable_moments) == 2

    pointers = validate(json.dumps(MOCK_POINTERS), PointersResponse)
    assert len(pointers.pointers) == 6


@pytest.mark.parametrize("raw", ["not json at all", "{\"title\": ", "", "```json\n{}\n```"])
def test_non_json_is_a_parse_error(raw: str) -> None:
    with pytest.raises(OutputValidationError) as excinfo:
        validate(raw, Verdict)
    assert excinfo.value.kind is ValidationKind.PARSE


@pytest.mark.parametrize("token", ["Infinity", "-Infinity", "NaN"])
def test_non_finite_number_tokens_are_parse_errors(token: str) -> None:
    raw = json.dumps(MOCK_POINTERS).replace('"t": 2,', f'"t": {token},', 1)
    assert token in raw
    with pytest.raises(OutputValidationError) as excinfo:
        validate(raw, PointersResponse)
    assert excinfo.value.kind is ValidationKind.PARSE


def test_wire_models_reject_nan_floats() -> None:
    data = copy.deepcopy(MOCK_VISION)
    data["notableMoments"][0]["t"] = float("nan")
    with pytest.raises(ValidationError):
        VisionObservation.model_validate(data)


def test_json_that_is_not_an_object_is_a_parse_error() -> None:
    with pytest.raises(OutputValidationError) as excinfo:
        validate("[1, 2, 3]", PointersResponse)
    assert excinfo.value.kind is ValidationKind.PARSE


@pytest.mark.parametrize(
    ("path", "value"),
    [
        (["confidence"], 101),
        (["confidence"], -1),
        (["vibe"], "CHILL"),
        (["editStrategy"], ["one", "two"]),
        (["editStrategy"], ["a", "b", "c", "d", "e", "f"]),
        (["hashtags"], ["#one", "#two"]),
        (["bestHook", "timestampSec"], "soon"),
    ],
)
def test_verdict_out_of_range_values_are_rejected(path: list[str], value: Any) -> None:
    _assert_schema_error(_mutated(MOCK_VERDICT, path, value), Verdict)


@pytest.mark.parametrize("field", ["title", "editorsCall", "bestHook", "caption", "avoid", "confidence"])
def test_verdict_missing_field_is_rejected(field: str) -> None:
    _assert_schema_error(_mutated(MOCK_VERDICT, [field], delete=True), Verdict)


def test_vision_limits_notable_moments_to_five() -> None:
    moments = [{"t": i, "desc": f"moment {i}"} for i in range(6)]
    _assert_schema_error(_mutated(MOCK_VISION, ["notableMoments"], moments), VisionObservation)


def test_vision_missing_scene_type_is_rejected() -> None:
    _assert_schema_error(_mutated(MOCK_VISION, ["sceneType"], delete=True), VisionObservation)


def test_pointer_missing_one_field_rejects_the_whole_response() -> None:
    _assert_schema_error(_mutated(MOCK_POINTERS, ["pointers", 3, "instruction"], delete=True), PointersResponse)


@pytest.mark.parametrize(
    ("path", "value"),
    [
        (["pointers", 0, "intensity"], 4),
        (["pointers", 0, "intensity"], 0),
        (["pointers", 0, "category"], "glitch"),
    ],
)
def test_pointer_enum_violations_are_rejected(path: list[Any], value: Any) -> None:
    _assert_schema_error(_mutated(MOCK_POINTERS, path, value), PointersResponse)


def test_pointer_count_bounds() -> None:
    five = MOCK_POINTERS["pointers"][:5]
    _assert_schema_error(_mutated(MOCK_POINTERS, ["pointers"], five), PointersResponse)

    eleven = (MOCK_POINTERS["pointers"] * 2)[:11]
    _assert_schema_error(_mutated(MOCK_POINTERS, ["pointers"], eleven), PointersResponse)


def test_try_validate_returns_tagged_results() -> None:
    ok = try_validate(json.dumps(MOCK_VISION), VisionObservation)
    assert isinstance(ok, Ok)
    assert ok.value.scene_type == "person"

    err = try_validate("nope", VisionObservation)
    assert isinstance(err, Err)
    assert err.error.kind is ValidationKind.PARSE
