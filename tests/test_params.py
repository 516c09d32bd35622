from __future__ import annotations

import pytest

from genchat.params import (
    DEFAULT_GENERATION_CONFIG,
    MAX_OUTPUT_TOKENS,
    TEMPERATURE,
    TOP_P,
    GenerationConfig,
    collect_generation_config,
    validate_number_input,
)


def _notices() -> tuple[list[str], object]:
    seen: list[str] = []
    return seen, seen.append


@pytest.mark.parametrize("raw", ["0", "0.0", "0.25", "1.5", "2", "2.0", " 1.1 "])
def test_temperature_in_range_is_returned_unchanged(raw: str) -> None:
    seen, notify = _notices()
    value = validate_number_input(raw, TEMPERATURE.minimum, TEMPERATURE.maximum, TEMPERATURE.default, notify=notify)
    assert value == pytest.approx(float(raw))
    assert seen == []


@pytest.mark.parametrize("raw", ["", "   ", "abc", "1.5abc", "nan", "NaN", "inf", "-0.1", "2.0001", "3"])
def test_temperature_invalid_input_falls_back_to_default(raw: str) -> None:
    seen, notify = _notices()
    value = validate_number_input(raw, TEMPERATURE.minimum, TEMPERATURE.maximum, TEMPERATURE.default, notify=notify)
    assert value == 0.7
    assert seen == ["Invalid input. Using default value: 0.7 (range: 0.0-2.0)"]


def test_temperature_three_is_rejected() -> None:
    assert validate_number_input("3", 0.0, 2.0, 0.7) == 0.7


def test_max_tokens_blank_uses_default() -> None:
    seen, notify = _notices()
    value = validate_number_input(
        "",
        MAX_OUTPUT_TOKENS.minimum,
        MAX_OUTPUT_TOKENS.maximum,
        MAX_OUTPUT_TOKENS.default,
        integral=True,
        notify=notify,
    )
    assert value == 500
    assert seen == ["Invalid input. Using default value: 500 (range: 50-2048)"]


@pytest.mark.parametrize(("raw", "expected"), [("50", 50), ("2048", 2048), ("1000", 1000), ("500.0", 500)])
def test_max_tokens_whole_numbers_in_range_are_accepted(raw: str, expected: int) -> None:
    value = validate_number_input(raw, 50, 2048, 500, integral=True)
    assert value == expected
    assert isinstance(value, int)


@pytest.mark.parametrize("raw", ["49", "2049", "49.9", "-1"])
def test_max_tokens_rejects_out_of_range(raw: str) -> None:
    assert validate_number_input(raw, 50, 2048, 500, integral=True) == 500


@pytest.mark.parametrize(("raw", "expected"), [("100.5", 100), ("50.9", 50), ("2047.99", 2047)])
def test_max_tokens_truncates_in_range_fractions(raw: str, expected: int) -> None:
    seen, notify = _notices()
    value = validate_number_input(raw, 50, 2048, 500, integral=True, notify=notify)
    assert value == expected
    assert isinstance(value, int)
    assert seen == []


def test_top_p_hint_is_narrower_than_enforced_range() -> None:
    # The prompt advertises 0.0 - 1.0 but 0.0 - 2.0 is what gets enforced.
    assert "0.0 - 1.0" in TOP_P.prompt()
    assert (TOP_P.minimum, TOP_P.maximum) == (0.0, 2.0)
    assert validate_number_input("1.5", TOP_P.minimum, TOP_P.maximum, TOP_P.default) == pytest.approx(1.5)
    assert validate_number_input("2.5", TOP_P.minimum, TOP_P.maximum, TOP_P.default) == 0.9


def test_prompts_name_parameter_range_and_default() -> None:
    assert TEMPERATURE.prompt() == "Enter Temperature (0.0 - 2.0, default: 0.7): "
    assert TOP_P.prompt() == "Enter Top-P (0.0 - 1.0, default: 0.9): "
    assert MAX_OUTPUT_TOKENS.prompt() == "Enter Max Output Tokens (e.g., 50-2000, default: 500): "


def test_collect_generation_config_reads_each_parameter_once() -> None:
    answers = iter(["1.5", "3", ""])
    prompts: list[str] = []
    seen, notify = _notices()

    def ask(prompt: str) -> str:
        prompts.append(prompt)
        return next(answers)

    config = collect_generation_config(ask, notify)

    assert config == GenerationConfig(temperature=1.5, top_p=0.9, max_output_tokens=500)
    assert len(prompts) == 3
    assert prompts[0].startswith("Enter Temperature")
    assert prompts[1].startswith("Enter Top-P")
    assert prompts[2].startswith("Enter Max Output Tokens")
    assert len(seen) == 2


def test_collect_generation_config_treats_end_of_input_as_blank() -> None:
    def ask(_prompt: str) -> str:
        raise EOFError

    assert collect_generation_config(ask) == DEFAULT_GENERATION_CONFIG


def test_generation_config_is_immutable() -> None:
    config = DEFAULT_GENERATION_CONFIG
    with pytest.raises(AttributeError):
        config.temperature = 1.0  # type: ignore[misc]
