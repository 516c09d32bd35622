"""Generation parameters collected from the operator at startup."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Union

Number = Union[int, float]
Ask = Callable[[str], str]
Notify = Callable[[str], None]


@dataclass(frozen=True)
class GenerationConfig:
    """Sampling and length parameters sent with every turn."""

    temperature: float
    top_p: float
    max_output_tokens: int


@dataclass(frozen=True)
class ParameterSpec:
    """One prompted parameter.

    ``minimum``/``maximum`` are the bounds enforced by validation, ``hint``
    is the range text shown in the prompt. They are kept apart because the
    two do not always agree.
    """

    label: str
    minimum: Number
    maximum: Number
    default: Number
    hint: str
    integral: bool = False

    def prompt(self) -> str:
        return f"Enter {self.label} ({self.hint}, default: {self.default}): "


TEMPERATURE = ParameterSpec("Temperature", 0.0, 2.0, 0.7, hint="0.0 - 2.0")
# Shown as 0.0 - 1.0 but validated against 0.0 - 2.0.
TOP_P = ParameterSpec("Top-P", 0.0, 2.0, 0.9, hint="0.0 - 1.0")
MAX_OUTPUT_TOKENS = ParameterSpec("Max Output Tokens", 50, 2048, 500, hint="e.g., 50-2000", integral=True)

DEFAULT_GENERATION_CONFIG = GenerationConfig(
    temperature=TEMPERATURE.default,
    top_p=TOP_P.default,
    max_output_tokens=int(MAX_OUTPUT_TOKENS.default),
)


def _parse_number(raw: str) -> float | None:
    try:
        value = float(raw.strip())
    except ValueError:
        return None
    if math.isnan(value):
        return None
    return value


def validate_number_input(
    raw: str,
    minimum: Number,
    maximum: Number,
    default: Number,
    *,
    integral: bool = False,
    notify: Notify | None = None,
) -> Number:
    """Return ``raw`` as a number inside ``[minimum, maximum]``, or ``default``.

    Anything that does not parse, is NaN or lies outside the closed range
    falls back to the default. ``notify`` receives a notice naming the substituted value.
    Integral parameters truncate an in-range fraction toward zero.
    """
    value = _parse_number(raw)
    if value is None or not minimum <= value <= maximum:
        if notify is not None:
            notify(f"Invalid input. Using default value: {default} (range: {minimum}-{maximum})")
        return default
    if integral:
        return int(value)
    return value


def read_parameter(spec: ParameterSpec, ask: Ask, notify: Notify | None = None) -> Number:
    """Prompt once for ``spec`` and validate the answer."""
    try:
        raw = ask(spec.prompt())
    except EOFError:
        raw = ""
    return validate_number_input(
        raw,
        spec.minimum,
        spec.maximum,
        spec.default,
        integral=spec.integral,
        notify=notify,
    )


def collect_generation_config(ask: Ask, notify: Notify | None = None) -> GenerationConfig:
    """Prompt for temperature, top-p and max output tokens in that order."""
    temperature = read_parameter(TEMPERATURE, ask, notify)
    top_p = read_parameter(TOP_P, ask, notify)
    max_output_tokens = read_parameter(MAX_OUTPUT_TOKENS, ask, notify)
    return GenerationConfig(
        temperature=float(temperature),
        top_p=float(top_p),
        max_output_tokens=int(max_output_tokens),
    )
