"""Republic-backed conversation channel."""

from __future__ import annotations

from typing import Any, Callable

from loguru import logger
from republic import LLM
from republic.tape import InMemoryTapeStore, Tape

from .config import Settings
from .errors import ChannelReplyError
from .params import GenerationConfig

TAPE_NAME = "genchat"
BOOTSTRAP_ANCHOR = "session/start"

LLMFactory = Callable[..., Any]


def extract_reply_text(result: Any) -> str:
    """Return the text of one model reply.

    Accepts a plain string or a structured output carrying ``value`` and
    ``error``.
    """
    error = getattr(result, "error", None)
    if error is not None:
        message = getattr(error, "message", None) or str(error)
        raise ChannelReplyError(message)
    value = getattr(result, "value", result)
    if not isinstance(value, str):
        raise ChannelReplyError(f"unexpected reply type: {type(value).__name__}")
    return value


class ConversationChannel:
    """One stateful exchange with the remote model.

    Turn history lives on the tape; this object only holds the handle.
    """

    def __init__(
        self,
        tape: Tape,
        generation: GenerationConfig,
        *,
        model: str,
        system_prompt: str | None = None,
    ) -> None:
        self._tape = tape
        self._generation = generation
        self._system_prompt = system_prompt
        self.model = model

    @property
    def generation(self) -> GenerationConfig:
        return self._generation

    def send(self, text: str) -> str:
        """Forward one operator turn and block until the model answers."""
        kwargs: dict[str, Any] = {
            "max_tokens": self._generation.max_output_tokens,
            "temperature": self._generation.temperature,
            "top_p": self._generation.top_p,
        }
        if self._system_prompt:
            kwargs["system_prompt"] = self._system_prompt
        result = self._tape.chat(prompt=text, **kwargs)
        return extract_reply_text(result)


def _ensure_bootstrap_anchor(tape: Tape) -> None:
    # Tape context reads history after the last anchor; a fresh tape has none.
    tape.handoff(BOOTSTRAP_ANCHOR, state={"owner": "human"})


def open_channel(
    settings: Settings,
    generation: GenerationConfig,
    *,
    llm_factory: LLMFactory = LLM,
) -> ConversationChannel:
    """Build the LLM client and open a fresh tape with empty history."""
    llm = llm_factory(
        settings.model,
        api_key=settings.require_api_key(),
        api_base=settings.api_base,
        tape_store=InMemoryTapeStore(),
    )
    tape = llm.tape(TAPE_NAME)
    _ensure_bootstrap_anchor(tape)
    logger.debug("opened conversation channel model={} tape={}", settings.model, TAPE_NAME)
    return ConversationChannel(
        tape,
        generation,
        model=settings.model,
        system_prompt=settings.system_prompt,
    )
