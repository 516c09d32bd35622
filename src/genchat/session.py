"""Interactive chat session state machine."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Callable

from loguru import logger

from .channel import ConversationChannel, open_channel
from .config import Settings
from .errors import ChannelOpenError
from .params import GenerationConfig
from .render import Renderer

EXIT_KEYWORDS = frozenset({"exit", "quit"})
USER_PROMPT = "You: "

ChannelFactory = Callable[[Settings, GenerationConfig], ConversationChannel]


class SessionState(str, Enum):
    INITIALIZING = "initializing"
    READY = "ready"
    WAITING_FOR_INPUT = "waiting_for_input"
    PROCESSING = "processing"
    TERMINATED = "terminated"


@dataclass(frozen=True)
class SessionContext:
    """Everything the loop needs, built once after parameter collection."""

    settings: Settings
    generation: GenerationConfig


def is_exit_command(line: str) -> bool:
    return line.strip().lower() in EXIT_KEYWORDS


class ChatSession:
    """Reads operator lines and forwards them to one conversation channel.

    Each turn is its own unit of failure: a fault while talking to the
    model is logged and reported, and the session keeps waiting for input.
    """

    def __init__(
        self,
        context: SessionContext,
        renderer: Renderer,
        *,
        channel_factory: ChannelFactory = open_channel,
    ) -> None:
        self._context = context
        self._renderer = renderer
        self._channel_factory = channel_factory
        self._channel: ConversationChannel | None = None
        self._state = SessionState.INITIALIZING

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def context(self) -> SessionContext:
        return self._context

    def start(self) -> None:
        """Open the channel and print the ready banner."""
        settings = self._context.settings
        try:
            self._channel = self._channel_factory(settings, self._context.generation)
        except Exception as exc:
            raise ChannelOpenError(f"Failed to initialize chatbot: {exc!s}") from exc
        self._state = SessionState.READY
        self._renderer.ready(settings.model, self._context.generation)
        self._state = SessionState.WAITING_FOR_INPUT

    def handle_line(self, line: str) -> bool:
        """Process one operator line. Returns False once the session ends."""
        if self._state is not SessionState.WAITING_FOR_INPUT:
            raise RuntimeError(f"cannot handle input in state {self._state.value}")

        if is_exit_command(line):
            self._terminate()
            return False

        if not line.strip():
            self._renderer.empty_input()
            return True

        self._state = SessionState.PROCESSING
        self._renderer.thinking()
        try:
            reply = self._send(line)
        except KeyboardInterrupt:
            # Ctrl-C mid-call ends the session the same way it does at the prompt.
            self._renderer.info("")
            self._terminate()
            return False
        except Exception as exc:
            logger.opt(exception=exc).error("Error communicating with model: {}", exc)
            self._renderer.turn_failed()
        else:
            self._renderer.assistant_message(reply)
        self._state = SessionState.WAITING_FOR_INPUT
        return True

    def run(self) -> int:
        """Drive the session to completion and return the exit code."""
        try:
            self.start()
        except ChannelOpenError as exc:
            logger.opt(exception=exc.__cause__ or exc).error("{}", exc)
            self._renderer.error(str(exc))
            self._state = SessionState.TERMINATED
            return 1

        while self._state is not SessionState.TERMINATED:
            try:
                line = self._renderer.ask(USER_PROMPT)
            except (EOFError, KeyboardInterrupt):
                self._renderer.info("")
                self._terminate()
                break
            self.handle_line(line)
        return 0

    def _send(self, text: str) -> str:
        if self._channel is None:
            raise RuntimeError("conversation channel is not open")
        return self._channel.send(text)

    def _terminate(self) -> None:
        self._renderer.farewell()
        self._renderer.close()
        self._state = SessionState.TERMINATED
