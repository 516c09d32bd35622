"""CLI renderer for genchat."""

from __future__ import annotations

from typing import Callable

from rich.console import Console
from rich.text import Text

from .params import GenerationConfig

SPEAKER_LABEL = "Chatbot: "
SPEAKER_STYLE = "bold yellow"


class Renderer:
    """Console I/O for the chat session using Rich for terminal output."""

    def __init__(
        self,
        console: Console | None = None,
        error_console: Console | None = None,
        reader: Callable[[str], str] | None = None,
    ) -> None:
        self.console: Console = console or Console(highlight=False)
        self.error_console: Console = error_console or Console(stderr=True, highlight=False)
        self._reader = reader or self.console.input
        self._closed = False

    @property
    def closed(self) -> bool:
        return self._closed

    def ask(self, prompt: str) -> str:
        """Read one line; raises EOFError once input is exhausted or released."""
        if self._closed:
            raise EOFError("input stream released")
        return self._reader(prompt)

    def close(self) -> None:
        """Release the input stream."""
        self._closed = True

    def info(self, message: str) -> None:
        self.console.print(Text(message))

    def error(self, message: str) -> None:
        self.error_console.print(Text.assemble(("Error: ", "bold red"), message))

    def welcome(self) -> None:
        self.info("Initializing Gemini Chatbot...")
        self.info("\n--- Configure Model Parameters (press Enter for defaults) ---")

    def ready(self, model: str, generation: GenerationConfig) -> None:
        """Render the ready banner with the final configuration."""
        self.info("\nChatbot ready! You can now start the conversation.")
        self.info("Type 'exit' or 'quit' to end at any time.")
        self.info(f"Current Model: {model}")
        self.info(
            f"Parameters: Temperature={generation.temperature}, "
            f"Top-P={generation.top_p}, Max Tokens={generation.max_output_tokens}\n"
        )

    def assistant_message(self, message: str) -> None:
        """Render a model-speaker line. The message is printed verbatim."""
        self.console.print(Text.assemble((SPEAKER_LABEL, SPEAKER_STYLE), message))

    def thinking(self) -> None:
        self.assistant_message("(thinking...)")

    def turn_failed(self) -> None:
        self.assistant_message("Oops! I encountered an error. Please try again.")

    def empty_input(self) -> None:
        self.assistant_message("Please type something.")

    def farewell(self) -> None:
        self.assistant_message("Goodbye!")
