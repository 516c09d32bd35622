"""genchat CLI bootstrap."""

from __future__ import annotations

from genchat.cli import app

if __name__ == "__main__":
    app()
