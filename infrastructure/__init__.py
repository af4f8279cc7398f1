"""Infrastructure layer exports."""

from .openai_transcriber import OpenAITranscriber, build_openai_client

__all__ = ["OpenAITranscriber", "build_openai_client"]
