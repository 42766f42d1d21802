from .openai_client import ChatCompletionResult, OpenAIChatClient

__all__ = [
    "ChatCompletionResult",
    "OpenAIChatClient",
]
