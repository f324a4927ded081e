"""Text processing utilities."""

import tiktoken


def truncate_text(text: str, max_length: int = 1000) -> str:
    """Truncate text to max length, appending an ellipsis when cut."""
    if len(text) <= max_length:
        return text
    return text[:max_length] + "..."


def count_tokens(text: str, encoding_name: str = "cl100k_base") -> int:
    """Count tokens in text."""
    encoding = tiktoken.get_encoding(encoding_name)
    return len(encoding.encode(text))
