"""Human-readable formatting for sizes, token counts and costs."""


def format_file_size(num_bytes: int) -> str:
    """Format a byte count as B, KB or MB."""
    if num_bytes < 1024:
        return f"{num_bytes}B"
    kb = num_bytes / 1024
    if kb < 1024:
        return f"{kb:.1f}KB"
    return f"{kb / 1024:.1f}MB"


def format_token_count(tokens: int) -> str:
    """Format a token count, using 'k' notation from 1000 up."""
    if tokens < 1000:
        return f"{tokens}"
    return f"{tokens / 1000:.1f}k"


def format_cost(cost: float) -> str:
    """Format a cost as dollars with four decimals."""
    return f"${cost:.4f}"


def format_rate(rate: float) -> str:
    """Format a per-million-token rate as dollars with two decimals."""
    return f"${rate:.2f}"


def format_context_window(tokens: int) -> str:
    """Format a context window size with thousands separators."""
    return f"{tokens:,} tokens"
