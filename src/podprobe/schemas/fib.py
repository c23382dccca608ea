from pydantic import BaseModel


class FibResult(BaseModel):
    """Result of a /fib computation. ``n`` is the clamped value actually used."""

    n: int
    result: int
    computation_ms: float
