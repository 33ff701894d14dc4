"""Model configuration — model name and generation parameters."""

from pydantic import BaseModel, Field


class ModelConfig(BaseModel):
    """Generation settings sent with each request.

    ``temperature`` and ``max_tokens`` are only included in the request body
    when set.
    """

    model_name: str
    temperature: float | None = Field(default=None, ge=0.0)
    max_tokens: int | None = Field(default=None, gt=0)
    context_limit: int | None = Field(
        default=None,
        gt=0,
        description="Context window of the model in tokens, if known.",
    )
