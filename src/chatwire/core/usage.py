"""Token usage reported by a provider for one request."""

from pydantic import BaseModel, ConfigDict


class Usage(BaseModel):
    """Token counts. Providers report inconsistent subsets, so every field is optional."""

    model_config = ConfigDict(frozen=True)

    input_tokens: int | None = None
    output_tokens: int | None = None
    total_tokens: int | None = None
