from pydantic import BaseModel, ConfigDict, Field, field_validator


class SearchConfig(BaseModel):
    """Parameters for a single by-author search."""

    model_config = ConfigDict(frozen=True)

    base_url: str = Field(min_length=1)
    author_name: str
    limit: int = Field(10, ge=1)
    format: str = "json"
    timeout: float | None = None

    @field_validator("base_url")
    @classmethod
    def strip_trailing_slash(cls, value: str) -> str:
        stripped = value.strip().rstrip("/")
        if not stripped:
            raise ValueError("base_url must not be empty")
        return stripped
