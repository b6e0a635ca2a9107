"""Cache configuration model."""

from typing import ClassVar

from pydantic import BaseModel, ConfigDict, Field


class CacheConfiguration(BaseModel):
    """Cache section.

    Attributes:
        dir: Cache directory. Empty selects the platform user cache directory.
        ttl_seconds: Default entry lifetime for generic reads. Branch names
            always use their own fixed lifetime.
    """

    model_config: ClassVar[ConfigDict] = ConfigDict(frozen=True, extra="ignore")

    dir: str = ""
    ttl_seconds: int = Field(default=300, ge=0)
