"""
Inbound plan request model.

Request bodies arrive as loosely-typed JSON from the presentation layer and
are validated here in strict mode: wrong types and unknown keys are
rejected, never coerced.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from ..extractor.video_source import extract_video_id


class PlanRequest(BaseModel):
    model_config = ConfigDict(
        strict=True,
        extra="forbid",
        frozen=True,
        populate_by_name=True,
    )

    channel_handles: list[str] = Field(alias="channelHandles")
    target_video_url: Optional[str] = Field(default=None, alias="targetVideoUrl")

    @field_validator("channel_handles")
    @classmethod
    def _check_handles(cls, value: list[str]) -> list[str]:
        if not value:
            raise ValueError("At least one channel handle is required.")
        for handle in value:
            if not handle.strip():
                raise ValueError("Channel handles must not be blank.")
        return value

    @field_validator("target_video_url")
    @classmethod
    def _check_target_url(cls, value: Optional[str]) -> Optional[str]:
        if value is not None and extract_video_id(value) is None:
            raise ValueError(f"Not a YouTube video URL: {value!r}")
        return value

    @property
    def target_video_id(self) -> Optional[str]:
        if self.target_video_url is None:
            return None
        return extract_video_id(self.target_video_url)
