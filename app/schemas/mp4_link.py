from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class Mp4LinkResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    success: bool
    id: Optional[str] = None
    mp4_link: Optional[str] = Field(default=None, alias="mp4Link")
    message: Optional[str] = None
    details: Optional[str] = None

    def to_body(self) -> dict:
        return self.model_dump(by_alias=True, exclude_none=True)
