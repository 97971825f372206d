from pydantic import AliasChoices, BaseModel, Field
from typing import Optional


class ShortenRequest(BaseModel):
    url: Optional[str] = None
    short_code: Optional[str] = Field(
        None, validation_alias=AliasChoices("shortcode", "shortCode", "short_code")
    )


class ShortenResponse(BaseModel):
    success: bool = True
    short_code: str = Field(..., alias="shortCode")

    class Config:
        populate_by_name = True


class ErrorResponse(BaseModel):
    success: bool = False
    error: str
