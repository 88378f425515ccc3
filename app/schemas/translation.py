from pydantic import BaseModel, ConfigDict, Field
from typing import Optional
from datetime import datetime


class TranslationCreate(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    banjara_text: Optional[str] = Field(None, alias="banjaraText")


class TranslationResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: Optional[int] = Field(None, description="History id; null when the translation was not saved")
    banjara_text: str = Field(alias="banjaraText")
    telugu_text: str = Field(alias="teluguText")
    english_text: str = Field(alias="englishText")
    used_fallback: bool = Field(False, alias="usedFallback")
    saved: bool = True


class TranslationRead(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: int
    banjara_text: str = Field(alias="banjaraText")
    telugu_text: str = Field(alias="teluguText")
    english_text: str = Field(alias="englishText")
    timestamp: Optional[datetime] = None
