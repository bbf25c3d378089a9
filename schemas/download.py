from enum import Enum
from typing import Optional
from pydantic import BaseModel, ConfigDict, field_validator
from utils.url_utils import Provider


class MediaFormat(str, Enum):
    MP4 = 'mp4'
    MP3 = 'mp3'


class ResolveRequest(BaseModel):
    model_config = ConfigDict(frozen=True)

    url: str = ''
    format: MediaFormat = MediaFormat.MP4
    platform: Optional[str] = None

    @field_validator('url', mode='before')
    @classmethod
    def _strip_url(cls, value):
        if value is None:
            return ''
        return value.strip() if isinstance(value, str) else value

    @field_validator('format', mode='before')
    @classmethod
    def _default_format(cls, value):
        if value is None or value == '':
            return MediaFormat.MP4
        return value.strip().lower() if isinstance(value, str) else value


class ResolveResult(BaseModel):
    success: bool = True
    source: Provider
    format: MediaFormat
    filename: str
    downloadUrl: str
    title: Optional[str] = None


class ResolveFailure(BaseModel):
    success: bool = False
    message: str
