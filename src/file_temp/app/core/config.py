from pathlib import Path
from typing import Optional

from pydantic import field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from file_temp.app.domain.files.value_objects import (
    DEFAULT_ACCEPTED_TYPES,
    DEFAULT_IDENTIFIER_LENGTH,
    DEFAULT_MAX_SIZE,
    Charset,
    parse_size,
)


class Settings(BaseSettings):
    model_config = SettingsConfigDict(env_file='.env', case_sensitive=True, extra='ignore')
    FILE_TEMP_MAX_SIZE: int | str = DEFAULT_MAX_SIZE
    FILE_TEMP_TYPES: list[str] = list(DEFAULT_ACCEPTED_TYPES)
    FILE_TEMP_FOLDER: Optional[Path] = None
    FILE_TEMP_ID_CHARSET: Charset = Charset.ALPHANUMERIC
    FILE_TEMP_ID_LENGTH: int = DEFAULT_IDENTIFIER_LENGTH
    FILE_TEMP_CHUNK_SIZE: int = 64 * 1024
    API_HOST: str = '0.0.0.0'
    API_PORT: int = 8000
    LOG_LEVEL: str = 'INFO'

    @field_validator('FILE_TEMP_MAX_SIZE', mode='after')
    @classmethod
    def _parse_max_size(cls, value: int | str) -> int:
        return parse_size(value)


settings = Settings()
