from pathlib import Path

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    # Basic auth settings
    auth_username: str
    auth_password: str

    # Storage settings
    catalog_path: Path = Path("data/catalog.json")

    # Image settings
    image_target_width: int = 300
    image_target_height: int = 300
    jpeg_quality: int = 95
    max_upload_bytes: int = 20 * 1024 * 1024

    log_level: str = "INFO"  # Can be DEBUG, INFO, WARNING, ERROR, CRITICAL

    @property
    def image_target_size(self) -> tuple[int, int]:
        return (self.image_target_width, self.image_target_height)


settings = Settings()  # type: ignore
