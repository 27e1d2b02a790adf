from pydantic import Field
from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    PROJECT_NAME: str = "meshmass"

    # Input validation
    CHECK_PRECONDITIONS: bool = True

    # Total volume at or below rtol * max_extent**3 is treated as degenerate
    DEGENERATE_VOLUME_RTOL: float = 1e-10

    # Triangles evaluated per vectorised batch
    CHUNK_SIZE: int = Field(default=65536, gt=0)

    # Voxels along the longest bounding-box axis for the brute-force oracle
    BRUTE_FORCE_RESOLUTION: int = 400

    # Logging
    LOG_LEVEL: str = "WARNING"
    LOG_JSON: bool = True

    model_config = {"env_prefix": "MESHMASS_", "env_file": ".env", "extra": "ignore"}


settings = Settings()
