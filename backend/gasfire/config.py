"""Application configuration from environment variables."""

from __future__ import annotations

from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    gasfire_env: str = "development"
    gasfire_log_level: str = "info"

    # CORS
    cors_origins: list[str] = ["http://localhost:3000"]

    # Rendering
    image_size: int = 512

    # Transaction history
    etherscan_api_key: str = ""
    etherscan_network: str = "mainnet"
    etherscan_timeout: float = 10.0

    # Attestation signing
    signer_private_key: str = ""

    model_config = {"env_file": ".env", "env_file_encoding": "utf-8"}


settings = Settings()
