"""
Configuration settings for the Range Minter API

Loads environment variables and provides application configuration.
"""
import os
from typing import List
from dotenv import load_dotenv

from range_minter.constants import UNISWAP_V3_FACTORY, POOL_INIT_CODE_HASH as DEFAULT_INIT_CODE_HASH

# Load environment variables from .env file
load_dotenv()


class Settings:
    """Application settings"""

    # API Configuration
    API_VERSION: str = "0.1.0"
    API_TITLE: str = "Uniswap V3 Range Minter API"
    API_DESCRIPTION: str = "Symmetric price range previews for Uniswap V3 liquidity positions"

    # Pool deployment
    FACTORY_ADDRESS: str = os.getenv("FACTORY_ADDRESS", UNISWAP_V3_FACTORY)
    POOL_INIT_CODE_HASH: str = os.getenv("POOL_INIT_CODE_HASH", DEFAULT_INIT_CODE_HASH)

    # The Graph API
    GRAPH_API_KEY: str = os.getenv("GRAPH_API_KEY", "")
    CHAIN: str = os.getenv("CHAIN", "ethereum")

    # CORS Configuration
    CORS_ORIGINS: List[str] = os.getenv(
        "CORS_ORIGINS",
        "http://localhost:3000"
    ).split(",")

    # Server Configuration
    HOST: str = os.getenv("HOST", "0.0.0.0")
    PORT: int = int(os.getenv("PORT", 8000))
    DEBUG: bool = os.getenv("DEBUG", "False").lower() == "true"
    LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO").upper()


# Create global settings instance
settings = Settings()
