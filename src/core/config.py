from typing import List, Optional

from pydantic_settings import BaseSettings, SettingsConfigDict
import os

# Load .env file if it exists, for local development
# In production, environment variables should be set directly.
if os.path.exists(".env"):
    from dotenv import load_dotenv
    load_dotenv()

class ValueDeliverySettings(BaseSettings):
    enabled: bool = True
    debug: bool = False
    log_level: str = "INFO"
    taxonomy_path: Optional[str] = None  # YAML keyword library; built-in table when unset

    # Session validation gate
    min_responses: int = 3
    min_key_response_chars: int = 10
    key_response_slots: List[str] = ["response1", "response4", "response6"]

    model_config = SettingsConfigDict(env_prefix='VALUE_DELIVERY_')

# Instantiate settings
settings = ValueDeliverySettings()
