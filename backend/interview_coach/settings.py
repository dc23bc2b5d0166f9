from typing import List

from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field

class Settings(BaseSettings):
	# Hosted text-generation (Hugging Face inference)
	hf_api_key: str | None = Field(default=None, validation_alias="HF_API_KEY")
	# Tried in order; the first model that returns a usable question wins
	hf_models: List[str] = Field(
		default=["google/gemma-2b-it", "Qwen/Qwen2.5-0.5B-Instruct"],
		validation_alias="HF_MODELS",
	)
	hf_base_url: str = Field(default="https://router.huggingface.co/hf-inference/models", validation_alias="HF_BASE_URL")
	hf_timeout_seconds: float = Field(default=5.0, validation_alias="HF_TIMEOUT_SECONDS")
	hf_max_new_tokens: int = Field(default=250, validation_alias="HF_MAX_NEW_TOKENS")
	hf_temperature: float = Field(default=0.8, validation_alias="HF_TEMPERATURE")

	# Local sentence-embedding model used for answer scoring
	embedding_model: str = Field(default="sentence-transformers/all-MiniLM-L6-v2", validation_alias="EMBEDDING_MODEL")
	# Load the embedding model at startup instead of on the first evaluation
	preload_embedding_model: bool = Field(default=False, validation_alias="PRELOAD_EMBEDDING_MODEL")

	# Database
	database_url: str | None = Field(default=None, validation_alias="DATABASE_URL")

	# Server
	host: str = Field(default="0.0.0.0", validation_alias="HOST")
	port: int = Field(default=3000, validation_alias="PORT")

	cors_origins: List[str] = Field(default=["*"], validation_alias="CORS_ORIGINS")
	log_level: str = Field(default="INFO", validation_alias="LOG_LEVEL")

	# Optional built frontend; mounted at /app only when the directory exists
	frontend_dir: str | None = Field(default=None, validation_alias="FRONTEND_DIR")

	# pydantic-settings v2 style config
	model_config = SettingsConfigDict(env_file=".env", extra="ignore")

settings = Settings()
