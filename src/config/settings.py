from functools import lru_cache
from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict
from pathlib import Path


class Settings(BaseSettings):
	# Vector/RAG backend selection; only "ct" (RagLite) is implemented
	RAG_PROVIDER: str = Field(default="ct")
	RAG_CT_BASE_URL: str | None = Field(default=None)  # e.g. http://raglite:8080
	RAG_CT_API_KEY: str | None = Field(default=None)
	RAG_TIMEOUT: float = Field(default=30.0)  # seconds, per backend round trip

	LOG_DIR: str = Field(default="./logs")
	LOG_LEVEL: str = Field(default="INFO")

	model_config = SettingsConfigDict(env_file=".env", env_file_encoding="utf-8", extra="ignore")

	def ensure_runtime_dirs(self) -> None:
		"""
		Ensure that runtime directories exist at startup.
		"""
		Path(self.LOG_DIR).mkdir(parents=True, exist_ok=True)


@lru_cache
def get_settings() -> Settings:
	"""
	Returns a cached Settings instance loaded from environment/.env.
	Also ensures runtime directories are present.
	"""
	settings = Settings()  # type: ignore[call-arg]
	settings.ensure_runtime_dirs()
	return settings
