"""Configuration loading and models."""

import os
from pathlib import Path

import yaml
from pydantic import BaseModel

from leadgen.core.models import SearchSpecification


class DelayConfig(BaseModel):
    website_scraping_ms: int = 1000
    api_calls_ms: int = 500


class LimitConfig(BaseModel):
    max_tokens: int = 300
    request_timeout_seconds: float = 10.0
    api_timeout_seconds: float = 30.0


class GenerationConfig(BaseModel):
    model: str = "claude-opus-4-5-20251101"
    temperature: float = 0.7
    seller_name: str = "TechHardware Pro"


class OutputConfig(BaseModel):
    directory: str = "."
    csv_filename: str = "lead_generation_results.csv"
    json_filename: str = "lead_generation_results.json"

    @property
    def csv_path(self) -> Path:
        return Path(self.directory) / self.csv_filename

    @property
    def json_path(self) -> Path:
        return Path(self.directory) / self.json_filename


class Settings(BaseModel):
    search: SearchSpecification = SearchSpecification()
    delays: DelayConfig = DelayConfig()
    limits: LimitConfig = LimitConfig()
    generation: GenerationConfig = GenerationConfig()
    output: OutputConfig = OutputConfig()
    apollo_api_key: str = ""
    anthropic_api_key: str = ""


DEFAULT_CONFIG_PATH = Path("config")

# (settings field, env var, service name, where to get a key)
API_KEYS = [
    ("apollo_api_key", "APOLLO_API_KEY", "Apollo API", "https://apollo.io/api"),
    ("anthropic_api_key", "ANTHROPIC_API_KEY", "Anthropic API", "https://console.anthropic.com/settings/keys"),
]


def load_settings(config_path: Path = DEFAULT_CONFIG_PATH) -> Settings:
    """Load settings from YAML file, taking API keys from the environment."""
    settings_file = config_path / "settings.yaml"

    data = {}
    if settings_file.exists():
        with open(settings_file) as f:
            data = yaml.safe_load(f) or {}

    settings = Settings(**data)

    # Check env vars for keys not set in YAML
    keys = {}
    for field, env_var, _, _ in API_KEYS:
        if not getattr(settings, field):
            keys[field] = os.environ.get(env_var, "")

    return settings.model_copy(update=keys)


def validate_api_keys(settings: Settings) -> list[str]:
    """Return a warning line for every provider key that is not configured."""
    warnings = []
    for field, env_var, service, url in API_KEYS:
        if not getattr(settings, field):
            warnings.append(
                f"{service} key not configured. Set {env_var} environment variable. "
                f"Get your API key from: {url}"
            )
    return warnings
