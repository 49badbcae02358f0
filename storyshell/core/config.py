"""
Application settings with environment variable support and validation
"""
from pydantic_settings import BaseSettings
from pydantic import Field, validator
from typing import Optional


class Settings(BaseSettings):
    """Process-level settings, read from the environment and an optional .env file"""

    # Application settings
    environment: str = Field(default="development", description="Application environment")
    debug: bool = Field(default=False, description="Debug mode flag")
    log_level: str = Field(default="INFO", description="Logging level")

    # Property source holding the story.* configuration bundles
    properties_file: str = Field(
        default="application.properties", description="Path of the .properties file"
    )

    # LLM settings
    llm_api_key: Optional[str] = Field(None, description="API key handed to LiteLLM (optional)")
    llm_timeout: float = Field(default=60.0, description="LLM request timeout in seconds")

    # Agent settings
    agent_timeout: Optional[float] = Field(
        default=300.0, description="Timeout for one whole agent run in seconds"
    )
    demo_prompt: str = Field(
        default="Tell me a story about caterpillars",
        description="Prompt sent by the demo command",
    )

    @validator('environment')
    def validate_environment(cls, v):
        """Validate environment setting"""
        allowed_environments = ['development', 'staging', 'production']
        if v not in allowed_environments:
            raise ValueError(f'Environment must be one of: {allowed_environments}')
        return v

    @validator('log_level')
    def validate_log_level(cls, v):
        """Validate log level setting"""
        allowed_levels = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']
        if v.upper() not in allowed_levels:
            raise ValueError(f'Log level must be one of: {allowed_levels}')
        return v.upper()

    @validator('llm_timeout', 'agent_timeout')
    def validate_timeout(cls, v):
        if v is not None and v <= 0:
            raise ValueError('Timeouts must be positive')
        return v

    @property
    def is_production(self) -> bool:
        """Check if running in production environment"""
        return self.environment == "production"

    @property
    def llm_config(self) -> dict:
        """Get LLM client configuration dictionary"""
        return {
            "api_key": self.llm_api_key,
            "timeout": self.llm_timeout,
        }

    class Config:
        env_file = ".env"
        case_sensitive = False
        validate_assignment = True
        extra = "ignore"


# Global settings instance
settings = Settings()


def validate_configuration(config: Optional[Settings] = None) -> bool:
    """Log the effective settings on startup, re-raising any failure"""
    import logging
    logger = logging.getLogger(__name__)
    config = config or settings

    try:
        if config.agent_timeout is not None and config.agent_timeout < config.llm_timeout:
            logger.warning(
                f"Agent timeout ({config.agent_timeout}s) is shorter than the "
                f"LLM timeout ({config.llm_timeout}s)"
            )

        # Log configuration status (without sensitive values)
        logger.info(f"Configuration validated successfully for environment: {config.environment}")
        logger.info(f"Debug mode: {config.debug}")
        logger.info(f"Log level: {config.log_level}")
        logger.info(f"Properties file: {config.properties_file}")
        logger.info(f"LLM API key configured: {bool(config.llm_api_key)}")

        return True

    except Exception as e:
        logger.error(f"Configuration validation failed: {e}")
        raise
