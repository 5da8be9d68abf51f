from pydantic_settings import BaseSettings
from typing import List, Optional

# every value here is read once at startup: environment variables first, then .env, then the defaults below.
# Stripe keys and FRONTEND_URL differ per deployment, the checkout options rarely do.


class Settings(BaseSettings):
    # Stripe settings
    STRIPE_SECRET_KEY: str
    # without a signing secret every webhook delivery is rejected with 400
    STRIPE_WEBHOOK_SECRET: Optional[str] = None

    # Checkout options
    CURRENCY: str = "usd"
    SHIPPING_ALLOWED_COUNTRIES: List[str] = ["US", "CA"]

    # domains
    FRONTEND_URL: str = "http://localhost:54338"
    DEPLOYED_FRONTEND_ORIGINS: List[str] = ["https://web-5zukd4dqr-justthetip-1372s-projects.vercel.app"]

    # Server
    PORT: int = 3000
    ENVIRONMENT: str = "development"
    LOG_LEVEL: str = "INFO"

    class Config:
        # local development keeps the Stripe test keys in .env (see .env.example);
        # deployments set real environment variables and ship no .env at all, which is fine
        env_file = ".env"
        case_sensitive = True
        # settings are read once at startup and never mutated afterwards
        frozen = True


# one shared instance for the whole process; routes receive it through get_settings so tests can swap it out
settings = Settings()


def get_settings() -> Settings:
    """Dependency to get the process-wide settings (overridable in tests)"""
    return settings
