import logging
import os

from dotenv import load_dotenv

from StorefrontPaginator.constants import API_VERSION

logger = logging.getLogger(__name__)


class EnvVarNotSetException(Exception):
    pass


def check_env_var(key: str) -> str:
    value = os.getenv(key)
    if not value:
        logger.error(f"{key} environment variable is not defined. Set it in the .env file.")
        raise EnvVarNotSetException(f"{key} environment variable is not defined. Set it in the .env file.")
    return value


class ClientSettings:
    """Connection settings for a Storefront API client."""

    def __init__(
        self,
        store_url: str,
        storefront_token: str,
        api_version: str = API_VERSION,
        timeout: float | None = None,
    ):
        self.store_url = store_url.rstrip("/")
        """Base URL of the store."""
        self.storefront_token = storefront_token
        """Storefront access token, sent as a request header."""
        self.api_version = api_version
        self.timeout = timeout
        """Request timeout in seconds, None to wait indefinitely."""

    @classmethod
    def from_env(cls) -> "ClientSettings":
        """
        Reads the settings from the environment, loading a `.env` file first if there is one.
        :raises EnvVarNotSetException: If `STOREFRONT_URL` or `STOREFRONT_TOKEN` is not set.
        """
        load_dotenv()
        timeout = os.getenv("STOREFRONT_TIMEOUT")
        return cls(
            store_url=check_env_var("STOREFRONT_URL"),
            storefront_token=check_env_var("STOREFRONT_TOKEN"),
            api_version=os.getenv("STOREFRONT_API_VERSION", API_VERSION),
            timeout=float(timeout) if timeout else None,
        )

    def __repr__(self):
        # Keep the token out of logs
        return f"ClientSettings(store_url={self.store_url!r}, api_version={self.api_version!r}, timeout={self.timeout!r})"
