"""
PayMongo client configuration.

Standalone configuration with no environment loading: callers pass their keys
in however they store them.
"""

from dataclasses import dataclass

from .exceptions import PayMongoConfigError

DEFAULT_BASE_URL = "https://api.paymongo.com/v1"

PUBLIC_KEY_PREFIX = "pk_"
SECRET_KEY_PREFIX = "sk_"


@dataclass(frozen=True)
class ResolvedConfig:
    """Validated configuration used by the transport.

    Attributes:
        api_key: The key sent as the Basic auth username
        base_url: API base URL without trailing slash
        is_public_key: True when ``api_key`` is a public (client-side) key
        timeout: Request timeout in seconds, or None for no timeout
        verify_ssl: Whether to verify SSL certificates
    """

    api_key: str
    base_url: str
    is_public_key: bool
    timeout: float | None = None
    verify_ssl: bool = True


@dataclass
class PayMongoConfig:
    """
    Configuration for the PayMongo client.

    Exactly one key is needed. When both are given the secret key wins, since
    it has full API access.

    Attributes:
        public_key: Public key (``pk_test_*`` / ``pk_live_*``) for client-side use
        secret_key: Secret key (``sk_test_*`` / ``sk_live_*``) for server-side use
        base_url: Base URL for the PayMongo API
        timeout: Request timeout in seconds (default: None, no timeout)
        verify_ssl: Whether to verify SSL certificates (default: True)

    Example:
        ```python
        config = PayMongoConfig(secret_key="sk_test_...")
        resolved = config.resolve()
        ```
    """

    public_key: str | None = None
    secret_key: str | None = None
    base_url: str = DEFAULT_BASE_URL
    timeout: float | None = None
    verify_ssl: bool = True

    def __post_init__(self) -> None:
        """Validate configuration after initialization."""
        self.base_url = (self.base_url or DEFAULT_BASE_URL).rstrip("/")

        if self.timeout is not None and self.timeout <= 0:
            raise PayMongoConfigError("timeout must be greater than 0")

    @property
    def api_key(self) -> str | None:
        """The key that will authenticate requests."""
        return self.secret_key or self.public_key

    @property
    def is_public_key(self) -> bool:
        """True when only a public key is configured."""
        return not self.secret_key and bool(self.public_key)

    def resolve(self) -> ResolvedConfig:
        """
        Validate the keys and produce the transport configuration.

        Returns:
            ResolvedConfig

        Raises:
            PayMongoConfigError: If no key is given or the key prefix is wrong
        """
        api_key = self.api_key
        if not api_key:
            raise PayMongoConfigError(
                "PayMongo requires either a public_key or secret_key. "
                "Use public_key for client-side operations, secret_key for server-side operations."
            )

        is_public_key = self.is_public_key

        if is_public_key and not api_key.startswith(PUBLIC_KEY_PREFIX):
            raise PayMongoConfigError(
                'Invalid public key format. Public keys should start with "pk_test_" or "pk_live_".'
            )

        if not is_public_key and not api_key.startswith(SECRET_KEY_PREFIX):
            raise PayMongoConfigError(
                'Invalid secret key format. Secret keys should start with "sk_test_" or "sk_live_".'
            )

        return ResolvedConfig(
            api_key=api_key,
            base_url=self.base_url,
            is_public_key=is_public_key,
            timeout=self.timeout,
            verify_ssl=self.verify_ssl,
        )

    @property
    def is_test_mode(self) -> bool:
        """Check if using a test mode key."""
        return "_test_" in (self.api_key or "")

    @property
    def is_live_mode(self) -> bool:
        """Check if using a live mode key."""
        return "_live_" in (self.api_key or "")
