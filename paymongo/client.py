"""PayMongo client: the single entry point of the SDK."""

from typing import Any, ClassVar

import structlog

from .config import DEFAULT_BASE_URL, PayMongoConfig, ResolvedConfig
from .http import HttpClient
from .resources import (
    CheckoutSessions,
    Customers,
    PaymentIntents,
    PaymentMethods,
    Payments,
    Refunds,
    Webhooks,
)

logger = structlog.get_logger(__name__)


class PayMongo:
    """
    Async client for the PayMongo API.

    Build one handle and pass it to the code that needs it. A public key gives
    client-side mode (payment methods, and payment intents through their client
    key); a secret key gives server-side mode with full access. The remote API
    enforces which key may call what; this client does not.

    Example:
        ```python
        from paymongo import PayMongo

        async with PayMongo(secret_key="sk_test_...") as paymongo:
            intent = await paymongo.payment_intents.create(
                {"amount": 10000, "payment_method_allowed": ["card"]}
            )
            same = await paymongo.payment_intents.retrieve(intent.id)
        ```
    """

    _instance: ClassVar["PayMongo | None"] = None

    def __init__(
        self,
        public_key: str | None = None,
        secret_key: str | None = None,
        base_url: str | None = None,
        timeout: float | None = None,
        verify_ssl: bool = True,
        config: PayMongoConfig | None = None,
    ) -> None:
        """
        Initialize the PayMongo client.

        Args:
            public_key: Public key for client-side use
            secret_key: Secret key for server-side use; wins over public_key
            base_url: Override the API base URL
            timeout: Request timeout in seconds (default: no timeout)
            verify_ssl: Whether to verify SSL certificates
            config: A ready PayMongoConfig; other arguments are ignored when given

        Raises:
            PayMongoConfigError: If no key is given or the key prefix is wrong
        """
        if config is None:
            config = PayMongoConfig(
                public_key=public_key,
                secret_key=secret_key,
                base_url=base_url or DEFAULT_BASE_URL,
                timeout=timeout,
                verify_ssl=verify_ssl,
            )
        self.config: ResolvedConfig = config.resolve()
        self.http = HttpClient(self.config)

        self.payment_intents = PaymentIntents(self.http)
        self.payment_methods = PaymentMethods(self.http)
        self.payments = Payments(self.http)
        self.customers = Customers(self.http)
        self.refunds = Refunds(self.http)
        self.webhooks = Webhooks(self.http)
        self.checkout_sessions = CheckoutSessions(self.http)

        logger.info(
            "PayMongo client initialized",
            base_url=self.config.base_url,
            mode="client" if self.is_client_side else "server",
        )

    async def __aenter__(self) -> "PayMongo":
        """Async context manager entry."""
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit."""
        await self.aclose()

    async def aclose(self) -> None:
        """Close the underlying HTTP connection pool."""
        await self.http.close()

    @property
    def is_client_side(self) -> bool:
        """True when authenticating with a public key."""
        return self.config.is_public_key

    @property
    def is_server_side(self) -> bool:
        """True when authenticating with a secret key."""
        return not self.config.is_public_key

    @classmethod
    def get_instance(cls, *, force_new: bool = False, **kwargs: Any) -> "PayMongo":
        """
        Return a process-wide shared client, creating it on first call.

        Convenience only. Access is not synchronized: concurrent first calls
        can each build an instance, so serialize the first call if that
        matters. Arguments are only used when a new instance is built.

        Args:
            force_new: Replace any existing instance with a new one
            **kwargs: Passed to ``PayMongo(...)``

        Returns:
            The shared PayMongo instance
        """
        if cls._instance is None or force_new:
            cls._instance = cls(**kwargs)
        return cls._instance

    @classmethod
    def reset_instance(cls) -> None:
        """Forget the shared instance. Does not close it."""
        cls._instance = None
