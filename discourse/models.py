import os
from dataclasses import dataclass
from typing import Any, Mapping, Optional

import config

# Forum records are passed through untouched
User = dict[str, Any]
Badge = dict[str, Any]
Post = dict[str, Any]


@dataclass(frozen=True)
class ClientConfig:
    host: str
    api_username: str
    api_key: str
    timeout: Optional[float] = config.REQUEST_TIMEOUT

    def __post_init__(self) -> None:
        host = (self.host or "").strip()
        for prefix in ("https://", "http://"):
            if host.startswith(prefix):
                host = host[len(prefix):]
        host = host.rstrip("/")
        object.__setattr__(self, "host", host)

        if not host:
            raise ValueError("host is required")
        if not self.api_username:
            raise ValueError("api_username is required")
        if not self.api_key:
            raise ValueError("api_key is required")
        if self.timeout is not None and self.timeout <= 0:
            raise ValueError(f"timeout must be positive, got {self.timeout}")

    @property
    def base_url(self) -> str:
        return f"https://{self.host}"

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None) -> "ClientConfig":
        """Build a config from DISCOURSE_* environment variables."""
        env = os.environ if environ is None else environ

        values = {}
        for name in (config.ENV_HOST, config.ENV_API_USERNAME, config.ENV_API_KEY):
            value = env.get(name)
            if not value:
                raise ValueError(f"{name} environment variable required")
            values[name] = value

        timeout: Optional[float] = config.REQUEST_TIMEOUT
        raw_timeout = env.get(config.ENV_TIMEOUT)
        if raw_timeout:
            try:
                timeout = float(raw_timeout)
            except ValueError:
                raise ValueError(
                    f"{config.ENV_TIMEOUT} must be a number, got {raw_timeout!r}"
                ) from None

        return cls(
            host=values[config.ENV_HOST],
            api_username=values[config.ENV_API_USERNAME],
            api_key=values[config.ENV_API_KEY],
            timeout=timeout,
        )

    def __repr__(self) -> str:
        return (
            f"ClientConfig(host={self.host!r}, api_username={self.api_username!r}, "
            f"api_key='***', timeout={self.timeout!r})"
        )
