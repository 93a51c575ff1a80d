"""Runtime configuration of the calculator HTTP service."""
import os
from typing import Literal

from pydantic import BaseModel, ConfigDict, Field, IPvAnyAddress


ENV_PREFIX = "CALCULATOR_"

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]


class ServiceSettings(BaseModel):
    """
    Validated settings of the service.

    Defaults bind every interface on port 5000 so the deployment health
    check can reach the container from another host.
    """

    # Settings must not change once the server has started
    model_config = ConfigDict(frozen=True, validate_default=True)

    host: IPvAnyAddress = Field(default="0.0.0.0", description="Interface to bind")
    port: int = Field(default=5000, ge=1, le=65535, description="TCP port to listen on")
    log_level: LogLevel = Field(default="INFO", description="Service log level")

    @classmethod
    def from_env(cls, **overrides) -> "ServiceSettings":
        """
        Build settings from CALCULATOR_* environment variables.

        Keyword overrides whose value is not None win over the environment.

        :return: Validated settings
        :rtype: ServiceSettings
        :raises pydantic.ValidationError: If a value is invalid
        """
        values = {}
        for name in cls.model_fields:
            raw = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if raw is not None:
                values[name] = raw.upper() if name == "log_level" else raw
        values.update({k: v for k, v in overrides.items() if v is not None})
        return cls(**values)
