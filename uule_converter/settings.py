import os
from typing import Optional

from dotenv import find_dotenv, load_dotenv
from pydantic import BaseModel, Field

from uule_converter.consts import (DEFAULT_PROVENANCE, LOGGED_IN_USER_SPECIFIED, UNSPECIFIED_RADIUS,
                                   USER_SPECIFIED_FOR_REQUEST)

ENV_PREFIX = "UULE_"


class UuleSettings(BaseModel):
    """Defaults used by UuleConverter when building UULEv2 tokens.

Changing role and producer shifts the precision of the search,
no change has been observed for provenance and radius.
    """
    role: int = Field(default=USER_SPECIFIED_FOR_REQUEST)
    producer: int = Field(default=LOGGED_IN_USER_SPECIFIED)
    provenance: int = Field(default=DEFAULT_PROVENANCE)
    radius: int = Field(default=UNSPECIFIED_RADIUS)

    @classmethod
    def from_env(cls, env_file: Optional[str] = None) -> "UuleSettings":
        """Read UULE_ROLE, UULE_PRODUCER, UULE_PROVENANCE and UULE_RADIUS.

        env_file is loaded first, by default the nearest .env above the working directory.
        """
        if env_file is None:
            env_file = find_dotenv(usecwd=True)
        load_dotenv(env_file)

        values = {}
        for name in cls.model_fields:
            value = os.getenv(f"{ENV_PREFIX}{name.upper()}")
            if value is not None:
                values[name] = value.strip()

        return cls(**values)
