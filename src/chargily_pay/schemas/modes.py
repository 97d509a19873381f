from enum import Enum

from ..constants import CHARGILY_LIVE_URL, CHARGILY_TEST_URL
from ..engine.exceptions import ConfigurationError


class ApiMode(Enum):
    LIVE = "live"
    TEST = "test"

    @classmethod
    def from_string(cls, value):
        if isinstance(value, cls):
            return value
        try:
            return cls(str(value).lower())
        except ValueError:
            raise ConfigurationError(f"Unsupported API mode: {value!r}, expected 'live' or 'test'")

    @property
    def base_url(self) -> str:
        return CHARGILY_LIVE_URL if self is ApiMode.LIVE else CHARGILY_TEST_URL
