"""
Settings for URL comparison.

The settings make use of `pydantic-settings <https://docs.pydantic.dev/usage/settings/>`_ library.
It is possible to instance them directly or use environment values to fill the settings.
"""

from typing import Annotated
from typing import Dict

from pydantic import Field
from pydantic import field_validator
from pydantic_settings import BaseSettings

MAX_PORT = 65535

DEFAULT_PORTS = {
    "http": 80,
    "https": 443,
    "ftp": 21,
    "ws": 80,
    "wss": 443,
}

Port = Annotated[int, Field(ge=0, le=MAX_PORT)]


class ComparisonSettings(BaseSettings):
    """Settings used when deriving the effective port of a URL."""

    default_ports: Dict[str, Port] = {}
    """
    Extra scheme default ports, merged on top of the built-in table.

    An entry for a scheme already in the built-in table overrides it,
    e.g. ``{"http": 8080}`` for a lab setup where plain HTTP lives on 8080.
    Schemes are lower-cased, the way parsed URLs carry them.
    """

    @field_validator("default_ports")
    @classmethod
    def lower_case_schemes(cls, value: Dict[str, int]) -> Dict[str, int]:
        lowered: Dict[str, int] = {}
        for scheme, port in value.items():
            key = scheme.lower()
            if key in lowered and lowered[key] != port:
                raise ValueError("conflicting default ports for scheme {!r}".format(key))
            lowered[key] = port
        return lowered

    def port_table(self) -> Dict[str, int]:
        """Return the built-in table updated with the configured ports."""
        table = dict(DEFAULT_PORTS)
        table.update(self.default_ports)
        return table
