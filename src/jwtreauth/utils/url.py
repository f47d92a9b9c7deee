"""
URL values and the equality check used to match reauthentication requests.

Two URLs are considered equal when they share the effective port, the path,
the host and the protocol. Every comparison is literal: no case folding,
no percent-decoding and no dot-segment or trailing-slash normalisation.
"""

import logging
from collections import namedtuple
from typing import Dict
from typing import Optional
from typing import Union
from urllib.parse import urlsplit

import requests
from requests.utils import to_native_string

from jwtreauth.exception import InvalidArgument
from jwtreauth.exception import URIError
from jwtreauth.utils.sanitize import sanitize
from jwtreauth.utils.settings import DEFAULT_PORTS
from jwtreauth.utils.settings import MAX_PORT
from jwtreauth.utils.settings import ComparisonSettings

logger = logging.getLogger(__name__)

__author__ = "NCC Group"


def _port_table(settings: Optional[ComparisonSettings]) -> Dict[str, int]:
    if settings is None:
        return DEFAULT_PORTS
    return settings.port_table()


def _check_port(name, port):
    if port is None:
        return
    if isinstance(port, bool) or not isinstance(port, int):
        raise InvalidArgument("{} must be an integer or None".format(name))
    if not 0 <= port <= MAX_PORT:
        raise InvalidArgument("{} {} out of range".format(name, port))


class URL(namedtuple("URL", ["protocol", "host", "port", "path", "default_port"])):
    """
    Immutable, pre-parsed URL.

    Only the parts that take part in comparison are kept. ``host`` is None
    when the URL has no authority and ``port`` is None when no port was
    given explicitly. ``default_port`` is looked up from the protocol unless
    given explicitly.
    """

    __slots__ = ()

    def __new__(
        cls,
        protocol: str,
        host: Optional[str] = None,
        port: Optional[int] = None,
        path: str = "",
        default_port: Optional[int] = None,
        settings: Optional[ComparisonSettings] = None,
    ) -> "URL":
        if not isinstance(protocol, str) or not protocol:
            raise InvalidArgument("protocol must be a non-empty string")
        if host is not None and not isinstance(host, str):
            raise InvalidArgument("host must be a string or None")
        _check_port("port", port)
        if not isinstance(path, str):
            raise InvalidArgument("path must be a string")

        if default_port is None:
            default_port = _port_table(settings).get(protocol)
        else:
            _check_port("default_port", default_port)

        return super().__new__(cls, protocol, host, port, path, default_port)

    def __repr__(self):
        return "URL(protocol={!r}, host={!r}, port={!r}, path={!r})".format(
            self.protocol, self.host, self.port, self.path
        )

    def __str__(self):
        if self.host is None:
            return "{}:{}".format(self.protocol, self.path)
        if self.port is None:
            return "{}://{}{}".format(self.protocol, self.host, self.path)
        return "{}://{}:{}{}".format(self.protocol, self.host, self.port, self.path)

    @classmethod
    def parse(cls, text: str, settings: Optional[ComparisonSettings] = None) -> "URL":
        """
        Parse an absolute URL string.

        The host is kept exactly as written (userinfo and port removed).
        Query and fragment are dropped.

        :param text: The URL
        :param settings: Optional settings with extra default ports
        :return: A URL instance
        """
        if not isinstance(text, str):
            raise InvalidArgument("URL must be a string")

        try:
            parts = urlsplit(text)
            port = parts.port
        except ValueError as err:
            logger.warning("Could not parse URL %s: %s", sanitize(text), err)
            raise URIError("Invalid URL: {}".format(err))

        if not parts.scheme:
            logger.warning("URL without scheme: %s", sanitize(text))
            raise URIError("URL has no scheme")

        return cls(
            parts.scheme,
            host=_literal_host(parts.netloc),
            port=port,
            path=parts.path,
            settings=settings,
        )

    @classmethod
    def from_request(
        cls,
        request: Union[requests.Request, requests.PreparedRequest],
        settings: Optional[ComparisonSettings] = None,
    ) -> "URL":
        """Build a URL from the target of a captured or prepared request."""
        url = getattr(request, "url", None)
        if not url:
            raise InvalidArgument("Request has no URL")
        if isinstance(url, bytes):
            url = to_native_string(url, "utf-8")
        return cls.parse(url, settings=settings)


def _literal_host(netloc):
    """Host part of an authority, case preserved; None if empty."""
    hostport = netloc.rpartition("@")[2]
    if hostport.startswith("["):
        host = hostport[: hostport.find("]") + 1]
    else:
        host = hostport.partition(":")[0]
    return host or None


def port_or_default(url: URL) -> Optional[int]:
    """
    Return the port of a URL, falling back on the protocol default.

    :param url: The URL
    :return: Port number, None if neither is known
    """
    if url.port is None:
        return url.default_port
    return url.port


def compare_equal(a: URL, b: URL) -> bool:
    """
    Check whether two URLs point at the same endpoint.

    The criteria are checked in this order, stopping at the first mismatch:

    * effective port (see :func:`port_or_default`)
    * path
    * host, where exactly one host being None means unequal
    * protocol

    :param a: the first URL to compare
    :param b: the second URL to compare
    :return: whether the two URLs are equal
    """
    for name, value in (("a", a), ("b", b)):
        if value is None:
            raise InvalidArgument("URL {} must not be None".format(name))
        if not isinstance(value, URL):
            raise InvalidArgument("URL {} must be a URL instance, not {}".format(name, type(value).__name__))

    if port_or_default(a) != port_or_default(b):
        logger.debug("Port mismatch: %s != %s", sanitize(a), sanitize(b))
        return False

    if a.path != b.path:
        logger.debug("Path mismatch: %s != %s", sanitize(a), sanitize(b))
        return False

    if (a.host is None) != (b.host is None):
        logger.debug("Host presence mismatch: %s != %s", sanitize(a), sanitize(b))
        return False
    if a.host is not None and a.host != b.host:
        logger.debug("Host mismatch: %s != %s", sanitize(a), sanitize(b))
        return False

    if a.protocol != b.protocol:
        logger.debug("Protocol mismatch: %s != %s", sanitize(a), sanitize(b))
        return False

    return True


def compare_equal_str(a: str, b: str, settings: Optional[ComparisonSettings] = None) -> bool:
    """Parse two URL strings and compare them with :func:`compare_equal`."""
    return compare_equal(URL.parse(a, settings), URL.parse(b, settings))
