# pylint: disable=missing-docstring
import pytest
from pydantic import ValidationError

from jwtreauth.utils.settings import DEFAULT_PORTS
from jwtreauth.utils.settings import ComparisonSettings
from jwtreauth.utils.url import URL
from jwtreauth.utils.url import port_or_default


def test_defaults(monkeypatch):
    monkeypatch.delenv("DEFAULT_PORTS", raising=False)
    settings = ComparisonSettings()
    assert settings.default_ports == {}
    assert settings.port_table() == DEFAULT_PORTS


def test_extra_ports():
    settings = ComparisonSettings(default_ports={"gopher": 70})
    table = settings.port_table()
    assert table["gopher"] == 70
    assert table["https"] == 443


def test_override_builtin():
    settings = ComparisonSettings(default_ports={"http": 8080})
    assert settings.port_table()["http"] == 8080
    assert DEFAULT_PORTS["http"] == 80


def test_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_PORTS", '{"gopher": 70, "http": 8000}')
    settings = ComparisonSettings()
    assert settings.default_ports == {"gopher": 70, "http": 8000}
    assert settings.port_table()["ftp"] == 21


@pytest.mark.parametrize("ports", [
    {"gopher": 70000},
    {"gopher": -5},
    {"http": 65536},
])
def test_port_out_of_range(ports):
    with pytest.raises(ValidationError):
        ComparisonSettings(default_ports=ports)


def test_port_bounds():
    settings = ComparisonSettings(default_ports={"low": 0, "high": 65535})
    assert settings.default_ports == {"low": 0, "high": 65535}


def test_schemes_lower_cased():
    settings = ComparisonSettings(default_ports={"GOPHER": 70, "Http": 8080})
    assert settings.default_ports == {"gopher": 70, "http": 8080}
    url = URL.parse("GOPHER://example.com/", settings)
    assert url.protocol == "gopher"
    assert port_or_default(url) == 70
    assert port_or_default(URL.parse("http://example.com/", settings)) == 8080


def test_conflicting_schemes():
    with pytest.raises(ValidationError):
        ComparisonSettings(default_ports={"gopher": 70, "GOPHER": 71})


def test_out_of_range_from_environment(monkeypatch):
    monkeypatch.setenv("DEFAULT_PORTS", '{"gopher": 70000}')
    with pytest.raises(ValidationError):
        ComparisonSettings()
