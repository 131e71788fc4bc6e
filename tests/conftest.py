"""Shared fixtures for wpatui tests."""

import pytest

from wpatui.constants import MARKER
from wpatui.model import Network, NetworkRegistry, ScanEntry

PREAMBLE = (
    "ctrl_interface=/var/run/wpa_supplicant\n"
    "eapol_version=2\n"
    "\n"
    "# hand-written entry, not managed by wpatui\n"
    "network={\n"
    '    ssid="Office"\n'
    "    key_mgmt=WPA-EAP\n"
    "}\n"
)


@pytest.fixture
def home_network():
    """A secure network with a password."""
    return Network(ssid="HomeNet", psk="hunter22", security=True)


@pytest.fixture
def open_network():
    """An open network."""
    return Network(ssid="CoffeeShop", psk="", security=False)


@pytest.fixture
def registry(home_network, open_network):
    """Registry with one secure and one open network."""
    return NetworkRegistry.from_networks([home_network, open_network])


@pytest.fixture
def scan_entries():
    """Scan results, sorted by ssid as the scanner returns them."""
    return [
        ScanEntry(ssid="Airport", security=False),
        ScanEntry(ssid="CoffeeShop", security=False),
        ScanEntry(ssid="HomeNet", security=True),
        ScanEntry(ssid="Neighbour", security=True),
    ]


@pytest.fixture
def generated_config():
    """Config content as wpatui writes it: preamble, marker, two entries."""
    return (
        PREAMBLE
        + MARKER + "\n"
        + "network={\n"
        + '    ssid="HomeNet"\n'
        + "    key_mgmt=WPA-PSK\n"
        + '    psk="hunter22"\n'
        + "}\n"
        + "\n"
        + "network={\n"
        + '    ssid="CoffeeShop"\n'
        + "    key_mgmt=NONE\n"
        + "}\n"
        + "\n"
    )


@pytest.fixture
def config_file(tmp_path, generated_config):
    """A wpa_supplicant.conf with a generated section."""
    path = tmp_path / "wpa_supplicant.conf"
    path.write_text(generated_config)
    return path


@pytest.fixture
def plain_config_file(tmp_path):
    """A wpa_supplicant.conf without a marker."""
    path = tmp_path / "wpa_supplicant.conf"
    path.write_text(PREAMBLE)
    return path
