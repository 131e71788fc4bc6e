"""Network models: remembered networks and scan observations."""

from dataclasses import dataclass


@dataclass
class Network:
    """A network remembered in the supplicant config.

    Identity is the ssid (exact, case-sensitive). An empty psk means an
    open network.
    """

    ssid: str
    psk: str = ""
    security: bool = False

    def __str__(self) -> str:
        kind = "WPA-PSK" if self.security else "open"
        return f"{self.ssid} ({kind})"

    @property
    def key_mgmt(self) -> str:
        """Value of the key_mgmt field for this network."""
        return "WPA-PSK" if self.security else "NONE"


@dataclass(frozen=True)
class ScanEntry:
    """A network observed in a single scan pass. Never persisted."""

    ssid: str
    security: bool = False

    def to_network(self, psk: str = "") -> Network:
        """Build the Network to remember for this observation."""
        return Network(ssid=self.ssid, psk=psk, security=self.security)
