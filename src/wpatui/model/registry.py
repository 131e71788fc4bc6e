"""NetworkRegistry: the set of remembered networks."""

from __future__ import annotations

import logging
from typing import Iterable, Iterator

from wpatui.model.network import Network

log = logging.getLogger(__name__)


class NetworkRegistry:
    """Known networks keyed by ssid, in insertion order.

    Insertion order is the order entries are written back to the config,
    so regenerating an unchanged registry reproduces the same file.
    """

    def __init__(self) -> None:
        self._networks: dict[str, Network] = {}

    @classmethod
    def from_networks(cls, networks: Iterable[Network]) -> NetworkRegistry:
        """Build a registry; duplicate ssids keep their first occurrence.

        Dropped entries are logged; they are not written back on save.
        """
        registry = cls()
        for network in networks:
            if registry.add(network):
                continue
            if network.ssid:
                log.warning(f"Dropping duplicate entry for ssid '{network.ssid}'")
            else:
                psk = "with psk" if network.psk else "without psk"
                log.warning(
                    f"Dropping entry without ssid (key_mgmt={network.key_mgmt}, {psk}): "
                    "only the first ssid-less entry is kept, the next save removes it"
                )
        return registry

    def add(self, network: Network) -> bool:
        """Remember a network.

        The first entry for an ssid wins: adding an ssid that is already
        known leaves the existing entry untouched.

        Returns:
            True if the network was added, False if the ssid was already known.
        """
        if network.ssid in self._networks:
            return False
        self._networks[network.ssid] = network
        log.info(f"Added network: {network}")
        return True

    def remove(self, ssid: str) -> bool:
        """Forget the network with this ssid. Returns False if it was unknown."""
        network = self._networks.pop(ssid, None)
        if network is None:
            return False
        log.info(f"Removed network: {network}")
        return True

    def contains(self, ssid: str) -> bool:
        return ssid in self._networks

    def get(self, ssid: str) -> Network | None:
        return self._networks.get(ssid)

    def networks(self) -> list[Network]:
        """Snapshot of the known networks in insertion order."""
        return list(self._networks.values())

    def __contains__(self, ssid: object) -> bool:
        return ssid in self._networks

    def __iter__(self) -> Iterator[Network]:
        return iter(list(self._networks.values()))

    def __len__(self) -> int:
        return len(self._networks)
