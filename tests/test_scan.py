"""Tests for scan output parsing."""

from unittest.mock import patch

from wpatui.command_execution import ExternalCommandError
from wpatui.model import ScanEntry
from wpatui.scan import parse_scan_output, scan_networks

HEADER = "SSID/MESH ID                      BSSID              CHAN RATE    S:N     INT CAPS"


def record(ssid: str, bssid: str = "00:11:22:33:44:55", caps: str = "EP") -> str:
    """Build a scan record aligned to HEADER."""
    return f"{ssid:<33} {bssid}   11   54M  -62:-96   100 {caps}"


class TestParseScanOutput:
    """Test parse_scan_output() function."""

    def test_header_fixture_boundary(self):
        """The BSSID label sits at offset 34, so the ssid column ends at 33."""
        assert HEADER.index("BSSID") == 34

    def test_secure_network(self):
        output = "\n".join([HEADER, record("CoffeeShop", caps="EPS   RSN<v1 ...> WME")])
        assert parse_scan_output(output) == [ScanEntry(ssid="CoffeeShop", security=True)]

    def test_wpa_marker_means_secure(self):
        output = "\n".join([HEADER, record("Old", caps="EP   WPA<v1 mc:TKIP>")])
        assert parse_scan_output(output)[0].security is True

    def test_open_network(self):
        output = "\n".join([HEADER, record("Library", caps="ES   WME")])
        assert parse_scan_output(output) == [ScanEntry(ssid="Library", security=False)]

    def test_security_marker_in_ssid_ignored(self):
        """Only the part after the ssid column is searched for security markers."""
        output = "\n".join([HEADER, record("RSN<fake", caps="ES")])
        assert parse_scan_output(output)[0].security is False

    def test_sorted_by_ssid(self):
        output = "\n".join([HEADER, record("zeta"), record("Alpha"), record("beta")])
        assert [e.ssid for e in parse_scan_output(output)] == ["Alpha", "beta", "zeta"]

    def test_duplicates_keep_first(self):
        output = "\n".join(
            [
                HEADER,
                record("Mesh", bssid="00:00:00:00:00:01", caps="RSN<v1>"),
                record("Mesh", bssid="00:00:00:00:00:02", caps="ES"),
            ]
        )
        assert parse_scan_output(output) == [ScanEntry(ssid="Mesh", security=True)]

    def test_empty_ssid_dropped(self):
        output = "\n".join([HEADER, record(""), record("Visible")])
        assert [e.ssid for e in parse_scan_output(output)] == ["Visible"]

    def test_short_records_skipped(self):
        output = "\n".join([HEADER, "truncated", "", record("Visible")])
        assert [e.ssid for e in parse_scan_output(output)] == ["Visible"]

    def test_ssid_with_inner_spaces(self):
        output = "\n".join([HEADER, record("My Home Net")])
        assert parse_scan_output(output)[0].ssid == "My Home Net"

    def test_missing_header_label(self):
        assert parse_scan_output("SSID CHAN\nfoo 11\n") == []

    def test_empty_output(self):
        assert parse_scan_output("") == []


class TestScanNetworks:
    """Test scan_networks() function."""

    @patch("wpatui.scan.run_command")
    def test_runs_scan_command(self, mock_run):
        mock_run.return_value = "\n".join([HEADER, record("CoffeeShop", caps="RSN<v1>")])
        entries = scan_networks("wlan1", timeout=7)
        mock_run.assert_called_once_with(["ifconfig", "-v", "wlan1", "list", "scan"], timeout=7)
        assert entries == [ScanEntry(ssid="CoffeeShop", security=True)]

    @patch("wpatui.scan.run_command", side_effect=ExternalCommandError("Command not found: ifconfig"))
    def test_failure_returns_empty(self, mock_run, caplog):
        assert scan_networks("wlan0") == []
        assert "Scan on wlan0 failed" in caplog.text

    def test_undecodable_ssid_still_listed(self):
        """A scan listing with invalid UTF-8 is parsed rather than aborting the scan."""
        listing = "\\n".join([HEADER, record("abXcd").replace("X", "\\377")])
        with patch("wpatui.scan.SCAN_COMMAND", ["printf", listing]):
            entries = scan_networks("wlan0")
        assert entries == [ScanEntry(ssid="ab\ufffdcd", security=False)]
