"""Shared constants and defaults for wpatui."""

# Defaults for the command-line options
DEFAULT_INTERFACE = "wlan0"
DEFAULT_CONFIG_PATH = "/etc/wpa_supplicant.conf"

# Seconds to wait for the scan/restart commands before giving up
COMMAND_TIMEOUT = 30.0

# Everything after this line in the config file is owned by wpatui
MARKER = "# WPATUI: DO NOT EDIT BELOW THIS LINE"

# Markers written by the tool wpatui replaces; their sections are taken over as-is
LEGACY_MARKERS = ("# CHAIFI: DO NOT EDIT BELOW THIS LINE",)

# External commands ({iface} is substituted)
SCAN_COMMAND = ["ifconfig", "-v", "{iface}", "list", "scan"]
RESTART_COMMAND = ["service", "netif", "restart", "{iface}"]

# Scan output: the SSID column ends right before this header label
SCAN_SSID_END_LABEL = "BSSID"
SCAN_SECURITY_MARKERS = ("WPA<", "RSN<")

# Layout limits for the network list
MAX_LIST_WIDTH = 80
MAX_LIST_HEIGHT = 25
