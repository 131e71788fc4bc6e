"""wpatui: pick wireless networks to remember in wpa_supplicant.conf."""
