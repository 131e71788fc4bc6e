"""Tests for network entry serialization."""

import pytest

from wpatui.model import Network
from wpatui.model.serializers import (
    MalformedValue,
    escape_value,
    parse_entry,
    parse_section,
    serialize_entry,
    unescape_value,
)


class TestEscapeValue:
    """Test escape_value() function."""

    def test_plain_string_unchanged(self):
        assert escape_value("HomeNet") == "HomeNet"

    def test_backslash_doubled(self):
        assert escape_value("a\\b") == "a\\\\b"

    def test_quote_escaped(self):
        assert escape_value('say "hi"') == 'say \\"hi\\"'

    def test_backslash_escaped_before_quote(self):
        """Backslashes are doubled first so quote escapes are not doubled."""
        assert escape_value('\\"') == '\\\\\\"'


class TestUnescapeValue:
    """Test unescape_value() function."""

    def test_empty_returned_unchanged(self):
        assert unescape_value("") == ""

    def test_bare_token_returned_unchanged(self):
        assert unescape_value("WPA-PSK") == "WPA-PSK"

    def test_quotes_stripped(self):
        assert unescape_value('"HomeNet"') == "HomeNet"

    def test_empty_quoted_string(self):
        assert unescape_value('""') == ""

    def test_escapes_reversed(self):
        assert unescape_value('"a\\\\b \\"c\\""') == 'a\\b "c"'

    def test_missing_closing_quote_raises(self):
        with pytest.raises(MalformedValue):
            unescape_value('"HomeNet')

    def test_lone_quote_raises(self):
        with pytest.raises(MalformedValue):
            unescape_value('"')

    def test_escaped_closing_quote_raises(self):
        """A closing quote preceded by a backslash does not close the string."""
        with pytest.raises(MalformedValue):
            unescape_value('"abc\\"')

    def test_unescaped_inner_quote_raises(self):
        with pytest.raises(MalformedValue):
            unescape_value('"ab"cd"')


class TestSerializeEntry:
    """Test serialize_entry() function."""

    def test_secure_network(self, home_network):
        assert serialize_entry(home_network) == (
            "network={\n"
            '    ssid="HomeNet"\n'
            "    key_mgmt=WPA-PSK\n"
            '    psk="hunter22"\n'
            "}\n"
        )

    def test_open_network_omits_psk(self, open_network):
        assert serialize_entry(open_network) == (
            "network={\n"
            '    ssid="CoffeeShop"\n'
            "    key_mgmt=NONE\n"
            "}\n"
        )

    def test_empty_ssid_omitted(self):
        text = serialize_entry(Network(ssid="", psk="", security=False))
        assert "ssid" not in text
        assert "key_mgmt=NONE" in text

    def test_values_escaped(self):
        text = serialize_entry(Network(ssid='My "Net"', psk="pa\\ss", security=True))
        assert '    ssid="My \\"Net\\""\n' in text
        assert '    psk="pa\\\\ss"\n' in text

    def test_key_mgmt_follows_security_not_psk(self):
        """A secure network without a stored psk still uses WPA-PSK."""
        text = serialize_entry(Network(ssid="x", psk="", security=True))
        assert "key_mgmt=WPA-PSK" in text
        assert 'psk="' not in text


class TestParseEntry:
    """Test parse_entry() function."""

    def test_parses_fields(self):
        network = parse_entry(['ssid="HomeNet"', "key_mgmt=WPA-PSK", 'psk="hunter22"'])
        assert network == Network(ssid="HomeNet", psk="hunter22", security=True)

    def test_key_mgmt_none_is_open(self):
        network = parse_entry(['ssid="Cafe"', "key_mgmt=NONE"])
        assert network.security is False

    def test_markers_and_indentation_tolerated(self):
        network = parse_entry(["network={", '    ssid="Cafe"', "    key_mgmt=NONE", "}"])
        assert network.ssid == "Cafe"

    def test_unknown_keys_ignored(self):
        network = parse_entry(['ssid="Cafe"', "priority=5", "scan_ssid=1"])
        assert network == Network(ssid="Cafe")

    def test_value_split_on_first_equals(self):
        network = parse_entry(['psk="a=b=c"'])
        assert network.psk == "a=b=c"

    def test_line_without_equals_raises(self):
        with pytest.raises(MalformedValue):
            parse_entry(["garbage"])

    def test_unbalanced_value_raises(self):
        with pytest.raises(MalformedValue):
            parse_entry(['ssid="Cafe'])

    @pytest.mark.parametrize(
        "network",
        [
            Network(ssid="HomeNet", psk="hunter22", security=True),
            Network(ssid="CoffeeShop", psk="", security=False),
            Network(ssid='Quote "Net"', psk='back\\slash"quote', security=True),
            Network(ssid="  spaced  ", psk="p = q", security=True),
        ],
    )
    def test_round_trip(self, network):
        """Parsing a serialized entry yields an equal network."""
        assert parse_entry(serialize_entry(network).splitlines()) == network


class TestParseSection:
    """Test parse_section() function."""

    def test_parses_multiple_blocks(self, home_network, open_network):
        lines = (serialize_entry(home_network) + "\n" + serialize_entry(open_network)).splitlines()
        assert parse_section(lines) == [home_network, open_network]

    def test_empty_section(self):
        assert parse_section([]) == []

    def test_malformed_entry_skipped(self, home_network, caplog):
        lines = [
            "network={",
            '    ssid="Broken',
            "}",
            *serialize_entry(home_network).splitlines(),
        ]
        assert parse_section(lines) == [home_network]
        assert "Skipping network entry" in caplog.text

    def test_unterminated_block_skipped(self, home_network, caplog):
        lines = serialize_entry(home_network).splitlines() + ["network={", '    ssid="Half"']
        assert parse_section(lines) == [home_network]
        assert "unterminated" in caplog.text

    def test_comments_between_blocks_ignored(self, open_network):
        lines = ["# comment", ""] + serialize_entry(open_network).splitlines()
        assert parse_section(lines) == [open_network]
