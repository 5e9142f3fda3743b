"""Tests for sdns.defaults: the rendered default config."""

from __future__ import annotations

import re
import tomllib

import sdns.config
import sdns.defaults


class TestRender:
    def test_deterministic(self) -> None:
        assert sdns.defaults.render("1.0") == sdns.defaults.render("1.0")

    def test_version_stamped_on_second_line(self) -> None:
        lines = sdns.defaults.render("7.7.7").splitlines()
        assert lines[0] == "# version this config was generated from"
        assert lines[1] == 'version = "7.7.7"'

    def test_defaults_to_expected_version(self) -> None:
        assert sdns.defaults.render() == sdns.defaults.render(sdns.config.CONFIG_VERSION)

    def test_only_version_differs(self) -> None:
        a = sdns.defaults.render("a").splitlines()
        b = sdns.defaults.render("b").splitlines()
        assert [i for i, (x, y) in enumerate(zip(a, b)) if x != y] == [1]

    def test_every_option_documented(self) -> None:
        text = sdns.defaults.render()
        for key in sdns.config.to_dict(sdns.config.Config()):
            assert re.search(rf"^#?{key} = ", text, re.MULTILINE), key

    def test_log_commented_out(self) -> None:
        text = sdns.defaults.render()
        assert "\n#log = \"\"\n" in text
        assert "log" not in tomllib.loads(text)

    def test_rendered_keys_cover_every_option(self) -> None:
        text = sdns.defaults.render()
        live = set(tomllib.loads(text))
        commented = set(re.findall(r"^#(\w+) = ", text, re.MULTILINE))
        assert live | commented == set(sdns.config.to_dict(sdns.config.Config()))
        assert commented == {"log", "outboundip"}

    def test_outbound_ip_commented_out(self) -> None:
        text = sdns.defaults.render()
        assert '\n#outboundip = ""\n' in text
        assert "outboundip" not in tomllib.loads(text)


class TestDocumentedDefaults:
    def _decoded(self) -> dict:
        return tomllib.loads(sdns.defaults.render("2.0.4"))

    def test_scalars(self) -> None:
        data = self._decoded()
        assert data["version"] == "2.0.4"
        assert data["loglevel"] == "info"
        assert data["bind"] == "0.0.0.0:53"
        assert data["api"] == "127.0.0.1:8080"
        assert data["nullroute"] == "0.0.0.0"
        assert data["nullroutev6"] == "0:0:0:0:0:0:0:0"
        assert data["interval"] == 200
        assert data["timeout"] == 5
        assert data["connecttimeout"] == 2
        assert data["expire"] == 600
        assert data["maxcount"] == 0
        assert data["maxdepth"] == 30
        assert data["ratelimit"] == 0

    def test_lists(self) -> None:
        data = self._decoded()
        assert data["sources"] == [
            "http://mirror1.malwaredomains.com/files/justdomains",
            "https://raw.githubusercontent.com/StevenBlack/hosts/master/hosts",
            "http://sysctl.org/cameleon/hosts",
            "https://zeustracker.abuse.ch/blocklist.php?download=domainblocklist",
            "https://s3.amazonaws.com/lists.disconnect.me/simple_tracking.txt",
            "https://s3.amazonaws.com/lists.disconnect.me/simple_ad.txt",
            "http://hosts-file.net/ad_servers.txt",
            "https://raw.githubusercontent.com/quidsup/notrack/master/trackers.txt",
        ]
        assert data["sourcedirs"] == ["sources"]
        assert data["blocklist"] == []
        assert data["whitelist"] == ["getsentry.com", "www.getsentry.com"]

    def test_root_servers(self) -> None:
        servers = self._decoded()["rootservers"]
        assert len(servers) == 13
        assert servers[0] == "198.41.0.4:53"
        assert all(s.endswith(":53") for s in servers)

    def test_root_keys_keep_tabs(self) -> None:
        assert self._decoded()["rootkeys"] == [
            ".\t\t\t172800\tIN\tDNSKEY\t257 3 8 "
            "AwEAAagAIKlVZrpC6Ia7gEzahOR+9W29euxhJhVVLOyQbSEW0O8gcCjFFVQUTf6v58fLjwBd0YI0EzrAcQqBGCzh/RStIoO8g0NfnfL2MTJRkxoXbfDaUeVPQuYEhg37NZWAJQ9VnMVDxP/VHL496M/QZxkjf5/Efucp2gaDX6RS6CXpoY68LsvPVjR0ZSwzz1apAzvN9dlzEheX7ICJBBtuA6G3LQpzW5hOA2hzCTMjJPJ8LbqF6dsV6DoBQzgul0sGIcGOYl7OyQdXfZ57relSQageu+ipAdTTJ25AsRTAoub8ONGcLmqrAmRLKBP1dfwhYB4N7knNnulqQxA+Uk1ihz0=",
            ".\t\t\t172800\tIN\tDNSKEY\t256 3 8 "
            "AwEAAdp440E6Mz7c+Vl4sPd0lTv2Qnc85dTW64j0RDD7sS/zwxWDJ3QRES2VKDO0OXLMqVJSs2YCCSDKuZXpDPuf++YfAu0j7lzYYdWTGwyNZhEaXtMQJIKYB96pW6cRkiG2Dn8S2vvo/PxW9PKQsyLbtd8PcwWglHgReBVp7kEv/Dd+3b3YMukt4jnWgDUddAySg558Zld+c9eGWkgWoOiuhg4rQRkFstMX1pRyOSHcZuH38o1WcsT4y3eT0U/SR6TOSLIB/8Ftirux/h297oS7tCcwSPt0wwry5OFNTlfMo8v7WGurogfk8hPipf7TTKHIi20LWen5RCsvYsQBkYGpF78=",
        ]

    def test_decodes_to_defaults(self) -> None:
        cfg = sdns.config.from_dict(self._decoded())
        assert cfg.version == "2.0.4"
        assert cfg.root_servers == sdns.defaults.DEFAULTS.root_servers
        assert cfg.outbound_ip == ""
