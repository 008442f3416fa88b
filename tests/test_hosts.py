"""
Tests for known host enumeration and default host selection.
"""
import pytest

from goctl_auth import read_config_from_string
from goctl_auth.hosts import ResolvedHost, default_host, known_hosts


class TestKnownHosts:
    """Tests for known_hosts."""

    def test_no_known_hosts(self, clean_env, no_hosts_config):
        hosts = known_hosts(no_hosts_config)

        assert hosts == []
        assert isinstance(hosts, list)

    def test_includes_goctl_host(self, clean_env, no_hosts_config):
        clean_env(GOCTL_HOST="test.com")

        assert known_hosts(no_hosts_config) == ["test.com"]

    def test_includes_authenticated_hosts(self, clean_env, hosts_config):
        assert known_hosts(hosts_config) == ["github.com", "enterprise.com"]

    @pytest.mark.parametrize("var", ["GOCTL_TOKEN", "GITHUB_TOKEN"])
    def test_includes_default_host_if_environment_auth_token(self, clean_env, no_hosts_config, var):
        clean_env(**{var: "TOKEN"})

        assert known_hosts(no_hosts_config) == ["github.com"]

    def test_enterprise_token_does_not_add_default_host(self, clean_env, no_hosts_config):
        clean_env(GOCTL_ENTERPRISE_TOKEN="TOKEN")

        assert known_hosts(no_hosts_config) == []

    def test_empty_token_does_not_add_default_host(self, clean_env, no_hosts_config):
        clean_env(GOCTL_TOKEN="")

        assert known_hosts(no_hosts_config) == []

    def test_deduplicates_hosts(self, clean_env, hosts_config):
        clean_env(GOCTL_HOST="test.com", GOCTL_TOKEN="TOKEN")

        assert known_hosts(hosts_config) == ["test.com", "github.com", "enterprise.com"]

    def test_override_matching_config_host_appears_once_first(self, clean_env, hosts_config):
        clean_env(GOCTL_HOST="enterprise.com")

        assert known_hosts(hosts_config) == ["enterprise.com", "github.com"]

    def test_override_is_not_normalized(self, clean_env, hosts_config):
        """Raw override strings are compared as given."""
        clean_env(GOCTL_HOST="GitHub.com")

        assert known_hosts(hosts_config) == ["GitHub.com", "github.com", "enterprise.com"]

    def test_token_fallback_skipped_when_override_set(self, clean_env, no_hosts_config):
        clean_env(GOCTL_HOST="test.com", GOCTL_TOKEN="TOKEN")

        assert known_hosts(no_hosts_config) == ["test.com"]

    def test_config_order_preserved(self, clean_env):
        config = read_config_from_string(
            "hosts:\n  b.example.com: {}\n  a.example.com: {}\n  github.com: {}\n"
        )

        assert known_hosts(config) == ["b.example.com", "a.example.com", "github.com"]

    def test_none_config_with_injected_env(self):
        assert known_hosts(None, env={"GITHUB_TOKEN": "TOKEN"}) == ["github.com"]


class TestDefaultHost:
    """Tests for default_host."""

    def test_goctl_host_if_set(self, clean_env, hosts_config):
        clean_env(GOCTL_HOST="test.com")

        assert default_host(hosts_config) == ResolvedHost("test.com", "GOCTL_HOST", True)

    def test_authenticated_host_if_only_one(self, clean_env, single_host_config):
        assert default_host(single_host_config) == ResolvedHost("enterprise.com", "hosts", True)

    def test_default_host_if_more_than_one_authenticated_host(self, clean_env, hosts_config):
        assert default_host(hosts_config) == ResolvedHost("github.com", "default", False)

    def test_default_host_if_no_authenticated_host(self, clean_env, no_hosts_config):
        assert default_host(no_hosts_config) == ResolvedHost("github.com", "default", False)

    def test_empty_goctl_host_is_unset(self, clean_env, single_host_config):
        clean_env(GOCTL_HOST="")

        assert default_host(single_host_config).source == "hosts"

    def test_none_config(self):
        assert default_host(None, env={}) == ResolvedHost("github.com", "default", False)
