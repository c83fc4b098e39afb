import threading

import pytest

from requiressl.conf import SSLPolicy, get_policy


class TestHosts:
    def test_configured_host_gets_one_trailing_slash(self):
        policy = SSLPolicy(https="secure.example.com", http="www.example.com/")

        assert policy.host("https") == "secure.example.com/"
        assert policy.host("http") == "www.example.com/"

    def test_configured_host_ignores_base_url(self):
        policy = SSLPolicy(https="secure.example.com")

        assert policy.resolve_host("https", "http://localhost/") == "secure.example.com/"

    def test_unconfigured_host_derived_from_base_url(self):
        policy = SSLPolicy()

        assert policy.host("https") is None
        assert policy.resolve_host("https", "http://localhost/") == "localhost/"
        assert policy.resolve_host("http", "https://shop.example.com:8443/app") == "shop.example.com:8443/app/"

    def test_first_derived_host_is_kept(self):
        policy = SSLPolicy()

        policy.resolve_host("https", "http://first.example.com/")

        assert policy.resolve_host("https", "http://second.example.com/") == "first.example.com/"
        assert policy.host("https") == "first.example.com/"

    def test_schemes_are_memoized_independently(self):
        policy = SSLPolicy()

        policy.resolve_host("https", "http://first.example.com/")

        assert policy.host("http") is None
        assert policy.resolve_host("http", "https://second.example.com/") == "second.example.com/"

    def test_unknown_scheme(self):
        policy = SSLPolicy()

        with pytest.raises(ValueError):
            policy.resolve_host("ftp", "http://localhost/")
        with pytest.raises(ValueError):
            policy.host("ws")

    def test_concurrent_first_use_converges(self):
        policy = SSLPolicy()
        barrier = threading.Barrier(8)
        results = []

        def resolve(index):
            barrier.wait()
            results.append(policy.resolve_host("https", f"http://host{index}.example.com/"))

        threads = [threading.Thread(target=resolve, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        assert len(results) == 8
        assert len(set(results)) == 1
        assert policy.host("https") == results[0]


class TestFromSettings:
    def test_defaults(self, settings):
        settings.REQUIRE_SSL = {}

        policy = get_policy()

        assert policy.host("https") is None
        assert policy.host("http") is None
        assert policy.remain_in_ssl is False
        assert policy.disabled is False

    def test_values_are_read(self, settings):
        settings.REQUIRE_SSL = {"https": "secure.example.com", "http": "www.example.com", "remain_in_ssl": 1}

        policy = get_policy()

        assert policy.host("https") == "secure.example.com/"
        assert policy.host("http") == "www.example.com/"
        assert policy.remain_in_ssl is True

    def test_disabled_by_setting_or_engine(self, settings):
        settings.REQUIRE_SSL = {"disabled": True}
        assert get_policy().disabled is True

        settings.REQUIRE_SSL = {}
        assert SSLPolicy.from_settings(disabled=True).disabled is True

    def test_non_dict_setting_is_treated_as_empty(self, settings):
        settings.REQUIRE_SSL = "secure.example.com"

        assert get_policy().host("https") is None

    def test_setting_change_reloads_policy(self, settings, ssl_policy):
        ssl_policy.resolve_host("https", "http://localhost/")

        settings.REQUIRE_SSL = {"https": "secure.example.com"}

        assert get_policy() is not ssl_policy
        assert get_policy().host("https") == "secure.example.com/"
