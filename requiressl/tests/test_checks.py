from requiressl.checks import check_middleware, check_setting


def ids(messages):
    return [message.id for message in messages]


class TestSettingCheck:
    def test_project_settings_pass(self):
        assert check_setting(None) == []

    def test_not_a_dict(self, settings):
        settings.REQUIRE_SSL = "secure.example.com"

        assert ids(check_setting(None)) == ["requiressl.E001"]

    def test_unknown_keys(self, settings):
        settings.REQUIRE_SSL = {"https": "secure.example.com", "hsts": True, "remain": 1}

        messages = check_setting(None)

        assert ids(messages) == ["requiressl.E002"]
        assert "hsts, remain" in messages[0].msg

    def test_blanket_ssl_redirect_conflicts(self, settings):
        settings.SECURE_SSL_REDIRECT = True
        settings.REQUIRE_SSL = {}

        assert ids(check_setting(None)) == ["requiressl.E003"]

    def test_blanket_ssl_redirect_with_remain_in_ssl(self, settings):
        settings.SECURE_SSL_REDIRECT = True
        settings.REQUIRE_SSL = {"remain_in_ssl": True}

        assert check_setting(None) == []


class TestMiddlewareCheck:
    def test_installed(self):
        assert check_middleware(None) == []

    def test_missing(self, settings):
        settings.MIDDLEWARE = [
            path for path in settings.MIDDLEWARE if not path.startswith("requiressl.")
        ]

        assert ids(check_middleware(None)) == ["requiressl.W001"]
