from datetime import datetime

from linkstate.url_checker import CheckResult, CheckStatus, LinkTarget


class TestLinkTarget:
    def test_identity_equality(self):
        assert LinkTarget("http://a.test") != LinkTarget("http://a.test")

    def test_apply_result_with_redirect(self):
        target = LinkTarget("http://a.test")
        checked_at = datetime(2024, 5, 1, 12, 0)
        target.apply_result(CheckResult(CheckStatus.ACCESSIBLE, "HTTP 200 OK (redirected 1x)", True, "http://b.test", 1), checked_at)
        assert target.status is CheckStatus.ACCESSIBLE
        assert target.last_checked == checked_at
        assert target.redirect_url == "http://b.test"
        assert target.has_redirect

    def test_apply_result_clears_redirect(self):
        target = LinkTarget("http://a.test", redirect_url="http://b.test")
        target.apply_result(CheckResult(CheckStatus.NOT_FOUND, "HTTP 404 Not Found"))
        assert target.redirect_url is None
        assert target.last_checked is not None

    def test_redirect_differing_only_in_case_is_not_shown(self):
        assert not LinkTarget("http://a.test/Page", redirect_url="HTTP://A.TEST/page").has_redirect

    def test_reset_status(self):
        target = LinkTarget("http://a.test", status=CheckStatus.ERROR, status_message="HTTP 500",
                            last_checked=datetime.now(), redirect_url="http://b.test")
        target.reset_status()
        assert target.status is CheckStatus.UNKNOWN
        assert target.status_message == ""
        assert target.last_checked is None
        assert target.redirect_url is None

    def test_display_text(self):
        assert CheckStatus.NOT_FOUND.display_text == "URL not found"
        assert CheckStatus.UNKNOWN.display_text == "URL status not checked"

    def test_web_url_matches_resolver_scheme_check(self):
        assert LinkTarget("  HTTPS://a.test  ").is_web_url
        assert not LinkTarget(" ftp://a.test").is_web_url
