from datetime import datetime

import pytest

from linkstate.url_checker import CheckStatus, CollectedTarget, LinkCheckReport, LinkTarget


@pytest.fixture
def targets():
    return [
        LinkTarget("http://ok.test", title="ok", status=CheckStatus.ACCESSIBLE, status_message="HTTP 200 OK",
                   last_checked=datetime(2024, 5, 1, 10, 30)),
        LinkTarget("http://gone.test", title="gone", status=CheckStatus.NOT_FOUND, status_message="HTTP 404 Not Found",
                   last_checked=datetime(2024, 5, 1, 10, 31)),
        LinkTarget("http://old.test", title="old", status=CheckStatus.ACCESSIBLE,
                   status_message="HTTP 200 OK (redirected 1x)", redirect_url="http://new.test"),
    ]


def test_write_and_summary(tmp_path, targets):
    report = LinkCheckReport(tmp_path / "reports" / "links.csv")
    assert not report.exists

    report.write(targets)

    assert report.exists
    assert report.summary() == {"accessible": 2, "not_found": 1}
    df = report.df
    assert list(df.columns) == LinkCheckReport.fieldnames
    assert df.iloc[0]["last_checked"] == "2024-05-01T10:30:00"
    assert df.iloc[2]["redirect_url"] == "http://new.test"


def test_write_replaces_previous_report(tmp_path, targets):
    report = LinkCheckReport(tmp_path / "links.csv")
    report.write(targets)
    report.write([CollectedTarget(targets[1])])
    assert len(report.df) == 1
    assert report.summary() == {"not_found": 1}


def test_broken_links(tmp_path, targets):
    report = LinkCheckReport(tmp_path / "links.csv")
    assert report.broken_links() is None
    report.write(targets)
    assert report.broken_links()["title"].tolist() == ["gone"]
