"""Tests for the PyGithub-backed client."""

from unittest.mock import MagicMock

from github.Requester import Requester

from changeset_check_core.gh.pull_request import GithubClient
from changeset_check_core.models import ChangedFile, ExistingComment


def _gh_file(filename, status):
    f = MagicMock()
    f.filename = filename
    f.status = status
    return f


def _gh_comment(id, body):
    c = MagicMock()
    c.id = id
    c.body = body
    return c


def make_client():
    github = MagicMock()
    repo = github.get_repo.return_value
    return GithubClient("tok", github=github), github, repo


class TestListPullRequestFiles:
    def test_maps_files(self):
        client, github, repo = make_client()
        repo.get_pull.return_value.get_files.return_value = [
            _gh_file(".changeset/foo.md", "added"),
            _gh_file("src/index.ts", "modified"),
        ]

        result = client.list_pull_request_files("owner", "repo", 7)

        github.get_repo.assert_called_once_with("owner/repo")
        repo.get_pull.assert_called_once_with(7)
        assert result == [ChangedFile(".changeset/foo.md", "added"), ChangedFile("src/index.ts", "modified")]


class TestListIssueComments:
    def test_sorted_oldest_first(self):
        client, _, repo = make_client()
        repo.get_issue.return_value.get_comments.return_value = [
            _gh_comment(30, "newer"),
            _gh_comment(10, "older"),
        ]

        result = client.list_issue_comments("owner", "repo", 7)

        repo.get_issue.assert_called_once_with(7)
        assert [c.id for c in result] == [10, 30]

    def test_none_body_becomes_empty(self):
        client, _, repo = make_client()
        repo.get_issue.return_value.get_comments.return_value = [_gh_comment(1, None)]
        assert client.list_issue_comments("owner", "repo", 7) == [ExistingComment(1, "")]


class TestWriteComments:
    def test_create_returns_new_id(self):
        client, _, repo = make_client()
        repo.get_issue.return_value.create_comment.return_value.id = 99

        assert client.create_issue_comment("owner", "repo", 7, "body") == 99
        repo.get_issue.return_value.create_comment.assert_called_once_with("body")

    def test_update_edits_existing_comment(self):
        client, _, repo = make_client()
        issue = repo.get_issue.return_value

        client.update_issue_comment("owner", "repo", 7, 42, "new body")

        issue.get_comment.assert_called_once_with(42)
        issue.get_comment.return_value.edit.assert_called_once_with("new body")


class TestRequestCount:
    """A check run should cost one request per endpoint: two reads and one write."""

    def _record_requests(self, mocker):
        calls = []

        def fake_request(verb, url, *args, **kwargs):
            calls.append((verb, url))
            if verb == "GET" and url.endswith("/pulls/5/files"):
                return {}, [{"filename": ".changeset/a.md", "status": "added"}]
            if verb == "GET" and url.endswith("/issues/5/comments"):
                return {}, [{"id": 42, "body": "<!-- sig -->"}]
            return {}, {"id": 42, "body": "new body"}

        mocker.patch.object(Requester, "requestJsonAndCheck", side_effect=fake_request)
        return calls

    def test_reads_and_update_make_one_request_each(self, mocker):
        calls = self._record_requests(mocker)
        client = GithubClient("tok")

        files = client.list_pull_request_files("o", "r", 5)
        comments = client.list_issue_comments("o", "r", 5)
        client.update_issue_comment("o", "r", 5, 42, "new body")

        assert files == [ChangedFile(".changeset/a.md", "added")]
        assert comments == [ExistingComment(42, "<!-- sig -->")]
        assert [verb for verb, _ in calls] == ["GET", "GET", "PATCH"]
        assert calls[0][1].endswith("/repos/o/r/pulls/5/files")
        assert calls[1][1].endswith("/repos/o/r/issues/5/comments")
        assert calls[2][1].endswith("/repos/o/r/issues/comments/42")

    def test_create_makes_a_single_request(self, mocker):
        calls = self._record_requests(mocker)

        assert GithubClient("tok").create_issue_comment("o", "r", 5, "body") == 42
        assert len(calls) == 1
        assert calls[0][0] == "POST"
        assert calls[0][1].endswith("/repos/o/r/issues/5/comments")
