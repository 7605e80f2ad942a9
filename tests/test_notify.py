import unittest
from unittest.mock import MagicMock

from oppiabot.github_api import IssuesClient
from oppiabot.notify import notify_author


class TestNotifyAuthor(unittest.TestCase):
    def test_comments_and_assigns(self):
        client = MagicMock()
        notify_author(client, "Hi @someone, fix it. Thanks!", 42, "oppia", "oppia", "someone")
        client.create_comment.assert_called_once_with(
            issue_number=42, repo="oppia", owner="oppia", body="Hi @someone, fix it. Thanks!"
        )
        client.add_assignees.assert_called_once_with(
            issue_number=42, repo="oppia", owner="oppia", assignees=["someone"]
        )

    def test_no_message_makes_no_calls(self):
        client = MagicMock()
        notify_author(client, None, 42, "oppia", "oppia", "someone")
        client.create_comment.assert_not_called()
        client.add_assignees.assert_not_called()

    def test_api_errors_propagate(self):
        client = MagicMock()
        client.create_comment.side_effect = RuntimeError("boom")
        with self.assertRaises(RuntimeError):
            notify_author(client, "message", 42, "oppia", "oppia", "someone")


class TestIssuesClient(unittest.TestCase):
    def setUp(self):
        self.gh = MagicMock()
        self.issue = self.gh.get_repo.return_value.get_issue.return_value
        self.client = IssuesClient(self.gh)

    def test_create_comment(self):
        self.client.create_comment(issue_number=5, repo="oppia", owner="oppia", body="hello")
        self.gh.get_repo.assert_called_once_with("oppia/oppia")
        self.gh.get_repo.return_value.get_issue.assert_called_once_with(5)
        self.issue.create_comment.assert_called_once_with("hello")

    def test_add_assignees(self):
        self.client.add_assignees(issue_number=5, repo="oppia", owner="oppia", assignees=["a", "b"])
        self.issue.add_to_assignees.assert_called_once_with("a", "b")


if __name__ == "__main__":
    unittest.main()
