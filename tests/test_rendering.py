import unittest

from roomchat.client import MessageView, ViewState
from roomchat.client.rendering import render_html, render_text
from roomchat.protocol import UserProfile


def sample_view():
    return ViewState(
        users=[UserProfile(name="alice", avatar="https://a.test/alice.png")],
        messages=[
            MessageView(sender="alice", body="<b>hi</b>", avatar="https://a.test/alice.png", is_image=False),
            MessageView(sender="alice", body="https://x.test/cat.gif", avatar="https://a.test/alice.png", is_image=True),
            MessageView(sender="zed", body="who?", avatar="https://p.test/none", is_image=False, resolved=False),
        ],
    )


class TestRenderHtml(unittest.TestCase):
    def test_sidebar_and_messages(self):
        page = render_html(sample_view())
        self.assertIn("<h2>Users</h2>", page)
        self.assertIn("alice's avatar", page)
        self.assertIn("Active now", page)
        self.assertIn('src="https://p.test/none"', page)

    def test_text_is_escaped(self):
        page = render_html(sample_view())
        self.assertIn("&lt;b&gt;hi&lt;/b&gt;", page)
        self.assertNotIn("<b>hi</b>", page)

    def test_gif_is_image(self):
        page = render_html(sample_view())
        self.assertIn('<img src="https://x.test/cat.gif" alt="gif image" />', page)

    def test_empty_view(self):
        page = render_html(ViewState(users=[], messages=[]), title="Room")
        self.assertIn("<title>Room</title>", page)


class TestRenderText(unittest.TestCase):
    def test_lines(self):
        self.assertEqual(
            render_text(sample_view()).splitlines(),
            [
                "users: alice",
                "<alice> <b>hi</b>",
                "<alice> [gif] https://x.test/cat.gif",
                "<zed (?)> who?",
            ],
        )


if __name__ == "__main__":
    unittest.main()
