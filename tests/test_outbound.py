import unittest

from roomchat.client import PLACEHOLDER_AVATAR, build_chat_message, build_register, generate_avatar
from roomchat.protocol import MessageKind


class TestBuilders(unittest.TestCase):
    def test_register(self):
        env = build_register("alice")
        self.assertIs(env.kind, MessageKind.REGISTER)
        self.assertEqual(env.payload_scalar, "alice")
        self.assertIsNone(env.payload_list)

    def test_chat_message_is_raw_text(self):
        env = build_chat_message("hello there")
        self.assertIs(env.kind, MessageKind.MESSAGE)
        self.assertEqual(env.payload_scalar, "hello there")
        self.assertIsNone(env.payload_list)


class TestAvatar(unittest.TestCase):
    def test_template(self):
        self.assertEqual(generate_avatar("alice"), "https://robohash.org/alice.png?set=set4")

    def test_deterministic(self):
        self.assertEqual(generate_avatar("bob"), generate_avatar("bob"))

    def test_distinct_names(self):
        names = ["alice", "bob", "Alice", "a b", "a/b", "ab", "a%20b"]
        urls = {generate_avatar(n) for n in names}
        self.assertEqual(len(urls), len(names))

    def test_name_is_escaped(self):
        url = generate_avatar("a b/c?")
        self.assertEqual(url, "https://robohash.org/a%20b%2Fc%3F.png?set=set4")

    def test_custom_template(self):
        self.assertEqual(generate_avatar("zoe", "https://img.test/{name}"), "https://img.test/zoe")

    def test_placeholder_differs(self):
        self.assertNotEqual(PLACEHOLDER_AVATAR, generate_avatar(""))


if __name__ == "__main__":
    unittest.main()
