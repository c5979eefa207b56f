import itertools
import json
import unittest

from autocomplete.errors import DecodeError
from autocomplete.trie import Trie


def build(*words):
    t = Trie()
    for w in words:
        t.insert(w)
    return t


class TestEncoding(unittest.TestCase):
    def test_empty_trie_schema(self):
        self.assertEqual(
            Trie().to_dict(),
            {"root": {"children": {}, "is_end_of_word": False}},
        )

    def test_nested_schema(self):
        obj = build("a", "ab").to_dict()
        a = obj["root"]["children"]["a"]
        self.assertTrue(a["is_end_of_word"])
        self.assertEqual(a["children"]["b"], {"children": {}, "is_end_of_word": True})

    def test_to_bytes_is_json(self):
        data = build("hi").to_bytes()
        self.assertIsInstance(data, bytes)
        self.assertEqual(json.loads(data.decode("utf-8")), build("hi").to_dict())

    def test_deterministic_across_insert_order(self):
        self.assertEqual(
            build("car", "cat", "dog").to_bytes(),
            build("dog", "cat", "car").to_bytes(),
        )

    def test_dumps_is_readable(self):
        text = build("é").dumps()
        self.assertIn('"é"', text)
        self.assertIn("\n", text)

    def test_matches_json_module_output(self):
        t = build("car", "cart", "care", "dog", "é")
        self.assertEqual(
            t.to_bytes(),
            json.dumps(t.to_dict(), sort_keys=True, separators=(",", ":"),
                       ensure_ascii=False).encode("utf-8"),
        )
        self.assertEqual(
            t.dumps(), json.dumps(t.to_dict(), indent=2, sort_keys=True, ensure_ascii=False),
        )


class TestRoundTrip(unittest.TestCase):
    def test_structural_round_trip(self):
        for words in ([], [""], ["car", "cart", "care"], ["a" * 200], ["a" * 5000],
                      ["naïve", "日本", "日"]):
            t = build(*words)
            self.assertEqual(Trie.from_bytes(t.to_bytes()), t, words)

    def test_behaves_identically_under_queries(self):
        t = build("ab", "abc", "ba", "c", "cab")
        restored = Trie.from_bytes(t.to_bytes())
        for n in range(0, 5):
            for q in map("".join, itertools.product("abc", repeat=n)):
                self.assertEqual(restored.search(q), t.search(q), q)
                self.assertEqual(
                    restored.search_partial(q) is None, t.search_partial(q) is None, q,
                )

    def test_deep_word_round_trips(self):
        t = build("a" * 5000, "ab")
        data = t.to_bytes()
        self.assertTrue(data.startswith(b'{"root":{"children":{"a":'))
        restored = Trie.from_bytes(data)
        self.assertTrue(restored.search("a" * 5000))
        self.assertFalse(restored.search("a" * 4999))
        self.assertEqual(restored, t)

    def test_deep_word_dumps(self):
        # indented output grows quadratically with depth
        text = build("a" * 1200).dumps()
        self.assertEqual(text.count('"a": {'), 1200)
        self.assertEqual(Trie.from_bytes(text.encode("utf-8")), build("a" * 1200))

    def test_restored_trie_accepts_inserts(self):
        restored = Trie.from_bytes(build("car").to_bytes())
        restored.insert("cart")
        self.assertEqual(restored, build("car", "cart"))


class TestDecodeErrors(unittest.TestCase):
    def assertRejects(self, blob):
        with self.assertRaises(DecodeError):
            Trie.from_bytes(blob)

    def test_truncated(self):
        self.assertRejects(build("car").to_bytes()[:-3])

    def test_not_json(self):
        self.assertRejects(b"car,cart,care")

    def test_not_utf8(self):
        self.assertRejects(b"\xff\xfe\x00")

    def test_missing_root(self):
        self.assertRejects(b'{"children": {}, "is_end_of_word": false}')

    def test_top_level_not_object(self):
        self.assertRejects(b"[]")

    def test_extra_top_level_key(self):
        self.assertRejects(b'{"root": {"children": {}, "is_end_of_word": false}, "v": 1}')

    def test_node_not_object(self):
        self.assertRejects(b'{"root": {"children": {"a": 1}, "is_end_of_word": false}}')

    def test_flag_not_bool(self):
        self.assertRejects(b'{"root": {"children": {}, "is_end_of_word": 0}}')

    def test_missing_flag(self):
        self.assertRejects(b'{"root": {"children": {}}}')

    def test_children_not_object(self):
        self.assertRejects(b'{"root": {"children": [], "is_end_of_word": false}}')

    def test_multi_char_key(self):
        self.assertRejects(
            b'{"root": {"children": {"ab": {"children": {}, "is_end_of_word": true}},'
            b' "is_end_of_word": false}}'
        )

    def test_empty_key(self):
        self.assertRejects(
            b'{"root": {"children": {"": {"children": {}, "is_end_of_word": true}},'
            b' "is_end_of_word": false}}'
        )

    def test_error_names_the_bad_node(self):
        blob = (b'{"root": {"children": {"a": {"children": {"b": 5}, "is_end_of_word": true}},'
                b' "is_end_of_word": false}}')
        with self.assertRaises(DecodeError) as ctx:
            Trie.from_bytes(blob)
        self.assertIn("'ab'", str(ctx.exception))

    def test_decode_error_is_value_error(self):
        self.assertTrue(issubclass(DecodeError, ValueError))


if __name__ == "__main__":
    unittest.main()
