import sys
import os
import unittest

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from chain import Chain


def _same(item, probe):
    return item == probe


class TestChain(unittest.TestCase):
    def test_new_chain_is_empty(self):
        chain = Chain()
        self.assertTrue(chain.is_empty())
        self.assertEqual(chain.size(), 0)
        self.assertEqual(len(chain), 0)

    def test_append_keeps_order(self):
        chain = Chain()
        chain.append("a")
        chain.append("b")
        chain.append("c")
        self.assertEqual(list(chain), ["a", "b", "c"])
        self.assertEqual(chain.size(), 3)
        self.assertFalse(chain.is_empty())

    def test_get_at(self):
        chain = Chain()
        chain.append(10)
        chain.append(20)
        self.assertEqual(chain.get_at(0), 10)
        self.assertEqual(chain.get_at(1), 20)

    def test_get_at_past_end_returns_none(self):
        chain = Chain()
        chain.append(10)
        self.assertIsNone(chain.get_at(1))
        self.assertIsNone(chain.get_at(-1))
        self.assertIsNone(Chain().get_at(0))

    def test_get_at_non_int_raises(self):
        chain = Chain()
        with self.assertRaises(TypeError):
            chain.get_at("0")

    def test_probe_until_absent_counts_items(self):
        chain = Chain()
        for i in range(5):
            chain.append(i)
        index = 0
        while chain.get_at(index) is not None:
            index += 1
        self.assertEqual(index, 5)


class TestChainRemoveAt(unittest.TestCase):
    def _chain(self, *items):
        chain = Chain()
        for item in items:
            chain.append(item)
        return chain

    def test_remove_front(self):
        chain = self._chain(1, 2, 3)
        self.assertEqual(chain.remove_at(0), 1)
        self.assertEqual(list(chain), [2, 3])

    def test_remove_middle(self):
        chain = self._chain(1, 2, 3)
        self.assertEqual(chain.remove_at(1), 2)
        self.assertEqual(list(chain), [1, 3])

    def test_remove_last_then_append(self):
        chain = self._chain(1, 2, 3)
        self.assertEqual(chain.remove_at(2), 3)
        chain.append(4)
        self.assertEqual(list(chain), [1, 2, 4])

    def test_remove_only_item_then_append(self):
        chain = self._chain("x")
        chain.remove_at(0)
        self.assertTrue(chain.is_empty())
        chain.append("y")
        self.assertEqual(list(chain), ["y"])

    def test_remove_out_of_range_raises(self):
        chain = self._chain(1)
        with self.assertRaises(IndexError):
            chain.remove_at(1)
        with self.assertRaises(IndexError):
            Chain().remove_at(0)

    def test_remove_non_int_raises(self):
        with self.assertRaises(TypeError):
            self._chain(1).remove_at(0.0)


class TestChainFind(unittest.TestCase):
    def test_find_returns_first_match(self):
        chain = Chain()
        for item in ["a", "b", "a"]:
            chain.append(item)
        self.assertEqual(chain.find(_same, "a"), 0)
        self.assertEqual(chain.find(_same, "b"), 1)

    def test_find_missing_returns_none(self):
        chain = Chain()
        chain.append("a")
        self.assertIsNone(chain.find(_same, "z"))
        self.assertIsNone(Chain().find(_same, "a"))

    def test_find_passes_item_then_probe(self):
        chain = Chain()
        chain.append(("k", 1))
        chain.append(("j", 2))
        index = chain.find(lambda item, key: item[0] == key, "j")
        self.assertEqual(index, 1)


class TestChainDestroy(unittest.TestCase):
    def test_destroy_calls_cleanup_in_order(self):
        chain = Chain()
        for item in [1, 2, 3]:
            chain.append(item)
        seen = []
        chain.destroy(seen.append)
        self.assertEqual(seen, [1, 2, 3])
        self.assertTrue(chain.is_empty())

    def test_destroy_without_cleanup(self):
        chain = Chain()
        chain.append(1)
        chain.destroy()
        self.assertEqual(len(chain), 0)
        self.assertIsNone(chain.get_at(0))


if __name__ == "__main__":
    unittest.main()
