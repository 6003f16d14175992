"""Tests for the prefix tree engine."""

import unittest

from algoquest.trie import SUGGESTION_LIMIT, PrefixTree


class InsertAndSearchTests(unittest.TestCase):

    def setUp(self):
        self.tree = PrefixTree()

    def test_insert_reports_path_and_new_nodes(self):
        result = self.tree.insert("tea")
        self.assertEqual([node.char for node in result["path"]], ["", "t", "e", "a"])
        self.assertEqual([node.id for node in result["new_nodes"]], ["node_0", "node_1", "node_2"])
        self.assertTrue(result["path"][-1].is_end_of_word)
        self.assertEqual([node.depth for node in result["path"]], [0, 1, 2, 3])

        extended = self.tree.insert("team")
        self.assertEqual(len(extended["path"]), 5)
        self.assertEqual([node.char for node in extended["new_nodes"]], ["m"])

    def test_reinsert_is_idempotent(self):
        self.tree.insert("tea")
        before = self.tree.get_memory_usage()["nodes"]
        result = self.tree.insert("tea")
        self.assertEqual(result["new_nodes"], [])
        self.assertEqual(self.tree.get_memory_usage()["nodes"], before)

    def test_search_found(self):
        self.tree.insert("tea")
        result = self.tree.search("tea")
        self.assertTrue(result["found"])
        self.assertNotIn("failed_at", result)
        self.assertEqual(len(result["path"]), 4)

    def test_stored_prefix_is_not_a_word(self):
        self.tree.insert("team")
        result = self.tree.search("tea")
        self.assertFalse(result["found"])
        self.assertNotIn("failed_at", result)

    def test_divergence_reports_failure_point(self):
        self.tree.insert("tea")
        result = self.tree.search("tex")
        self.assertFalse(result["found"])
        failed = result["failed_at"]
        self.assertEqual(failed["char"], "x")
        self.assertEqual(failed["index"], 2)
        self.assertEqual(failed["node"].char, "e")
        self.assertEqual([node.char for node in result["path"]], ["", "t", "e"])

    def test_search_on_empty_tree(self):
        result = self.tree.search("a")
        self.assertEqual(result["failed_at"]["node"], self.tree.root)

    def test_empty_word(self):
        self.assertFalse(self.tree.search("")["found"])
        self.tree.insert("")
        self.assertTrue(self.tree.search("")["found"])
        self.assertEqual(self.tree.get_memory_usage()["nodes"], 1)

    def test_membership_and_length(self):
        for word in ("tea", "ten", "in"):
            self.tree.insert(word)
        self.assertIn("ten", self.tree)
        self.assertNotIn("te", self.tree)
        self.assertNotIn(3, self.tree)
        self.assertEqual(len(self.tree), 3)


class PrefixTests(unittest.TestCase):

    def setUp(self):
        self.tree = PrefixTree(["tea", "ten", "team", "in"])

    def test_suggestions_follow_insertion_order(self):
        result = self.tree.starts_with("te")
        self.assertTrue(result["has_prefix"])
        self.assertEqual(result["suggestions"], ["tea", "team", "ten"])
        self.assertEqual([node.char for node in result["path"]], ["", "t", "e"])

    def test_missing_prefix(self):
        result = self.tree.starts_with("x")
        self.assertFalse(result["has_prefix"])
        self.assertEqual(result["suggestions"], [])

    def test_suggestions_are_capped(self):
        tree = PrefixTree(f"a{i}" for i in range(15))
        suggestions = tree.starts_with("a")["suggestions"]
        self.assertEqual(len(suggestions), SUGGESTION_LIMIT)
        for word in suggestions:
            self.assertTrue(word.startswith("a"))
            self.assertTrue(tree.search(word)["found"])

    def test_long_word_is_collected(self):
        word = "a" * 2500
        tree = PrefixTree(["ab", word])
        self.assertTrue(tree.search(word)["found"])
        self.assertEqual(tree.starts_with("a")["suggestions"], ["ab", word])
        self.assertEqual(tree.get_all_words(), ["ab", word])
        self.assertEqual(tree.get_memory_usage()["nodes"], 2502)

    def test_get_all_words_is_uncapped(self):
        tree = PrefixTree(f"a{i}" for i in range(15))
        self.assertEqual(len(tree.get_all_words()), 15)


class StatisticsTests(unittest.TestCase):

    def test_memory_usage(self):
        tree = PrefixTree(["tea", "ten"])
        self.assertEqual(tree.get_memory_usage(), {"nodes": 5, "edges": 4, "bytes": 700})

    def test_empty_tree_memory(self):
        self.assertEqual(PrefixTree().get_memory_usage(), {"nodes": 1, "edges": 0, "bytes": 100})

    def test_layout(self):
        tree = PrefixTree(["te", "in"])
        tree.calculate_layout()
        t_node = tree.root.children["t"]
        i_node = tree.root.children["i"]
        self.assertEqual((tree.root.x, tree.root.y), (0.0, 0.0))
        self.assertAlmostEqual(t_node.x, -100.0)
        self.assertAlmostEqual(i_node.x, 100.0)
        self.assertAlmostEqual(t_node.y, 80.0)
        e_node = t_node.children["e"]
        self.assertAlmostEqual(e_node.x, -100.0)
        self.assertAlmostEqual(e_node.y, 160.0)

    def test_insert_batch(self):
        tree = PrefixTree()
        stats = tree.insert_batch(["tea", "ten"])
        self.assertEqual(stats["total_nodes"], 5)
        self.assertEqual(stats["shared_nodes"], 4)
        self.assertAlmostEqual(stats["compression_ratio"], 0.625)

    def test_insert_batch_empty(self):
        stats = PrefixTree().insert_batch([])
        self.assertEqual(stats, {"total_nodes": 1, "shared_nodes": 0, "compression_ratio": 1.0})

    def test_clear_resets_tree(self):
        tree = PrefixTree(["tea", "ten"])
        tree.clear()
        self.assertEqual(tree.get_memory_usage()["nodes"], 1)
        self.assertFalse(tree.search("tea")["found"])
        self.assertEqual(tree.insert("x")["new_nodes"][0].id, "node_0")


if __name__ == "__main__":
    unittest.main()
