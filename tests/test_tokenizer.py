import unittest

from markov_babble.errors import ConfigurationError
from markov_babble.tokenizer import boundary_set_for, join_tokens, read_tokens, tokenize


class TestTokenizer(unittest.TestCase):
    def test_tokenize_splits_punctuation(self):
        self.assertEqual(
            tokenize("I see a little silhouetto of a man."),
            ["I", "see", "a", "little", "silhouetto", "of", "a", "man", "."],
        )
        self.assertEqual(
            tokenize("Scaramouche, will you do the Fandango?"),
            ["Scaramouche", ",", "will", "you", "do", "the", "Fandango", "?"],
        )

    def test_tokenize_keeps_contractions_and_hyphens(self):
        self.assertEqual(tokenize("He's a well-known  poor boy"), ["He's", "a", "well-known", "poor", "boy"])

    def test_tokenize_blank_line(self):
        self.assertEqual(tokenize("   \t "), [])

    def test_read_tokens_joins_lines(self):
        lines = ["Galileo, Figaro\n", "\n", "magnifico.\n"]
        self.assertEqual(
            list(read_tokens(lines, "sentence-endings")),
            ["Galileo", ",", "Figaro", "magnifico", "."],
        )

    def test_read_tokens_line_endings(self):
        lines = ["To be\n", "\n", "or not\n"]
        self.assertEqual(
            list(read_tokens(lines, "line-endings")),
            ["To", "be", "\n", "or", "not", "\n"],
        )

    def test_unknown_boundary_mode(self):
        with self.assertRaises(ConfigurationError):
            list(read_tokens(["a b"], "paragraphs"))
        with self.assertRaises(ConfigurationError):
            boundary_set_for("paragraphs")

    def test_boundary_set_for(self):
        self.assertEqual(boundary_set_for("sentence-endings"), frozenset({".", "!", "?"}))
        self.assertEqual(boundary_set_for("line-endings"), frozenset({"\n"}))
        self.assertEqual(boundary_set_for("sentence-endings", [";"]), frozenset({".", "!", "?", ";"}))

    def test_join_tokens(self):
        self.assertEqual(join_tokens(["Hello", ",", "world", "."]), "Hello , world .")
        self.assertEqual(join_tokens(["a", "b", "\n", "c", "\n"]), "a b\nc")
        self.assertEqual(join_tokens([]), "")


if __name__ == '__main__':
    unittest.main()
