import io
import tempfile
import unittest
from pathlib import Path

from markov_babble.markov_chain import train_from_paths, train_from_stream


class TestTrain(unittest.TestCase):
    def test_train_from_stream(self):
        stream = io.StringIO("the cat sat.\nthe dog sat.\n")
        model, state_count, entry_count = train_from_stream(stream, order=1, boundaries="sentence-endings")

        self.assertEqual(entry_count, 7)
        self.assertEqual(sorted(model.successors(("the",))), ["cat", "dog"])
        # The sentence end on line one leads into line two.
        self.assertEqual(model.successors((".",)), ("the",))
        self.assertEqual(state_count, len(model.states()))

    def test_train_from_stream_line_endings(self):
        stream = io.StringIO("one two\nthree\n")
        model, _, _ = train_from_stream(stream, order=1, boundaries="line-endings")
        self.assertEqual(model.successors(("two",)), ("\n",))
        self.assertEqual(model.successors(("\n",)), ("three",))

    def test_train_from_paths(self):
        with tempfile.TemporaryDirectory() as tmp:
            first = Path(tmp) / "first.txt"
            second = Path(tmp) / "second.txt"
            first.write_text("a b c", encoding="utf-8")
            second.write_text("d e", encoding="utf-8")

            model, state_count, entry_count = train_from_paths(
                [first, second], order=2, boundaries="sentence-endings", show_progress=False)

        self.assertEqual(entry_count, 3)
        self.assertEqual(state_count, 3)
        self.assertEqual(model.successors(("b", "c")), ("d",))

    def test_missing_file(self):
        with self.assertRaises(FileNotFoundError):
            train_from_paths(["does/not/exist.txt"], show_progress=False)

    def test_short_corpus(self):
        model, state_count, entry_count = train_from_stream(io.StringIO("hello"), order=1,
                                                            boundaries="sentence-endings")
        self.assertEqual((len(model), state_count, entry_count), (0, 0, 0))


if __name__ == '__main__':
    unittest.main()
