import unittest
from unittest import mock
import tempfile
import sys
import os

# Add project root to path
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from scramble.common.errors import DictionaryError
from scramble.models import dictionary


class TestWordListDictionary(unittest.TestCase):
    def write_words(self, text):
        fd, path = tempfile.mkstemp(suffix=".txt")
        with os.fdopen(fd, "w", encoding="utf-8") as f:
            f.write(text)
        self.addCleanup(os.remove, path)
        return path

    def test_lookup_is_case_insensitive(self):
        d = dictionary.WordListDictionary(["Bored", " road "])
        self.assertTrue(d.is_recognized_word("bored", "en"))
        self.assertTrue(d.is_recognized_word("ROAD", "en"))
        self.assertFalse(d.is_recognized_word("darko", "en"))

    def test_empty_word(self):
        d = dictionary.WordListDictionary(["bored"])
        self.assertFalse(d.is_recognized_word("", "en"))

    def test_load_skips_proper_nouns(self):
        path = self.write_words("bored\nYoda\nKobe\nroad\nre-do\n\n")
        d = dictionary.WordListDictionary.load(path)
        self.assertEqual(len(d), 2)
        self.assertTrue(d.is_recognized_word("road", "en"))
        self.assertFalse(d.is_recognized_word("yoda", "en"))
        self.assertFalse(d.is_recognized_word("kobe", "en"))

    def test_load_missing_file(self):
        with self.assertRaises(DictionaryError):
            dictionary.WordListDictionary.load("/nonexistent/english.txt")

    def test_bundled_word_list(self):
        d = dictionary.WordListDictionary.load()
        for word in ("bored", "board", "broad", "road", "keyboard"):
            self.assertTrue(d.is_recognized_word(word, "en"), word)
        for word in ("yoda", "kobe", "ebay", "boyd", "brody", "kbyeoadr"):
            self.assertFalse(d.is_recognized_word(word, "en"), word)


class TestWordfreqDictionary(unittest.TestCase):
    def setUp(self):
        self.base = dictionary.WordListDictionary(["bored", "yoke"])

    def test_threshold(self):
        d = dictionary.WordfreqDictionary(self.base, min_zipf=3.0)
        with mock.patch.object(dictionary, "zipf_frequency", return_value=3.0) as zf:
            self.assertTrue(d.is_recognized_word("bored", "en"))
            zf.assert_called_once_with("bored", "en")
        with mock.patch.object(dictionary, "zipf_frequency", return_value=2.9):
            self.assertFalse(d.is_recognized_word("bored", "en"))

    def test_frequent_word_missing_from_base(self):
        d = dictionary.WordfreqDictionary(self.base, min_zipf=1.0)
        with mock.patch.object(dictionary, "zipf_frequency", return_value=4.0) as zf:
            self.assertFalse(d.is_recognized_word("yoda", "en"))
            zf.assert_not_called()

    def test_unknown_word(self):
        d = dictionary.WordfreqDictionary(self.base, min_zipf=1.0)
        with mock.patch.object(dictionary, "zipf_frequency", return_value=0.0):
            self.assertFalse(d.is_recognized_word("yoke", "en"))

    def test_zero_threshold_skips_wordfreq(self):
        d = dictionary.WordfreqDictionary(self.base, min_zipf=0)
        with mock.patch.object(dictionary, "zipf_frequency") as zf:
            self.assertTrue(d.is_recognized_word("yoke", "en"))
            zf.assert_not_called()

    def test_non_alpha_not_looked_up(self):
        d = dictionary.WordfreqDictionary(self.base)
        with mock.patch.object(dictionary, "zipf_frequency") as zf:
            self.assertFalse(d.is_recognized_word("", "en"))
            self.assertFalse(d.is_recognized_word("road 2", "en"))
            zf.assert_not_called()

    def test_default_threshold_from_config(self):
        d = dictionary.WordfreqDictionary(self.base)
        self.assertEqual(d.min_zipf, dictionary.config.MIN_ZIPF)

    def test_real_lookup(self):
        d = dictionary.WordfreqDictionary(self.base)
        self.assertTrue(d.is_recognized_word("bored", "en"))
        self.assertFalse(d.is_recognized_word("kbyeoadr", "en"))


class TestCheckLocale(unittest.TestCase):
    def test_english_supported(self):
        dictionary.check_locale("en")

    def test_unknown_locale(self):
        with self.assertRaises(DictionaryError):
            dictionary.check_locale("xx")


if __name__ == '__main__':
    unittest.main()
