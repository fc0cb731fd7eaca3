import json
import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_ats.vocabulary import LocalVocabulary, get_default_vocabulary  # noqa: E402


class VocabularyTests(unittest.TestCase):
    def test_default_vocabulary_is_loaded_once(self):
        self.assertIs(get_default_vocabulary(), get_default_vocabulary())

    def test_default_terms(self):
        terms = get_default_vocabulary().terms()
        self.assertIsInstance(terms, tuple)
        self.assertEqual(len(terms), 73)
        self.assertEqual(terms[0], "accomplished")
        self.assertIn("spearheaded", terms)
        self.assertTrue(all(term == term.lower() for term in terms))

    def test_custom_file_is_normalized(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "terms.json"
            path.write_text(json.dumps(["Led", "led", "  Managed ", ""]), encoding="utf-8")
            vocabulary = LocalVocabulary(path)
        self.assertEqual(vocabulary.terms(), ("led", "managed"))
        self.assertIn("LED", vocabulary)
        self.assertEqual(len(vocabulary), 2)

    def test_non_list_file_is_rejected(self):
        with tempfile.TemporaryDirectory() as tmp:
            path = Path(tmp) / "terms.json"
            path.write_text(json.dumps({"led": 1}), encoding="utf-8")
            with self.assertRaises(RuntimeError):
                LocalVocabulary(path)


if __name__ == "__main__":
    unittest.main()
