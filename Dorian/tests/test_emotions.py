import os
import sys
import unittest

# Add the project directory to the Python path to allow importing 'dorian'
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from dorian.emotions import (
    DEFAULT_EMOTIONS,
    Archetype,
    EmotionCatalog,
    EmotionInfo,
    EmotionKind,
    InvalidEmotionKind,
)


class TestEmotionCatalog(unittest.TestCase):

    def setUp(self):
        self.catalog = EmotionCatalog()

    def test_all_kinds_in_enumeration_order(self):
        kinds = self.catalog.all_kinds()
        self.assertEqual(len(kinds), 10)
        self.assertEqual(list(kinds), sorted(kinds))
        self.assertEqual(kinds[0], EmotionKind.JOY)
        self.assertEqual(kinds[-1], EmotionKind.PRIDE)
        # Restartable: a second pass yields the same sequence.
        self.assertEqual(list(self.catalog), list(self.catalog))

    def test_lookups(self):
        self.assertEqual(self.catalog.color_of(EmotionKind.JOY), (255, 230, 70))
        self.assertEqual(self.catalog.color_of(2), (255, 60, 60))
        self.assertEqual(self.catalog.archetype_of(EmotionKind.FEAR), Archetype.SHADOW)
        self.assertEqual(self.catalog.archetype_of(EmotionKind.CURIOSITY), "curious")
        self.assertEqual(self.catalog.name_of(EmotionKind.HOPE), "Hope")
        self.assertEqual(self.catalog.vector_of(EmotionKind.SADNESS), (-1, -1))
        self.assertEqual(self.catalog.kind_named("love"), EmotionKind.LOVE)
        self.assertEqual(self.catalog.kind_named("Pride"), EmotionKind.PRIDE)

    def test_unknown_kind_is_rejected(self):
        for bad in (10, -1, "joy", None):
            with self.assertRaises(InvalidEmotionKind):
                self.catalog.info(bad)
        with self.assertRaises(InvalidEmotionKind):
            self.catalog.color_of(42)
        with self.assertRaises(InvalidEmotionKind):
            self.catalog.kind_named("boredom")
        self.assertTrue(issubclass(InvalidEmotionKind, KeyError))

    def test_incomplete_catalog_fails_at_construction(self):
        partial = dict(DEFAULT_EMOTIONS)
        del partial[EmotionKind.ENVY]
        with self.assertRaises(ValueError):
            EmotionCatalog(partial)

    def test_entry_validation(self):
        with self.assertRaises(ValueError):
            EmotionInfo("Glow", (300, 0, 0), (0, 0), Archetype.VITAL)
        with self.assertRaises(ValueError):
            EmotionInfo("Glow", (10, 10, 10), (0, 0, 0), Archetype.VITAL)


if __name__ == '__main__':
    unittest.main()
