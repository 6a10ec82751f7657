import unittest
from kitchen.logic.normalize import normalize_name


class TestNormalizeName(unittest.TestCase):

    def test_plural_rewrites(self):
        self.assertEqual(normalize_name("Tomatoes"), "tomato")
        self.assertEqual(normalize_name("Potatoes"), "potato")
        self.assertEqual(normalize_name("Berries"), "berry")
        self.assertEqual(normalize_name("Eggs"), "egg")

    def test_ss_and_us_endings_kept(self):
        self.assertEqual(normalize_name("Glass"), "glass")
        self.assertEqual(normalize_name("Status"), "status")
        self.assertEqual(normalize_name("Asparagus"), "asparagus")

    def test_punctuation_and_whitespace(self):
        self.assertEqual(normalize_name("  Avocado. "), "avocado")
        self.assertEqual(normalize_name("Cheese (grated),  Parmesan"), "cheese grated parmesan")
        self.assertEqual(normalize_name("( egg )"), "egg")

    def test_only_last_word_singularized(self):
        self.assertEqual(normalize_name("Cherry Tomatoes"), "cherry tomato")
        self.assertEqual(normalize_name("Eggs Benedict"), "eggs benedict")
        self.assertEqual(normalize_name("Sourdough Bread"), "sourdough bread")

    def test_empty_input(self):
        self.assertEqual(normalize_name(""), "")
        self.assertEqual(normalize_name(None), "")
        self.assertEqual(normalize_name("   "), "")

    def test_idempotent(self):
        samples = ["Tomatoes", "  Avocado. ", "Berries", "Eggs", "Glass", "( egg )",
                   "a s", "Baby Potatoes.", "Fries", "Peas", "Status", "x s.", "S", "Cheese (grated)"]
        for s in samples:
            once = normalize_name(s)
            self.assertEqual(normalize_name(once), once, msg=s)
