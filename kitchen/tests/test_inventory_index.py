import unittest
from kitchen.domain.Ingredient import IngredientEntity
from kitchen.logic.inventory.index import InventoryIndex


class TestInventoryIndex(unittest.TestCase):

    def setUp(self):
        names = ["Tomatoes", "Cherry Tomatoes", "Tomato Paste", "Sun-dried Tomato", "Tomato Sauce",
                 "Green Tomatoes", "Basil"]
        self.entities = [IngredientEntity(id=f"i{n}", name=name) for n, name in enumerate(names)]
        self.index = InventoryIndex(self.entities)

    def test_lookup_exact_key(self):
        self.assertIs(self.index.lookup("tomato"), self.entities[0])
        self.assertIs(self.index.lookup("basil"), self.entities[6])
        self.assertIsNone(self.index.lookup("tomat"))
        self.assertIsNone(self.index.lookup("oregano"))
        self.assertIs(self.index.lookup_name("Basil."), self.entities[6])

    def test_search_substring_capped_in_order(self):
        hits = self.index.search("Tomatoes")
        self.assertEqual(len(hits), 5)
        self.assertEqual([h.id for h in hits], ["i0", "i1", "i2", "i3", "i4"])
        self.assertEqual([h.id for h in self.index.search("tomato", limit=10)],
                         ["i0", "i1", "i2", "i3", "i4", "i5"])

    def test_search_empty_query(self):
        self.assertEqual(self.index.search(""), [])
        self.assertEqual(self.index.search(" . "), [])

    def test_duplicate_keys_not_merged(self):
        first = IngredientEntity(id="x1", name="Eggs")
        second = IngredientEntity(id="x2", name="egg")
        index = InventoryIndex([first, second])
        # lookup picks one of them; both stay listable
        self.assertIn(index.lookup("egg"), (first, second))
        self.assertEqual([e.id for e in index.search("egg")], ["x1", "x2"])
        self.assertEqual(len(index), 2)
        self.assertIn("egg", index)

    def test_source_list_not_mutated(self):
        before = list(self.entities)
        self.index.search("tomato")
        self.assertEqual(self.entities, before)
