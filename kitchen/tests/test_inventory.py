import unittest
from kitchen.domain.Ingredient import IngredientEntity
from kitchen.domain.Inventory import Inventory
from kitchen.domain.RecipeBook import RecipeBook
from kitchen.domain.Recipe import Recipe
from kitchen.events.Event_Bus import EventBus, INVENTORY_CHANGED, INVENTORY_OUT_OF_STOCK, RECIPES_CHANGED


class TestInventory(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(INVENTORY_CHANGED, lambda name, payload: self.events.append((name, payload)))
        self.bus.subscribe(INVENTORY_OUT_OF_STOCK, lambda name, payload: self.events.append((name, payload)))
        self.milk = IngredientEntity(id="a", name="Milk", quantity=1, unit="l")
        self.eggs = IngredientEntity(id="b", name="Eggs", quantity=6)
        self.flour = IngredientEntity(id="c", name="Flour", quantity=500, unit="g")
        self.inventory = Inventory([self.milk, self.eggs, self.flour]).set_event_bus(self.bus)

    def test_replace_keeps_unrelated_entries(self):
        before = self.inventory.items
        self.inventory.update("b", "quantity", 12)
        after = self.inventory.items
        self.assertIsNot(before, after)
        self.assertIs(after[0], self.milk)
        self.assertIs(after[2], self.flour)
        self.assertEqual(after[1].quantity, 12)
        self.assertEqual(self.eggs.quantity, 6)
        self.assertEqual([i.id for i in after], ["a", "b", "c"])

    def test_update_name_refreshes_key(self):
        updated = self.inventory.update("a", "name", "Oat Milks")
        self.assertEqual(updated.name_normalized, "oat milk")
        self.assertEqual(self.inventory.get("a").name_normalized, "oat milk")

    def test_unknown_id(self):
        with self.assertRaises(KeyError):
            self.inventory.get("zzz")
        with self.assertRaises(KeyError):
            self.inventory.toggle_stock("zzz")
        with self.assertRaises(KeyError):
            self.inventory.replace(IngredientEntity(id="zzz", name="Salt"))

    def test_toggle_publishes_events(self):
        self.inventory.toggle_stock("a")
        names = [name for name, _ in self.events]
        self.assertEqual(names, [INVENTORY_CHANGED, INVENTORY_OUT_OF_STOCK])
        payload = self.events[0][1]
        self.assertEqual(payload["action"], "update")
        self.assertEqual(payload["entity_id"], "a")
        self.assertEqual(payload["snapshot"], self.inventory.snapshot())
        self.assertIs(self.events[1][1]["entity"], self.inventory.get("a"))
        self.assertEqual(self.inventory.missing_count(), 1)
        # Back in stock: only the change event
        self.events.clear()
        self.inventory.toggle_stock("a")
        self.assertEqual([name for name, _ in self.events], [INVENTORY_CHANGED])
        self.assertEqual(self.inventory.missing_count(), 0)

    def test_quick_add(self):
        added = self.inventory.quick_add("  Sourdough Bread ")
        self.assertEqual(added.name, "Sourdough Bread")
        self.assertFalse(added.in_stock)
        self.assertEqual(added.category, "Pantry")
        self.assertEqual(added.unit, "pcs")
        self.assertEqual(added.quantity, 0)
        self.assertTrue(added.id.startswith("inv_"))
        self.assertIs(self.inventory.items[-1], added)
        with self.assertRaises(ValueError):
            self.inventory.quick_add("   ")

    def test_remove(self):
        removed = self.inventory.remove("b")
        self.assertIs(removed, self.eggs)
        self.assertEqual([i.id for i in self.inventory], ["a", "c"])
        self.assertEqual(self.events[-1][1]["action"], "remove")

    def test_failing_subscriber_does_not_break_mutation(self):
        def boom(name, payload):
            raise RuntimeError("listener failure")
        self.bus.subscribe(INVENTORY_CHANGED, boom)
        with self.assertLogs("kitchen.events.Event_Bus", level="ERROR"):
            self.inventory.update("c", "quantity", 250)
        self.assertEqual(self.inventory.get("c").quantity, 250)

    def test_from_dict(self):
        inv = Inventory.from_dict([{"id": "x", "name": "Tomatoes", "quantity": 3, "store": "Market"}])
        self.assertEqual(inv.get("x").name_normalized, "tomato")
        self.assertEqual(inv.to_dict()[0]["store"], "Market")


class TestRecipeBook(unittest.TestCase):

    def setUp(self):
        self.bus = EventBus()
        self.events = []
        self.bus.subscribe(RECIPES_CHANGED, lambda name, payload: self.events.append(payload))
        self.book = RecipeBook([
            Recipe(id="1", name="Avocado Toast"),
            Recipe(id="2", name="Tomato Soup"),
        ]).set_event_bus(self.bus)

    def test_search(self):
        self.assertEqual([r.id for r in self.book.search("toast")], ["1"])
        self.assertEqual([r.id for r in self.book.search("TOMATO")], ["2"])
        self.assertEqual([r.id for r in self.book.search("")], ["1", "2"])
        self.assertEqual(self.book.search("pizza"), [])

    def test_replace_and_remove(self):
        first = self.book.get("1")
        self.book.replace(self.book.get("2").with_field("name", "Potato Soup"))
        self.assertIs(self.book.recipes[0], first)
        self.assertEqual(self.book.get("2").name_normalized, "potato soup")
        self.book.remove("1")
        self.assertEqual([r.id for r in self.book], ["2"])
        self.assertEqual([e["action"] for e in self.events], ["update", "remove"])
