import unittest
from pydantic import ValidationError
from kitchen.utilities.validators import IngredientInput, RecipeInput, QuickAddInput, validated_field_value


class TestIngredientInput(unittest.TestCase):

    def test_blank_name_rejected(self):
        with self.assertRaises(ValidationError):
            IngredientInput(name="   ")

    def test_negative_quantity_rejected(self):
        with self.assertRaises(ValidationError):
            IngredientInput(name="Milk", quantity=-1)

    def test_unknown_category_rejected(self):
        with self.assertRaises(ValidationError):
            IngredientInput(name="Milk", category="Drinks")

    def test_to_entity(self):
        entity = IngredientInput(name="  Cherry Tomatoes ", quantity=3, store="  ", category="Produce").to_entity()
        self.assertEqual(entity.name, "Cherry Tomatoes")
        self.assertEqual(entity.name_normalized, "cherry tomato")
        self.assertIsNone(entity.store)
        self.assertEqual(entity.quantity, 3)


class TestRecipeInput(unittest.TestCase):

    def test_blank_name_rejected(self):
        with self.assertRaises(ValidationError):
            RecipeInput(name="  ")

    def test_negative_amount_rejected(self):
        with self.assertRaises(ValidationError):
            RecipeInput(name="Soup", ingredients=[{"name": "Water", "amount": -1}])

    def test_bad_difficulty_rejected(self):
        with self.assertRaises(ValidationError):
            RecipeInput(name="Soup", difficulty="Impossible")

    def test_to_recipe(self):
        recipe = RecipeInput(
            name=" Tomato Soup ",
            ingredients=[{"name": "Tomatoes", "amount": 4}, {"name": "Salt", "amount": 0, "unit": "pinch"}],
            instructions=["Chop", "  ", "Simmer"],
            nutrition={"calories": 120},
            type="Lunch",
        ).to_recipe()
        self.assertEqual(recipe.name, "Tomato Soup")
        self.assertEqual(recipe.instructions, ["Chop", "Simmer"])
        self.assertEqual([i.name_normalized for i in recipe.ingredients], ["tomato", "salt"])
        self.assertEqual(recipe.nutrition["calories"], 120)
        self.assertEqual(recipe.type, "Lunch")


class TestQuickAddInput(unittest.TestCase):

    def test_strip(self):
        self.assertEqual(QuickAddInput(name="  Tea ").name, "Tea")
        with self.assertRaises(ValidationError):
            QuickAddInput(name=" ")


class TestValidatedFieldValue(unittest.TestCase):

    def setUp(self):
        self.current = {"name": "Milk", "in_stock": True, "category": "Dairy", "quantity": 1,
                        "name_normalized": "milk", "updated_at": 0}

    def test_coerces_value(self):
        self.assertIs(validated_field_value(IngredientInput, self.current, "in_stock", "false"), False)
        self.assertEqual(validated_field_value(IngredientInput, self.current, "name", "  Oat Milk "), "Oat Milk")

    def test_rejects_against_form_rules(self):
        for field, value in (("needed_quantity", -3), ("serves_per_unit", -2), ("name", ""),
                             ("category", "Drinks")):
            with self.assertRaises(ValidationError):
                validated_field_value(IngredientInput, self.current, field, value)

    def test_unknown_field_passes_through(self):
        self.assertEqual(validated_field_value(IngredientInput, self.current, "name_normalized", "x"), "x")
