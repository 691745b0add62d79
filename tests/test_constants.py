"""
Realistic meal plan texts for the MealText test suite.

These mirror what trainers actually paste: simple one-line-per-meal plans,
"Meal N" blocks with bulleted ingredients, mixed units, decimals, and mixed
bullet styles.
"""

# =============================================================================
# SIMPLE FORMAT - one "Category: description" line per meal
# =============================================================================

SIMPLE_TWO_MEALS = "Breakfast: Oatmeal with berries\nLunch: Chicken salad"

SIMPLE_FULL_DAY = """Breakfast: Oatmeal with berries and almonds
Lunch: Grilled chicken salad with avocado
Dinner: Baked salmon with quinoa and asparagus
Snack: Greek yogurt with honey"""

# =============================================================================
# STRUCTURED FORMAT - "Meal N" blocks with bulleted ingredients
# =============================================================================

STRUCTURED_SINGLE_MEAL = (
    "Meal 1\n-175g of Jasmine Rice\n-150g of Lean ground beef\n-100g of cooked broccoli"
)

STRUCTURED_EGGS_MEAL = "Meal 1\n-4 eggs\n-2 pieces of sourdough bread\n-1 banana (100g)"

# Blank line between the marker and its ingredients, indented trailing line
STRUCTURED_TWO_MEALS = """
Meal 1

-175g of Jasmine Rice
-150g of Lean ground beef
-100g of cooked broccoli

Meal 2

-4 eggs
-2 pieces of sourdough bread
-1 banana (100g)
      """

MIXED_UNITS = """Meal 1

-2 cups of oats
-1 cup of almond milk
-2 tbsp of honey
-0.5 cup of blueberries

Meal 2

-6 oz of chicken breast
-1 cup of brown rice
-2 tbsp of olive oil
-1 lb of mixed vegetables

Meal 3

-250ml of protein shake
-1 tbsp of peanut butter
-1 banana"""

MINIMAL_NO_UNITS = """Meal 1
-2 eggs
-2 toast
-1 banana

Meal 2
-chicken wrap
-side salad
-apple

Meal 3
-steak
-baked potato
-green beans"""

DECIMALS_AND_MIXED_BULLETS = """Meal 1

-175.5g of jasmine rice
-150.25g of lean ground beef
-100g of cooked broccoli
-15ml of soy sauce

Meal 2

•4 eggs
•2 slices of sourdough bread
•1.5 banana (150g)
•50.5g of strawberries
•10g of grass-fed butter
•15ml of raw honey

Meal 3

-100.75g turkey breast
-150g of sweet potato
-100g of asparagus
•250ml of coconut water
•1 tbsp of olive oil"""

SIX_UNLABELED_MEALS = "\n\n".join(f"Meal {n}\n-{n}00g of rice" for n in range(1, 7))
