"""Alias and vocabulary tables used to canonicalize ingredient phrases."""

from types import MappingProxyType
from typing import Mapping

# Whole words/phrases removed before alias lookup. Multi-word phrases first
# so "to taste" is not broken up by a single-word entry.
MEASUREMENT_WORDS: tuple[str, ...] = (
    "to taste", "as needed",
    "cup", "cups", "tablespoon", "tablespoons", "tbsp", "tbsps", "tbs",
    "teaspoon", "teaspoons", "tsp", "tsps",
    "ounce", "ounces", "oz", "pound", "pounds", "lb", "lbs",
    "gram", "grams", "g", "kilogram", "kilograms", "kg",
    "milliliter", "milliliters", "ml", "liter", "liters", "l",
    "pinch", "pinches", "dash", "dashes", "handful", "handfuls",
    "clove", "cloves", "piece", "pieces", "slice", "slices",
    "can", "cans", "package", "packages", "bag", "bags", "box", "boxes",
    "about", "approximately", "roughly", "around", "optional",
)

# Phrase (lowercase, already stripped of measurements) -> canonical name
INGREDIENT_ALIASES: Mapping[str, str] = MappingProxyType({
    # Beef
    "beef slices": "Beef Steak",
    "beef strips": "Beef Steak",
    "sliced beef": "Beef Steak",
    "beef steak slices": "Beef Steak",
    "beef sirloin slices": "Sirloin Steak",
    "beef tenderloin slices": "Beef Tenderloin",
    "ground beef meat": "Ground Beef",
    "minced beef": "Ground Beef",
    "beef mince": "Ground Beef",

    # Chicken
    "chicken breast slices": "Chicken Breast",
    "sliced chicken breast": "Chicken Breast",
    "chicken breast strips": "Chicken Breast",
    "boneless skinless chicken breast": "Boneless Chicken Breast",
    "boneless skinless chicken breasts": "Boneless Chicken Breast",
    "boneless chicken breast halves": "Boneless Chicken Breast",
    "chicken thigh fillets": "Chicken Thigh",
    "skinless chicken thighs": "Boneless Chicken Thigh",
    "boneless skinless chicken thighs": "Boneless Chicken Thigh",
    "ground chicken meat": "Ground Chicken",
    "minced chicken": "Ground Chicken",

    # Pork
    "pork chop slices": "Pork Chop",
    "sliced pork chop": "Pork Chop",
    "pork tenderloin slices": "Pork Tenderloin",
    "pork loin slices": "Pork Loin",
    "ground pork meat": "Ground Pork",
    "minced pork": "Ground Pork",
    "pork mince": "Ground Pork",

    # Turkey
    "turkey breast slices": "Turkey Breast",
    "sliced turkey breast": "Turkey Breast",
    "ground turkey meat": "Ground Turkey",
    "minced turkey": "Ground Turkey",

    # Seafood
    "salmon fillet": "Salmon",
    "salmon filet": "Salmon",
    "tuna fillet": "Tuna",
    "cod fillet": "Cod",
    "tilapia fillet": "Tilapia",
    "halibut fillet": "Halibut",
    "mahi mahi fillet": "Mahi Mahi",
    "shrimp peeled": "Shrimp",
    "deveined shrimp": "Shrimp",
    "peeled and deveined shrimp": "Shrimp",
    "jumbo shrimp": "Shrimp",
    "large shrimp": "Shrimp",
    "medium shrimp": "Shrimp",

    # Vegetables
    "cherry tomatoes halved": "Cherry Tomatoes",
    "grape tomatoes halved": "Cherry Tomatoes",
    "roma tomatoes diced": "Tomato",
    "beefsteak tomato sliced": "Tomato",
    "yellow onion diced": "Onion",
    "white onion diced": "Onion",
    "red onion sliced": "Red Onion",
    "green bell pepper diced": "Bell Pepper",
    "red bell pepper diced": "Bell Pepper",
    "yellow bell pepper diced": "Bell Pepper",
    "minced garlic": "Garlic",
    "garlic minced": "Garlic",
    "garlic cloves minced": "Garlic",
    "fresh ginger grated": "Ginger",
    "ginger root grated": "Ginger",
    "scallions": "Green Onion",
    "spring onions": "Green Onion",

    # Cheese
    "shredded cheddar cheese": "Cheddar Cheese",
    "grated cheddar cheese": "Cheddar Cheese",
    "shredded mozzarella cheese": "Mozzarella Cheese",
    "grated mozzarella cheese": "Mozzarella Cheese",
    "shredded parmesan cheese": "Parmesan Cheese",
    "grated parmesan cheese": "Parmesan Cheese",
    "freshly grated parmesan": "Parmesan Cheese",
    "shredded mexican cheese blend": "Mexican Cheese Blend",
    "shredded monterey jack": "Monterey Jack",

    # Herbs
    "fresh basil leaves": "Fresh Basil",
    "fresh cilantro leaves": "Fresh Cilantro",
    "fresh parsley leaves": "Fresh Parsley",
    "fresh thyme leaves": "Fresh Thyme",
    "fresh rosemary leaves": "Fresh Rosemary",
    "fresh oregano leaves": "Fresh Oregano",
    "fresh mint leaves": "Fresh Mint",
    "fresh dill leaves": "Fresh Dill",

    # Dairy
    "heavy whipping cream": "Heavy Cream",
    "sour cream full fat": "Sour Cream",
    "plain greek yogurt": "Greek Yogurt",
    "unsweetened almond milk": "Almond Milk",
    "unsweetened coconut milk": "Coconut Milk",
    "full fat coconut milk": "Coconut Milk",
    "large eggs": "Eggs",

    # Legumes
    "black beans drained": "Black Beans",
    "kidney beans drained": "Kidney Beans",
    "chickpeas drained": "Chickpeas",
    "canned chickpeas": "Chickpeas",
    "garbanzo beans": "Chickpeas",
    "white beans drained": "White Beans",
    "cannellini beans": "White Beans",

    # Grains
    "long grain white rice": "White Rice",
    "jasmine rice uncooked": "Jasmine Rice",
    "basmati rice uncooked": "Basmati Rice",
    "brown rice uncooked": "Brown Rice",
    "quinoa uncooked": "Quinoa",
    "couscous uncooked": "Couscous",

    # Pasta
    "spaghetti noodles": "Spaghetti",
    "penne pasta": "Penne",
    "fettuccine noodles": "Fettuccine",
    "linguine noodles": "Linguine",
    "rigatoni pasta": "Rigatoni",

    # Oils
    "extra virgin olive oil": "Olive Oil",
    "evoo": "Olive Oil",
    "vegetable oil": "Vegetable Oil",
    "canola oil": "Canola Oil",
    "coconut oil": "Coconut Oil",
    "avocado oil": "Avocado Oil",

    # Condiments
    "low sodium soy sauce": "Soy Sauce",
    "light soy sauce": "Soy Sauce",
    "dark soy sauce": "Soy Sauce",
    "worcestershire sauce": "Worcestershire Sauce",
    "hot sauce": "Hot Sauce",
    "sriracha sauce": "Sriracha",
    "fish sauce": "Fish Sauce",

    # Spices
    "ground black pepper": "Black Pepper",
    "freshly ground black pepper": "Black Pepper",
    "kosher salt": "Salt",
    "sea salt": "Salt",
    "table salt": "Salt",
    "garlic powder": "Garlic Powder",
    "onion powder": "Onion Powder",
    "chili powder": "Chili Powder",
    "cayenne pepper": "Cayenne",
    "red pepper flakes": "Red Pepper Flakes",
    "crushed red pepper": "Red Pepper Flakes",

    # Canned goods
    "canned diced tomatoes": "Diced Tomatoes",
    "canned crushed tomatoes": "Crushed Tomatoes",
    "tomato sauce canned": "Tomato Sauce",
    "tomato paste canned": "Tomato Paste",
    "canned coconut milk": "Coconut Milk",
})

# Alias keys in substring-scan order: longest first, ties alphabetical.
ALIAS_SCAN_ORDER: tuple[str, ...] = tuple(
    sorted(INGREDIENT_ALIASES, key=lambda key: (-len(key), key))
)
