"""
Recipe Draft - Food Catalog.

The fixed reference list of ingredient names that imported ingredient
lines are matched against. Names are unique case-insensitively; where a
food appears under more than one group the first group wins.
"""

from dataclasses import dataclass, field
from functools import cached_property
from types import MappingProxyType
from typing import Iterator, Mapping


# =============================================================================
# Reference Data
# =============================================================================

FOODS_BY_GROUP: Mapping[str, tuple[str, ...]] = MappingProxyType({
    "Fruits": (
        "Apple", "Banana", "Orange", "Strawberry", "Blueberry", "Raspberry",
        "Blackberry", "Mango", "Pineapple", "Watermelon", "Cantaloupe",
        "Honeydew Melon", "Grapes", "Peach", "Pear", "Plum", "Cherry",
        "Apricot", "Kiwi", "Papaya", "Guava", "Dragon Fruit", "Lychee",
        "Passion Fruit", "Pomegranate", "Fig", "Date", "Cranberry",
        "Grapefruit", "Lemon", "Lime", "Tangerine", "Clementine",
        "Blood Orange", "Nectarine", "Persimmon", "Starfruit", "Avocado",
        "Coconut", "Raisins",
    ),
    "Vegetables": (
        "Tomato", "Cherry Tomatoes", "Cucumber", "Lettuce", "Spinach", "Kale",
        "Arugula", "Cabbage", "Broccoli", "Cauliflower", "Carrot", "Celery",
        "Bell Pepper", "Jalapeño", "Serrano Pepper", "Habanero",
        "Poblano Pepper", "Onion", "Red Onion", "Green Onion", "Shallot",
        "Leek", "Garlic", "Ginger", "Potato", "Sweet Potato", "Yam",
        "Eggplant", "Zucchini", "Yellow Squash", "Butternut Squash",
        "Acorn Squash", "Pumpkin", "Asparagus", "Green Beans", "Snap Peas",
        "Snow Peas", "Peas", "Corn", "Brussels Sprouts", "Beet", "Radish",
        "Turnip", "Parsnip", "Mushroom", "Shiitake Mushroom",
        "Portobello Mushroom", "Button Mushroom", "Oyster Mushroom",
        "Bok Choy", "Napa Cabbage", "Swiss Chard", "Collard Greens",
        "Mustard Greens", "Artichoke", "Fennel", "Okra", "Jicama",
        "Kohlrabi", "Rutabaga",
    ),
    "Dairy & Eggs": (
        "Milk", "Whole Milk", "Skim Milk", "Almond Milk", "Oat Milk",
        "Soy Milk", "Coconut Milk", "Buttermilk", "Heavy Cream",
        "Light Cream", "Half and Half", "Sour Cream", "Cream Cheese",
        "Butter", "Unsalted Butter", "Salted Butter", "Ghee",
        "Cheddar Cheese", "Mozzarella Cheese", "Parmesan Cheese",
        "Swiss Cheese", "Gouda Cheese", "Brie Cheese", "Feta Cheese",
        "Ricotta Cheese", "Cottage Cheese", "Blue Cheese", "Provolone Cheese",
        "Monterey Jack", "Pepper Jack", "Mexican Cheese Blend",
        "Gruyere Cheese", "Pecorino Romano", "Mascarpone", "Greek Yogurt",
        "Plain Yogurt", "Eggs", "Egg Whites", "Egg Yolks",
    ),
    "Meat & Poultry": (
        "Chicken Breast", "Boneless Chicken Breast", "Chicken Thigh",
        "Boneless Chicken Thigh", "Chicken Wings", "Chicken Drumsticks",
        "Chicken Legs", "Whole Chicken", "Ground Chicken", "Chicken Tenders",
        "Turkey Breast", "Ground Turkey", "Whole Turkey", "Duck",
        "Duck Breast", "Quail", "Cornish Hen", "Beef Steak", "Ribeye Steak",
        "Sirloin Steak", "Filet Mignon", "Flank Steak", "Skirt Steak",
        "Chuck Roast", "Brisket", "Beef Short Ribs", "Beef Tenderloin",
        "Prime Rib", "Oxtail", "Ground Beef", "Lean Ground Beef",
        "Pork Chop", "Pork Tenderloin", "Pork Loin", "Pork Shoulder",
        "Pork Belly", "Ground Pork", "Baby Back Ribs", "Ham", "Prosciutto",
        "Bacon", "Pancetta", "Pork Sausage", "Italian Sausage", "Chorizo",
        "Bratwurst", "Kielbasa", "Salami", "Pepperoni", "Lamb Chop",
        "Leg of Lamb", "Lamb Shank", "Rack of Lamb", "Ground Lamb",
        "Veal Cutlet", "Venison", "Bison", "Rabbit", "Chicken Liver",
    ),
    "Seafood": (
        "Salmon", "Tuna", "Cod", "Halibut", "Sea Bass", "Snapper",
        "Mahi Mahi", "Swordfish", "Tilapia", "Catfish", "Trout", "Mackerel",
        "Sardines", "Anchovies", "Haddock", "Flounder", "Sole", "Shrimp",
        "Prawns", "Lobster", "Crab", "Scallops", "Clams", "Mussels",
        "Oysters", "Squid", "Calamari", "Octopus",
    ),
    "Grains & Bread": (
        "White Rice", "Brown Rice", "Jasmine Rice", "Basmati Rice",
        "Arborio Rice", "Wild Rice", "Quinoa", "Couscous", "Bulgur Wheat",
        "Farro", "Barley", "Oats", "Rolled Oats", "Steel Cut Oats",
        "Cornmeal", "Polenta", "Grits", "White Bread", "Whole Wheat Bread",
        "Sourdough Bread", "Rye Bread", "Ciabatta", "Focaccia", "Baguette",
        "Pita Bread", "Naan", "Tortilla", "Corn Tortilla", "Flour Tortilla",
        "English Muffin", "Bagel", "Croissant", "Brioche", "Breadcrumbs",
        "Panko", "Pasta", "Spaghetti", "Penne", "Fettuccine", "Linguine",
        "Rigatoni", "Farfalle", "Fusilli", "Lasagna Noodles", "Macaroni",
        "Orzo", "Egg Noodles", "Rice Noodles", "Udon Noodles",
        "Soba Noodles", "Ramen Noodles",
    ),
    "Legumes & Beans": (
        "Black Beans", "Pinto Beans", "Kidney Beans", "Navy Beans",
        "White Beans", "Cannellini Beans", "Lima Beans", "Chickpeas",
        "Lentils", "Red Lentils", "Green Lentils", "Split Peas",
        "Black-Eyed Peas", "Edamame", "Tofu", "Firm Tofu", "Silken Tofu",
        "Tempeh",
    ),
    "Nuts & Seeds": (
        "Almonds", "Cashews", "Walnuts", "Pecans", "Pistachios",
        "Macadamia Nuts", "Hazelnuts", "Pine Nuts", "Peanuts",
        "Peanut Butter", "Almond Butter", "Sunflower Seeds",
        "Pumpkin Seeds", "Sesame Seeds", "Chia Seeds", "Flax Seeds",
        "Poppy Seeds", "Tahini",
    ),
    "Oils & Fats": (
        "Olive Oil", "Extra Virgin Olive Oil", "Vegetable Oil", "Canola Oil",
        "Avocado Oil", "Coconut Oil", "Sesame Oil", "Peanut Oil",
        "Sunflower Oil", "Lard", "Shortening", "Cooking Spray",
    ),
    "Herbs & Spices": (
        "Basil", "Fresh Basil", "Oregano", "Fresh Oregano", "Thyme",
        "Fresh Thyme", "Rosemary", "Fresh Rosemary", "Sage", "Parsley",
        "Fresh Parsley", "Cilantro", "Fresh Cilantro", "Dill", "Fresh Dill",
        "Mint", "Fresh Mint", "Tarragon", "Bay Leaf", "Chives",
        "Black Pepper", "White Pepper", "Cayenne", "Paprika",
        "Smoked Paprika", "Cumin", "Coriander", "Turmeric", "Cinnamon",
        "Nutmeg", "Cloves", "Cardamom", "Star Anise", "Fennel Seeds",
        "Mustard Seeds", "Salt", "Garlic Powder", "Onion Powder",
        "Ginger Powder", "Chili Powder", "Curry Powder", "Garam Masala",
        "Red Pepper Flakes", "Italian Seasoning", "Herbs de Provence",
        "Za'atar", "Sumac", "Vanilla Extract", "Almond Extract",
    ),
    "Condiments & Sauces": (
        "Ketchup", "Mustard", "Dijon Mustard", "Mayonnaise", "Soy Sauce",
        "Tamari", "Worcestershire Sauce", "Hot Sauce", "Sriracha",
        "BBQ Sauce", "Teriyaki Sauce", "Hoisin Sauce", "Fish Sauce",
        "Oyster Sauce", "Gochujang", "Miso Paste", "Harissa", "Pesto",
        "Marinara Sauce", "Tomato Sauce", "Tomato Paste", "Salsa",
        "Hummus", "Vinegar", "Balsamic Vinegar", "Red Wine Vinegar",
        "White Wine Vinegar", "Apple Cider Vinegar", "Rice Vinegar",
    ),
    "Beverages": (
        "Water", "Sparkling Water", "Coffee", "Espresso", "Tea",
        "Green Tea", "Orange Juice", "Apple Juice", "Lemon Juice",
        "Lime Juice", "Coconut Water", "Vegetable Broth", "Chicken Broth",
        "Beef Broth", "Chicken Stock", "Vegetable Stock", "Red Wine",
        "White Wine", "Beer", "Rum", "Vodka", "Whiskey", "Bourbon", "Gin",
        "Tequila", "Brandy",
    ),
    "Baking": (
        "Flour", "All-Purpose Flour", "Bread Flour", "Cake Flour",
        "Whole Wheat Flour", "Almond Flour", "Coconut Flour", "Sugar",
        "White Sugar", "Brown Sugar", "Powdered Sugar", "Granulated Sugar",
        "Honey", "Maple Syrup", "Agave Nectar", "Molasses", "Corn Syrup",
        "Baking Powder", "Baking Soda", "Yeast", "Active Dry Yeast",
        "Cornstarch", "Cocoa Powder", "Chocolate Chips",
        "Dark Chocolate Chips", "White Chocolate Chips", "Baking Chocolate",
        "Gelatin", "Cream of Tartar",
    ),
    "Frozen Foods": (
        "Frozen Peas", "Frozen Corn", "Frozen Spinach",
        "Frozen Mixed Vegetables", "Frozen Berries", "Ice Cream", "Sorbet",
    ),
    "Canned Goods": (
        "Crushed Tomatoes", "Diced Tomatoes", "Whole Peeled Tomatoes",
        "Pumpkin Puree", "Coconut Cream", "Evaporated Milk",
        "Sweetened Condensed Milk", "Canned Tuna", "Canned Salmon",
    ),
})


# =============================================================================
# Catalog
# =============================================================================


@dataclass(frozen=True)
class CatalogEntry:
    """A canonical food name and the group it is filed under."""

    name: str
    group: str

    @property
    def key(self) -> str:
        return self.name.lower()


@dataclass(frozen=True)
class FoodCatalog:
    """
    Immutable, case-insensitively unique set of canonical food names.

    Entries keep their declaration order; `by_length` offers the same
    entries longest-name-first for matchers that prefer the most specific
    name.
    """

    entries: tuple[CatalogEntry, ...]
    _index: Mapping[str, CatalogEntry] = field(repr=False, compare=False)

    @classmethod
    def from_groups(cls, groups: Mapping[str, tuple[str, ...]]) -> "FoodCatalog":
        index: dict[str, CatalogEntry] = {}
        for group, names in groups.items():
            for name in names:
                entry = CatalogEntry(name=name, group=group)
                index.setdefault(entry.key, entry)
        return cls(entries=tuple(index.values()), _index=MappingProxyType(index))

    @classmethod
    def from_names(cls, names: list[str], group: str = "Other") -> "FoodCatalog":
        return cls.from_groups({group: tuple(names)})

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[CatalogEntry]:
        return iter(self.entries)

    def __contains__(self, name: object) -> bool:
        return isinstance(name, str) and name.lower() in self._index

    def get(self, name: str) -> CatalogEntry | None:
        """Case-insensitive exact lookup."""
        return self._index.get(name.lower().strip())

    @cached_property
    def by_length(self) -> tuple[CatalogEntry, ...]:
        return tuple(sorted(self.entries, key=lambda e: (-len(e.key), e.key)))


FOOD_CATALOG = FoodCatalog.from_groups(FOODS_BY_GROUP)
