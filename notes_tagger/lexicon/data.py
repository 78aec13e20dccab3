from __future__ import annotations

# ---------------------------------------------------------------------------
# Taste descriptors
# ---------------------------------------------------------------------------

TASTE_DESCRIPTORS: dict[str, list[str]] = {
    # Spice & heat
    "spicy": ["spicy", "hot", "heat", "chile", "jalapeño", "sriracha", "fire", "capsaicin", "pepper"],
    "mild": ["mild", "gentle", "subtle"],
    # Sweet & savory
    "sweet": ["sweet", "sugary", "dessert", "candy", "honey", "maple", "caramel"],
    "savory": ["savory", "umami", "rich", "meaty", "brothy", "salty"],
    "sour": ["sour", "tart", "acidic", "citrus", "lemon", "vinegar", "tangy"],
    "bitter": ["bitter", "dark", "coffee", "cocoa", "hoppy"],
    # Intensity
    "fresh": ["fresh", "crisp", "light", "clean", "bright", "zesty"],
    "bold": ["bold", "intense", "strong", "robust", "powerful"],
    # Texture
    "creamy": ["creamy", "smooth", "rich", "buttery", "velvety", "silky"],
    "crunchy": ["crunchy", "crispy", "crisp", "fried", "crackling", "brittle"],
    "tender": ["tender", "soft", "melt", "fall-off-bone", "juicy", "succulent"],
    "chewy": ["chewy", "tough", "rubbery", "dense"],
    "flaky": ["flaky", "layered", "delicate", "crumbly"],
    # Cooking methods
    "smoky": ["smoky", "grilled", "charred", "barbecue", "smoked", "bbq"],
    "garlicky": ["garlicky", "garlic", "garliced"],
    "herby": ["herby", "herbaceous", "herb", "herbs", "basil", "oregano", "thyme"],
    "earthy": ["earthy", "rustic", "mushroom", "truffle"],
    "nutty": ["nutty", "toasted", "roasted", "almond"],
}

# ---------------------------------------------------------------------------
# Dish types
# ---------------------------------------------------------------------------

DISH_TYPES: dict[str, list[str]] = {
    # Courses
    "appetizer": ["appetizer", "starter", "app", "small plate", "tapas", "amuse-bouche"],
    "entree": ["entree", "main", "entrée", "dinner", "plate", "main course"],
    "dessert": ["dessert", "sweet", "cake", "ice cream", "pie", "pastry", "pudding"],
    "beverage": ["drink", "cocktail", "wine", "beer", "juice", "soda", "beverage"],
    "side": ["side", "side dish", "accompaniment"],
    # Specific dishes
    "salad": ["salad", "greens", "bowl", "slaw"],
    "soup": ["soup", "stew", "broth", "chili", "bisque", "chowder"],
    "pasta": ["pasta", "noodle", "spaghetti", "ramen", "linguine", "penne"],
    "pizza": ["pizza", "pie", "flatbread"],
    "burger": ["burger", "hamburger", "cheeseburger"],
    "sandwich": ["sandwich", "sub", "hoagie", "panini", "wrap"],
    "taco": ["taco", "burrito", "quesadilla", "enchilada"],
    "rice": ["rice", "risotto", "fried rice", "paella"],
    "bread": ["bread", "roll", "baguette", "toast"],
    # Proteins
    "seafood": ["fish", "seafood", "shrimp", "salmon", "tuna", "cod", "shellfish", "lobster", "crab", "oyster"],
    "meat": ["steak", "chicken", "pork", "beef", "lamb", "veal", "duck"],
    "steak": ["steak", "ribeye", "filet", "sirloin", "t-bone"],
    "chicken": ["chicken", "poultry", "fowl", "hen"],
    "pork": ["pork", "bacon", "ham", "sausage", "prosciutto"],
    "vegetarian": ["vegetarian", "vegan", "plant-based", "veggie", "meatless"],
}

# ---------------------------------------------------------------------------
# Quality indicators
# ---------------------------------------------------------------------------

QUALITY_INDICATORS: dict[str, list[str]] = {
    "positive": [
        "amazing", "excellent", "perfect", "delicious", "incredible", "outstanding",
        "fantastic", "wonderful", "loved", "favorite", "best", "phenomenal",
        "exceptional", "superb",
    ],
    "negative": [
        "disappointing", "bland", "overcooked", "cold", "dry", "soggy",
        "burnt", "undercooked", "stale", "mediocre", "bad", "terrible",
        "awful", "horrible",
    ],
}
