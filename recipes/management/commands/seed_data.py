user_fixtures = [
    {"username": "johndoe", "email": "john.doe@example.org", "first_name": "John", "last_name": "Doe"},
    {"username": "janedoe", "email": "jane.doe@example.org", "first_name": "Jane", "last_name": "Doe"},
    {"username": "charlie", "email": "charlie.johnson@example.org", "first_name": "Charlie", "last_name": "Johnson"},
]

# (name, unit, min quantity, max quantity)
INGREDIENT_POOL = [
    ("salt", "g", 2, 10),
    ("black pepper", "g", 1, 5),
    ("olive oil", "ml", 10, 60),
    ("garlic cloves", "", 1, 6),
    ("red onion", "", 1, 2),
    ("cherry tomatoes", "g", 100, 400),
    ("parmesan", "g", 20, 80),
    ("fresh basil", "g", 5, 20),
    ("chicken breast", "g", 200, 600),
    ("smoked paprika", "tsp", 1, 3),
    ("ground cumin", "tsp", 1, 2),
    ("yogurt", "g", 50, 250),
    ("baby spinach", "g", 50, 200),
    ("mushrooms", "g", 100, 300),
    ("lemon juice", "ml", 10, 40),
    ("soy sauce", "ml", 15, 45),
    ("white rice", "g", 150, 400),
    ("pasta", "g", 200, 500),
    ("butter", "g", 10, 100),
    ("flour", "g", 100, 500),
    ("sugar", "g", 20, 200),
    ("eggs", "", 1, 4),
    ("milk", "ml", 100, 500),
]

categories = ["Breakfast", "Lunch", "Dinner", "Dessert", "Vegan"]
tags_pool = ["quick", "family", "spicy", "budget", "comfort", "healthy", "high_protein", "low_carb"]

collection_names = [
    "Weeknight dinners",
    "Baking",
    "Date night",
    "Meal prep",
    "Summer favourites",
    "Comfort food",
]

review_phrases = [
    "Made this twice already, lovely.",
    "Good, but needed more seasoning.",
    "Family favourite now.",
    "Easy to follow and tasty.",
    "Not for me, too rich.",
    "",
]
