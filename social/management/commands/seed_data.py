user_fixtures = [
    {"username": "alice", "email": "alice@example.org", "first_name": "Alice", "last_name": "Walker",
     "travel_preferences": ["hiking", "food", "culture"], "budget_preference": "mid-range"},
    {"username": "bob", "email": "bob@example.org", "first_name": "Bob", "last_name": "Marsh",
     "travel_preferences": ["hiking", "beaches"], "budget_preference": "mid-range"},
    {"username": "carol", "email": "carol@example.org", "first_name": "Carol", "last_name": "Reyes",
     "travel_preferences": ["nightlife", "food"], "budget_preference": "luxury"},
]

travel_preferences_pool = [
    "hiking",
    "beaches",
    "food",
    "culture",
    "nightlife",
    "museums",
    "road trips",
    "backpacking",
    "wildlife",
    "skiing",
    "photography",
    "festivals",
]

travel_moods = [
    "spontaneous",
    "slow and relaxed",
    "packed itinerary",
    "off the beaten path",
]

budget_preferences = ["low-range", "mid-range", "luxury"]
