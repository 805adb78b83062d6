MOCK_ANSWERS = [
    {
        "name": "Marco",
        "purpose": "personal",
        "gender": "male",
        "style": "smart-casual",
        "occasion": "work-office",
        "budget": "10000",
        "color": "neutrals",
        "sizes": {"top": "L", "bottom": "32", "shoe": "9"},
    },
    {
        "name": "Bea",
        "purpose": "gift",
        "gender": "female",
        "recipient": "Bea",
        "relationship": "partner",
        "style": "formal-elegant",
        "occasion": "anniversary",
        "budget": "999999",
        "color": "ai-decide",
    },
    {
        "name": "Sam",
        "purpose": "personal",
        "gender": "unisex",
        "style": "casual-street",
        "occasion": "daily-wear",
        "budget": "5000",
        "color": "dark",
    },
]
