"""
Tables des cartes générées (hors catalogue cœur).

Désactivées par défaut (`GameConfig.include_procedural_strategies`), elles
servent à étoffer la pioche : paris spéculatifs, campagnes marketing à
paliers, achats de stock, maintenance, RH et financement.
"""

# Paris spéculatifs (toujours "Bad")
BAD_IDEAS = [
    {"name": "NFT Loyalty Program", "desc": "Minting JPEGs of pepperoni.", "cost": 8000},
    {"name": "VR Dining Experience", "desc": "Headsets while eating.", "cost": 15000},
    {"name": "Drone Delivery (Beta)", "desc": "Experimental and dangerous.", "cost": 20000},
    {"name": "AI Waiter Holograms", "desc": "Creepy and glitchy.", "cost": 12000},
    {"name": "Edible Menu Paper", "desc": "Gimmicky and gross.", "cost": 3000},
    {"name": "Sub-prime Franchise", "desc": "Opening a location in a swamp.", "cost": 40000},
    {"name": "Gold Leaf Pizza", "desc": "Tastes like metal.", "cost": 5000},
    {"name": "Lobster Tank", "desc": "High maintenance, low sales.", "cost": 6000},
    {"name": "Live Polka Band", "desc": "Loud and annoying.", "cost": 2000},
    {"name": "Phone Booth Aquarium", "desc": "Leaked everywhere.", "cost": 4500},
]

# Canaux marketing : coût de base, commandes/jour gagnées, charges récurrentes
MARKETING_CHANNELS = [
    {"name": "Local Paper", "base_cost": 4500, "order_gain": 1.0, "opex": 300},
    {"name": "Instagram Boost", "base_cost": 2400, "order_gain": 0.5, "opex": 150},
    {"name": "Community Board", "base_cost": 1200, "order_gain": 0.2, "opex": 60},
    {"name": "Radio Spot", "base_cost": 10500, "order_gain": 2.0, "opex": 900},
    {"name": "Influencer Post", "base_cost": 25500, "order_gain": 4.0, "opex": 1500},
    {"name": "Direct Mailer", "base_cost": 13500, "order_gain": 2.5, "opex": 1200},
    {"name": "Podcast Read", "base_cost": 8400, "order_gain": 1.2, "opex": 450},
    {"name": "Google Ads", "base_cost": 9000, "order_gain": 1.5, "opex": 1200},
]
MARKETING_TIERS = (1, 2, 3)

INGREDIENTS = [
    "Pepperoni",
    "Mozzarella",
    "Flour",
    "Tomato Sauce",
    "Olive Oil",
    "Mushrooms",
    "Sausage",
    "Peppers",
    "Onions",
    "Garlic",
]
SPOT_BUY_COST = 9000
SPOT_BUY_INVENTORY = 9600  # un peu plus de stock que de cash dépensé
SUPPLIER_CONTRACT_COST = 7500  # frais juridiques
SUPPLIER_CONTRACT_COGS_FACTOR = 0.992

FIXTURES = [
    "Oven Door",
    "Walk-in Fridge",
    "Dishwasher",
    "Front Door",
    "POS Terminal",
    "Neon Sign",
    "Restroom Plumbing",
    "HVAC Unit",
    "Delivery Scooter",
    "Tables",
]
REPAIR_BASE_COST, REPAIR_STEP = 3600, 300
REPLACE_BASE_COST, REPLACE_STEP = 13500, 600
REPLACE_EQUIPMENT_VALUE = 3000

ROLES = [
    "Server",
    "Dishwasher",
    "Line Cook",
    "Delivery Driver",
    "Host",
    "Assistant Manager",
]
HIRE_COST, HIRE_SALARY, HIRE_ORDER_GAIN = 7500, 450, 1.5
TRAIN_COST, TRAIN_RAISE = 3600, 80
BONUS_COST = 9000

# Financement : coût négatif = entrée de trésorerie
FINANCING_OFFERS = [
    {
        "id": "fin_credit_line",
        "title": "Bank Credit Line",
        "desc": "Draw a 20k line of credit at the local bank.",
        "amount": 20000,
        "kind": "loan",
    },
    {
        "id": "fin_equipment_loan",
        "title": "Equipment Loan",
        "desc": "Refinance the ovens for 35k of fresh cash.",
        "amount": 35000,
        "kind": "loan",
    },
    {
        "id": "fin_angel_round",
        "title": "Angel Investor",
        "desc": "Sell a minority stake to a regular customer with deep pockets.",
        "amount": 30000,
        "kind": "equity",
    },
]
