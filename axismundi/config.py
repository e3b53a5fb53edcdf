"""Central configuration defaults and constants for Axis Mundi."""

import os

# Logging
DEFAULT_LOG_LEVEL = os.getenv("AXISMUNDI_LOG_LEVEL", "INFO").upper()

# API Defaults
DEFAULT_API_HOST = os.getenv("AXISMUNDI_API_HOST", "127.0.0.1")
DEFAULT_API_PORT = int(os.getenv("AXISMUNDI_API_PORT", "5000"))
DEFAULT_API_DEBUG = os.getenv("AXISMUNDI_API_DEBUG", "false").lower() in ("true", "1", "yes", "on")

# Encumbrance rules (fixed by the ruleset, not tunable through the environment)
CURRENCY_WEIGHT_SENTINEL = "*"  # weight priced by coin count instead of per unit
DEFAULT_PREPARED_UNIT_WEIGHT = 1
DEFAULT_PREPARED_COINS_PER_WEIGHT = 20
DEFAULT_CARRIED_COINS_PER_WEIGHT = 100

# Vehicle sides that carry hit points
VEHICLE_SIDES = ("forward", "aft", "port", "starboard")

# Spell levels available in a spellbook
SPELL_LEVELS = (1, 2, 3, 4, 5, 6)

# Label keys resolved by an external localizer
ABILITY_LABEL_KEYS = {
    "str": "AXISMUNDIRPG.AbilityStr",
    "dex": "AXISMUNDIRPG.AbilityDex",
    "con": "AXISMUNDIRPG.AbilityCon",
    "int": "AXISMUNDIRPG.AbilityInt",
    "wis": "AXISMUNDIRPG.AbilityWis",
    "cha": "AXISMUNDIRPG.AbilityCha",
}

ABILITY_ABBREVIATION_KEYS = {
    "str": "AXISMUNDIRPG.AbilityStrAbbr",
    "dex": "AXISMUNDIRPG.AbilityDexAbbr",
    "con": "AXISMUNDIRPG.AbilityConAbbr",
    "int": "AXISMUNDIRPG.AbilityIntAbbr",
    "wis": "AXISMUNDIRPG.AbilityWisAbbr",
    "cha": "AXISMUNDIRPG.AbilityChaAbbr",
}

SAVE_LABEL_KEYS = {
    "death": "AXISMUNDIRPG.SaveDeath",
    "wands": "AXISMUNDIRPG.SaveWands",
    "paralysis": "AXISMUNDIRPG.SaveParalysis",
    "breath": "AXISMUNDIRPG.SaveBreath",
    "spells": "AXISMUNDIRPG.SaveSpells",
}

MONEY_LABEL_KEYS = {
    "pp": "AXISMUNDIRPG.Platinum",
    "gp": "AXISMUNDIRPG.Gold",
    "ep": "AXISMUNDIRPG.Electrum",
    "sp": "AXISMUNDIRPG.Silver",
    "cp": "AXISMUNDIRPG.Copper",
}

# Derived stronghold field labels
STRONGHOLD_LABEL_KEYS = {
    "height": "AXISMUNDIRPG.Height",
    "cost": "AXISMUNDIRPG.Cost",
    "build_time": "AXISMUNDIRPG.BuildTime",
}
