"""Fixed option sets and stat tables for the character creator."""

RACES = [
    "Terran (Human)",
    "Cyber-Elf",
    "Void-Born",
    "Mecha-Construct",
    "Neko-Morph",
    "Draconian",
]

CLASSES = [
    "Star-Knight",
    "Warp-Mage",
    "Tech-Rogue",
    "Bio-Medic",
    "Heavy-Gunner",
    "Psionic-Operative",
]

ALIGNMENTS = [
    "Lawful Good", "Neutral Good", "Chaotic Good",
    "Lawful Neutral", "True Neutral", "Chaotic Neutral",
    "Lawful Evil", "Neutral Evil", "Chaotic Evil",
]

BACKGROUNDS = [
    "Academy Legacy",
    "Slum Survivor",
    "Corporate Spy",
    "War Orphan",
    "Lost Royalty",
    "Memory Wiped",
]

HAIR_STYLES = ["Crew Cut", "Long & Flowing", "Cyber-Dreads", "Bald", "Mohawk", "Bob Cut"]

CYBERNETICS = ["None", "Ocular Implants", "Neural Interface", "Cyber-Arm", "Synth-Skin"]

STAT_KEYS = ("STR", "DEX", "INT", "CHA", "VIT")

DEFAULT_BASE_STATS = {"STR": 5, "DEX": 5, "INT": 5, "CHA": 5, "VIT": 5}

BASE_STATS: dict[str, dict[str, int]] = {
    "Terran (Human)":  {"STR": 5, "DEX": 5, "INT": 5, "CHA": 5, "VIT": 5},
    "Cyber-Elf":       {"STR": 3, "DEX": 7, "INT": 6, "CHA": 4, "VIT": 4},
    "Void-Born":       {"STR": 2, "DEX": 4, "INT": 8, "CHA": 3, "VIT": 3},
    "Mecha-Construct": {"STR": 8, "DEX": 3, "INT": 5, "CHA": 1, "VIT": 8},
    "Neko-Morph":      {"STR": 4, "DEX": 8, "INT": 3, "CHA": 6, "VIT": 4},
    "Draconian":       {"STR": 7, "DEX": 4, "INT": 3, "CHA": 4, "VIT": 7},
}

# Partial: missing keys add nothing
CLASS_BONUSES: dict[str, dict[str, int]] = {
    "Star-Knight":       {"STR": 3, "VIT": 2},
    "Warp-Mage":         {"INT": 4, "CHA": 1},
    "Tech-Rogue":        {"DEX": 3, "INT": 2},
    "Bio-Medic":         {"INT": 3, "VIT": 2},
    "Heavy-Gunner":      {"STR": 2, "VIT": 3},
    "Psionic-Operative": {"CHA": 3, "INT": 2},
}


def options() -> dict[str, list[str]]:
    """All option sets the creator screen offers, keyed by field name."""
    return {
        "races": list(RACES),
        "classes": list(CLASSES),
        "alignments": list(ALIGNMENTS),
        "backgrounds": list(BACKGROUNDS),
        "hair_styles": list(HAIR_STYLES),
        "cybernetics": list(CYBERNETICS),
    }
