# herostats/thresholds.py
"""Fixed tuning values for match-page extraction and aggregation."""

WINDOW_DAYS = 7
TOP_HERO_COUNT = 5

# Substring of an image src that marks a hero portrait rather than an ability icon;
# it also matches "/heroes/" paths.
HERO_PATH_MARKERS = ("hero",)

IMAGE_EXTENSIONS = (".png", ".jpg", ".jpeg", ".webp", ".gif")
HERO_IMAGE_SUFFIXES = ("_full", "_icon", "_small", "_vert", "_lg", "_sb")

# Ability and spell names that share the hero image family.
ABILITY_NAME_FRAGMENTS = (
    "bladestorm", "omnislash", "blade fury", "healing ward",
    "berserker", "battle hunger", "culling blade",
    "hook", "rot", "dismember",
    "fissure", "enchant totem", "echo slam",
    "power shot", "windrun", "focus fire",
    "mana burn", "blink", "reality rift",
    "telekinesis", "spell steal", "invoke",
    "storm bolt", "thunder clap", "god's strength",
)

WIN_KEYWORDS = ("won", "victory", "win", "radiant victory", "dire victory")
LOSS_KEYWORDS = ("lost", "defeat", "loss")
RESULT_KEYWORDS = WIN_KEYWORDS + LOSS_KEYWORDS
