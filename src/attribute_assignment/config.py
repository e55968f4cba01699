# Attribute slots in display order
ATTRIBUTE_SLOTS = ("STR", "COR", "STA", "PER", "INT", "PRS", "LUC")

ATTRIBUTE_NAMES = {
    "STR": "Strength",
    "COR": "Coordination",
    "STA": "Stamina",
    "PER": "Perception",
    "INT": "Intellect",
    "PRS": "Presence",
    "LUC": "Luck",
}

# Drag-and-drop id prefixes used by the presentation layer
DRAGGABLE_PREFIX = "draggable"
DROPPABLE_PREFIX = "droppable"

# Scripted session settings
RESET_COMMAND = "reset"
DEFAULT_LOG_LEVEL = "INFO"
