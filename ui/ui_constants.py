"""
Shared look-and-feel constants for the booking and settings screens
"""

# ===== RESPONSIVE LAYOUT CONSTANTS =====
BREAKPOINT = 800  # Mobile vs Desktop threshold (px)
MOBILE_WIDTH = 400

# Brand colours
PRIMARY = "#E9190A"
ACCENT = "#FEB23F"

CURRENCY_SYMBOL = "₹"

# Badge colours per food type
FOOD_TYPE_COLORS = {
    "veg": "green",
    "non_veg": "red",
    "platter": "orange",
}
