# cork/ui/theming/theme_definitions.py
# Theme color palette definitions for Cork

from __future__ import annotations


# theme definitions w/ gradient color palettes, primary to deep
THEMES = {
    "deep_blue": [
        "#4a90e2",  # sky blue
        "#357abd",  # medium blue
        "#2563eb",  # royal blue
        "#1d4ed8",  # deep blue
        "#1e40af",  # dark blue
    ],
    "cork_oak": [
        "#e8c39e",  # light cork
        "#d2a679",  # tan
        "#b7844f",  # cork brown
        "#8b5e34",  # bark
        "#603813",  # dark oak
    ],
    "mint": [
        "#a7f3d0",  # pale mint
        "#6ee7b7",  # mint
        "#34d399",  # emerald
        "#10b981",  # deep emerald
        "#047857",  # forest
    ],
    "mono": [
        "#f5f5f5",  # near white
        "#d4d4d4",  # light gray
        "#a3a3a3",  # gray
        "#737373",  # dim gray
        "#525252",  # charcoal
    ],
}
