# --- rmap_lib/rendering/constants.py ---
# Shared constants for the rendering package to avoid circular imports.

DEFAULT_CLEANUP_ITERATIONS = 10

DEFAULT_STYLES = {
    "solid_color": "#00FF00",
    "slope_left_color": "#FFFF00",
    "slope_right_color": "#FF00FF",
    "protect_neg_x_color": "#FFFF00",
    "protect_pos_x_color": "#FF00FF",
    "cleanup_iterations": DEFAULT_CLEANUP_ITERATIONS,
    "outline": True,
}

TRANSPARENT = (0, 0, 0, 0)
