"""
Configuration file for the figure-classification system.

Contains the shared tolerances plus the LANGUAGE and EDGE_RESOLUTION
mode switches. Modules should read values using the get_active_params()
function.
"""

# ---------------------------------------------------------------
# MODE SELECTION
# ---------------------------------------------------------------

# Label set used when a Figure is rendered to a string: "en" or "ru"
LANGUAGE = "en"

# Which point list edge indices are resolved against during the
# self-intersection check: "original" (as received) or "normalized"
EDGE_RESOLUTION = "original"


# ---------------------------------------------------------------
# SHARED PARAMETERS (used in every mode)
# ---------------------------------------------------------------

EPSILON = 1e-5                     # side lengths, collinearity, parallelism
RIGHT_ANGLE_TOLERANCE = 2          # degrees, quadrilateral corners only


# ===============================================================
# LABEL SETS
# ===============================================================

LABELS_EN = {
    "point": "point",
    "segment": "segment",
    "fragment": "fragment",
    "self-intersecting": "self-intersecting",
    "triangle": "triangle",
    "quadrilateral": "quadrilateral",
    "pentagon": "pentagon",
    "hexagon": "hexagon",
    "n-gon": "{n}-gon",
    # triangle subtypes
    "right": "right",
    "isosceles": "isosceles",
    "scalene": "scalene",
    # quadrilateral subtypes
    "square": "square",
    "rectangle": "rectangle",
    "rhombus": "rhombus",
    "trapezoid": "trapezoid",
    "general": "general",
}

LABELS_RU = {
    "point": "точка",
    "segment": "отрезок",
    "fragment": "фрагмент",
    "self-intersecting": "фигура с самопересечениями",
    "triangle": "треугольник",
    "quadrilateral": "четырёхугольник",
    "pentagon": "пятиугольник",
    "hexagon": "шестиугольник",
    "n-gon": "{n}-угольник",
    "right": "прямоугольный",
    "isosceles": "равнобедренный",
    "scalene": "разносторонний",
    "square": "квадрат",
    "rectangle": "прямоугольник",
    "rhombus": "ромб",
    "trapezoid": "трапеция",
    "general": "четырёхугольник",
}

LABELS = {
    "en": LABELS_EN,
    "ru": LABELS_RU,
}

EDGE_RESOLUTION_MODES = ("original", "normalized")


# ---------------------------------------------------------------
# FIGURE GENERATION
# ---------------------------------------------------------------

MIN_COORD = -5
MAX_COORD = 5

MIN_POINTS = 1
MAX_POINTS = 6

CENTER_SHIFT_THRESHOLD = 5         # coordinates >= this are pulled inward
CENTER_SHIFT = 2

POINT_COLORS = ("red", "green", "blue", "orange", "magenta", "black", "cyan")


# ---------------------------------------------------------------
# COMMAND LINE
# ---------------------------------------------------------------

FIGURE_COUNT = 10
SEED = None


# ---------------------------------------------------------------
# PARAMETER ACCESS LOGIC
# ---------------------------------------------------------------

def get_active_params():
    """
    Returns the active set of parameters:
    - the shared tolerances and generator constants
    - the label dictionary of the selected LANGUAGE
    - the selected EDGE_RESOLUTION mode
    Raises ValueError if either mode switch holds an unknown value.
    """

    if LANGUAGE not in LABELS:
        raise ValueError(f"Unknown LANGUAGE {LANGUAGE!r}, expected one of {sorted(LABELS)}")
    if EDGE_RESOLUTION not in EDGE_RESOLUTION_MODES:
        raise ValueError(
            f"Unknown EDGE_RESOLUTION {EDGE_RESOLUTION!r}, "
            f"expected one of {list(EDGE_RESOLUTION_MODES)}"
        )

    base = {
        "EPSILON": EPSILON,
        "RIGHT_ANGLE_TOLERANCE": RIGHT_ANGLE_TOLERANCE,
        "MIN_COORD": MIN_COORD,
        "MAX_COORD": MAX_COORD,
        "MIN_POINTS": MIN_POINTS,
        "MAX_POINTS": MAX_POINTS,
        "CENTER_SHIFT_THRESHOLD": CENTER_SHIFT_THRESHOLD,
        "CENTER_SHIFT": CENTER_SHIFT,
        "POINT_COLORS": POINT_COLORS,
    }

    # Merge in mode-dependent values
    base["LANGUAGE"] = LANGUAGE
    base["LABELS"] = LABELS[LANGUAGE]
    base["EDGE_RESOLUTION"] = EDGE_RESOLUTION

    return base


def get_labels(language=None):
    """
    Label dictionary for `language`, or for the active LANGUAGE if None.
    """
    if language is None:
        return get_active_params()["LABELS"]
    if language not in LABELS:
        raise ValueError(f"Unknown language {language!r}, expected one of {sorted(LABELS)}")
    return LABELS[language]
