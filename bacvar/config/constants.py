# constants.py
"""
Global configuration and constants for the BacVar application.
Includes window settings, colors, timings and the diagram parameters.
"""

# ==========================================
#        CONFIGURATION & CONSTANTS
# ==========================================

# --- Window & Layout ---
WINDOW_WIDTH = 1100
WINDOW_HEIGHT = 800
PAGE_PADDING = 24         # Horizontal padding of page sections
SECTION_WRAP = 900        # Wrap length for section prose
NAV_HEIGHT = 40           # Height of the navigation bar

# --- Diagram Canvases ---
MUTATION_CANVAS_WIDTH = 480
MUTATION_CANVAS_HEIGHT = 110
BASE_CELL_WIDTH = 40
BASE_CELL_HEIGHT = 56
BASE_CELL_GAP = 8

CONJUGATION_CANVAS_WIDTH = 480
CONJUGATION_CANVAS_HEIGHT = 224
CELL_RADIUS_X = 48
CELL_RADIUS_Y = 64

RECOMBINANT_CANVAS_SIZE = 288
PLASMID_RADIUS = 64

# --- Timing ---
TRANSFER_STEP_INTERVAL_MS = 2500  # Conjugation stepper tick
ROTATION_FRAME_MS = 50            # Plasmid rotation redraw (phase 5)
TRANSFER_FRAME_MS = 40            # Particle/bridge animation redraw
TRANSFER_ANIMATION_MS = 1000      # Duration of the particle/bridge motion per step
ROTATION_PERIOD_MS = 10000        # One full turn of the plasmid

# --- Colors ---
COLOR_BG_PAGE = "#F9F8F4"
COLOR_BG_WHITE = "white"
COLOR_BG_DARK = "#1c1917"
COLOR_BG_PANEL = "#F5F4F0"
COLOR_TEXT = "#292524"
COLOR_TEXT_MUTED = "#78716c"
COLOR_TEXT_LIGHT = "#f5f5f4"
COLOR_GOLD = "#C5A059"
COLOR_BORDER = "#e7e5e4"

COLOR_CELL_NORMAL = "white"
COLOR_CELL_OUTLINE = "#d6d3d1"
COLOR_CELL_CHANGED = "#fef2f2"
COLOR_CELL_CHANGED_TEXT = "#dc2626"
COLOR_CELL_CHANGED_OUTLINE = "#fecaca"

COLOR_DONOR_FILL = "#dcfce7"
COLOR_DONOR_OUTLINE = "#86efac"
COLOR_RECIPIENT_NEUTRAL = "#fafaf9"
COLOR_RECIPIENT_NEUTRAL_OUTLINE = "#d6d3d1"
COLOR_RECIPIENT_RECEIVED = "#f0fdf4"
COLOR_PILUS = "#d6d3d1"

COLOR_PLASMID = "#2A9D8F"
COLOR_PLASMID_DIM = "#1f4f4a"   # Plasmid ring once cut (dimmed)
COLOR_INSERT = "#E76F51"
COLOR_INSERT_FADING = "#8a4a3a"
COLOR_HOST_RING = "#78716c"

# --- Fonts ---
FONT_FAMILY = "Georgia"
FONT_MONO = "Courier"
FONT_TITLE = (FONT_FAMILY, 28, "bold")
FONT_HEADING = (FONT_FAMILY, 18, "bold")
FONT_SUBHEADING = (FONT_FAMILY, 12, "bold")
FONT_BODY = ("tahoma", 10)
FONT_SMALL = ("tahoma", 8)
FONT_SMALL_BOLD = ("tahoma", 8, "bold")
FONT_BASE = ("tahoma", 14, "bold")
FONT_CAPTION = (FONT_FAMILY, 10, "italic")

# --- Sequence Mutation Diagram ---
VALID_BASES = set("ATGC")
PURINES = set("AG")
PYRIMIDINES = set("CT")
REFERENCE_SEQUENCE = "ATGCATG"
SUBSTITUTION_INDEX = 2
SUBSTITUTION_BASE = "T"
INSERTION_INDEX = 3
INSERTION_BASE = "A"
DELETION_INDEX = 3
NO_ANNOTATION = -1  # Sentinel: no highlighted cell

# --- Conjugation Diagram ---
# Particle positions as fractions of the stage width
PARTICLE_DONOR_POSITION = 0.35
PARTICLE_MIDPOINT_POSITION = 0.50
PARTICLE_RECIPIENT_POSITION = 0.65

# --- Recombinant DNA Diagram ---
# pUC19 multiple cloning site, carries a single EcoRI site
VECTOR_SEQUENCE = (
    "ATGACCATGATTACGCCAAGCTTGCATGCCTGCAGGTCGACTCTAGAGGATCC"
    "CCGGGTACCGAGCTCGAATTCACTGGCCGTCGTTTTAC"
)
