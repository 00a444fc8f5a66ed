"""
Constants and configuration values for PicX.

This module centralizes all constant values, magic numbers, and
configuration settings used throughout the application.
"""

# Adjustment ranges (closed intervals) and defaults
BRIGHTNESS_RANGE = (0, 200)
CONTRAST_RANGE = (0, 200)
SATURATION_RANGE = (0, 200)
ROTATION_RANGE = (0, 360)

DEFAULT_BRIGHTNESS = 100
DEFAULT_CONTRAST = 100
DEFAULT_SATURATION = 100
DEFAULT_ROTATION = 0

# Named filters, in the order the filter panel shows them
FILTER_GRAYSCALE = "grayscale"
FILTER_SEPIA = "sepia"
FILTER_BLUR = "blur"
FILTER_SHARPEN = "sharpen"
FILTER_VINTAGE = "vintage"
FILTER_COOL = "cool"
FILTER_WARM = "warm"
FILTER_DRAMATIC = "dramatic"

NAMED_FILTERS = (
    FILTER_GRAYSCALE,
    FILTER_SEPIA,
    FILTER_BLUR,
    FILTER_SHARPEN,
    FILTER_VINTAGE,
    FILTER_COOL,
    FILTER_WARM,
    FILTER_DRAMATIC,
)

# Photo display box (the preview never upscales past natural size)
PHOTO_DISPLAY_MAX_WIDTH = 860
PHOTO_DISPLAY_MAX_HEIGHT = 500
CROP_BAKED_HINT = "Adjustments are baked into the crop and still apply on top of it."

# Poster editor surface
DEFAULT_POSTER_CANVAS_WIDTH = 860
DEFAULT_POSTER_CANVAS_HEIGHT = 600
POSTER_BACKGROUND_COLOR = "#ffffff"
POSTER_PLACEHOLDER_TEXT = "Choose a Template to Start"

# Element kinds and defaults
ELEMENT_TYPE_TEXT = "text"
ELEMENT_TYPE_IMAGE = "image"

TEXT_KIND_HEADING = "heading"
TEXT_KIND_SUBHEADING = "subheading"
TEXT_KIND_BODY = "body"
TEXT_KINDS = (TEXT_KIND_HEADING, TEXT_KIND_SUBHEADING, TEXT_KIND_BODY)

TEXT_ALIGNMENTS = ("left", "center", "right")

DEFAULT_TEXT_CONTENT = "Double click to edit"
DEFAULT_TEXT_COLOR = "#000000"
DEFAULT_FONT_FAMILY = "Arial"
DEFAULT_TEXT_ALIGN = "left"
DEFAULT_FONT_SIZES = {
    TEXT_KIND_HEADING: 32,
    TEXT_KIND_SUBHEADING: 24,
    TEXT_KIND_BODY: 16,
}
DEFAULT_FONT_WEIGHTS = {
    TEXT_KIND_HEADING: "bold",
    TEXT_KIND_SUBHEADING: "normal",
    TEXT_KIND_BODY: "normal",
}

DEFAULT_ELEMENT_X = 50.0
DEFAULT_ELEMENT_Y = 50.0
DEFAULT_IMAGE_WIDTH = 200
DEFAULT_IMAGE_HEIGHT = 200

# Style panel choices
FONT_FAMILIES = ("Arial", "Times New Roman", "Helvetica", "Georgia", "Verdana")
COLOR_SWATCHES = (
    "#000000", "#FFFFFF", "#FF0000", "#00FF00", "#0000FF",
    "#FFFF00", "#FF00FF", "#00FFFF", "#808080", "#800000",
)

# Template catalog: (id, name, thumbnail reference)
TEMPLATE_CATALOG = (
    ("template1", "Business",
     "https://images.unsplash.com/photo-1497215728101-856f4ea42174?w=200&h=200&fit=crop"),
    ("template2", "Event",
     "https://images.unsplash.com/photo-1492684223066-81342ee5ff30?w=200&h=200&fit=crop"),
    ("template3", "Social Media",
     "https://images.unsplash.com/photo-1563986768494-4dee2763ff3f?w=200&h=200&fit=crop"),
    ("template4", "Portfolio",
     "https://images.unsplash.com/photo-1522542550221-31fd19575a2d?w=200&h=200&fit=crop"),
    ("template5", "Wedding",
     "https://images.unsplash.com/photo-1519741497674-611481863552?w=200&h=200&fit=crop"),
    ("template6", "Restaurant",
     "https://images.unsplash.com/photo-1517248135467-4c7edcad34c4?w=200&h=200&fit=crop"),
)

# File naming
PHOTO_DOWNLOAD_FILENAME = "edited-image.png"
POSTER_DOWNLOAD_FILENAME = "poster.png"
DEFAULT_OUTPUT_FORMAT = "PNG"
PNG_DATA_URI_PREFIX = "data:image/png;base64,"

# Supported file formats (file picker filter; the decoder has the final say)
SUPPORTED_STANDARD_IMAGES = {".png", ".jpg", ".jpeg", ".bmp", ".gif", ".tiff", ".webp"}
IMAGE_FILE_FILTER = "Images (*.png *.jpg *.jpeg *.bmp *.gif *.tiff *.webp)"

# Sharing
DEFAULT_SHARE_MESSAGE = "Here is your edited image!"

# UI constants
DEFAULT_WINDOW_WIDTH = 1400
DEFAULT_WINDOW_HEIGHT = 850
APP_TITLE = "PicX 2.0"
SELECTION_RING_COLOR = "#3b82f6"

# Logging
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"
DEFAULT_LOG_LEVEL = "INFO"
