"""
Named filter demonstration for PicX.

Renders a synthetic gradient photo through every named filter and a poster
with one element of each kind, saving the results as PNG files and timing
each render.

Usage:
    python examples/photo_filters_demo.py [output_dir]
"""

import sys
from pathlib import Path

# Add parent directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

import time
from PIL import Image

from PX_Libs.constants import NAMED_FILTERS
from PX_Libs.ImageEditingLib.image_models import Point
from PX_Libs.ImageEditingLib.photo_editor import PhotoEditor
from PX_Libs.PosterLib.poster_editor import PosterEditor
from PX_Libs.RenderLib.download import DownloadConfig, save_download


def make_gradient(width=1200, height=800):
    """Build a colourful gradient test photo."""
    image = Image.new("RGBA", (width, height))
    pixels = image.load()
    for x in range(width):
        for y in range(height):
            pixels[x, y] = (x * 255 // width, y * 255 // height, 160, 255)
    return image


def render_filters(output_dir):
    """Export the gradient once per named filter."""
    editor = PhotoEditor()
    editor.load_image(make_gradient())
    print(f"Loaded {editor.image.natural_size.width}x{editor.image.natural_size.height}, "
          f"displayed at {editor.image.display_size.width}x{editor.image.display_size.height}")
    print("-" * 60)

    for name in (None,) + NAMED_FILTERS:
        editor.apply_named_filter(name)
        start = time.time()
        image = editor.export()
        elapsed = time.time() - start

        label = name or "none"
        path = save_download(
            image,
            DownloadConfig(filename=f"filter-{label}.png", directory=str(output_dir), overwrite=True),
        )
        print(f"  {label:10s} {elapsed:6.3f}s  {editor.effect_css()}")
        print(f"             -> {path}")


def render_poster(output_dir):
    """Export a poster with a heading, a body text and an image."""
    editor = PosterEditor()
    editor.select_template("template2")
    scene = editor.scene

    heading = scene.add_text("heading")
    scene.edit_text_content(heading.id, "Summer Festival")
    scene.begin_drag(heading.id)
    scene.update_drag(Point(120, 80))
    scene.end_drag()

    body = scene.add_text("body")
    scene.edit_text_content(body.id, "Saturday, all day")
    scene.begin_drag(body.id)
    scene.update_drag(Point(120, 120))
    scene.end_drag()

    photo = scene.add_image(make_gradient(300, 200))
    scene.begin_drag(photo.id)
    scene.update_drag(Point(120, 160))
    scene.end_drag()
    scene.resize_image(photo.id, 480, 320)

    path = save_download(
        editor.export(),
        DownloadConfig(filename="poster.png", directory=str(output_dir), overwrite=True),
    )
    print(f"\nPoster ({len(scene)} elements) -> {path}")


def main():
    """Run the demonstration."""
    output_dir = Path(sys.argv[1]) if len(sys.argv) > 1 else Path("picx_demo_output")

    print("=" * 60)
    print("PicX Filter Demonstration")
    print("=" * 60)

    render_filters(output_dir)
    render_poster(output_dir)

    print("\n" + "=" * 60)


if __name__ == "__main__":
    main()
