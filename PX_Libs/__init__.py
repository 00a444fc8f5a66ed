"""
PX_Libs - PicX Library Modules

This package contains core functionality for the PicX editor,
organized into specialized sub-packages:

- ImageEditingLib: Photo adjustments, effect descriptors, cropping and loading
- PosterLib: Poster scene model, templates and poster editor state
- RenderLib: Compositor, fonts, download and share boundaries
- InteractionLib: Pointer gesture controller for both editor modes
- UILib: PyQt5 windows and widgets
"""

__version__ = "2.0.0"
