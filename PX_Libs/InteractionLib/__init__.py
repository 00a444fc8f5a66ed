"""
InteractionLib - Pointer-event routing for PicX
"""

from .interaction_controller import ContainerRect, EditorMode, InteractionController

__all__ = ["ContainerRect", "EditorMode", "InteractionController"]
