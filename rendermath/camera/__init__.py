from .camera import Camera, SceneCamera

__all__ = ['Camera', 'SceneCamera']
