from .viewport import Viewport, ScissorBox

__all__ = ['Viewport', 'ScissorBox']
