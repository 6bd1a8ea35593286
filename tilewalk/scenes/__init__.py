from .manager import SceneManager

__all__ = ["SceneManager"]
