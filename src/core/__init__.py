from core.vector import Vector2, Vector3, Vector4, nearly_equal

__all__ = ["Vector2", "Vector3", "Vector4", "nearly_equal"]
