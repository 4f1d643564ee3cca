from .normalize import InputShape, normalize_samples

__all__ = ["InputShape", "normalize_samples"]
