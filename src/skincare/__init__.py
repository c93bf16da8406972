"""SkinCare AI - photo-based skin analysis backed by a multimodal model."""

__version__ = "0.1.0"
