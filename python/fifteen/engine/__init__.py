from fifteen.engine.generator import GridGenerator

__all__ = ["GridGenerator"]
