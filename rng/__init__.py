from .random_number_generator import RandomNumberGenerator

__all__ = ["RandomNumberGenerator"]
