from src.engine.sort_check import first_inversion, is_sorted_descending, truncate

__all__ = [
    "first_inversion",
    "is_sorted_descending",
    "truncate",
]
