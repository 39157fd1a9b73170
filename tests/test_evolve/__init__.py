__all__ = [
    "test_categories",
]
