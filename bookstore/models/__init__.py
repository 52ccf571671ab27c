from bookstore.models.author import Author

__all__ = ["Author"]
