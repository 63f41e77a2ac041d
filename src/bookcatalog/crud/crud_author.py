"""
Repository for Author records.
Lookups by id, by name (substring) and with the author's books; add, edit and delete.
"""

from typing import List, Optional

from sqlalchemy.orm import selectinload

from ..models.author import Author
from ..schemas.catalog import AuthorSchema
from .base import BaseRepository


class AuthorRepository(BaseRepository):
    model = Author
    schema = AuthorSchema

    def get_all_authors(self) -> List[AuthorSchema]:
        return self._list()

    def get_author(self, author_id: int) -> Optional[AuthorSchema]:
        """
        Retrieves an author by primary key.

        Args:
            author_id (int): Id of the author.

        Returns:
            Optional[AuthorSchema]: The author with `books` not loaded, None if it does not exist.
        """
        return self._get_by_id(author_id)

    def get_author_with_books(self, author_id: int) -> Optional[AuthorSchema]:
        return self._get_by_id(author_id, options=(selectinload(Author.books),))

    def get_authors_by_name(self, name: str) -> List[AuthorSchema]:
        return self._search(Author.name, name)

    def add_author(self, author: AuthorSchema) -> AuthorSchema:
        return self._add(author)

    def edit_author(self, author: AuthorSchema) -> bool:
        return self._overwrite(author)

    def delete_author(self, author: AuthorSchema) -> bool:
        return self._delete(author.id)
