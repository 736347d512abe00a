"""A list of books where each book must have a title and an author."""

from dataclasses import dataclass, field
from typing import List, Optional

from deepvalidate import ValidationError, append, require_field


@dataclass
class Book:
    title: str = field(default="", metadata={"json": "title"})
    author: str = field(default="", metadata={"json": "author"})

    def validate(self) -> Optional[BaseException]:
        errs = None
        if self.title == "":
            errs = append(errs, ValidationError(path="title", message="is required"))

        # Same kind of check as above, using a helper.
        errs = append(errs, require_field("author", self.author))

        return errs


@dataclass
class Order:
    books: List[Book] = field(default_factory=list, metadata={"json": "books"})


def build() -> Order:
    return Order(books=[Book(title="")])
