# src/patternbook/builder.py
"""
Builder: assemble a value that takes many parameters through an intermediate object.

The builder is nested in the type it builds so the value type itself stays a
plain immutable record.
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from .config import PlaygroundConfig


@dataclass(frozen=True)
class Article:
    id: str
    title: str
    contents: str
    author: str
    date: datetime
    views: int

    class Builder:
        def __init__(self):
            self._id = "123"
            self._title: Optional[str] = None
            self._contents: Optional[str] = None
            self._author: Optional[str] = None
            self._date: Optional[datetime] = None
            self._views = 0

        def set_id(self, id: str) -> "Article.Builder":
            self._id = id
            return self

        def set_title(self, title: str) -> "Article.Builder":
            self._title = title
            return self

        def set_content(self, content: str) -> "Article.Builder":
            self._contents = content
            return self

        def set_author(self, author: str) -> "Article.Builder":
            self._author = author
            return self

        def set_date(self, date: datetime) -> "Article.Builder":
            self._date = date
            return self

        def set_views(self, views: int) -> "Article.Builder":
            if views < 0:
                raise ValueError(f"views must be non-negative, got {views}")
            self._views = views
            return self

        def build(self) -> "Article":
            """Return a new ``Article``; raises ``ValueError`` if a required field is unset."""
            missing = [name for name, value in (("title", self._title),
                                                ("contents", self._contents),
                                                ("author", self._author))
                       if value is None]
            if missing:
                raise ValueError(f"Cannot build Article, missing: {', '.join(missing)}")
            return Article(id=self._id,
                           title=self._title,
                           contents=self._contents,
                           author=self._author,
                           date=self._date or datetime.now(),
                           views=self._views)


def demo(config: PlaygroundConfig) -> None:
    article = (Article.Builder()
               .set_title("Builders in Python")
               .set_content("Chain setters, then build.")
               .set_author("Orland")
               .set_views(42)
               .build())
    print(f"{article.id}: {article.title!r} by {article.author} ({article.views} views)")

    try:
        Article.Builder().set_title("Draft").build()
    except ValueError as e:
        print(e)
