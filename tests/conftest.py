"""Pytest fixtures for blog-renderer tests.

The json_source, csv_source and sqlite_source fixtures hold the same two
authors and three articles, encoded for each supported data source.
"""

import copy
import csv
import json

import pytest
from sqlalchemy import create_engine, text

AUTHORS = [
    {"id": 1, "firstname": "Bob", "lastname": "Lee"},
    {"id": 2, "firstname": "alice", "lastname": "martin"},
]

ARTICLES = [
    {
        "id": 1,
        "title": "Hello",
        "content": "World",
        "authorId": 1,
        "date": "2020-01-02",
    },
    {
        "id": 2,
        "title": "Second post",
        "content": "More content",
        "authorId": 2,
        "date": "2020-02-15",
    },
    {
        "id": 3,
        "title": "Third, with a comma",
        "content": 'Content with "quotes"',
        "authorId": 1,
        "date": "2020-03-01",
    },
]


@pytest.fixture
def sample_document():
    """Sample JSON blog document."""
    return copy.deepcopy({"authors": AUTHORS, "articles": ARTICLES})


@pytest.fixture
def json_source(tmp_path, sample_document):
    """Write the sample document to a JSON file."""
    path = tmp_path / "blog.json"
    path.write_text(json.dumps(sample_document, indent=2), encoding="utf-8")
    return path


@pytest.fixture
def csv_source(tmp_path):
    """Write the sample data to a CSV file, one row per article."""
    authors = {author["id"]: author for author in AUTHORS}
    path = tmp_path / "blog.csv"
    with path.open("w", newline="", encoding="utf-8") as f:
        writer = csv.writer(f)
        writer.writerow(["id", "title", "content", "date", "authorId", "firstname", "lastname"])
        for article in ARTICLES:
            author = authors[article["authorId"]]
            writer.writerow([
                article["id"],
                article["title"],
                article["content"],
                article["date"],
                article["authorId"],
                author["firstname"],
                author["lastname"],
            ])
    return path


@pytest.fixture
def sqlite_source(tmp_path):
    """Create a SQLite database with author and article tables."""
    path = tmp_path / "blog.db"
    engine = create_engine(f"sqlite:///{path}")
    with engine.begin() as connection:
        connection.execute(text(
            "CREATE TABLE author ("
            "id_author INTEGER PRIMARY KEY, firstname TEXT, lastname TEXT)"
        ))
        connection.execute(text(
            "CREATE TABLE article ("
            "id_article INTEGER PRIMARY KEY, title TEXT, content TEXT, "
            "authorId INTEGER, date TEXT)"
        ))
        connection.execute(
            text(
                "INSERT INTO author (id_author, firstname, lastname) "
                "VALUES (:id, :firstname, :lastname)"
            ),
            AUTHORS,
        )
        connection.execute(
            text(
                "INSERT INTO article (id_article, title, content, authorId, date) "
                "VALUES (:id, :title, :content, :authorId, :date)"
            ),
            ARTICLES,
        )
    engine.dispose()
    return path
