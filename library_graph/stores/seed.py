"""
Mock Records

The small set of authors and books the in-memory store starts with.
The seed script loads the same records into the database.
"""

AUTHORS = [
    {"id": "1", "name": "Patrick Rothfuss", "age": 44},
    {"id": "2", "name": "Brandon Sanderson", "age": 42},
    {"id": "3", "name": "Terry Pratchett", "age": 66},
]

BOOKS = [
    {"id": "1", "name": "Name of the Wind", "genre": "Fantasy", "author_id": "1"},
    {"id": "2", "name": "The Final Empire", "genre": "Fantasy", "author_id": "2"},
    {"id": "3", "name": "The Long Earth", "genre": "Sci-Fi", "author_id": "3"},
    {"id": "4", "name": "The Hero of Ages", "genre": "Fantasy", "author_id": "2"},
    {"id": "5", "name": "The Colour of Magic", "genre": "Fantasy", "author_id": "3"},
    {"id": "6", "name": "The Light Fantastic", "genre": "Fantasy", "author_id": "3"},
]
