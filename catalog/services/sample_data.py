"""
Sample Catalog Data

The ten records every new store starts with (unless SEED_SAMPLE_DATA is
disabled).
"""

from catalog.schemas.book import Book, Genre

SAMPLE_BOOKS: tuple[Book, ...] = (
    Book(
        title="Harry Potter and the Philosopher's Stone",
        author="J.K. Rowling",
        isbn="9780747532743",
        genre=Genre.FANTASY,
        publisher="Bloomsbury Publishing",
        year_published=1997,
    ),
    Book(
        title="To Kill a Mockingbird",
        author="Harper Lee",
        isbn="9780061120084",
        genre=Genre.FICTION,
        publisher="Harper Perennial Modern Classics",
        year_published=1960,
    ),
    Book(
        title="1984",
        author="George Orwell",
        isbn="9780451524935",
        genre=Genre.SCIENCE_FICTION,
        publisher="Signet Classics",
        year_published=1949,
    ),
    Book(
        title="Pride and Prejudice",
        author="Jane Austen",
        isbn="9780140283297",
        genre=Genre.ROMANCE,
        publisher="Penguin Classics",
        year_published=1813,
    ),
    Book(
        title="The Catcher in the Rye",
        author="J.D. Salinger",
        isbn="9780316769488",
        genre=Genre.FICTION,
        publisher="Little, Brown and Company",
        year_published=1951,
    ),
    Book(
        title="Harry Potter and the Sorcerer's Stone",
        author="J.K. Rowling",
        isbn="9780590353427",
        genre=Genre.FANTASY,
        publisher="Arthur A. Levine Books",
        year_published=1997,
    ),
    Book(
        title="The Hobbit",
        author="J.R.R. Tolkien",
        isbn="9780345339683",
        genre=Genre.FANTASY,
        publisher="Houghton Mifflin Harcourt",
        year_published=1937,
    ),
    Book(
        title="The Lord of the Rings",
        author="J.R.R. Tolkien",
        isbn="9780307887449",
        genre=Genre.FANTASY,
        publisher="Delacorte Press",
        year_published=2003,
    ),
    Book(
        title="The Da Vinci Code",
        author="Dan Brown",
        isbn="9780307277671",
        genre=Genre.MYSTERY,
        publisher="Anchor Books",
        year_published=2008,
    ),
    Book(
        title="The Hunger Games",
        author="Suzanne Collins",
        isbn="9780439023528",
        genre=Genre.SCIENCE_FICTION,
        publisher="Scholastic Press",
        year_published=2008,
    ),
)
