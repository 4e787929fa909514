"""Create the post tables in the configured database."""

from chatterbox_posts.core.settings import settings
from chatterbox_posts.db.session import create_tables


def init_db() -> None:
    """Initialize the database by creating all tables."""
    create_tables()


if __name__ == "__main__":
    init_db()
    print(f"Database initialized at {settings.database_url}.")
