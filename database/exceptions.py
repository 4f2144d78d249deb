class DatabaseError(Exception):
    """Base for all persistence errors."""


class NotFoundError(DatabaseError):
    """Golfer or round not found."""


class IntegrityError(DatabaseError):
    """A check or foreign key constraint rejected the write."""
