class DuplicateRecordError(Exception):
    """Raised when a write violates a unique or partial-unique constraint.

    The transaction has already been rolled back when this is raised.
    """

    def __init__(self, constraint: str):
        self.constraint = constraint
        super().__init__(f"Duplicate record violates {constraint}")
