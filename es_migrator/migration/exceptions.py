"""
Migration errors

All of them are raised before any mutating call reaches the engine.
"""


class MigrationError(Exception):
    """Base class for rejected migrations"""


class IndexAlreadyExists(MigrationError):
    """Target index name is already taken, or equals the replaced index"""

    def __init__(self, index: str):
        self.index = index
        super().__init__(f"Index {index} already exists.")


class InvalidAliasName(MigrationError):
    """Alias name collides with an index or a foreign alias binding"""

    def __init__(self, alias: str):
        self.alias = alias
        super().__init__(
            f"Unable to create the alias with name '{alias}' because other index "
            f"or alias with the same name already exists."
        )


class IndexNotFound(MigrationError):
    """Requested generation is not among the indices behind the alias"""

    def __init__(self, index: str):
        self.index = index
        super().__init__(f"Index {index} was not found.")
