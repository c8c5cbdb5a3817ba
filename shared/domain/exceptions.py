"""
Domain Errors

Root of the business-error taxonomy. Every subclass carries a stable
``code`` that the API layer uses to pick the response status.
"""


class DomainError(Exception):
    """Business rule violation or caller input error; never retried."""

    code = "domain_error"

    def __init__(self, message: str = ""):
        super().__init__(message or self.__class__.__doc__ or self.code)
        self.message = str(self.args[0])


class NotFoundError(DomainError):
    """Referenced entity does not exist."""

    code = "not_found"

    @classmethod
    def for_entity(cls, entity: str, entity_id) -> "NotFoundError":
        return cls(f"{entity} with id = {entity_id} not found")
