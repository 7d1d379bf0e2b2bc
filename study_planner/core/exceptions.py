"""
Domain exceptions raised by the service layer.
Endpoints translate them into HTTP errors.
"""


class StudyPlannerError(Exception):
    """Base class for all planner errors"""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(StudyPlannerError):
    """Referenced entity does not exist"""


class InvalidReferenceError(StudyPlannerError):
    """A provided foreign key does not match an existing row"""


class ConflictError(StudyPlannerError):
    """Write would violate a uniqueness rule"""
