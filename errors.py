"""
Exceptions raised while fetching and grading the York course list
"""


class GradesError(Exception):
    """Base class for every fatal error of a grades run"""


class TransportError(GradesError):
    """A request to the portal could not be completed"""


class MalformedPageError(GradesError):
    """The portal returned HTML without the structure we depend on"""


class TableNotFoundError(MalformedPageError):
    """The course list page has no grades table"""


class RowShapeError(MalformedPageError):
    """A grades table row has fewer cells than the fixed column layout"""


class CreditParseError(GradesError):
    """A course code does not carry a numeric credit weight"""


class AuthenticationFailed(GradesError):
    """Passport York did not confirm the login"""
