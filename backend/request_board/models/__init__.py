"""ORM Models — SQLAlchemy declarative models for the board and its collaborators.

Invariants:
    - All models inherit from Base (db/base.py)
    - HelpRequest is the aggregate root for likes and help offers

Design Decisions:
    - One file per entity for locality
    - All models imported here so SQLAlchemy resolves string-based relationship()
      references before any query runs
"""

from request_board.models.user import User  # noqa: F401
from request_board.models.user_session import UserSession  # noqa: F401
from request_board.models.help_request import HelpRequest  # noqa: F401
from request_board.models.request_like import RequestLike  # noqa: F401
from request_board.models.request_help_offer import RequestHelpOffer  # noqa: F401
from request_board.models.notification import Notification  # noqa: F401
