from enum import Enum


class Role(str, Enum):
    """
    Enum for user roles.
    """

    USER = "USER"
    ADMIN = "ADMIN"
