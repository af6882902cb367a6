"""Root of the Presence Icons exception hierarchy."""


class PresenceIconsException(Exception):
    """Common ancestor of every error raised by presence_icons.

    Callers that only need to know "icon lookup went wrong" can catch this;
    theme lookups raise the narrower ResolutionError family.
    """
