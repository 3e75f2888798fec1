from nanoemit.lib.events import Emitter, ListenerError, Unsubscribe, create_events
from nanoemit.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    Emitter.__name__,
    ListenerError.__name__,
    "Unsubscribe",
    create_events.__name__,
]
