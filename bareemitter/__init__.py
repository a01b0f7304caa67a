from bareemitter.config import Config, ConfigType, SynchronizedConfig
from bareemitter.lib.emitter import BareEmitter, Listener
from bareemitter.version import __version__

PACKAGE = __package__
VERSION = __version__

__all__ = [
    "VERSION",
    "PACKAGE",
    "Listener",
    BareEmitter.__name__,
    Config.__name__,
    ConfigType.__name__,
    SynchronizedConfig.__name__,
]
