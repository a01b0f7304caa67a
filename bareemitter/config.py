import enum


class Config:
    """Base emitter configuration."""

    THREAD_SAFE = False
    LOG_EMITS = True


class SynchronizedConfig(Config):
    """Guard the registry with a lock for emitters shared between threads."""

    THREAD_SAFE = True


class TestingConfig(Config):
    """Quiet configuration for test suites."""

    LOG_EMITS = False


class ConfigType(enum.Enum):
    DEFAULT = Config
    SYNCHRONIZED = SynchronizedConfig
    TESTING = TestingConfig
