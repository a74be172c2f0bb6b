from .settings import ENV_DEBUG, ENV_GEODE_HOME, ENV_MEMBER_NAME, ShellSettings

__all__ = ["ENV_DEBUG", "ENV_GEODE_HOME", "ENV_MEMBER_NAME", "ShellSettings"]
