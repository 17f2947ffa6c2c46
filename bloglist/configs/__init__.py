from bloglist.configs.settings import (
    CONFIG_MAP,
    HashingConfig,
    Settings,
    get_settings,
)

__all__ = [
    "CONFIG_MAP",
    "HashingConfig",
    "Settings",
    "get_settings",
]
