# -*- coding: utf-8 -*-
from .config import ActiveConfigs, ConfigMetadata, GlobalConfig
from .manager import ConfigManager
from .paths import Paths
from .utils import get_config_path, load_global_config, save_global_config

__all__ = [
    "ActiveConfigs",
    "ConfigManager",
    "ConfigMetadata",
    "GlobalConfig",
    "Paths",
    "get_config_path",
    "load_global_config",
    "save_global_config",
]
