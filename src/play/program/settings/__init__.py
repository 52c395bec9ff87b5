from .manager import settings_manager as settings_manager
