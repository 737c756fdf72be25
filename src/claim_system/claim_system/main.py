from __future__ import annotations

import importlib
import logging

from dotenv import load_dotenv

from config import get_settings_module

from .common.logging import setup_logging
from .container import Container, build_container

logger = logging.getLogger(__name__)


def load_settings() -> dict:
    """Read the active settings module (see config.get_settings_module) into a dict."""
    load_dotenv(override=False)
    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    out = {name: getattr(settings, name) for name in dir(settings) if name.isupper()}
    out["SETTINGS_MODULE"] = settings_module
    return out


def create_container() -> Container:
    settings = load_settings()
    setup_logging(settings.get("LOG_LEVEL", "INFO"), settings.get("LOG_FILE"))

    container = build_container(settings=settings)
    logger.info(
        "[claim-system] settings=%s data_dir=%s",
        settings["SETTINGS_MODULE"],
        container.storage.data_dir,
    )
    return container
