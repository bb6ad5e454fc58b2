"""
Settings Module - STYLEMIX
Default values for every recognised configuration key.

Live values are resolved by core/config.py
(environment > .env > JSON settings file > these defaults).
"""
import logging

logger = logging.getLogger(__name__)

DEFAULT_SETTINGS = {
    "LOG_LEVEL": "INFO",
    "STYLEMIX_CONFIG_FILE": "stylemix.json",
    "STYLEMIX_BASE_FONT_SIZE": 16,
    "STYLEMIX_BREAKPOINTS_FILE": "",
    "STYLEMIX_TEMPLATE_DIR": "styles",
    "STYLEMIX_DEFAULT_DURATION": "0.3s",
    "STYLEMIX_DEFAULT_EASING": "ease-in-out",
}

# Mobile-first thresholds plus their max-width complements
DEFAULT_BREAKPOINTS = {
    "small": "(min-width: 576px)",
    "medium": "(min-width: 768px)",
    "large": "(min-width: 992px)",
    "xlarge": "(min-width: 1200px)",
    "max-small": "(max-width: 575px)",
    "max-medium": "(max-width: 767px)",
    "max-large": "(max-width: 991px)",
    "max-xlarge": "(max-width: 1199px)",
}

logger.debug("Settings module loaded")
