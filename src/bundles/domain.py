"""Domain initialization and configuration."""

from protean.domain import Domain

from bundles.utils.logging import configure_logging, get_logger

# Configure logging for the application (LOG_DIR picks the log directory)
configure_logging()

# Get logger for this module
logger = get_logger(__name__)

# Domain Composition Root
bundles = Domain(name="bundles")
