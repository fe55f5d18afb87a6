"""beanlens - Spring bean and injection analysis for Java sources."""

from loguru import logger

from beanlens.application.services.indexer import ProjectIndex
from beanlens.application.services.parser import JavaFileParser
from beanlens.application.services.resolver import BeanResolver

__version__ = "0.1.0"

# Silent until the host opts in with logger.enable("beanlens").
logger.disable("beanlens")

__all__ = ["BeanResolver", "JavaFileParser", "ProjectIndex", "__version__"]
